"""ReportedContent: the posts, reviews and comments admins may be asked about.

Kept current by ``moderation.community_events`` so that an admin handling
a report can read the content without reaching into the Community
context. Rows are dropped when the content is deleted.
"""

from protean.exceptions import ObjectNotFoundError
from protean.fields import DateTime, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from moderation.domain import moderation
from moderation.report.report import ReportedItemType


@moderation.projection
class ReportedContent:
    content_id: Identifier(identifier=True, required=True)
    content_type: String(required=True, choices=ReportedItemType)
    user_id: Identifier(required=True)
    text: Text()
    title: String(max_length=200)
    rating: Integer()
    entity_type: String()
    entity_id: Identifier()
    created_at: DateTime()
    updated_at: DateTime()


def record_content(**fields):
    current_domain.repository_for(ReportedContent).add(ReportedContent(**fields))


def revise_content(content_id, updated_at, **changes):
    repo = current_domain.repository_for(ReportedContent)
    try:
        content = repo.get(str(content_id))
    except ObjectNotFoundError:
        return
    for name, value in changes.items():
        setattr(content, name, value)
    content.updated_at = updated_at
    repo.add(content)


def forget_content(content_id):
    repo = current_domain.repository_for(ReportedContent)
    try:
        repo._dao.delete(repo.get(str(content_id)))
    except ObjectNotFoundError:
        pass


def content_info(content_type, content_id):
    """The stored post, review or comment; ObjectNotFoundError when gone."""
    try:
        content = current_domain.repository_for(ReportedContent).get(str(content_id))
    except ObjectNotFoundError:
        content = None
    if content is None or content.content_type != content_type:
        raise ObjectNotFoundError(f"Content {content_type}/{content_id} not found")
    return content
