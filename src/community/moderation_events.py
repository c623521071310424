"""Inbound cross-domain event handler: Community reacts to Moderation events.

An admin resolving a report with ``delete_content`` removes the reported
post, comment or review, bypassing the ownership check.
"""

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from protean.utils.mixins import handle
from shared.events.moderation import ReportedContentRemoved

from community.domain import community
from community.post.post import Post
from community.shared.targets import load_target

logger = structlog.get_logger(__name__)

community.register_external_event(ReportedContentRemoved, "Moderation.ReportedContentRemoved.v1")


@community.event_handler(part_of=Post, stream_category="moderation::report")
class ModerationEventsHandler:
    @handle(ReportedContentRemoved)
    def on_reported_content_removed(self, event: ReportedContentRemoved) -> None:
        try:
            target = load_target(event.content_type, event.content_id)
        except ObjectNotFoundError:
            logger.info(
                "Reported content already gone",
                content_type=event.content_type,
                content_id=str(event.content_id),
            )
            return

        target.delete()
        current_domain.repository_for(type(target)).add(target)

        logger.info(
            "Reported content removed",
            report_id=str(event.report_id),
            content_type=event.content_type,
            content_id=str(event.content_id),
        )
