"""Member: the user roster admin checks run against.

Filled from Identity.UserRegistered by ``moderation.identity_events``.
"""

from protean.exceptions import ObjectNotFoundError
from protean.fields import Boolean, DateTime, Identifier, String
from protean.utils.globals import current_domain

from moderation.domain import moderation


@moderation.projection
class Member:
    user_id: Identifier(identifier=True, required=True)
    username: String(required=True)
    is_admin: Boolean(default=False)
    registered_at: DateTime()


def usernames(user_ids):
    """Map each known user id to its username; unknown ids are left out."""
    repo = current_domain.repository_for(Member)
    names = {}
    for user_id in {str(user_id) for user_id in user_ids if user_id}:
        try:
            names[user_id] = repo.get(user_id).username
        except ObjectNotFoundError:
            continue
    return names
