"""Recipient: usernames for rendering who did what.

Filled from Identity.UserRegistered by
``notifications.notification.identity_events``.
"""

from notifications.domain import notifications
from protean.fields import DateTime, Identifier, String


@notifications.projection
class Recipient:
    user_id: Identifier(identifier=True, required=True)
    username: String(required=True)
    registered_at: DateTime()
