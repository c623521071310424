"""Notification aggregate: one notice addressed to one user.

Created reactively from Identity and Community events. The only state
change afterwards is being read; reading twice changes nothing.
"""

from datetime import UTC, datetime
from enum import Enum

from notifications.domain import notifications
from notifications.notification.events import NotificationCreated, NotificationRead
from protean.fields import Boolean, DateTime, Identifier, String, Text


class NotificationType(Enum):
    COMMENT = "comment"
    REPLY = "reply"
    VOTE = "vote"
    FOLLOW = "follow"
    RATING = "rating"


@notifications.aggregate
class Notification:
    recipient_user_id = Identifier(required=True)
    actor_user_id = Identifier()
    notification_type = String(choices=NotificationType, required=True)
    entity_type = String(max_length=20)
    entity_id = Identifier()
    message = Text(required=True)
    is_read = Boolean(default=False)
    created_at = DateTime()
    read_at = DateTime()

    @classmethod
    def create(
        cls,
        recipient_user_id,
        notification_type,
        message,
        actor_user_id=None,
        entity_type=None,
        entity_id=None,
    ):
        now = datetime.now(UTC)
        notification = cls(
            recipient_user_id=recipient_user_id,
            actor_user_id=actor_user_id,
            notification_type=notification_type,
            entity_type=entity_type,
            entity_id=entity_id,
            message=message,
            is_read=False,
            created_at=now,
        )
        notification.raise_(
            NotificationCreated(
                notification_id=str(notification.id),
                recipient_user_id=str(recipient_user_id),
                actor_user_id=str(actor_user_id) if actor_user_id else None,
                notification_type=notification_type,
                created_at=now,
            )
        )
        return notification

    def mark_read(self):
        """Returns False when the notification was already read."""
        if self.is_read:
            return False

        now = datetime.now(UTC)
        self.is_read = True
        self.read_at = now
        self.raise_(
            NotificationRead(
                notification_id=str(self.id),
                recipient_user_id=str(self.recipient_user_id),
                read_at=now,
            )
        )
        return True
