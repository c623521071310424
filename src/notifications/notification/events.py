"""Domain events for the Notification aggregate."""

from notifications.domain import notifications
from protean.fields import DateTime, Identifier, String


@notifications.event(part_of="Notification")
class NotificationCreated:
    __version__ = 1

    notification_id = Identifier(required=True)
    recipient_user_id = Identifier(required=True)
    actor_user_id = Identifier()
    notification_type = String(required=True)
    created_at = DateTime(required=True)


@notifications.event(part_of="Notification")
class NotificationRead:
    __version__ = 1

    notification_id = Identifier(required=True)
    recipient_user_id = Identifier(required=True)
    read_at = DateTime(required=True)
