"""MarkNotificationRead / MarkAllNotificationsRead / DeleteNotification."""

import structlog
from notifications.domain import notifications
from notifications.notification.notification import Notification
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

logger = structlog.get_logger(__name__)


@notifications.command(part_of="Notification")
class MarkNotificationRead:
    notification_id = Identifier(required=True)


@notifications.command(part_of="Notification")
class MarkAllNotificationsRead:
    user_id = Identifier(required=True)


@notifications.command(part_of="Notification")
class DeleteNotification:
    notification_id = Identifier(required=True)


def notifications_for(user_id, **filters):
    repo = current_domain.repository_for(Notification)
    return (
        repo._dao.query.filter(recipient_user_id=str(user_id), **filters).order_by("-created_at").all().items
    )


def unread_count(user_id) -> int:
    return len(notifications_for(user_id, is_read=False))


@notifications.command_handler(part_of=Notification)
class NotificationReadingHandler:
    @handle(MarkNotificationRead)
    def mark_read(self, command):
        repo = current_domain.repository_for(Notification)
        notification = repo.get(command.notification_id)
        if notification.mark_read():
            repo.add(notification)

    @handle(MarkAllNotificationsRead)
    def mark_all_read(self, command):
        repo = current_domain.repository_for(Notification)
        unread = notifications_for(command.user_id, is_read=False)
        for notification in unread:
            notification.mark_read()
            repo.add(notification)

        logger.info("Notifications marked read", user_id=str(command.user_id), count=len(unread))
        return len(unread)

    @handle(DeleteNotification)
    def delete_notification(self, command):
        repo = current_domain.repository_for(Notification)
        repo._dao.delete(repo.get(command.notification_id))
