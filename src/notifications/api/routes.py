"""FastAPI routes for the Notifications domain.

Thin adapters that translate HTTP requests into domain commands.
No business logic, only schema to command to response translation.
"""

from fastapi import APIRouter
from notifications.api.schemas import (
    MarkAllReadResponse,
    NotificationListResponse,
    NotificationResponse,
    StatusResponse,
    UnreadCountResponse,
)
from notifications.notification.reading import (
    DeleteNotification,
    MarkAllNotificationsRead,
    MarkNotificationRead,
    notifications_for,
    unread_count,
)
from protean.utils.globals import current_domain

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _notification(n) -> NotificationResponse:
    return NotificationResponse(
        notification_id=str(n.id),
        recipient_user_id=str(n.recipient_user_id),
        actor_user_id=str(n.actor_user_id) if n.actor_user_id else None,
        notification_type=n.notification_type,
        entity_type=n.entity_type,
        entity_id=str(n.entity_id) if n.entity_id else None,
        message=n.message,
        is_read=n.is_read,
        created_at=n.created_at,
        read_at=n.read_at,
    )


@router.get("/user/{user_id}", response_model=NotificationListResponse)
async def list_notifications(user_id: str) -> NotificationListResponse:
    """A user's notifications, newest first, with the unread count."""
    items = notifications_for(user_id)
    return NotificationListResponse(
        notifications=[_notification(n) for n in items],
        unread_count=sum(1 for n in items if not n.is_read),
    )


@router.get("/user/{user_id}/unread-count", response_model=UnreadCountResponse)
async def get_unread_count(user_id: str) -> UnreadCountResponse:
    return UnreadCountResponse(unread_count=unread_count(user_id))


@router.put("/user/{user_id}/read-all", response_model=MarkAllReadResponse)
async def mark_all_read(user_id: str) -> MarkAllReadResponse:
    marked = current_domain.process(MarkAllNotificationsRead(user_id=user_id), asynchronous=False)
    return MarkAllReadResponse(marked=marked)


@router.put("/{notification_id}/read", response_model=StatusResponse)
async def mark_read(notification_id: str) -> StatusResponse:
    current_domain.process(MarkNotificationRead(notification_id=notification_id), asynchronous=False)
    return StatusResponse()


@router.delete("/{notification_id}", response_model=StatusResponse)
async def delete_notification(notification_id: str) -> StatusResponse:
    current_domain.process(DeleteNotification(notification_id=notification_id), asynchronous=False)
    return StatusResponse()
