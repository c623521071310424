"""Shared helpers for notification event handlers.

Provides the common pattern: skip self-actions → resolve the actor's name
→ render the template → create the Notification.
"""

import structlog
from notifications.notification.notification import Notification
from notifications.projections.recipient import Recipient
from notifications.templates import get_template
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

logger = structlog.get_logger(__name__)

UNKNOWN_ACTOR = "Someone"


def actor_name(user_id) -> str:
    if not user_id:
        return UNKNOWN_ACTOR
    try:
        return current_domain.repository_for(Recipient).get(str(user_id)).username
    except ObjectNotFoundError:
        return UNKNOWN_ACTOR


def notify(
    recipient_user_id,
    actor_user_id,
    notification_type: str,
    context: dict,
    entity_type: str | None = None,
    entity_id=None,
):
    """Create one notification, unless the actor is the recipient.

    Returns the notification id, or None when nothing was created.
    """
    if not recipient_user_id:
        return None
    if actor_user_id and str(actor_user_id) == str(recipient_user_id):
        logger.debug(
            "Skipping self-notification",
            user_id=str(recipient_user_id),
            notification_type=notification_type,
        )
        return None

    message = get_template(notification_type).render({"actor": actor_name(actor_user_id), **context})
    notification = Notification.create(
        recipient_user_id=str(recipient_user_id),
        notification_type=notification_type,
        message=message,
        actor_user_id=str(actor_user_id) if actor_user_id else None,
        entity_type=entity_type,
        entity_id=str(entity_id) if entity_id else None,
    )
    current_domain.repository_for(Notification).add(notification)

    logger.info(
        "Notification created",
        notification_id=str(notification.id),
        recipient_user_id=str(recipient_user_id),
        notification_type=notification_type,
    )
    return str(notification.id)
