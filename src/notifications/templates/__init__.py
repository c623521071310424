"""Template registry: maps NotificationType to template classes."""

from notifications.notification.notification import NotificationType
from notifications.templates.activity import (
    CommentTemplate,
    FollowTemplate,
    RatingTemplate,
    ReplyTemplate,
    VoteTemplate,
)

TEMPLATE_REGISTRY: dict[str, type] = {
    NotificationType.FOLLOW.value: FollowTemplate,
    NotificationType.COMMENT.value: CommentTemplate,
    NotificationType.REPLY.value: ReplyTemplate,
    NotificationType.VOTE.value: VoteTemplate,
    NotificationType.RATING.value: RatingTemplate,
}


def get_template(notification_type: str):
    """Look up a template class by notification type string."""
    template_cls = TEMPLATE_REGISTRY.get(notification_type)
    if template_cls is None:
        raise ValueError(f"No template registered for notification type: {notification_type}")
    return template_cls
