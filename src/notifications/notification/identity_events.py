"""Inbound cross-domain event handlers: Notifications reacts to Identity events.

Keeps the Recipient directory current and tells users about new followers.
"""

from notifications.domain import notifications
from notifications.notification.helpers import notify
from notifications.notification.notification import Notification, NotificationType
from notifications.projections.recipient import Recipient
from protean.utils.globals import current_domain
from protean.utils.mixins import handle
from shared.events.identity import UserFollowed, UserRegistered

notifications.register_external_event(UserRegistered, "Identity.UserRegistered.v1")
notifications.register_external_event(UserFollowed, "Identity.UserFollowed.v1")


@notifications.event_handler(part_of=Notification, stream_category="identity::user")
class IdentityUserEventsHandler:
    @handle(UserRegistered)
    def on_user_registered(self, event: UserRegistered) -> None:
        current_domain.repository_for(Recipient).add(
            Recipient(
                user_id=str(event.user_id),
                username=event.username,
                registered_at=event.registered_at,
            )
        )


@notifications.event_handler(part_of=Notification, stream_category="identity::follow")
class IdentityFollowEventsHandler:
    @handle(UserFollowed)
    def on_user_followed(self, event: UserFollowed) -> None:
        """Tell the followed user who started following them."""
        notify(
            recipient_user_id=event.followed_id,
            actor_user_id=event.follower_id,
            notification_type=NotificationType.FOLLOW.value,
            context={},
            entity_type="user",
            entity_id=event.follower_id,
        )
