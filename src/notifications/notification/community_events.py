"""Inbound cross-domain event handlers: Notifications reacts to Community events.

Content owners hear about comments, votes and ratings on their posts and
reviews; comment authors hear about replies. Withdrawn votes are silent.
"""

from notifications.domain import notifications
from notifications.notification.helpers import notify
from notifications.notification.notification import Notification, NotificationType
from protean.utils.mixins import handle
from shared.events.community import CommentAdded, PostRated, VoteCast

notifications.register_external_event(CommentAdded, "Community.CommentAdded.v1")
notifications.register_external_event(VoteCast, "Community.VoteCast.v1")
notifications.register_external_event(PostRated, "Community.PostRated.v1")

_NOTIFYING_VOTE_ACTIONS = {"added", "updated"}


@notifications.event_handler(part_of=Notification, stream_category="community::comment")
class CommunityCommentEventsHandler:
    @handle(CommentAdded)
    def on_comment_added(self, event: CommentAdded) -> None:
        if event.parent_comment_id:
            notify(
                recipient_user_id=event.parent_author_id,
                actor_user_id=event.user_id,
                notification_type=NotificationType.REPLY.value,
                context={"preview": event.preview or ""},
                entity_type=event.entity_type,
                entity_id=event.entity_id,
            )
        else:
            notify(
                recipient_user_id=event.content_owner_id,
                actor_user_id=event.user_id,
                notification_type=NotificationType.COMMENT.value,
                context={"content_type": event.content_type or event.entity_type, "preview": event.preview or ""},
                entity_type=event.entity_type,
                entity_id=event.entity_id,
            )


@notifications.event_handler(part_of=Notification, stream_category="community::vote")
class CommunityVoteEventsHandler:
    @handle(VoteCast)
    def on_vote_cast(self, event: VoteCast) -> None:
        if event.action not in _NOTIFYING_VOTE_ACTIONS:
            return
        notify(
            recipient_user_id=event.content_owner_id,
            actor_user_id=event.user_id,
            notification_type=NotificationType.VOTE.value,
            context={
                "vote_type": event.vote_type,
                "content_type": event.entity_type,
                "preview": event.preview or "",
            },
            entity_type=event.entity_type,
            entity_id=event.entity_id,
        )


@notifications.event_handler(part_of=Notification, stream_category="community::post")
class CommunityPostEventsHandler:
    @handle(PostRated)
    def on_post_rated(self, event: PostRated) -> None:
        notify(
            recipient_user_id=event.post_owner_id,
            actor_user_id=event.user_id,
            notification_type=NotificationType.RATING.value,
            context={"preview": event.preview or "", "rating": event.rating},
            entity_type="post",
            entity_id=event.post_id,
        )
