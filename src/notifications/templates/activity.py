"""Message templates for social activity notifications."""

from notifications.notification.notification import NotificationType


class FollowTemplate:
    notification_type = NotificationType.FOLLOW.value

    @staticmethod
    def render(context: dict) -> str:
        return f"{context['actor']} started following you"


class CommentTemplate:
    notification_type = NotificationType.COMMENT.value

    @staticmethod
    def render(context: dict) -> str:
        return f'{context["actor"]} commented on your {context["content_type"]}: "{context["preview"]}..."'


class ReplyTemplate:
    notification_type = NotificationType.REPLY.value

    @staticmethod
    def render(context: dict) -> str:
        return f'{context["actor"]} replied to your comment: "{context["preview"]}..."'


class VoteTemplate:
    notification_type = NotificationType.VOTE.value

    @staticmethod
    def render(context: dict) -> str:
        verb = "upvoted" if context["vote_type"] == "up" else "downvoted"
        return f'{context["actor"]} {verb} your {context["content_type"]}: "{context["preview"]}..."'


class RatingTemplate:
    notification_type = NotificationType.RATING.value

    @staticmethod
    def render(context: dict) -> str:
        return f'{context["actor"]} rated your post "{context["preview"]}..." with {context["rating"]} stars'
