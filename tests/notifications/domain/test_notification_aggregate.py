"""Domain tests for the Notification aggregate and message templates."""

import pytest
from notifications.notification.events import NotificationCreated, NotificationRead
from notifications.notification.notification import Notification
from notifications.templates import get_template
from protean.exceptions import ValidationError


def _notification():
    return Notification.create(recipient_user_id="u1", notification_type="follow", message="ann started following you")


class TestNotification:
    def test_created_unread(self):
        notification = _notification()
        assert notification.is_read is False
        assert isinstance(notification._events[-1], NotificationCreated)

    def test_unknown_type(self):
        with pytest.raises(ValidationError):
            Notification.create(recipient_user_id="u1", notification_type="poke", message="hi")

    def test_mark_read(self):
        notification = _notification()
        assert notification.mark_read() is True
        assert notification.read_at is not None
        assert isinstance(notification._events[-1], NotificationRead)

    def test_mark_read_twice(self):
        notification = _notification()
        notification.mark_read()
        notification._events.clear()

        assert notification.mark_read() is False
        assert notification._events == []


class TestTemplates:
    def test_follow(self):
        assert get_template("follow").render({"actor": "ann"}) == "ann started following you"

    def test_comment(self):
        message = get_template("comment").render({"actor": "ann", "content_type": "review", "preview": "Great"})
        assert message == 'ann commented on your review: "Great..."'

    @pytest.mark.parametrize("vote_type,verb", [("up", "upvoted"), ("down", "downvoted")])
    def test_vote(self, vote_type, verb):
        message = get_template("vote").render(
            {"actor": "ann", "vote_type": vote_type, "content_type": "post", "preview": "Hi"}
        )
        assert message == f'ann {verb} your post: "Hi..."'

    def test_rating(self):
        message = get_template("rating").render({"actor": "ann", "preview": "Sketch", "rating": 4})
        assert message == 'ann rated your post "Sketch..." with 4 stars'

    def test_unknown(self):
        with pytest.raises(ValueError):
            get_template("poke")
