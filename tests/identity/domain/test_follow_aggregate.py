import pytest
from identity.follow.events import UserFollowed, UserUnfollowed
from identity.follow.follow import Follow
from protean.exceptions import ValidationError


class TestFollowEdge:
    def test_start_activates_edge(self):
        follow = Follow.start("user-a", "user-b")
        assert follow.is_active is True
        assert follow.followed_at is not None
        assert isinstance(follow._events[0], UserFollowed)

    def test_cannot_follow_self(self):
        with pytest.raises(ValidationError) as exc:
            Follow.start("user-a", "user-a")
        assert exc.value.messages["follow"] == ["You cannot follow yourself"]

    def test_end_deactivates_edge(self):
        follow = Follow.start("user-a", "user-b")
        follow._events.clear()

        follow.end()

        assert follow.is_active is False
        assert follow.unfollowed_at is not None
        event = follow._events[0]
        assert isinstance(event, UserUnfollowed)
        assert event.follower_id == "user-a"
        assert event.followed_id == "user-b"

    def test_cannot_end_inactive_edge(self):
        follow = Follow.start("user-a", "user-b")
        follow.end()
        with pytest.raises(ValidationError):
            follow.end()

    def test_resume_reactivates_edge(self):
        follow = Follow.start("user-a", "user-b")
        follow.end()
        follow._events.clear()

        follow.resume()

        assert follow.is_active is True
        assert follow.unfollowed_at is None
        assert isinstance(follow._events[0], UserFollowed)

    def test_cannot_resume_active_edge(self):
        follow = Follow.start("user-a", "user-b")
        with pytest.raises(ValidationError) as exc:
            follow.resume()
        assert exc.value.messages["follow"] == ["You are already following this user"]
