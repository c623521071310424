import pytest
from community.comment.comment import Comment
from community.comment.events import CommentAdded, CommentDeleted
from community.vote.events import VoteCast
from community.vote.vote import Vote, VoteAction, VoteType
from protean.exceptions import ValidationError


class TestComment:
    def test_added_event_carries_notification_context(self):
        comment = Comment.add(
            user_id="user-2",
            comment_text="Nice shot! " * 10,
            entity_type="post",
            entity_id="post-1",
            content_owner_id="user-1",
        )
        event = comment._events[0]
        assert isinstance(event, CommentAdded)
        assert event.content_owner_id == "user-1"
        assert event.content_type == "post"
        assert len(event.preview) == 50

    def test_text_limits(self):
        with pytest.raises(ValidationError):
            Comment.add(user_id="u", comment_text=" ", entity_type="post", entity_id="p")
        with pytest.raises(ValidationError):
            Comment.add(user_id="u", comment_text="x" * 1001, entity_type="post", entity_id="p")

    def test_unknown_target_type(self):
        with pytest.raises(ValidationError):
            Comment.add(user_id="u", comment_text="Hi", entity_type="photo", entity_id="p")

    def test_delete(self):
        comment = Comment.add(user_id="u", comment_text="Hi", entity_type="review", entity_id="r")
        comment._events.clear()
        comment.delete()
        assert comment.is_active is False
        assert isinstance(comment._events[0], CommentDeleted)


class TestVoteToggle:
    @pytest.fixture()
    def vote(self):
        return Vote.open(user_id="u", entity_type="post", entity_id="p", vote_type=VoteType.UP.value)

    def test_first_vote_is_added(self, vote):
        assert vote.toggle(VoteType.UP.value) == VoteAction.ADDED
        assert vote.is_active is True
        assert isinstance(vote._events[0], VoteCast)

    def test_same_type_withdraws(self, vote):
        vote.toggle(VoteType.UP.value)
        assert vote.toggle(VoteType.UP.value) == VoteAction.REMOVED
        assert vote.is_active is False

    def test_other_type_switches(self, vote):
        vote.toggle(VoteType.UP.value)
        assert vote.toggle(VoteType.DOWN.value) == VoteAction.UPDATED
        assert vote.vote_type == VoteType.DOWN.value
        assert vote.is_active is True

    def test_withdrawn_vote_comes_back(self, vote):
        vote.toggle(VoteType.UP.value)
        vote.toggle(VoteType.UP.value)
        assert vote.toggle(VoteType.DOWN.value) == VoteAction.ADDED
