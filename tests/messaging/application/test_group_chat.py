"""Application tests for the group room."""

from datetime import UTC, datetime

import pytest
from messaging.chat_user.session import CreateChatUser
from messaging.message.message import GroupMessage
from messaging.message.sending import PostGroupMessage, group_messages
from protean import current_domain
from protean.exceptions import ObjectNotFoundError


@pytest.fixture(autouse=True)
def alice():
    current_domain.process(CreateChatUser(username="alice"), asynchronous=False)


def _post(text, room=None):
    return current_domain.process(PostGroupMessage(sender="alice", message=text, room=room), asynchronous=False)


class TestGroupChat:
    def test_history_oldest_first(self):
        _post("one")
        _post("two")
        assert [m.message for m in group_messages()] == ["one", "two"]
        assert group_messages()[0].room == "general"

    def test_limit_keeps_latest(self):
        for text in ("one", "two", "three"):
            _post(text)
        assert [m.message for m in group_messages(limit=2)] == ["two", "three"]

    def test_after(self):
        repo = current_domain.repository_for(GroupMessage)
        repo.add(GroupMessage(sender="alice", message="old", sent_at=datetime(2024, 1, 1, tzinfo=UTC)))
        repo.add(GroupMessage(sender="alice", message="new", sent_at=datetime(2024, 6, 1, tzinfo=UTC)))

        messages = group_messages(after=datetime(2024, 3, 1, tzinfo=UTC))
        assert [m.message for m in messages] == ["new"]

    def test_rooms_are_separate(self):
        _post("lobby only", room="lobby")
        assert group_messages() == []
        assert len(group_messages(room="lobby")) == 1

    def test_unknown_sender(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(PostGroupMessage(sender="ghost", message="hi"), asynchronous=False)
