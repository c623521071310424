"""Application tests for the follow graph."""

import pytest
from identity.follow.follow import Follow
from identity.follow.following import FollowUser, UnfollowUser, find_edge
from identity.user.registration import RegisterUser
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError


@pytest.fixture()
def users():
    alice = current_domain.process(
        RegisterUser(username="alice", email="alice@example.com", password="secret123"),
        asynchronous=False,
    )
    bob = current_domain.process(
        RegisterUser(username="bob", email="bob@example.com", password="secret123"),
        asynchronous=False,
    )
    return alice, bob


class TestFollowUser:
    def test_creates_active_edge(self, users):
        alice, bob = users
        current_domain.process(FollowUser(follower_id=alice, followed_id=bob), asynchronous=False)

        edge = find_edge(alice, bob)
        assert edge is not None
        assert edge.is_active is True

    def test_cannot_follow_self(self, users):
        alice, _ = users
        with pytest.raises(ValidationError):
            current_domain.process(FollowUser(follower_id=alice, followed_id=alice), asynchronous=False)

    def test_cannot_follow_twice(self, users):
        alice, bob = users
        current_domain.process(FollowUser(follower_id=alice, followed_id=bob), asynchronous=False)
        with pytest.raises(ValidationError):
            current_domain.process(FollowUser(follower_id=alice, followed_id=bob), asynchronous=False)

    def test_unknown_user(self, users):
        alice, _ = users
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(FollowUser(follower_id=alice, followed_id="missing"), asynchronous=False)

    def test_refollow_reuses_edge(self, users):
        alice, bob = users
        current_domain.process(FollowUser(follower_id=alice, followed_id=bob), asynchronous=False)
        current_domain.process(UnfollowUser(follower_id=alice, followed_id=bob), asynchronous=False)
        current_domain.process(FollowUser(follower_id=alice, followed_id=bob), asynchronous=False)

        edges = current_domain.repository_for(Follow)._dao.query.filter(follower_id=alice).all().items
        assert len(edges) == 1
        assert edges[0].is_active is True


class TestUnfollowUser:
    def test_deactivates_edge(self, users):
        alice, bob = users
        current_domain.process(FollowUser(follower_id=alice, followed_id=bob), asynchronous=False)
        current_domain.process(UnfollowUser(follower_id=alice, followed_id=bob), asynchronous=False)

        assert find_edge(alice, bob).is_active is False

    def test_not_following(self, users):
        alice, bob = users
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(UnfollowUser(follower_id=alice, followed_id=bob), asynchronous=False)
