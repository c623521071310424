"""Integration tests for the UserCard projection via domain.process()."""

from identity.follow.following import FollowUser, UnfollowUser
from identity.projections.user_card import UserCard, search_users
from identity.user.login import RecordLogin
from identity.user.profile import UpdateProfile
from identity.user.registration import RegisterUser
from protean import current_domain


def _register(username, email=None):
    return current_domain.process(
        RegisterUser(username=username, email=email or f"{username}@example.com", password="secret123"),
        asynchronous=False,
    )


class TestUserCard:
    def test_created_on_registration(self):
        user_id = _register("alice")

        card = current_domain.repository_for(UserCard).get(user_id)
        assert card.username == "alice"
        assert card.follower_count == 0
        assert card.following_count == 0

    def test_registration_profile_is_carried_onto_card(self):
        user_id = current_domain.process(
            RegisterUser(
                username="alice",
                email="alice@example.com",
                password="secret123",
                bio="Movie fan",
                location="Lisbon",
                profile_picture="/photos/file/alice.png",
            ),
            asynchronous=False,
        )

        card = current_domain.repository_for(UserCard).get(user_id)
        assert card.bio == "Movie fan"
        assert card.location == "Lisbon"
        assert card.profile_picture == "/photos/file/alice.png"

    def test_profile_changes_are_reflected(self):
        user_id = _register("alice")
        current_domain.process(UpdateProfile(user_id=user_id, location="Berlin"), asynchronous=False)

        assert current_domain.repository_for(UserCard).get(user_id).location == "Berlin"

    def test_login_is_recorded(self):
        user_id = _register("alice")
        current_domain.process(RecordLogin(user_id=user_id), asynchronous=False)

        assert current_domain.repository_for(UserCard).get(user_id).last_login_at is not None

    def test_follow_counts(self):
        alice = _register("alice")
        bob = _register("bob")

        current_domain.process(FollowUser(follower_id=alice, followed_id=bob), asynchronous=False)

        cards = current_domain.repository_for(UserCard)
        assert cards.get(bob).follower_count == 1
        assert cards.get(alice).following_count == 1

        current_domain.process(UnfollowUser(follower_id=alice, followed_id=bob), asynchronous=False)

        assert cards.get(bob).follower_count == 0
        assert cards.get(alice).following_count == 0


class TestSearchUsers:
    def test_case_insensitive_substring(self):
        _register("FilmBuff")
        _register("bookworm")

        names = [card.username for card in search_users("film")]
        assert names == ["FilmBuff"]

    def test_limit(self):
        for i in range(5):
            _register(f"reader{i}")

        assert len(search_users("reader", limit=3)) == 3
