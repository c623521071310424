"""User card: public profile with follower and following counts."""

from protean.core.projector import on
from protean.exceptions import ObjectNotFoundError
from protean.fields import Boolean, DateTime, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from identity.domain import identity
from identity.follow.events import UserFollowed, UserUnfollowed
from identity.follow.follow import Follow
from identity.user.events import ProfileUpdated, UserLoggedIn, UserRegistered
from identity.user.user import User

SEARCH_LIMIT = 20


@identity.projection
class UserCard:
    user_id: Identifier(identifier=True, required=True)
    username: String(required=True)
    email: String(required=True)
    is_admin: Boolean(default=False)
    bio: Text()
    location: String()
    profile_picture: String()
    follower_count: Integer(default=0)
    following_count: Integer(default=0)
    registered_at: DateTime()
    last_login_at: DateTime()


def search_users(term, limit=SEARCH_LIMIT):
    """Users whose username contains ``term``, case-insensitively."""
    repo = current_domain.repository_for(UserCard)
    return repo._dao.query.filter(username__icontains=term).order_by("username").limit(limit).all().items


def _adjust_counts(user_id, followers=0, following=0):
    repo = current_domain.repository_for(UserCard)
    try:
        card = repo.get(str(user_id))
    except ObjectNotFoundError:
        return
    card.follower_count = max(0, card.follower_count + followers)
    card.following_count = max(0, card.following_count + following)
    repo.add(card)


@identity.projector(projector_for=UserCard, aggregates=[User, Follow])
class UserCardProjector:
    @on(UserRegistered)
    def on_user_registered(self, event):
        current_domain.repository_for(UserCard).add(
            UserCard(
                user_id=event.user_id,
                username=event.username,
                email=event.email,
                is_admin=event.is_admin,
                bio=event.bio,
                location=event.location,
                profile_picture=event.profile_picture,
                follower_count=0,
                following_count=0,
                registered_at=event.registered_at,
            )
        )

    @on(ProfileUpdated)
    def on_profile_updated(self, event):
        repo = current_domain.repository_for(UserCard)
        card = repo.get(event.user_id)
        card.bio = event.bio
        card.location = event.location
        card.profile_picture = event.profile_picture
        repo.add(card)

    @on(UserLoggedIn)
    def on_user_logged_in(self, event):
        repo = current_domain.repository_for(UserCard)
        card = repo.get(event.user_id)
        card.last_login_at = event.logged_in_at
        repo.add(card)

    @on(UserFollowed)
    def on_user_followed(self, event):
        _adjust_counts(event.followed_id, followers=1)
        _adjust_counts(event.follower_id, following=1)

    @on(UserUnfollowed)
    def on_user_unfollowed(self, event):
        _adjust_counts(event.followed_id, followers=-1)
        _adjust_counts(event.follower_id, following=-1)
