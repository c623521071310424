"""Domain events for the Follow aggregate."""

from protean.fields import DateTime, Identifier

from identity.domain import identity


@identity.event(part_of="Follow")
class UserFollowed:
    """A user started following another user."""

    __version__ = 1

    follow_id = Identifier(required=True)
    follower_id = Identifier(required=True)
    followed_id = Identifier(required=True)
    followed_at = DateTime(required=True)


@identity.event(part_of="Follow")
class UserUnfollowed:
    """A user stopped following another user."""

    __version__ = 1

    follow_id = Identifier(required=True)
    follower_id = Identifier(required=True)
    followed_id = Identifier(required=True)
    unfollowed_at = DateTime(required=True)
