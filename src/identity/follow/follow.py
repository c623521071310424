"""Follow aggregate: one directed edge of the social graph.

Each follower/followed pair owns a single Follow record for its whole
history. Unfollowing deactivates the edge instead of deleting it, so the
UserUnfollowed event travels through the normal unit of work; following
again reactivates the same record.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Identifier

from identity.domain import identity
from identity.follow.events import UserFollowed, UserUnfollowed


@identity.aggregate
class Follow:
    follower_id: Identifier(required=True)
    followed_id: Identifier(required=True)
    is_active: Boolean(default=True)
    followed_at: DateTime()
    unfollowed_at: DateTime()

    @invariant.post
    def cannot_follow_self(self):
        if self.follower_id is not None and str(self.follower_id) == str(self.followed_id):
            raise ValidationError({"follow": ["You cannot follow yourself"]})

    @classmethod
    def start(cls, follower_id, followed_id):
        follow = cls(follower_id=follower_id, followed_id=followed_id, is_active=False)
        follow.resume()
        return follow

    def resume(self):
        if self.is_active and self.followed_at is not None:
            raise ValidationError({"follow": ["You are already following this user"]})

        now = datetime.now(UTC)
        self.is_active = True
        self.followed_at = now
        self.unfollowed_at = None

        self.raise_(
            UserFollowed(
                follow_id=str(self.id),
                follower_id=str(self.follower_id),
                followed_id=str(self.followed_id),
                followed_at=now,
            )
        )

    def end(self):
        if not self.is_active:
            raise ValidationError({"follow": ["You are not following this user"]})

        now = datetime.now(UTC)
        self.is_active = False
        self.unfollowed_at = now

        self.raise_(
            UserUnfollowed(
                follow_id=str(self.id),
                follower_id=str(self.follower_id),
                followed_id=str(self.followed_id),
                unfollowed_at=now,
            )
        )
