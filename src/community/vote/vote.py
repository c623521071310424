"""Vote aggregate: a user's up or down vote on a post or review.

One record per user and target. Voting again with the same type withdraws
the vote; a different type switches it. A withdrawn vote stays on record
as inactive and comes back to life on the next vote.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import Boolean, DateTime, Identifier, String

from community.domain import community
from community.vote.events import VoteCast


class VoteType(Enum):
    UP = "up"
    DOWN = "down"


class VoteAction(Enum):
    ADDED = "added"
    REMOVED = "removed"
    UPDATED = "updated"


@community.aggregate
class Vote:
    user_id = Identifier(required=True)
    entity_type = String(required=True, max_length=20)
    entity_id = Identifier(required=True)
    vote_type = String(choices=VoteType, required=True)
    is_active = Boolean(default=True)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def open(cls, user_id, entity_type, entity_id, vote_type):
        now = datetime.now(UTC)
        return cls(
            user_id=user_id,
            entity_type=entity_type,
            entity_id=entity_id,
            vote_type=vote_type,
            is_active=False,
            created_at=now,
            updated_at=now,
        )

    def toggle(self, vote_type, content_owner_id=None, preview=None):
        """Apply a vote of ``vote_type`` and return the resulting action."""
        if not self.is_active:
            action = VoteAction.ADDED
            self.is_active = True
        elif self.vote_type == vote_type:
            action = VoteAction.REMOVED
            self.is_active = False
        else:
            action = VoteAction.UPDATED

        now = datetime.now(UTC)
        self.vote_type = vote_type
        self.updated_at = now

        self.raise_(
            VoteCast(
                vote_id=str(self.id),
                user_id=str(self.user_id),
                entity_type=self.entity_type,
                entity_id=str(self.entity_id),
                vote_type=vote_type,
                action=action.value,
                content_owner_id=str(content_owner_id) if content_owner_id else None,
                preview=preview,
                voted_at=now,
            )
        )
        return action
