"""CastVote: toggle a vote, plus the vote count queries."""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from community.domain import community
from community.shared.content import TargetType
from community.shared.targets import load_target, parse_target_type, target_preview
from community.vote.vote import Vote, VoteType

logger = structlog.get_logger(__name__)

VOTABLE = (TargetType.POST, TargetType.REVIEW)


@community.command(part_of="Vote")
class CastVote:
    user_id = Identifier(required=True)
    entity_type = String(required=True)
    entity_id = Identifier(required=True)
    vote_type = String(choices=VoteType, required=True)


def _votes(**filters):
    return current_domain.repository_for(Vote)._dao.query.filter(**filters).all().items


def find_vote(user_id, entity_type, entity_id):
    votes = _votes(user_id=str(user_id), entity_type=entity_type, entity_id=str(entity_id))
    return votes[0] if votes else None


def vote_counts(entity_type, entity_id):
    """Upvotes, downvotes and score (up minus down) for one target."""
    parse_target_type(entity_type, VOTABLE)
    votes = _votes(entity_type=entity_type, entity_id=str(entity_id), is_active=True)
    upvotes = sum(1 for v in votes if v.vote_type == VoteType.UP.value)
    downvotes = len(votes) - upvotes
    return {"upvotes": upvotes, "downvotes": downvotes, "score": upvotes - downvotes}


def user_vote(user_id, entity_type, entity_id):
    """The live vote type ``user_id`` holds on a target, or None."""
    vote = find_vote(user_id, entity_type, entity_id)
    return vote.vote_type if vote and vote.is_active else None


def bulk_votes(entity_type, entity_ids, user_id=None):
    """Counts and the caller's vote for each of ``entity_ids``, keyed by id."""
    return {
        str(entity_id): {
            **vote_counts(entity_type, entity_id),
            "user_vote": user_vote(user_id, entity_type, entity_id) if user_id else None,
        }
        for entity_id in entity_ids
    }


@community.command_handler(part_of=Vote)
class VotingHandler:
    @handle(CastVote)
    def cast_vote(self, command):
        target = load_target(command.entity_type, command.entity_id, VOTABLE)

        vote = find_vote(command.user_id, command.entity_type, command.entity_id)
        if vote is None:
            vote = Vote.open(
                user_id=command.user_id,
                entity_type=command.entity_type,
                entity_id=command.entity_id,
                vote_type=command.vote_type,
            )

        action = vote.toggle(
            command.vote_type,
            content_owner_id=target.user_id,
            preview=target_preview(target),
        )
        current_domain.repository_for(Vote).add(vote)

        logger.info(
            "Vote cast",
            vote_id=str(vote.id),
            entity_type=command.entity_type,
            entity_id=str(command.entity_id),
            action=action.value,
        )
        return action.value
