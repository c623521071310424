"""Domain events for the Vote aggregate."""

from protean.fields import DateTime, Identifier, String

from community.domain import community


@community.event(part_of="Vote")
class VoteCast:
    """A user added, changed or withdrew a vote on a post or review."""

    __version__ = 1

    vote_id = Identifier(required=True)
    user_id = Identifier(required=True)
    entity_type = String(required=True)
    entity_id = Identifier(required=True)
    vote_type = String(required=True)
    action = String(required=True)
    content_owner_id = Identifier()
    preview = String()
    voted_at = DateTime(required=True)
