"""Domain events for the Review aggregate."""

from protean.fields import DateTime, Identifier, Integer, String, Text

from community.domain import community


@community.event(part_of="Review")
class ReviewSubmitted:
    """A user reviewed an entity."""

    __version__ = 1

    review_id = Identifier(required=True)
    entity_id = Identifier(required=True)
    user_id = Identifier(required=True)
    rating = Integer(required=True)
    title = String(required=True)
    review_text = Text()
    submitted_at = DateTime(required=True)


@community.event(part_of="Review")
class ReviewEdited:
    """A user changed the content or rating of their review."""

    __version__ = 1

    review_id = Identifier(required=True)
    entity_id = Identifier(required=True)
    previous_rating = Integer(required=True)
    rating = Integer(required=True)
    title = String()
    review_text = Text()
    edited_at = DateTime(required=True)


@community.event(part_of="Review")
class ReviewDeleted:
    """A review was deleted by its author, a moderator, or an entity removal."""

    __version__ = 1

    review_id = Identifier(required=True)
    entity_id = Identifier(required=True)
    user_id = Identifier(required=True)
    rating = Integer(required=True)
    deleted_at = DateTime(required=True)
