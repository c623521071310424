"""Cross-domain event contracts for Community domain events.

These classes define the event shape for consumption by other domains
(e.g., the Catalogue domain to keep entity ratings current, the
Notifications domain to tell content owners about comments, votes and
ratings, the Moderation domain to count reviews and keep the text admins
look at when handling reports). They are registered as external events
via domain.register_external_event() with matching __type__ strings so
Protean's stream deserialization works correctly.

The source-of-truth events live in src/community/*/events.py.
"""

from protean.core.event import BaseEvent
from protean.fields import DateTime, Identifier, Integer, String, Text


class ReviewSubmitted(BaseEvent):
    """A user reviewed an entity."""

    __version__ = 1

    review_id = Identifier(required=True)
    entity_id = Identifier(required=True)
    user_id = Identifier(required=True)
    rating = Integer(required=True)
    title = String(required=True)
    review_text = Text()
    submitted_at = DateTime(required=True)


class ReviewEdited(BaseEvent):
    """A user changed the content or rating of their review."""

    __version__ = 1

    review_id = Identifier(required=True)
    entity_id = Identifier(required=True)
    previous_rating = Integer(required=True)
    rating = Integer(required=True)
    title = String()
    review_text = Text()
    edited_at = DateTime(required=True)


class ReviewDeleted(BaseEvent):
    """A review was deleted by its author, a moderator, or an entity removal."""

    __version__ = 1

    review_id = Identifier(required=True)
    entity_id = Identifier(required=True)
    user_id = Identifier(required=True)
    rating = Integer(required=True)
    deleted_at = DateTime(required=True)


class CommentAdded(BaseEvent):
    """A user commented on a post or review, or replied to a comment."""

    __version__ = 1

    comment_id = Identifier(required=True)
    user_id = Identifier(required=True)
    entity_type = String(required=True)
    entity_id = Identifier(required=True)
    parent_comment_id = Identifier()
    content_owner_id = Identifier()
    content_type = String()
    parent_author_id = Identifier()
    preview = String()
    comment_text = Text()
    commented_at = DateTime(required=True)


class VoteCast(BaseEvent):
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


class PostRated(BaseEvent):
    """A user rated a rate-my-work post."""

    __version__ = 1

    post_id = Identifier(required=True)
    user_id = Identifier(required=True)
    rating = Integer(required=True)
    post_owner_id = Identifier(required=True)
    preview = String()
    rated_at = DateTime(required=True)


class CommentEdited(BaseEvent):
    __version__ = 1

    comment_id = Identifier(required=True)
    comment_text = Text()
    edited_at = DateTime(required=True)


class CommentDeleted(BaseEvent):
    """A comment was removed; its replies and votes go with it."""

    __version__ = 1

    comment_id = Identifier(required=True)
    entity_type = String(required=True)
    entity_id = Identifier(required=True)
    deleted_at = DateTime(required=True)


class PostCreated(BaseEvent):
    """A user published a post."""

    __version__ = 1

    post_id = Identifier(required=True)
    user_id = Identifier(required=True)
    post_type = String(required=True)
    content = Text()
    created_at = DateTime(required=True)


class PostEdited(BaseEvent):
    """A user changed the text of their post."""

    __version__ = 1

    post_id = Identifier(required=True)
    content = Text()
    edited_at = DateTime(required=True)


class PostDeleted(BaseEvent):
    """A post was deleted by its author or a moderator."""

    __version__ = 1

    post_id = Identifier(required=True)
    user_id = Identifier(required=True)
    deleted_at = DateTime(required=True)
