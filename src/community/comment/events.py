"""Domain events for the Comment aggregate."""

from protean.fields import DateTime, Identifier, String, Text

from community.domain import community


@community.event(part_of="Comment")
class CommentAdded:
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


@community.event(part_of="Comment")
class CommentEdited:
    __version__ = 1

    comment_id = Identifier(required=True)
    comment_text = Text()
    edited_at = DateTime(required=True)


@community.event(part_of="Comment")
class CommentDeleted:
    """A comment was removed; its replies and votes go with it."""

    __version__ = 1

    comment_id = Identifier(required=True)
    entity_type = String(required=True)
    entity_id = Identifier(required=True)
    deleted_at = DateTime(required=True)
