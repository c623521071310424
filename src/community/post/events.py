"""Domain events for the Post aggregate."""

from protean.fields import DateTime, Identifier, Integer, String, Text

from community.domain import community


@community.event(part_of="Post")
class PostCreated:
    """A user published a post."""

    __version__ = 1

    post_id = Identifier(required=True)
    user_id = Identifier(required=True)
    post_type = String(required=True)
    content = Text()
    created_at = DateTime(required=True)


@community.event(part_of="Post")
class PostEdited:
    """A user changed the text of their post."""

    __version__ = 1

    post_id = Identifier(required=True)
    content = Text()
    edited_at = DateTime(required=True)


@community.event(part_of="Post")
class PostDeleted:
    """A post was deleted by its author or a moderator."""

    __version__ = 1

    post_id = Identifier(required=True)
    user_id = Identifier(required=True)
    deleted_at = DateTime(required=True)


@community.event(part_of="Post")
class PostRated:
    """A user rated a rate-my-work post, or changed their rating."""

    __version__ = 1

    post_id = Identifier(required=True)
    user_id = Identifier(required=True)
    rating = Integer(required=True)
    post_owner_id = Identifier(required=True)
    preview = String()
    rated_at = DateTime(required=True)


@community.event(part_of="Post")
class PostRatingRemoved:
    """A user withdrew their rating of a post."""

    __version__ = 1

    post_id = Identifier(required=True)
    user_id = Identifier(required=True)
    removed_at = DateTime(required=True)
