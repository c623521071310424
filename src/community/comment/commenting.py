"""AddComment / EditComment / DeleteComment: commands and handler."""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from community.comment.comment import Comment
from community.domain import community
from community.shared.content import ContentStatus, assert_owner
from community.shared.targets import load_target, parse_target_type

logger = structlog.get_logger(__name__)


@community.command(part_of="Comment")
class AddComment:
    user_id = Identifier(required=True)
    comment_text = Text(required=True)
    entity_type = String(required=True)
    entity_id = Identifier(required=True)
    parent_comment_id = Identifier()


@community.command(part_of="Comment")
class EditComment:
    comment_id = Identifier(required=True)
    user_id = Identifier(required=True)
    comment_text = Text(required=True)


@community.command(part_of="Comment")
class DeleteComment:
    comment_id = Identifier(required=True)
    user_id = Identifier(required=True)


def load_comment(comment_id):
    """Fetch a comment that has not been deleted."""
    comment = current_domain.repository_for(Comment).get(comment_id)
    if not comment.is_active:
        raise ObjectNotFoundError(f"Comment {comment_id} does not exist")
    return comment


def comments_for(entity_type, entity_id):
    """Live comments on a target, oldest first."""
    target_type = parse_target_type(entity_type)
    repo = current_domain.repository_for(Comment)
    return (
        repo._dao.query.filter(
            status=ContentStatus.ACTIVE.value,
            entity_type=target_type.value,
            entity_id=str(entity_id),
        )
        .order_by("created_at")
        .all()
        .items
    )


def replies_to(comment_id):
    repo = current_domain.repository_for(Comment)
    return (
        repo._dao.query.filter(status=ContentStatus.ACTIVE.value, parent_comment_id=str(comment_id))
        .order_by("created_at")
        .all()
        .items
    )


@community.command_handler(part_of=Comment)
class CommentingHandler:
    @handle(AddComment)
    def add_comment(self, command):
        target = load_target(command.entity_type, command.entity_id)

        parent_author_id = None
        if command.parent_comment_id:
            parent = load_comment(command.parent_comment_id)
            if parent.entity_type != command.entity_type or str(parent.entity_id) != str(command.entity_id):
                raise ValidationError(
                    {"parent_comment_id": ["Parent comment belongs to a different item"]}
                )
            parent_author_id = parent.user_id

        comment = Comment.add(
            user_id=command.user_id,
            comment_text=command.comment_text,
            entity_type=command.entity_type,
            entity_id=command.entity_id,
            parent_comment_id=command.parent_comment_id,
            content_owner_id=target.user_id,
            parent_author_id=parent_author_id,
        )
        current_domain.repository_for(Comment).add(comment)

        logger.info(
            "Comment added",
            comment_id=str(comment.id),
            entity_type=command.entity_type,
            entity_id=str(command.entity_id),
            is_reply=bool(command.parent_comment_id),
        )
        return str(comment.id)

    @handle(EditComment)
    def edit_comment(self, command):
        comment = load_comment(command.comment_id)
        assert_owner(comment.user_id, command.user_id, "comments")

        comment.edit(command.comment_text)
        current_domain.repository_for(Comment).add(comment)

    @handle(DeleteComment)
    def delete_comment(self, command):
        comment = load_comment(command.comment_id)
        assert_owner(comment.user_id, command.user_id, "comments")

        comment.delete()
        current_domain.repository_for(Comment).add(comment)
