"""Comment aggregate: a remark on a post, review or comment, optionally threaded."""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, String, Text

from community.comment.events import CommentAdded, CommentDeleted, CommentEdited
from community.domain import community
from community.shared.content import ContentStatus, TargetType, assert_active, preview

MAX_COMMENT_LENGTH = 1000


@community.aggregate
class Comment:
    user_id = Identifier(required=True)
    comment_text = Text(required=True)
    entity_type = String(choices=TargetType, required=True)
    entity_id = Identifier(required=True)
    parent_comment_id = Identifier()
    status = String(choices=ContentStatus, default=ContentStatus.ACTIVE.value)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def comment_text_length_is_bounded(self):
        if self.comment_text is None:
            return
        if not self.comment_text.strip():
            raise ValidationError({"comment_text": ["Comment cannot be empty"]})
        if len(self.comment_text) > MAX_COMMENT_LENGTH:
            raise ValidationError(
                {"comment_text": [f"Comment cannot exceed {MAX_COMMENT_LENGTH} characters"]}
            )

    @classmethod
    def add(
        cls,
        user_id,
        comment_text,
        entity_type,
        entity_id,
        parent_comment_id=None,
        content_owner_id=None,
        parent_author_id=None,
    ):
        now = datetime.now(UTC)
        comment = cls(
            user_id=user_id,
            comment_text=comment_text,
            entity_type=entity_type,
            entity_id=entity_id,
            parent_comment_id=parent_comment_id,
            status=ContentStatus.ACTIVE.value,
            created_at=now,
            updated_at=now,
        )
        comment.raise_(
            CommentAdded(
                comment_id=str(comment.id),
                user_id=str(user_id),
                entity_type=entity_type,
                entity_id=str(entity_id),
                parent_comment_id=str(parent_comment_id) if parent_comment_id else None,
                content_owner_id=str(content_owner_id) if content_owner_id else None,
                content_type=entity_type,
                parent_author_id=str(parent_author_id) if parent_author_id else None,
                preview=preview(comment_text),
                comment_text=comment_text,
                commented_at=now,
            )
        )
        return comment

    @property
    def is_active(self):
        return self.status == ContentStatus.ACTIVE.value

    def edit(self, comment_text):
        assert_active(self.status, "comment")

        now = datetime.now(UTC)
        self.comment_text = comment_text
        self.updated_at = now
        self.raise_(CommentEdited(comment_id=str(self.id), comment_text=comment_text, edited_at=now))

    def delete(self):
        assert_active(self.status, "comment")

        now = datetime.now(UTC)
        self.status = ContentStatus.DELETED.value
        self.updated_at = now
        self.raise_(
            CommentDeleted(
                comment_id=str(self.id),
                entity_type=self.entity_type,
                entity_id=str(self.entity_id),
                deleted_at=now,
            )
        )
