"""Resolve the post, review or comment a comment or vote points at."""

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from community.comment.comment import Comment
from community.post.post import Post
from community.review.review import Review
from community.shared.content import TargetType, preview


def _aggregate_for(target_type):
    return {
        TargetType.POST: Post,
        TargetType.REVIEW: Review,
        TargetType.COMMENT: Comment,
    }[target_type]


def parse_target_type(entity_type, allowed=tuple(TargetType)):
    try:
        target_type = TargetType(entity_type)
    except ValueError:
        target_type = None
    if target_type not in allowed:
        names = ", ".join(t.value for t in allowed)
        raise ValidationError({"entity_type": [f"Entity type must be one of: {names}"]})
    return target_type


def load_target(entity_type, entity_id, allowed=tuple(TargetType)):
    """Return the live aggregate for ``(entity_type, entity_id)`` or raise ObjectNotFoundError."""
    target_type = parse_target_type(entity_type, allowed)
    target = current_domain.repository_for(_aggregate_for(target_type)).get(entity_id)
    if not target.is_active:
        raise ObjectNotFoundError(f"{target_type.value.capitalize()} {entity_id} does not exist")
    return target


def target_preview(target):
    """Short excerpt of the target's text, used in notification messages."""
    if hasattr(target, "preview_text"):
        return target.preview_text
    if hasattr(target, "review_text"):
        return preview(target.review_text)
    return preview(target.comment_text)
