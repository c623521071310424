"""Helpers shared by the community aggregates."""

from enum import Enum

from protean.exceptions import ValidationError

PREVIEW_LENGTH = 50


class ContentStatus(Enum):
    ACTIVE = "Active"
    DELETED = "Deleted"


class TargetType(Enum):
    POST = "post"
    REVIEW = "review"
    COMMENT = "comment"


def preview(text, length=PREVIEW_LENGTH):
    """First ``length`` characters of ``text``; empty string for None."""
    return (text or "")[:length]


def assert_owner(owner_id, user_id, noun):
    if str(owner_id) != str(user_id):
        raise ValidationError({"user_id": [f"You can only modify your own {noun}"]})


def assert_active(status, noun):
    if status == ContentStatus.DELETED.value:
        raise ValidationError({"status": [f"This {noun} has been deleted"]})
