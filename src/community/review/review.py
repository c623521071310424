"""Review aggregate: one user's rating and write-up of one entity."""

from datetime import UTC, datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, Integer, String, Text

from community.domain import community
from community.review.events import ReviewDeleted, ReviewEdited, ReviewSubmitted
from community.shared.content import ContentStatus, assert_active

# Sentinel for distinguishing "not provided" from None in partial updates
_UNSET = object()

DEFAULT_TITLE = "Review"


@community.aggregate
class Review:
    """A star rating with a title and text.

    A user may review each entity once. Deletion flips the status so that
    ReviewDeleted reaches the catalogue and the comment cleanup handler.
    """

    entity_id = Identifier(required=True)
    user_id = Identifier(required=True)
    rating = Integer(required=True, min_value=1, max_value=5)
    title = String(max_length=200, default=DEFAULT_TITLE)
    review_text = Text(required=True)
    status = String(choices=ContentStatus, default=ContentStatus.ACTIVE.value)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def review_text_must_not_be_blank(self):
        if self.review_text is not None and not self.review_text.strip():
            raise ValidationError({"review_text": ["Review text cannot be empty"]})

    @classmethod
    def submit(cls, entity_id, user_id, rating, review_text, title=None):
        now = datetime.now(UTC)
        title = title.strip() if title and title.strip() else DEFAULT_TITLE

        review = cls(
            entity_id=entity_id,
            user_id=user_id,
            rating=rating,
            title=title,
            review_text=review_text,
            status=ContentStatus.ACTIVE.value,
            created_at=now,
            updated_at=now,
        )
        review.raise_(
            ReviewSubmitted(
                review_id=str(review.id),
                entity_id=str(entity_id),
                user_id=str(user_id),
                rating=rating,
                title=title,
                review_text=review_text,
                submitted_at=now,
            )
        )
        return review

    @property
    def is_active(self):
        return self.status == ContentStatus.ACTIVE.value

    def edit(self, rating=_UNSET, title=_UNSET, review_text=_UNSET):
        assert_active(self.status, "review")

        now = datetime.now(UTC)
        previous_rating = self.rating

        with atomic_change(self):
            if rating is not _UNSET:
                self.rating = rating
            if title is not _UNSET:
                self.title = title.strip() if title and title.strip() else DEFAULT_TITLE
            if review_text is not _UNSET:
                self.review_text = review_text
            self.updated_at = now

        self.raise_(
            ReviewEdited(
                review_id=str(self.id),
                entity_id=str(self.entity_id),
                previous_rating=previous_rating,
                rating=self.rating,
                title=self.title,
                review_text=self.review_text,
                edited_at=now,
            )
        )

    def delete(self):
        assert_active(self.status, "review")

        now = datetime.now(UTC)
        self.status = ContentStatus.DELETED.value
        self.updated_at = now

        self.raise_(
            ReviewDeleted(
                review_id=str(self.id),
                entity_id=str(self.entity_id),
                user_id=str(self.user_id),
                rating=self.rating,
                deleted_at=now,
            )
        )
