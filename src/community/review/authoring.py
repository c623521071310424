"""SubmitReview / EditReview / DeleteReview: commands and handler."""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from community.domain import community
from community.projections.reviewable import Reviewable
from community.review.review import _UNSET, Review
from community.shared.content import ContentStatus, assert_owner

logger = structlog.get_logger(__name__)


@community.command(part_of="Review")
class SubmitReview:
    entity_id = Identifier(required=True)
    user_id = Identifier(required=True)
    rating = Integer(required=True, min_value=1, max_value=5)
    title = String(max_length=200)
    review_text = Text(required=True)


@community.command(part_of="Review")
class EditReview:
    review_id = Identifier(required=True)
    user_id = Identifier(required=True)
    rating = Integer(min_value=1, max_value=5)
    title = String(max_length=200)
    review_text = Text()


@community.command(part_of="Review")
class DeleteReview:
    review_id = Identifier(required=True)
    user_id = Identifier(required=True)


def load_review(review_id):
    """Fetch a review that has not been deleted."""
    review = current_domain.repository_for(Review).get(review_id)
    if not review.is_active:
        raise ObjectNotFoundError(f"Review {review_id} does not exist")
    return review


def active_reviews(**filters):
    repo = current_domain.repository_for(Review)
    return repo._dao.query.filter(status=ContentStatus.ACTIVE.value, **filters).order_by("-created_at").all().items


@community.command_handler(part_of=Review)
class ReviewAuthoringHandler:
    @handle(SubmitReview)
    def submit_review(self, command):
        current_domain.repository_for(Reviewable).get(command.entity_id)

        if active_reviews(entity_id=command.entity_id, user_id=command.user_id):
            raise ValidationError({"review": ["You have already reviewed this entity"]})

        review = Review.submit(
            entity_id=command.entity_id,
            user_id=command.user_id,
            rating=command.rating,
            title=command.title,
            review_text=command.review_text,
        )
        current_domain.repository_for(Review).add(review)

        logger.info(
            "Review submitted",
            review_id=str(review.id),
            entity_id=str(command.entity_id),
            rating=command.rating,
        )
        return str(review.id)

    @handle(EditReview)
    def edit_review(self, command):
        review = load_review(command.review_id)
        assert_owner(review.user_id, command.user_id, "reviews")

        review.edit(
            rating=command.rating if command.rating is not None else _UNSET,
            title=command.title if command.title is not None else _UNSET,
            review_text=command.review_text if command.review_text is not None else _UNSET,
        )
        current_domain.repository_for(Review).add(review)

    @handle(DeleteReview)
    def delete_review(self, command):
        review = load_review(command.review_id)
        assert_owner(review.user_id, command.user_id, "reviews")

        review.delete()
        current_domain.repository_for(Review).add(review)

        logger.info("Review deleted", review_id=str(review.id))
