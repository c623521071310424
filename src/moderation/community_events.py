"""Inbound cross-domain event handlers for Community events.

Keeps the review counter on the dashboard and the ReportedContent copies
admins read when handling reports.
"""

from protean.utils.mixins import handle
from shared.events.community import (
    CommentAdded,
    CommentDeleted,
    CommentEdited,
    PostCreated,
    PostDeleted,
    PostEdited,
    ReviewDeleted,
    ReviewEdited,
    ReviewSubmitted,
)

from moderation.domain import moderation
from moderation.projections.platform_stats import bump
from moderation.projections.reported_content import forget_content, record_content, revise_content
from moderation.report.report import Report, ReportedItemType

moderation.register_external_event(ReviewSubmitted, "Community.ReviewSubmitted.v1")
moderation.register_external_event(ReviewEdited, "Community.ReviewEdited.v1")
moderation.register_external_event(ReviewDeleted, "Community.ReviewDeleted.v1")
moderation.register_external_event(PostCreated, "Community.PostCreated.v1")
moderation.register_external_event(PostEdited, "Community.PostEdited.v1")
moderation.register_external_event(PostDeleted, "Community.PostDeleted.v1")
moderation.register_external_event(CommentAdded, "Community.CommentAdded.v1")
moderation.register_external_event(CommentEdited, "Community.CommentEdited.v1")
moderation.register_external_event(CommentDeleted, "Community.CommentDeleted.v1")


@moderation.event_handler(part_of=Report, stream_category="community::review")
class CommunityReviewEventsHandler:
    @handle(ReviewSubmitted)
    def on_review_submitted(self, event: ReviewSubmitted) -> None:
        bump("total_reviews")
        record_content(
            content_id=str(event.review_id),
            content_type=ReportedItemType.REVIEW.value,
            user_id=str(event.user_id),
            text=event.review_text,
            title=event.title,
            rating=event.rating,
            entity_type="entity",
            entity_id=str(event.entity_id),
            created_at=event.submitted_at,
            updated_at=event.submitted_at,
        )

    @handle(ReviewEdited)
    def on_review_edited(self, event: ReviewEdited) -> None:
        revise_content(
            event.review_id,
            event.edited_at,
            text=event.review_text,
            title=event.title,
            rating=event.rating,
        )

    @handle(ReviewDeleted)
    def on_review_deleted(self, event: ReviewDeleted) -> None:
        bump("total_reviews", -1)
        forget_content(event.review_id)


@moderation.event_handler(part_of=Report, stream_category="community::post")
class CommunityPostEventsHandler:
    @handle(PostCreated)
    def on_post_created(self, event: PostCreated) -> None:
        record_content(
            content_id=str(event.post_id),
            content_type=ReportedItemType.POST.value,
            user_id=str(event.user_id),
            text=event.content,
            created_at=event.created_at,
            updated_at=event.created_at,
        )

    @handle(PostEdited)
    def on_post_edited(self, event: PostEdited) -> None:
        revise_content(event.post_id, event.edited_at, text=event.content)

    @handle(PostDeleted)
    def on_post_deleted(self, event: PostDeleted) -> None:
        forget_content(event.post_id)


@moderation.event_handler(part_of=Report, stream_category="community::comment")
class CommunityCommentEventsHandler:
    @handle(CommentAdded)
    def on_comment_added(self, event: CommentAdded) -> None:
        record_content(
            content_id=str(event.comment_id),
            content_type=ReportedItemType.COMMENT.value,
            user_id=str(event.user_id),
            text=event.comment_text,
            entity_type=event.entity_type,
            entity_id=str(event.entity_id),
            created_at=event.commented_at,
            updated_at=event.commented_at,
        )

    @handle(CommentEdited)
    def on_comment_edited(self, event: CommentEdited) -> None:
        revise_content(event.comment_id, event.edited_at, text=event.comment_text)

    @handle(CommentDeleted)
    def on_comment_deleted(self, event: CommentDeleted) -> None:
        forget_content(event.comment_id)
