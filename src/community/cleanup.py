"""Same-domain cleanup: deleting content takes its comments and votes along.

Deleting a comment raises CommentDeleted in turn, so whole reply threads
are removed one level at a time.
"""

import structlog
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from community.comment.comment import Comment
from community.comment.commenting import comments_for, replies_to
from community.comment.events import CommentDeleted
from community.domain import community
from community.post.events import PostDeleted
from community.post.post import Post
from community.review.events import ReviewDeleted
from community.review.review import Review
from community.shared.content import TargetType
from community.vote.vote import Vote

logger = structlog.get_logger(__name__)


def _delete_comments(comments):
    repo = current_domain.repository_for(Comment)
    for comment in comments:
        if comment.is_active:
            comment.delete()
            repo.add(comment)


def _delete_votes(entity_type, entity_id):
    repo = current_domain.repository_for(Vote)
    votes = repo._dao.query.filter(entity_type=entity_type, entity_id=str(entity_id)).all().items
    for vote in votes:
        repo._dao.delete(vote)


def remove_dependents(entity_type, entity_id):
    comments = comments_for(entity_type, entity_id)
    _delete_comments(comments)
    _delete_votes(entity_type, entity_id)

    logger.info(
        "Removed dependent content",
        entity_type=entity_type,
        entity_id=str(entity_id),
        comment_count=len(comments),
    )


@community.event_handler(part_of=Post)
class PostCleanupHandler:
    @handle(PostDeleted)
    def on_post_deleted(self, event: PostDeleted) -> None:
        remove_dependents(TargetType.POST.value, event.post_id)


@community.event_handler(part_of=Review)
class ReviewCleanupHandler:
    @handle(ReviewDeleted)
    def on_review_deleted(self, event: ReviewDeleted) -> None:
        remove_dependents(TargetType.REVIEW.value, event.review_id)


@community.event_handler(part_of=Comment)
class CommentCleanupHandler:
    @handle(CommentDeleted)
    def on_comment_deleted(self, event: CommentDeleted) -> None:
        _delete_comments(replies_to(event.comment_id))
        remove_dependents(TargetType.COMMENT.value, event.comment_id)
