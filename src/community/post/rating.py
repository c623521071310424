"""RatePost / RemovePostRating: star ratings on rate-my-work posts."""

import structlog
from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from community.domain import community
from community.post.authoring import load_post
from community.post.post import Post

logger = structlog.get_logger(__name__)

RECENT_RATINGS_LIMIT = 5


@community.command(part_of="Post")
class RatePost:
    post_id = Identifier(required=True)
    user_id = Identifier(required=True)
    rating = Integer(required=True, min_value=1, max_value=5)


@community.command(part_of="Post")
class RemovePostRating:
    post_id = Identifier(required=True)
    user_id = Identifier(required=True)


def rating_summary(post, user_id=None):
    """Average, count, most recent ratings and (optionally) ``user_id``'s own rating."""
    recent = sorted(post.ratings, key=lambda r: r.rated_at, reverse=True)[:RECENT_RATINGS_LIMIT]
    own = post.rating_by(user_id) if user_id else None
    return {
        "average_rating": post.average_rating or 0.0,
        "total_ratings": post.total_ratings or 0,
        "recent_ratings": recent,
        "user_rating": own.rating if own else None,
    }


@community.command_handler(part_of=Post)
class PostRatingHandler:
    @handle(RatePost)
    def rate_post(self, command):
        post = load_post(command.post_id)
        post.rate(command.user_id, command.rating)
        current_domain.repository_for(Post).add(post)

        logger.info(
            "Post rated",
            post_id=str(post.id),
            rating=command.rating,
            average_rating=post.average_rating,
        )
        return post.average_rating

    @handle(RemovePostRating)
    def remove_post_rating(self, command):
        post = load_post(command.post_id)
        post.remove_rating(command.user_id)
        current_domain.repository_for(Post).add(post)
