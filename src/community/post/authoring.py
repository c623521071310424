"""CreatePost / EditPost / DeletePost: commands and handler."""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Boolean, Identifier, Text
from protean.utils.globals import current_domain

from community.domain import community
from community.post.post import Post, PostType
from community.shared.content import ContentStatus, assert_owner

logger = structlog.get_logger(__name__)

TOP_RATED_LIMIT = 10


@community.command(part_of="Post")
class CreatePost:
    user_id = Identifier(required=True)
    content = Text(required=True)
    is_rate_enabled = Boolean(default=False)


@community.command(part_of="Post")
class EditPost:
    post_id = Identifier(required=True)
    user_id = Identifier(required=True)
    content = Text(required=True)


@community.command(part_of="Post")
class DeletePost:
    post_id = Identifier(required=True)
    user_id = Identifier(required=True)


def load_post(post_id):
    """Fetch a post that has not been deleted."""
    post = current_domain.repository_for(Post).get(post_id)
    if not post.is_active:
        raise ObjectNotFoundError(f"Post {post_id} does not exist")
    return post


def active_posts(**filters):
    repo = current_domain.repository_for(Post)
    return repo._dao.query.filter(status=ContentStatus.ACTIVE.value, **filters).order_by("-created_at").all().items


def top_rated_posts(limit=TOP_RATED_LIMIT):
    """Rated rate-my-work posts, best average first, ties broken by rating count."""
    rated = [p for p in active_posts(post_type=PostType.RATE_MY_WORK.value) if p.total_ratings]
    rated.sort(key=lambda p: (p.average_rating, p.total_ratings), reverse=True)
    return rated[:limit]


@community.command_handler(part_of=Post)
class PostAuthoringHandler:
    @handle(CreatePost)
    def create_post(self, command):
        post = Post.create(
            user_id=command.user_id,
            content=command.content,
            is_rate_enabled=command.is_rate_enabled,
        )
        current_domain.repository_for(Post).add(post)

        logger.info("Post created", post_id=str(post.id), post_type=post.post_type)
        return str(post.id)

    @handle(EditPost)
    def edit_post(self, command):
        post = load_post(command.post_id)
        assert_owner(post.user_id, command.user_id, "posts")

        post.edit(command.content)
        current_domain.repository_for(Post).add(post)

    @handle(DeletePost)
    def delete_post(self, command):
        post = load_post(command.post_id)
        assert_owner(post.user_id, command.user_id, "posts")

        post.delete()
        current_domain.repository_for(Post).add(post)

        logger.info("Post deleted", post_id=str(post.id))
