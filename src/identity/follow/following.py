"""FollowUser / UnfollowUser: commands and handler."""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from identity.domain import identity
from identity.follow.follow import Follow
from identity.user.user import User

logger = structlog.get_logger(__name__)


@identity.command(part_of="Follow")
class FollowUser:
    follower_id: Identifier(required=True)
    followed_id: Identifier(required=True)


@identity.command(part_of="Follow")
class UnfollowUser:
    follower_id: Identifier(required=True)
    followed_id: Identifier(required=True)


def find_edge(follower_id, followed_id):
    """Return the Follow record for the pair, active or not, or None."""
    repo = current_domain.repository_for(Follow)
    edges = repo._dao.query.filter(
        follower_id=str(follower_id),
        followed_id=str(followed_id),
    ).all().items
    return edges[0] if edges else None


@identity.command_handler(part_of=Follow)
class FollowingHandler:
    @handle(FollowUser)
    def follow_user(self, command):
        if str(command.follower_id) == str(command.followed_id):
            raise ValidationError({"follow": ["You cannot follow yourself"]})

        users = current_domain.repository_for(User)
        users.get(command.followed_id)
        users.get(command.follower_id)

        repo = current_domain.repository_for(Follow)
        edge = find_edge(command.follower_id, command.followed_id)
        if edge is None:
            edge = Follow.start(command.follower_id, command.followed_id)
        else:
            edge.resume()
        repo.add(edge)

        logger.info(
            "User followed",
            follower_id=str(command.follower_id),
            followed_id=str(command.followed_id),
        )
        return str(edge.id)

    @handle(UnfollowUser)
    def unfollow_user(self, command):
        edge = find_edge(command.follower_id, command.followed_id)
        if edge is None or not edge.is_active:
            raise ObjectNotFoundError("You are not following this user")

        edge.end()
        current_domain.repository_for(Follow).add(edge)
