"""Sending and reading messenger messages."""

from datetime import UTC

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import String, Text
from protean.utils.globals import current_domain

from messaging.chat_user.chat_user import ChatUser
from messaging.domain import messaging
from messaging.message.message import DEFAULT_ROOM, DirectMessage, GroupMessage

logger = structlog.get_logger(__name__)

DEFAULT_HISTORY_LIMIT = 100


@messaging.command(part_of="DirectMessage")
class SendDirectMessage:
    sender = String(required=True, max_length=20)
    receiver = String(required=True, max_length=20)
    message = Text(required=True)


@messaging.command(part_of="GroupMessage")
class PostGroupMessage:
    sender = String(required=True, max_length=20)
    message = Text(required=True)
    room = String(max_length=50)


def group_room() -> str:
    return current_domain.config.get("custom", {}).get("GROUP_ROOM", DEFAULT_ROOM)


def history_limit() -> int:
    return int(current_domain.config.get("custom", {}).get("GROUP_HISTORY_LIMIT", DEFAULT_HISTORY_LIMIT))


def _chat_user(username):
    return current_domain.repository_for(ChatUser).get(username)


def connection_between(sender, receiver):
    """The connection id shared by two chat users, or ``None``."""
    try:
        first, second = _chat_user(sender), _chat_user(receiver)
    except ObjectNotFoundError:
        return None
    if (
        first.is_connected
        and second.is_connected
        and first.partner == second.username
        and second.partner == first.username
        and first.connection_id == second.connection_id
    ):
        return str(first.connection_id)
    return None


@messaging.command_handler(part_of=DirectMessage)
class DirectMessageHandler:
    @handle(SendDirectMessage)
    def send_direct_message(self, command):
        connection_id = connection_between(command.sender, command.receiver)
        if connection_id is None:
            raise ValidationError({"receiver": ["You are not connected to this user"]})

        message = DirectMessage.send(connection_id, command.sender, command.receiver, command.message)
        current_domain.repository_for(DirectMessage).add(message)
        return str(message.id)


@messaging.command_handler(part_of=GroupMessage)
class GroupMessageHandler:
    @handle(PostGroupMessage)
    def post_group_message(self, command):
        # Raises ObjectNotFoundError for unknown senders
        _chat_user(command.sender)

        message = GroupMessage.post(command.sender, command.message, command.room or group_room())
        current_domain.repository_for(GroupMessage).add(message)
        logger.info("Group message posted", sender=command.sender, room=message.room)
        return str(message.id)


def conversation(username, partner):
    """Messages on the live connection between ``username`` and ``partner``, oldest first."""
    connection_id = connection_between(username, partner)
    if connection_id is None:
        return []
    repo = current_domain.repository_for(DirectMessage)
    return repo._dao.query.filter(connection_id=connection_id).order_by("sent_at").all().items


def _aware(value):
    return value.replace(tzinfo=UTC) if value.tzinfo is None else value


def group_messages(room=None, after=None, limit=None):
    """The latest ``limit`` messages in ``room``, returned oldest first."""
    limit = limit or history_limit()
    repo = current_domain.repository_for(GroupMessage)
    messages = repo._dao.query.filter(room=room or group_room()).order_by("-sent_at").all().items
    if after is not None:
        messages = [m for m in messages if _aware(m.sent_at) > _aware(after)]
    return list(reversed(messages[:limit]))
