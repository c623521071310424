"""Messenger sessions: create, queue for P2P, leave, log out.

Joining the queue pairs the two users who have waited longest, under a
fresh connection id. Leaving a chat sends the partner back to idle,
deletes the conversation and removes the leaving user.
"""

import uuid

import structlog
from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from messaging.access import check_username
from messaging.chat_user.chat_user import ChatStatus, ChatUser
from messaging.domain import messaging
from messaging.message.message import DirectMessage

logger = structlog.get_logger(__name__)


@messaging.command(part_of="ChatUser")
class CreateChatUser:
    username = String(required=True, max_length=20)


@messaging.command(part_of="ChatUser")
class JoinP2PQueue:
    username = String(required=True, max_length=20)


@messaging.command(part_of="ChatUser")
class LeaveP2P:
    username = String(required=True, max_length=20)


@messaging.command(part_of="ChatUser")
class Logout:
    username = String(required=True, max_length=20)


def p2p_status(user) -> dict:
    return {
        "connected": user.is_connected,
        "waiting": user.is_waiting,
        "partner": user.partner,
        "connection_id": str(user.connection_id) if user.connection_id else None,
    }


def pair_waiting(candidates):
    """Pair ``candidates`` two at a time, longest-waiting first.

    Returns the list of ``(first, second, connection_id)`` pairings; an odd
    user out stays waiting.
    """
    queue = sorted((u for u in candidates if u.is_waiting), key=lambda u: u.queued_at)
    pairs = []
    while len(queue) >= 2:
        first, second = queue.pop(0), queue.pop(0)
        connection_id = str(uuid.uuid4())
        first.connect(second.username, connection_id)
        second.connect(first.username, connection_id)
        pairs.append((first, second, connection_id))
    return pairs


def _end_conversation(user):
    """Return ``user``'s partner to idle and delete their messages."""
    repo = current_domain.repository_for(ChatUser)
    if user.is_connected and user.partner:
        partners = repo._dao.query.filter(username=user.partner).all().items
        for partner in partners:
            if partner.connection_id == user.connection_id:
                partner.disconnect()
                repo.add(partner)

        messages = current_domain.repository_for(DirectMessage)
        for message in messages._dao.query.filter(connection_id=str(user.connection_id)).all().items:
            messages._dao.delete(message)

    user.disconnect()


def _close_session(username):
    """End any conversation and remove the user."""
    repo = current_domain.repository_for(ChatUser)
    user = repo.get(username)
    _end_conversation(user)
    repo._dao.delete(user)


@messaging.command_handler(part_of=ChatUser)
class ChatSessionHandler:
    @handle(CreateChatUser)
    def create_chat_user(self, command):
        check_username(command.username)
        user = ChatUser.join(command.username)
        current_domain.repository_for(ChatUser).add(user)
        logger.info("Chat user created", username=command.username)
        return user.username

    @handle(JoinP2PQueue)
    def join_queue(self, command):
        repo = current_domain.repository_for(ChatUser)
        user = repo.get(command.username)
        if user.is_connected:
            return p2p_status(user)

        user.enqueue()
        others = [
            u
            for u in repo._dao.query.filter(status=ChatStatus.WAITING.value).all().items
            if u.username != user.username
        ]
        for first, second, connection_id in pair_waiting(others + [user]):
            repo.add(first)
            repo.add(second)
            logger.info("P2P chat connected", users=[first.username, second.username], connection_id=connection_id)
        repo.add(user)

        return p2p_status(user)

    @handle(LeaveP2P)
    def leave_p2p(self, command):
        _close_session(command.username)
        logger.info("Chat user left P2P", username=command.username)

    @handle(Logout)
    def logout(self, command):
        _close_session(command.username)
        logger.info("Chat user logged out", username=command.username)
