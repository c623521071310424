"""ChatUser aggregate: an anonymous messenger session, keyed by username.

State Machine:
    IDLE → WAITING → CONNECTED → IDLE
"""

import re
from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, String

from messaging.chat_user.events import (
    ChatUserConnected,
    ChatUserDisconnected,
    ChatUserJoined,
    ChatUserQueued,
)
from messaging.domain import messaging

_USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9]{3,20}$")


class ChatStatus(Enum):
    IDLE = "idle"
    WAITING = "waiting"
    CONNECTED = "connected"


def validate_username(username):
    if not username or not _USERNAME_PATTERN.match(username):
        raise ValidationError({"username": ["Username must be 3-20 letters or digits"]})


@messaging.aggregate
class ChatUser:
    username = String(identifier=True, max_length=20)
    status = String(choices=ChatStatus, default=ChatStatus.IDLE.value)
    partner = String(max_length=20)
    connection_id = Identifier()
    waiting_since = DateTime()
    created_at = DateTime()

    @invariant.post
    def username_is_well_formed(self):
        validate_username(self.username)

    @classmethod
    def join(cls, username):
        now = datetime.now(UTC)
        user = cls(username=username, status=ChatStatus.IDLE.value, created_at=now)
        user.raise_(ChatUserJoined(username=username, joined_at=now))
        return user

    @property
    def is_connected(self):
        return self.status == ChatStatus.CONNECTED.value

    @property
    def is_waiting(self):
        return self.status == ChatStatus.WAITING.value

    @property
    def queued_at(self):
        """``waiting_since`` as an aware UTC datetime. SQL providers read it back naive."""
        if self.waiting_since is None or self.waiting_since.tzinfo is not None:
            return self.waiting_since
        return self.waiting_since.replace(tzinfo=UTC)

    def enqueue(self):
        if self.is_connected:
            raise ValidationError({"status": ["You are already in a chat"]})
        if self.is_waiting:
            return

        now = datetime.now(UTC)
        self.status = ChatStatus.WAITING.value
        self.waiting_since = now
        self.raise_(ChatUserQueued(username=self.username, waiting_since=now))

    def connect(self, partner, connection_id):
        now = datetime.now(UTC)
        self.status = ChatStatus.CONNECTED.value
        self.partner = partner
        self.connection_id = connection_id
        self.waiting_since = None
        self.raise_(
            ChatUserConnected(
                username=self.username,
                partner=partner,
                connection_id=connection_id,
                connected_at=now,
            )
        )

    def disconnect(self):
        connection_id = self.connection_id
        self.status = ChatStatus.IDLE.value
        self.partner = None
        self.connection_id = None
        self.waiting_since = None
        if connection_id:
            self.raise_(
                ChatUserDisconnected(
                    username=self.username,
                    connection_id=connection_id,
                    disconnected_at=datetime.now(UTC),
                )
            )
