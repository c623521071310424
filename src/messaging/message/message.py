"""DirectMessage and GroupMessage aggregates."""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, String, Text

from messaging.domain import messaging

MAX_MESSAGE_LENGTH = 1000
DEFAULT_ROOM = "general"


def _check_message(message):
    if message is None:
        return
    if not message.strip():
        raise ValidationError({"message": ["Message cannot be empty"]})
    if len(message) > MAX_MESSAGE_LENGTH:
        raise ValidationError({"message": [f"Message cannot exceed {MAX_MESSAGE_LENGTH} characters"]})


@messaging.aggregate
class DirectMessage:
    connection_id = Identifier(required=True)
    sender = String(required=True, max_length=20)
    receiver = String(required=True, max_length=20)
    message = Text(required=True)
    sent_at = DateTime()

    @invariant.post
    def message_length_is_bounded(self):
        _check_message(self.message)

    @classmethod
    def send(cls, connection_id, sender, receiver, message):
        return cls(
            connection_id=connection_id,
            sender=sender,
            receiver=receiver,
            message=message,
            sent_at=datetime.now(UTC),
        )


@messaging.aggregate
class GroupMessage:
    room = String(max_length=50, default=DEFAULT_ROOM)
    sender = String(required=True, max_length=20)
    message = Text(required=True)
    sent_at = DateTime()

    @invariant.post
    def message_length_is_bounded(self):
        _check_message(self.message)

    @classmethod
    def post(cls, sender, message, room=DEFAULT_ROOM):
        return cls(room=room or DEFAULT_ROOM, sender=sender, message=message, sent_at=datetime.now(UTC))
