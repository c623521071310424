"""Domain events for the ChatUser aggregate."""

from protean.fields import DateTime, Identifier, String

from messaging.domain import messaging


@messaging.event(part_of="ChatUser")
class ChatUserJoined:
    __version__ = 1

    username = String(required=True)
    joined_at = DateTime(required=True)


@messaging.event(part_of="ChatUser")
class ChatUserQueued:
    __version__ = 1

    username = String(required=True)
    waiting_since = DateTime(required=True)


@messaging.event(part_of="ChatUser")
class ChatUserConnected:
    __version__ = 1

    username = String(required=True)
    partner = String(required=True)
    connection_id = Identifier(required=True)
    connected_at = DateTime(required=True)


@messaging.event(part_of="ChatUser")
class ChatUserDisconnected:
    __version__ = 1

    username = String(required=True)
    connection_id = Identifier(required=True)
    disconnected_at = DateTime(required=True)
