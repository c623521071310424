"""Cross-domain event contracts for Identity domain events.

These classes define the event shape for consumption by other domains
(e.g., the Notifications domain to render actor names and follow alerts,
the Moderation domain to know who is an admin). They are registered as
external events via domain.register_external_event() with matching
__type__ strings so Protean's stream deserialization works correctly.

The source-of-truth events are in src/identity/user/events.py and
src/identity/follow/events.py.
"""

from protean.core.event import BaseEvent
from protean.fields import Boolean, DateTime, Identifier, String, Text


class UserRegistered(BaseEvent):
    """A new user account was created on the platform."""

    __version__ = 1

    user_id = Identifier(required=True)
    username = String(required=True)
    email = String(required=True)
    is_admin = Boolean(default=False)
    bio = Text()
    location = String()
    profile_picture = String()
    registered_at = DateTime(required=True)


class UserFollowed(BaseEvent):
    """A user started following another user."""

    __version__ = 1

    follow_id = Identifier(required=True)
    follower_id = Identifier(required=True)
    followed_id = Identifier(required=True)
    followed_at = DateTime(required=True)
