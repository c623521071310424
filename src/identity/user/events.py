"""Domain events for the User aggregate."""

from protean.fields import Boolean, DateTime, Identifier, String, Text

from identity.domain import identity


@identity.event(part_of="User")
class UserRegistered:
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


@identity.event(part_of="User")
class ProfileUpdated:
    """A user changed their public profile details."""

    __version__ = 1

    user_id = Identifier(required=True)
    bio = Text()
    location = String()
    profile_picture = String()
    updated_at = DateTime(required=True)


@identity.event(part_of="User")
class UserLoggedIn:
    """A user signed in with valid credentials."""

    __version__ = 1

    user_id = Identifier(required=True)
    logged_in_at = DateTime(required=True)
