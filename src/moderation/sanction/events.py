"""Domain events for user warnings and bans."""

from protean.fields import DateTime, Identifier, String

from moderation.domain import moderation


@moderation.event(part_of="UserWarning")
class UserWarned:
    __version__ = 1

    warning_id = Identifier(required=True)
    user_id = Identifier(required=True)
    admin_id = Identifier(required=True)
    reason = String(required=True)
    expires_at = DateTime()
    warned_at = DateTime(required=True)


@moderation.event(part_of="UserBan")
class UserBanned:
    __version__ = 1

    ban_id = Identifier(required=True)
    user_id = Identifier(required=True)
    admin_id = Identifier(required=True)
    ban_type = String(required=True)
    reason = String(required=True)
    expires_at = DateTime()
    banned_at = DateTime(required=True)
