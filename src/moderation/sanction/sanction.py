"""UserWarning and UserBan aggregates: sanctions issued from reports.

A warning lapses after 30 days unless told otherwise. A temporary ban
lasts 7 days by default; a permanent ban never expires.
"""

from datetime import UTC, datetime, timedelta
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Identifier, String, Text
from protean.utils.globals import current_domain

from moderation.domain import moderation
from moderation.sanction.events import UserBanned, UserWarned

WARNING_DAYS = 30
TEMPORARY_BAN_DAYS = 7
DEFAULT_WARNING_REASON = "Content violation"
DEFAULT_BAN_REASON = "Repeated violations"


class BanType(Enum):
    TEMPORARY = "temporary"
    PERMANENT = "permanent"


@moderation.aggregate
class UserWarning:
    user_id = Identifier(required=True)
    admin_id = Identifier(required=True)
    reason = Text(required=True)
    content_type = String(max_length=20)
    content_id = Identifier()
    expires_at = DateTime()
    created_at = DateTime()

    @classmethod
    def issue(cls, user_id, admin_id, reason=None, content_type=None, content_id=None, expires_at=None):
        now = datetime.now(UTC)
        reason = reason or DEFAULT_WARNING_REASON
        expires_at = expires_at or now + timedelta(days=WARNING_DAYS)

        warning = cls(
            user_id=user_id,
            admin_id=admin_id,
            reason=reason,
            content_type=content_type,
            content_id=content_id,
            expires_at=expires_at,
            created_at=now,
        )
        warning.raise_(
            UserWarned(
                warning_id=str(warning.id),
                user_id=str(user_id),
                admin_id=str(admin_id),
                reason=reason,
                expires_at=expires_at,
                warned_at=now,
            )
        )
        return warning


@moderation.aggregate
class UserBan:
    user_id = Identifier(required=True)
    admin_id = Identifier(required=True)
    reason = Text(required=True)
    ban_type = String(choices=BanType, default=BanType.TEMPORARY.value)
    expires_at = DateTime()
    is_active = Boolean(default=True)
    created_at = DateTime()

    @classmethod
    def impose(cls, user_id, admin_id, ban_type=None, reason=None, expires_at=None):
        now = datetime.now(UTC)
        try:
            ban_type = BanType(ban_type or BanType.TEMPORARY.value)
        except ValueError:
            raise ValidationError({"ban_type": ["Ban type must be temporary or permanent"]}) from None
        reason = reason or DEFAULT_BAN_REASON
        if ban_type == BanType.PERMANENT:
            expires_at = None
        else:
            expires_at = expires_at or now + timedelta(days=TEMPORARY_BAN_DAYS)

        ban = cls(
            user_id=user_id,
            admin_id=admin_id,
            reason=reason,
            ban_type=ban_type.value,
            expires_at=expires_at,
            is_active=True,
            created_at=now,
        )
        ban.raise_(
            UserBanned(
                ban_id=str(ban.id),
                user_id=str(user_id),
                admin_id=str(admin_id),
                ban_type=ban_type.value,
                reason=reason,
                expires_at=expires_at,
                banned_at=now,
            )
        )
        return ban

    def is_in_force(self, at=None):
        if not self.is_active:
            return False
        if self.expires_at is None:
            return True
        expires_at = self.expires_at
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=UTC)
        return expires_at > (at or datetime.now(UTC))


def warnings_for(user_id):
    repo = current_domain.repository_for(UserWarning)
    return repo._dao.query.filter(user_id=str(user_id)).order_by("-created_at").all().items


def bans_for(user_id):
    repo = current_domain.repository_for(UserBan)
    return repo._dao.query.filter(user_id=str(user_id)).order_by("-created_at").all().items


def is_banned(user_id):
    """True while the user has an active ban that has not run out."""
    return any(ban.is_in_force() for ban in bans_for(user_id))
