"""User aggregate root."""

import re
from datetime import UTC, datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, String, Text

from identity.domain import identity
from identity.user.events import ProfileUpdated, UserLoggedIn, UserRegistered
from identity.user.passwords import hash_password, verify_password

# Sentinel for distinguishing "not provided" from None in partial updates
_UNSET = object()

_USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")
_MIN_PASSWORD_LENGTH = 6


def is_valid_email(email: str) -> bool:
    """Structural email check: one @, non-empty parts, a dotted domain, no spaces."""
    if not email or any(ch.isspace() for ch in email) or email.count("@") != 1:
        return False

    local_part, domain_part = email.split("@", 1)
    if not local_part or not domain_part or "." not in domain_part:
        return False
    if domain_part.startswith(".") or domain_part.endswith(".") or ".." in email:
        return False
    return True


@identity.aggregate
class User:
    """A registered member of the platform.

    Holds credentials and the public profile. Usernames and emails are
    unique across the platform, compared case-insensitively; uniqueness is
    checked by the registration handler because it spans instances.
    """

    username: String(required=True, max_length=50)
    email: String(required=True, max_length=254)
    password_hash: String(required=True, max_length=255)
    is_admin: Boolean(default=False)
    bio: Text()
    location: String(max_length=100)
    profile_picture: String(max_length=500)
    registered_at: DateTime()
    last_login_at: DateTime()

    @invariant.post
    def username_is_well_formed(self):
        if self.username is None:
            return
        if len(self.username) < 3:
            raise ValidationError({"username": ["Username must be at least 3 characters"]})
        if not _USERNAME_PATTERN.match(self.username):
            raise ValidationError({"username": ["Username may only contain letters, digits, '.', '_' and '-'"]})

    @invariant.post
    def email_is_well_formed(self):
        if self.email is not None and not is_valid_email(self.email):
            raise ValidationError({"email": [f"Invalid email address: {self.email!r}"]})

    @invariant.post
    def bio_cannot_exceed_limit(self):
        if self.bio and len(self.bio) > 500:
            raise ValidationError({"bio": ["Bio cannot exceed 500 characters"]})

    @classmethod
    def register(
        cls,
        username,
        email,
        password,
        is_admin=False,
        bio=None,
        location=None,
        profile_picture=None,
    ):
        if not password or len(password) < _MIN_PASSWORD_LENGTH:
            raise ValidationError({"password": [f"Password must be at least {_MIN_PASSWORD_LENGTH} characters"]})

        now = datetime.now(UTC)
        normalized_email = email.strip().lower()

        user = cls(
            username=username,
            email=normalized_email,
            password_hash=hash_password(password),
            is_admin=bool(is_admin),
            bio=bio,
            location=location,
            profile_picture=profile_picture,
            registered_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=str(user.id),
                username=username,
                email=normalized_email,
                is_admin=bool(is_admin),
                bio=bio,
                location=location,
                profile_picture=profile_picture,
                registered_at=now,
            )
        )
        return user

    def check_password(self, password) -> bool:
        return verify_password(password, self.password_hash)

    def record_login(self):
        now = datetime.now(UTC)
        self.last_login_at = now
        self.raise_(UserLoggedIn(user_id=str(self.id), logged_in_at=now))

    def update_profile(self, bio=_UNSET, location=_UNSET, profile_picture=_UNSET):
        now = datetime.now(UTC)

        with atomic_change(self):
            if bio is not _UNSET:
                self.bio = bio
            if location is not _UNSET:
                self.location = location
            if profile_picture is not _UNSET:
                self.profile_picture = profile_picture

        self.raise_(
            ProfileUpdated(
                user_id=str(self.id),
                bio=self.bio,
                location=self.location,
                profile_picture=self.profile_picture,
                updated_at=now,
            )
        )
