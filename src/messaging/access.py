"""Messenger entry checks: the shared access code and username availability."""

import hmac
import os

from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from messaging.chat_user.chat_user import ChatUser, validate_username

DEFAULT_ACCESS_CODE = "CRITIQUE"


def _custom(key, default):
    return current_domain.config.get("custom", {}).get(key, default)


def access_code() -> str:
    return os.getenv("MESSENGER_ACCESS_CODE") or _custom("MESSENGER_ACCESS_CODE", DEFAULT_ACCESS_CODE)


def verify_code(code) -> bool:
    return hmac.compare_digest((code or "").encode(), access_code().encode())


def username_taken(username) -> bool:
    return bool(current_domain.repository_for(ChatUser)._dao.query.filter(username=username).all().items)


def check_username(username) -> None:
    """Raise ValidationError unless ``username`` is well formed and free."""
    validate_username(username)
    if username_taken(username):
        raise ValidationError({"username": ["Username is already taken"]})
