"""Shared BDD fixtures and step definitions for the Identity domain."""

import pytest
from identity.follow.events import UserFollowed, UserUnfollowed
from identity.user.events import ProfileUpdated, UserLoggedIn, UserRegistered
from identity.user.user import User
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then

# Map event name strings to classes for dynamic lookup
_EVENT_CLASSES = {
    "UserRegistered": UserRegistered,
    "ProfileUpdated": ProfileUpdated,
    "UserLoggedIn": UserLoggedIn,
    "UserFollowed": UserFollowed,
    "UserUnfollowed": UserUnfollowed,
}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a registered user "{username}"'), target_fixture="user")
def registered_user(username):
    user = User.register(username=username, email=f"{username}@example.com", password="secret123")
    user._events.clear()
    return user


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the action fails with a validation error")
def action_fails_with_validation_error(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then(parsers.cfparse("a {event_type} event is raised"))
def event_is_raised(user, event_type):
    event_cls = _EVENT_CLASSES[event_type]
    assert any(isinstance(e, event_cls) for e in user._events)
