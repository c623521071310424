"""Shared BDD fixtures and step definitions for the Notifications domain."""

from datetime import UTC, datetime

import pytest
from notifications.notification.identity_events import IdentityUserEventsHandler
from notifications.notification.reading import notifications_for
from pytest_bdd import given, parsers, then
from shared.events.identity import UserRegistered


@pytest.fixture()
def users():
    """Usernames to user ids for the scenario."""
    return {}


@given(parsers.cfparse('a user named "{username}"'))
def user_named(username, users):
    user_id = f"id-{username}"
    IdentityUserEventsHandler().on_user_registered(
        UserRegistered(
            user_id=user_id,
            username=username,
            email=f"{username}@example.com",
            registered_at=datetime.now(UTC),
        )
    )
    users[username] = user_id


@then(parsers.cfparse('"{username}" has {count:d} notifications'))
@then(parsers.cfparse('"{username}" has {count:d} notification'))
def notification_count(username, count, users):
    assert len(notifications_for(users[username])) == count


@then(parsers.cfparse('"{username}" is told "{message}"'))
def told(username, message, users):
    assert message in [n.message for n in notifications_for(users[username])]
