from datetime import UTC, datetime

import pytest
from notifications.notification.identity_events import IdentityUserEventsHandler
from shared.events.identity import UserRegistered


@pytest.fixture(autouse=True)
def recipients():
    handler = IdentityUserEventsHandler()
    for user_id, username in (("u-ann", "ann"), ("u-bob", "bob")):
        handler.on_user_registered(
            UserRegistered(
                user_id=user_id,
                username=username,
                email=f"{username}@example.com",
                registered_at=datetime.now(UTC),
            )
        )
