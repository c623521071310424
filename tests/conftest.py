import os
import tempfile
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Selects the config overlay through ``PROTEAN_ENV`` and keeps password
    hashing and uploads cheap and local. Each bounded context's conftest
    initializes its own domain and pushes its context per test.
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env
    os.environ.setdefault("BCRYPT_ROUNDS", "4")
    os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="critique-uploads-"))


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def reset_domain():
    """Return a callable that clears databases, brokers and the event store of a domain."""

    def _reset(domain):
        for _, provider in domain.providers.items():
            provider._data_reset()

        for _, broker in domain.brokers.items():
            broker._data_reset()

        domain.event_store.store._data_reset()

    return _reset
