import pytest
from protean import current_domain
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def notifications_bed():
    from notifications.domain import notifications

    bed = DomainFixture(notifications)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def run_around_tests(notifications_bed, reset_domain):
    """Push domain context before each test, cleanup after."""
    with notifications_bed.domain_context():
        yield

        reset_domain(current_domain)
