import pytest
from protean import current_domain
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def messaging_bed():
    from messaging.domain import messaging

    bed = DomainFixture(messaging)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def run_around_tests(messaging_bed, reset_domain):
    """Push domain context before each test, cleanup after."""
    with messaging_bed.domain_context():
        yield

        reset_domain(current_domain)
