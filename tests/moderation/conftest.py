import pytest
from protean import current_domain
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def moderation_bed():
    from moderation.domain import moderation

    bed = DomainFixture(moderation)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def run_around_tests(moderation_bed, reset_domain):
    """Push domain context before each test, cleanup after."""
    with moderation_bed.domain_context():
        yield

        reset_domain(current_domain)
