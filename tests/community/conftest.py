import pytest
from protean import current_domain
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def community_bed():
    from community.domain import community

    bed = DomainFixture(community)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def run_around_tests(community_bed, reset_domain):
    """Push domain context before each test, cleanup after."""
    with community_bed.domain_context():
        yield

        reset_domain(current_domain)
