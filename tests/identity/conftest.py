import pytest
from protean import current_domain
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def identity_bed():
    from identity.domain import identity

    bed = DomainFixture(identity)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def run_around_tests(identity_bed, reset_domain):
    """Push domain context before each test, cleanup after."""
    with identity_bed.domain_context():
        yield

        reset_domain(current_domain)
