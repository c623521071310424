import pytest
from protean import current_domain
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def catalogue_bed():
    from catalogue.domain import catalogue

    bed = DomainFixture(catalogue)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def run_around_tests(catalogue_bed, reset_domain):
    """Push domain context before each test, cleanup after."""
    with catalogue_bed.domain_context():
        yield

        reset_domain(current_domain)
