import pytest
from protean import current_domain
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def media_bed():
    from media.domain import media

    bed = DomainFixture(media)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def run_around_tests(media_bed, reset_domain):
    """Push domain context before each test, cleanup after."""
    with media_bed.domain_context():
        yield

        reset_domain(current_domain)


@pytest.fixture(autouse=True)
def upload_dir(tmp_path, monkeypatch):
    """Write uploaded files into a per-test directory."""
    monkeypatch.setenv("UPLOAD_DIR", str(tmp_path))
    return tmp_path
