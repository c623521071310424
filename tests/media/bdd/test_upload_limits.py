"""BDD tests for upload limits."""

from media.photo.storage import validate_upload
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, scenarios, when

scenarios("features/upload_limits.feature")


@given(parsers.cfparse('{count:d} "{mime_type}" files of {size:d} KB'))
def files_of(batch, count, mime_type, size):
    batch.extend((f"file{i}", mime_type, size * 1024) for i in range(count))


@when("the upload is checked")
def check(batch, error):
    try:
        validate_upload(batch)
    except ValidationError as exc:
        error["exc"] = exc
