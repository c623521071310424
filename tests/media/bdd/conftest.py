"""Shared BDD fixtures and step definitions for the Media domain."""

import pytest
from protean.exceptions import ValidationError
from pytest_bdd import then


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@pytest.fixture()
def batch():
    """The ``(filename, mime_type, size)`` tuples of one upload."""
    return []


@then("the action fails with a validation error")
def action_fails_with_validation_error(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then("the upload is accepted")
def upload_accepted(error):
    assert error["exc"] is None
