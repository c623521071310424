"""Shared BDD fixtures and step definitions for the Catalogue domain."""

import pytest
from catalogue.entity_request.entity_request import EntityRequest
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a pending request for "{item_name}"'), target_fixture="request_")
def pending_request(item_name):
    request = EntityRequest.submit(user_id="user-bdd", item_name=item_name, category_id="cat-bdd")
    request._events.clear()
    return request


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the action fails with a validation error")
def action_fails_with_validation_error(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then(parsers.cfparse('the request status is "{status}"'))
def request_status_is(request_, status):
    assert request_.status == status
