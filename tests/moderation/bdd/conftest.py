"""Shared BDD fixtures and step definitions for the Moderation domain."""

import pytest
from moderation.report.report import Report
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@given(parsers.cfparse('a pending report against "{user_id}"'), target_fixture="report")
def pending_report(user_id):
    report = Report.file(
        reporter_user_id="reporter-bdd",
        reported_item_type="review",
        reported_item_id="review-bdd",
        reported_user_id=user_id,
        reason="Misinformation",
    )
    report._events.clear()
    return report


@then("the action fails with a validation error")
def action_fails_with_validation_error(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then(parsers.cfparse('the report status is "{status}"'))
def report_status_is(report, status):
    assert report.status == status
