"""BDD tests for report status transitions."""

from protean.exceptions import ValidationError
from pytest_bdd import parsers, scenarios, then, when

scenarios("features/report_lifecycle.feature")


@when(parsers.cfparse('an admin moves it to "{status}"'))
def move(report, status):
    report.change_status(status)


@when(parsers.cfparse('an admin tries to move it to "{status}"'))
def try_move(report, status, error):
    try:
        report.change_status(status)
    except ValidationError as exc:
        error["exc"] = exc


@then("no events are raised")
def no_events(report):
    assert report._events == []
