"""Shared BDD fixtures and step definitions for the Tracking domain."""

import pytest
from pytest_bdd import given, parsers, then
from tracking.ledger.events import DeliveryRecorded, LedgerOpened, StatusUpdated
from tracking.ledger.ledger import DeliveryLedger

_LEDGER_EVENT_CLASSES = {
    "LedgerOpened": LedgerOpened,
    "DeliveryRecorded": DeliveryRecorded,
    "StatusUpdated": StatusUpdated,
}


@pytest.fixture()
def error():
    """Container for captured ledger errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("an empty delivery ledger", target_fixture="ledger")
def empty_ledger():
    ledger = DeliveryLedger.open(owner="0xOwner")
    ledger._events.clear()
    return ledger


@given("a ledger with a dispatched package", target_fixture="ledger")
def ledger_with_package():
    ledger = DeliveryLedger.open(owner="0xOwner")
    ledger.record_delivery("Alice", "Bob", 1000, "dispatched")
    ledger._events.clear()
    return ledger


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the ledger lists package ids "{ids}"'))
def ledger_lists_ids(ledger, ids):
    assert ledger.all_package_ids() == [int(i) for i in ids.split(",")]


@then(parsers.cfparse('package {package_id:d} has status "{status}"'))
def package_has_status(ledger, package_id, status):
    assert ledger.get_delivery_details(package_id).status == status


@then(parsers.cfparse("package {package_id:d} has no delivery time"))
def package_not_delivered(ledger, package_id):
    assert ledger.get_delivery_details(package_id).delivery_time == 0


@then(parsers.cfparse("package {package_id:d} has a delivery time"))
def package_delivered(ledger, package_id):
    assert ledger.get_delivery_details(package_id).delivery_time > 0


@then(parsers.cfparse('the ledger action fails with "{message}"'))
def ledger_action_fails(error, message):
    assert error["exc"] is not None, "Expected a ledger error but none was raised"
    assert str(error["exc"]) == message


@then(parsers.cfparse("a {event_type} event is raised"))
def ledger_event_raised(ledger, event_type):
    event_cls = _LEDGER_EVENT_CLASSES[event_type]
    assert any(
        isinstance(e, event_cls) for e in ledger._events
    ), f"No {event_type} event found. Events: {[type(e).__name__ for e in ledger._events]}"
