"""Tests for DeliveryLedger events — each method raises the correct event."""

import pytest
from tracking.ledger.events import DeliveryRecorded, LedgerOpened, StatusUpdated
from tracking.ledger.ledger import DeliveryLedger, DeliveryRecordNotFound


def _make_ledger():
    ledger = DeliveryLedger.open(owner="0xOwner")
    return ledger


class TestLedgerOpenedEvent:
    def test_raises_event(self):
        ledger = _make_ledger()
        assert len(ledger._events) == 1
        assert isinstance(ledger._events[0], LedgerOpened)

    def test_event_has_owner(self):
        ledger = _make_ledger()
        assert ledger._events[0].owner == "0xOwner"
        assert ledger._events[0].ledger_id == str(ledger.id)


class TestDeliveryRecordedEvent:
    def test_record_raises_event(self):
        ledger = _make_ledger()
        ledger.record_delivery("Alice", "Bob", 1000, "dispatched")
        events = [e for e in ledger._events if isinstance(e, DeliveryRecorded)]
        assert len(events) == 1

    def test_event_carries_record_fields(self):
        ledger = _make_ledger()
        ledger.record_delivery("Alice", "Bob", 1000, "dispatched")
        event = ledger._events[-1]
        assert event.package_id == 1
        assert event.sender == "Alice"
        assert event.recipient == "Bob"
        assert event.dispatch_time == 1000
        assert event.status == "dispatched"
        assert event.recorded_at is not None

    def test_one_event_per_record_in_order(self):
        ledger = _make_ledger()
        ledger.record_delivery("Alice", "Bob", 1000, "dispatched")
        ledger.record_delivery("Charlie", "David", 2000, "in transit")
        events = [e for e in ledger._events if isinstance(e, DeliveryRecorded)]
        assert [e.package_id for e in events] == [1, 2]


class TestStatusUpdatedEvent:
    def test_update_raises_event_with_old_status(self):
        ledger = _make_ledger()
        ledger.record_delivery("Alice", "Bob", 1000, "dispatched")
        ledger.update_status(1, "delivered")
        events = [e for e in ledger._events if isinstance(e, StatusUpdated)]
        assert len(events) == 1
        assert events[0].package_id == 1
        assert events[0].old_status == "dispatched"
        assert events[0].new_status == "delivered"

    def test_event_carries_delivery_time(self):
        ledger = _make_ledger()
        ledger.record_delivery("Alice", "Bob", 1000, "dispatched")
        ledger.update_status(1, "delivered")
        event = ledger._events[-1]
        assert event.delivery_time == ledger.get_delivery_details(1).delivery_time

    def test_chained_updates_report_previous_status(self):
        ledger = _make_ledger()
        ledger.record_delivery("Alice", "Bob", 1000, "dispatched")
        ledger.update_status(1, "in transit")
        ledger.update_status(1, "delivered")
        events = [e for e in ledger._events if isinstance(e, StatusUpdated)]
        assert [(e.old_status, e.new_status) for e in events] == [
            ("dispatched", "in transit"),
            ("in transit", "delivered"),
        ]

    def test_failed_update_raises_no_event(self):
        ledger = _make_ledger()
        ledger._events.clear()
        with pytest.raises(DeliveryRecordNotFound):
            ledger.update_status(3, "x")
        assert ledger._events == []


class TestEventOrdering:
    def test_events_follow_operation_order(self):
        ledger = _make_ledger()
        ledger.record_delivery("Alice", "Bob", 1000, "dispatched")
        ledger.update_status(1, "delivered")
        ledger.record_delivery("Charlie", "David", 2000, "in transit")
        assert [type(e).__name__ for e in ledger._events] == [
            "LedgerOpened",
            "DeliveryRecorded",
            "StatusUpdated",
            "DeliveryRecorded",
        ]
