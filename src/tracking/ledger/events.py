"""Delivery ledger events — immutable facts about the ledger's records.

Raised synchronously by the DeliveryLedger aggregate in the order the
changes happen, and consumed by the read-model projectors.
"""

from protean.fields import DateTime, Identifier, Integer, String, Text

from tracking.domain import tracking


@tracking.event(part_of="DeliveryLedger")
class LedgerOpened:
    """A new delivery ledger was opened for an owner."""

    __version__ = 1

    ledger_id = Identifier(required=True)
    owner = String(required=True, max_length=255, sanitize=False)
    opened_at = DateTime(required=True)


@tracking.event(part_of="DeliveryLedger")
class DeliveryRecorded:
    """A package was dispatched and entered into the ledger."""

    __version__ = 1

    ledger_id = Identifier(required=True)
    package_id = Integer(required=True)
    sender = Text(default="", sanitize=False)
    recipient = Text(default="", sanitize=False)
    dispatch_time = Integer(required=True)
    status = Text(default="", sanitize=False)
    recorded_at = DateTime(required=True)


@tracking.event(part_of="DeliveryLedger")
class StatusUpdated:
    """A package's status was replaced; carries the status before the change."""

    __version__ = 1

    ledger_id = Identifier(required=True)
    package_id = Integer(required=True)
    old_status = Text(default="", sanitize=False)
    new_status = Text(default="", sanitize=False)
    delivery_time = Integer(required=True)
    updated_at = DateTime(required=True)
