"""DeliveryLedger aggregate (CQRS) — the core of the tracking domain.

The ledger owns every delivery record it has issued and the counter that
hands out package ids. Records are only ever appended; a status update
replaces the status wholesale and stamps the delivery time.

Record lifecycle:
    Nonexistent → Created(status=s0, delivery_time=0) → Updated(s1, t1) → Updated(s2, t2) → ...

There is no terminal state: a record accepts status updates indefinitely.
"""

from dataclasses import dataclass
from datetime import UTC, datetime

from protean.exceptions import ObjectNotFoundError
from protean.fields import DateTime, HasMany, Integer, String, Text

from tracking.access import get_access_policy
from tracking.domain import tracking
from tracking.ledger.events import DeliveryRecorded, LedgerOpened, StatusUpdated

NOT_FOUND_MESSAGE = "Delivery record not found"


def current_time() -> int:
    """Current wall-clock time in unix seconds."""
    return int(datetime.now(UTC).timestamp())


class DeliveryRecordNotFound(ObjectNotFoundError):
    """No delivery record exists for the given package id."""

    def __init__(self, package_id: int) -> None:
        self.package_id = package_id
        super().__init__({"package_id": [NOT_FOUND_MESSAGE]})
        self.messages = {"package_id": [NOT_FOUND_MESSAGE]}

    def __str__(self) -> str:
        return NOT_FOUND_MESSAGE

    def __reduce__(self):
        return (self.__class__, (self.package_id,))


@dataclass(frozen=True)
class DeliveryDetails:
    """Read-only snapshot of a single delivery record."""

    package_id: int
    sender: str
    recipient: str
    dispatch_time: int
    status: str
    delivery_time: int

    @property
    def is_updated(self) -> bool:
        return self.delivery_time != 0


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@tracking.entity(part_of="DeliveryLedger")
class DeliveryRecord:
    """The stored state for one package."""

    package_id = Integer(required=True, min_value=1)
    sender = Text(default="", sanitize=False)
    recipient = Text(default="", sanitize=False)
    dispatch_time = Integer(default=0)
    status = Text(default="", sanitize=False)
    delivery_time = Integer(default=0)

    def snapshot(self) -> DeliveryDetails:
        return DeliveryDetails(
            package_id=self.package_id,
            sender=self.sender or "",
            recipient=self.recipient or "",
            dispatch_time=self.dispatch_time,
            status=self.status or "",
            delivery_time=self.delivery_time or 0,
        )


# ---------------------------------------------------------------------------
# Aggregate Root (CQRS)
# ---------------------------------------------------------------------------
@tracking.aggregate
class DeliveryLedger:
    owner = String(required=True, max_length=255, sanitize=False)
    next_package_id = Integer(default=1, min_value=1)
    records = HasMany(DeliveryRecord)
    opened_at = DateTime()

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def open(cls, owner: str):
        """Open an empty ledger owned by ``owner``."""
        now = datetime.now(UTC)
        ledger = cls(owner=owner, next_package_id=1, opened_at=now)
        ledger.raise_(
            LedgerOpened(
                ledger_id=str(ledger.id),
                owner=owner,
                opened_at=now,
            )
        )
        return ledger

    # -------------------------------------------------------------------
    # Lookup helpers
    # -------------------------------------------------------------------
    def _find_record(self, package_id: int) -> DeliveryRecord | None:
        return next((r for r in (self.records or []) if r.package_id == package_id), None)

    def _get_record(self, package_id: int) -> DeliveryRecord:
        record = self._find_record(package_id)
        if record is None:
            raise DeliveryRecordNotFound(package_id)
        return record

    def exists(self, package_id: int) -> bool:
        return self._find_record(package_id) is not None

    # -------------------------------------------------------------------
    # Recording
    # -------------------------------------------------------------------
    def record_delivery(
        self,
        sender: str,
        recipient: str,
        dispatch_time: int,
        status: str,
        actor: str | None = None,
    ) -> int:
        """Append a new delivery record and return its package id."""
        get_access_policy().authorize(self, actor, "record_delivery")

        package_id = self.next_package_id
        self.next_package_id = package_id + 1
        self.add_records(
            DeliveryRecord(
                package_id=package_id,
                sender=sender,
                recipient=recipient,
                dispatch_time=dispatch_time,
                status=status,
                delivery_time=0,
            )
        )
        self.raise_(
            DeliveryRecorded(
                ledger_id=str(self.id),
                package_id=package_id,
                sender=sender,
                recipient=recipient,
                dispatch_time=dispatch_time,
                status=status,
                recorded_at=datetime.now(UTC),
            )
        )
        return package_id

    # -------------------------------------------------------------------
    # Status updates
    # -------------------------------------------------------------------
    def update_status(self, package_id: int, new_status: str, actor: str | None = None) -> None:
        """Replace a record's status and stamp its delivery time."""
        record = self._get_record(package_id)
        get_access_policy().authorize(self, actor, "update_status")

        old_status = record.status or ""
        delivered_at = current_time()
        record.status = new_status
        record.delivery_time = delivered_at
        self.raise_(
            StatusUpdated(
                ledger_id=str(self.id),
                package_id=package_id,
                old_status=old_status,
                new_status=new_status,
                delivery_time=delivered_at,
                updated_at=datetime.now(UTC),
            )
        )

    # -------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------
    def get_delivery_details(self, package_id: int) -> DeliveryDetails:
        return self._get_record(package_id).snapshot()

    def all_package_ids(self) -> list[int]:
        """Package ids in the order they were recorded."""
        return sorted(r.package_id for r in (self.records or []))
