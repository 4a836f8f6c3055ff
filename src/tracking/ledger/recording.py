"""Delivery recording — command and handler."""

import structlog
from protean import handle
from protean.fields import Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from tracking.domain import tracking
from tracking.ledger.ledger import DeliveryLedger

logger = structlog.get_logger(__name__)


@tracking.command(part_of="DeliveryLedger")
class RecordDelivery:
    """Record a newly dispatched package in a ledger."""

    ledger_id = Identifier(required=True)
    sender = Text(default="", sanitize=False)
    recipient = Text(default="", sanitize=False)
    dispatch_time = Integer(required=True)
    status = Text(default="", sanitize=False)
    actor = String(max_length=255, sanitize=False)


@tracking.command_handler(part_of=DeliveryLedger)
class RecordDeliveryHandler:
    @handle(RecordDelivery)
    def record_delivery(self, command):
        repo = current_domain.repository_for(DeliveryLedger)
        ledger = repo.get(command.ledger_id)
        package_id = ledger.record_delivery(
            sender=command.sender,
            recipient=command.recipient,
            dispatch_time=command.dispatch_time,
            status=command.status,
            actor=command.actor,
        )
        repo.add(ledger)
        logger.info(
            "Delivery recorded",
            ledger_id=str(ledger.id),
            package_id=package_id,
            status=command.status,
        )
        return package_id
