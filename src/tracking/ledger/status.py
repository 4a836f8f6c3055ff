"""Delivery status updates — command and handler.

A missing package id raises DeliveryRecordNotFound before the ledger is
touched, so the unit of work is never committed.
"""

import structlog
from protean import handle
from protean.fields import Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from tracking.domain import tracking
from tracking.ledger.ledger import DeliveryLedger

logger = structlog.get_logger(__name__)


@tracking.command(part_of="DeliveryLedger")
class UpdateDeliveryStatus:
    """Replace the status of a recorded package."""

    ledger_id = Identifier(required=True)
    package_id = Integer(required=True)
    status = Text(default="", sanitize=False)
    actor = String(max_length=255, sanitize=False)


@tracking.command_handler(part_of=DeliveryLedger)
class UpdateDeliveryStatusHandler:
    @handle(UpdateDeliveryStatus)
    def update_status(self, command):
        repo = current_domain.repository_for(DeliveryLedger)
        ledger = repo.get(command.ledger_id)
        ledger.update_status(
            package_id=command.package_id,
            new_status=command.status,
            actor=command.actor,
        )
        repo.add(ledger)
        logger.info(
            "Delivery status updated",
            ledger_id=str(ledger.id),
            package_id=command.package_id,
            status=command.status,
        )
