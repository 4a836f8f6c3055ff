"""Ledger opening — command and handler."""

import structlog
from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from tracking.domain import tracking
from tracking.ledger.ledger import DeliveryLedger

logger = structlog.get_logger(__name__)


@tracking.command(part_of="DeliveryLedger")
class OpenLedger:
    """Open a new, empty delivery ledger."""

    owner = String(required=True, max_length=255, sanitize=False)


@tracking.command_handler(part_of=DeliveryLedger)
class OpenLedgerHandler:
    @handle(OpenLedger)
    def open_ledger(self, command):
        ledger = DeliveryLedger.open(owner=command.owner)
        current_domain.repository_for(DeliveryLedger).add(ledger)
        logger.info("Delivery ledger opened", ledger_id=str(ledger.id), owner=command.owner)
        return str(ledger.id)
