"""Delivery timeline — per-package status history view."""

import json

from protean.core.projector import on
from protean.fields import DateTime, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from tracking.domain import tracking
from tracking.ledger.events import DeliveryRecorded, StatusUpdated
from tracking.ledger.ledger import DeliveryLedger


def timeline_key(ledger_id: str, package_id: int) -> str:
    return f"{ledger_id}:{package_id}"


@tracking.projection
class DeliveryTimeline:
    timeline_id = String(identifier=True, required=True, max_length=100)
    ledger_id = Identifier(required=True)
    package_id = Integer(required=True)
    sender = Text(sanitize=False)
    recipient = Text(sanitize=False)
    current_status = Text(sanitize=False)
    history = Text(sanitize=False)  # JSON list of {status, at} entries
    update_count = Integer(default=0)
    last_updated_at = DateTime()


@tracking.projector(projector_for=DeliveryTimeline, aggregates=[DeliveryLedger])
class DeliveryTimelineProjector:
    @on(DeliveryRecorded)
    def on_delivery_recorded(self, event):
        current_domain.repository_for(DeliveryTimeline).add(
            DeliveryTimeline(
                timeline_id=timeline_key(event.ledger_id, event.package_id),
                ledger_id=event.ledger_id,
                package_id=event.package_id,
                sender=event.sender,
                recipient=event.recipient,
                current_status=event.status,
                history=json.dumps(
                    [{"status": event.status, "at": event.recorded_at.isoformat() if event.recorded_at else None}]
                ),
                update_count=0,
                last_updated_at=event.recorded_at,
            )
        )

    @on(StatusUpdated)
    def on_status_updated(self, event):
        repo = current_domain.repository_for(DeliveryTimeline)
        view = repo.get(timeline_key(event.ledger_id, event.package_id))
        view.current_status = event.new_status

        existing = json.loads(view.history) if view.history else []
        existing.append(
            {"status": event.new_status, "at": event.updated_at.isoformat() if event.updated_at else None}
        )
        view.history = json.dumps(existing)
        view.update_count = (view.update_count or 0) + 1
        view.last_updated_at = event.updated_at
        repo.add(view)
