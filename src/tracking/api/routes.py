"""FastAPI routes for the Tracking domain.

Thin adapters that translate HTTP requests into domain commands and read
the ledger (or its projections) for queries.
"""

import json

from fastapi import APIRouter, HTTPException
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from tracking.api.schemas import (
    DeliveryDetailsResponse,
    DeliveryTimelineResponse,
    LedgerIdResponse,
    LedgerResponse,
    OpenLedgerRequest,
    PackageIdResponse,
    PackageIdsResponse,
    RecordDeliveryRequest,
    StatusResponse,
    TimelineEntry,
    UpdateStatusRequest,
)
from tracking.ledger.ledger import NOT_FOUND_MESSAGE, DeliveryLedger, DeliveryRecordNotFound
from tracking.ledger.opening import OpenLedger
from tracking.ledger.recording import RecordDelivery
from tracking.ledger.status import UpdateDeliveryStatus
from tracking.projections.delivery_timeline import DeliveryTimeline, timeline_key
from tracking.utils.logging import bind_ledger

router = APIRouter(prefix="/ledgers", tags=["ledgers"])


def _load_ledger(ledger_id: str) -> DeliveryLedger:
    try:
        return current_domain.repository_for(DeliveryLedger).get(ledger_id)
    except ObjectNotFoundError:
        raise HTTPException(status_code=404, detail="Ledger not found")


# ---------------------------------------------------------------------------
# Ledgers
# ---------------------------------------------------------------------------
@router.post("", status_code=201, response_model=LedgerIdResponse)
async def open_ledger(body: OpenLedgerRequest) -> LedgerIdResponse:
    """Open a new delivery ledger."""
    result = current_domain.process(OpenLedger(owner=body.owner), asynchronous=False)
    return LedgerIdResponse(ledger_id=result)


@router.get("/{ledger_id}", response_model=LedgerResponse)
async def get_ledger(ledger_id: str) -> LedgerResponse:
    ledger = _load_ledger(ledger_id)
    return LedgerResponse(
        ledger_id=str(ledger.id),
        owner=ledger.owner,
        package_count=len(ledger.all_package_ids()),
    )


# ---------------------------------------------------------------------------
# Deliveries
# ---------------------------------------------------------------------------
@router.post("/{ledger_id}/deliveries", status_code=201, response_model=PackageIdResponse)
async def record_delivery(ledger_id: str, body: RecordDeliveryRequest) -> PackageIdResponse:
    """Record a newly dispatched package."""
    bind_ledger(ledger_id)
    _load_ledger(ledger_id)
    command = RecordDelivery(
        ledger_id=ledger_id,
        sender=body.sender,
        recipient=body.recipient,
        dispatch_time=body.dispatch_time,
        status=body.status,
        actor=body.actor,
    )
    try:
        result = current_domain.process(command, asynchronous=False)
    except ValidationError as exc:
        raise HTTPException(status_code=403, detail=exc.messages)
    return PackageIdResponse(package_id=result)


@router.get("/{ledger_id}/deliveries", response_model=PackageIdsResponse)
async def list_package_ids(ledger_id: str) -> PackageIdsResponse:
    """All package ids in the order they were recorded."""
    ledger = _load_ledger(ledger_id)
    return PackageIdsResponse(package_ids=ledger.all_package_ids())


@router.get("/{ledger_id}/deliveries/{package_id}", response_model=DeliveryDetailsResponse)
async def get_delivery_details(ledger_id: str, package_id: int) -> DeliveryDetailsResponse:
    ledger = _load_ledger(ledger_id)
    try:
        details = ledger.get_delivery_details(package_id)
    except DeliveryRecordNotFound:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)
    return DeliveryDetailsResponse(
        package_id=details.package_id,
        sender=details.sender,
        recipient=details.recipient,
        dispatch_time=details.dispatch_time,
        status=details.status,
        delivery_time=details.delivery_time,
    )


@router.put("/{ledger_id}/deliveries/{package_id}/status", response_model=StatusResponse)
async def update_status(ledger_id: str, package_id: int, body: UpdateStatusRequest) -> StatusResponse:
    """Replace a package's status."""
    bind_ledger(ledger_id, package_id=package_id)
    _load_ledger(ledger_id)
    command = UpdateDeliveryStatus(
        ledger_id=ledger_id,
        package_id=package_id,
        status=body.status,
        actor=body.actor,
    )
    try:
        current_domain.process(command, asynchronous=False)
    except DeliveryRecordNotFound:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)
    except ValidationError as exc:
        raise HTTPException(status_code=403, detail=exc.messages)
    return StatusResponse(status="status_updated")


@router.get("/{ledger_id}/deliveries/{package_id}/timeline", response_model=DeliveryTimelineResponse)
async def get_delivery_timeline(ledger_id: str, package_id: int) -> DeliveryTimelineResponse:
    """Status history of a package, oldest first."""
    try:
        view = current_domain.repository_for(DeliveryTimeline).get(timeline_key(ledger_id, package_id))
    except ObjectNotFoundError:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)

    history = json.loads(view.history) if view.history else []
    return DeliveryTimelineResponse(
        package_id=view.package_id,
        current_status=view.current_status or "",
        update_count=view.update_count or 0,
        history=[TimelineEntry(status=entry["status"] or "", at=entry.get("at")) for entry in history],
    )
