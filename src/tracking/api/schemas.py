"""Pydantic API schemas for the Tracking domain.

These are the external API contracts — separate from domain commands.
The API layer translates between these schemas and domain commands.
"""

from pydantic import BaseModel


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------
class OpenLedgerRequest(BaseModel):
    owner: str


class RecordDeliveryRequest(BaseModel):
    sender: str
    recipient: str
    dispatch_time: int
    status: str
    actor: str | None = None


class UpdateStatusRequest(BaseModel):
    status: str
    actor: str | None = None


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------
class LedgerIdResponse(BaseModel):
    ledger_id: str


class LedgerResponse(BaseModel):
    ledger_id: str
    owner: str
    package_count: int


class PackageIdResponse(BaseModel):
    package_id: int


class PackageIdsResponse(BaseModel):
    package_ids: list[int]


class DeliveryDetailsResponse(BaseModel):
    package_id: int
    sender: str
    recipient: str
    dispatch_time: int
    status: str
    delivery_time: int


class TimelineEntry(BaseModel):
    status: str
    at: str | None = None


class DeliveryTimelineResponse(BaseModel):
    package_id: int
    current_status: str
    update_count: int
    history: list[TimelineEntry]


class StatusResponse(BaseModel):
    status: str
