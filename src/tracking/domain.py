"""Tracking bounded context — Delivery Ledger.

Keeps an append-style ledger of shipped packages and their status changes.
Uses CQRS (not event sourcing): the ledger aggregate is the source of truth
and raises events that feed the read models.
"""

from protean.domain import Domain

from tracking.utils.logging import configure_logging

configure_logging()

tracking = Domain(name="tracking")
