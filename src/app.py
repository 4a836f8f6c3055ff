"""Parcel Ledger FastAPI application.

Processes ledger commands synchronously via HTTP. Every request under
/ledgers runs inside the tracking domain context.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# PROTEAN_ENV controls which config overlay is applied:
#   - "test"       → event_processing = "sync"  (projectors fire in UoW)
#   - "production" → event_processing = "async" (projectors fire via Engine)
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from tracking.domain import tracking
from tracking.utils.logging import clear_context

tracking.init()

app = FastAPI(
    title="Parcel Ledger API",
    description="Append-style ledger of shipped packages and their status changes",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the tracking domain context for ledger requests."""
    if not request.url.path.startswith("/ledgers"):
        return await call_next(request)
    try:
        with tracking.domain_context():
            return await call_next(request)
    finally:
        clear_context()


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from tracking.api.routes import router as ledger_router  # noqa: E402

app.include_router(ledger_router)


@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": tracking.name})
