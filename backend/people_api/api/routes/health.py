"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /health always returns 200 if the process is up
    - Reports the live record count; never touches the records themselves
"""

import logging
from fastapi import APIRouter, Request, status

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["Health"])

SERVICE_NAME = "people-api"


@router.get("", status_code=status.HTTP_200_OK)
async def health_check(request: Request):
    """Basic liveness probe. Returns 200 if the process is up."""
    store = getattr(request.app.state, "person_store", None)
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": request.app.version,
        "people": len(store) if store is not None else 0,
    }
