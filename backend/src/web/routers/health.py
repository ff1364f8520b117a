"""
Health Router - API endpoints for liveness and readiness checks
"""
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/live")
async def health_live():
    """Liveness probe: server process is up"""
    return {"status": "live"}


@router.get("/ready")
async def health_ready(request: Request):
    """Readiness probe: database answers queries"""
    db = request.app.state.db
    try:
        ready = await db.ping()
    except Exception:
        logger.exception("Readiness check failed")
        ready = False
    status_code = 200 if ready else 503
    return JSONResponse(
        status_code=status_code,
        content={"status": "ready" if ready else "not_ready", "database": ready},
    )
