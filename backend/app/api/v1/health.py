import logging
from typing import Any

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy import text

from app.core.config import settings
from app.db import engine
from app.models import utc_now

logger = logging.getLogger(__name__)

router = APIRouter()


def _check_database(ok_status: str) -> Any:
    timestamp = utc_now().isoformat()
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except Exception as e:
        logger.error("Database health check failed: %s", e)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "error",
                "database": "disconnected",
                "error": str(e) if settings.ENVIRONMENT != "production" else "Database connection failed",
                "timestamp": timestamp,
            },
        )
    return {"status": ok_status, "database": "connected", "timestamp": timestamp}


@router.get("/", summary="Health check", tags=["health"])
def read_health() -> Any:
    """Service and database status; 503 when the database is unreachable."""
    return _check_database("ok")


@router.get("/ready", summary="Readiness check", tags=["health"])
def read_ready() -> Any:
    return _check_database("ready")
