"""
Health check and scoring metrics endpoints.
"""
from datetime import datetime
import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from lyriclearn.config.settings import get_settings
from lyriclearn.core.db import get_db
from lyriclearn.core.error_handlers import error_handler
from lyriclearn.core.metrics import snapshot_metrics

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(request: Request, db: Session = Depends(get_db)):
    """Health check with frequency table and database status"""
    settings = get_settings()
    details = {
        "database": {"status": "unknown"},
        "frequency_table": {"status": "unknown"},
    }

    container = getattr(request.app.state, 'service_container', None)
    if container is None or not container.is_initialized:
        return {
            "status": "unhealthy",
            "message": "Service container not initialized",
            "version": settings.app_version,
            "timestamp": datetime.utcnow().isoformat(),
            "details": details,
        }

    table = container.frequency_table
    details["frequency_table"] = {
        "status": "healthy",
        "source": table.source,
        "words": len(table),
    }

    try:
        db.execute(text("SELECT 1"))
        details["database"] = {"status": "healthy"}
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        details["database"] = {"status": "unhealthy", "error": str(e)}

    # Scoring does not depend on the database
    status = "healthy" if details["database"]["status"] == "healthy" else "degraded"

    return {
        "status": status,
        "version": settings.app_version,
        "timestamp": datetime.utcnow().isoformat(),
        "details": details,
    }


@router.get("/metrics")
async def metrics():
    """Scoring latency percentiles and error counts"""
    return {
        "scoring": snapshot_metrics(),
        "errors": error_handler.get_error_statistics(),
    }
