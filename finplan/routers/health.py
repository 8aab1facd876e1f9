"""Health check endpoints."""
from fastapi import APIRouter, Depends, status, Response
from sqlalchemy.orm import Session
from sqlalchemy import inspect, text

from finplan.db import get_db
from finplan.dependencies import get_catalog
from finplan.services.catalog import CatalogStore

router = APIRouter(tags=["health"])


@router.get("/health")
async def health():
    """Basic health check - process is alive."""
    return {"status": "healthy"}


@router.get("/ready")
async def ready(
    response: Response,
    db: Session = Depends(get_db),
    catalog: CatalogStore = Depends(get_catalog)
):
    """
    Readiness check - database reachable and report table present.

    Returns 200 if ready to accept traffic, 503 if not ready.
    """
    try:
        db.execute(text("SELECT 1"))
        tables = set(inspect(db.get_bind()).get_table_names())
    except Exception as e:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return {
            "status": "not_ready",
            "database": "disconnected",
            "error": str(e),
            "message": "Database connection failed"
        }

    if "reports" not in tables:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return {
            "status": "not_ready",
            "database": "connected",
            "tables": "missing",
            "missing_tables": ["reports"],
        }

    return {
        "status": "ready",
        "database": "connected",
        "tables": "present",
        "strategies": len(catalog),
    }
