"""FastAPI dependencies."""
from fastapi import HTTPException, Request, status

from finplan.services.catalog import CatalogStore


def get_catalog(request: Request) -> CatalogStore:
    """
    Strategy catalog created at startup.

    Raises:
        HTTPException 503 if the application has not finished starting
    """
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Strategy catalog not initialised"
        )
    return catalog
