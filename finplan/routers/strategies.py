"""Strategy catalog routes."""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status

from finplan.dependencies import get_catalog
from finplan.schemas.strategy import Strategy, StrategyCreate, StrategyImportRequest, StrategyUpdate
from finplan.services.catalog import CatalogStore, DuplicateStrategyError, ProtectedStrategyError
from finplan.services.organizer import filter_strategies, organize


router = APIRouter(
    prefix="/api/strategies",
    tags=["strategies"],
)


@router.get("", response_model=List[Strategy])
async def list_strategies(
    search: Optional[str] = Query(None, description="Case-insensitive text filter"),
    section: Optional[str] = Query(None, description="Section key or 'all'"),
    catalog: CatalogStore = Depends(get_catalog)
):
    """List the whole catalog, built-in and custom, optionally filtered."""
    return filter_strategies(catalog.get_strategies(), search, section)


@router.get("/organized")
async def organized_strategies(
    search: Optional[str] = Query(None),
    section: Optional[str] = Query(None),
    catalog: CatalogStore = Depends(get_catalog)
):
    """
    Catalog grouped for browsing.

    Sections in canonical order; strategies and subsections alphabetical.
    """
    groups = organize(catalog.get_strategies(), search_text=search, section=section)
    return {"sections": [group.to_dict() for group in groups.values()]}


@router.get("/export")
async def export_strategies(catalog: CatalogStore = Depends(get_catalog)):
    """Export all custom strategies as JSON."""
    return catalog.export_strategies()


@router.post("/import", response_model=List[Strategy])
async def import_strategies(
    payload: StrategyImportRequest,
    catalog: CatalogStore = Depends(get_catalog)
):
    """Import strategies under fresh ids; each becomes a custom strategy."""
    return catalog.import_strategies(payload.strategies)


@router.get("/category/{category}", response_model=List[Strategy])
async def strategies_by_category(category: str, catalog: CatalogStore = Depends(get_catalog)):
    return catalog.get_by_category(category)


@router.get("/section/{section}", response_model=List[Strategy])
async def strategies_by_section(section: str, catalog: CatalogStore = Depends(get_catalog)):
    return catalog.get_by_section(section)


@router.get("/subsection/{subsection}", response_model=List[Strategy])
async def strategies_by_subsection(subsection: str, catalog: CatalogStore = Depends(get_catalog)):
    return catalog.get_by_subsection(subsection)


@router.get("/{strategy_id}", response_model=Strategy)
async def get_strategy(strategy_id: str, catalog: CatalogStore = Depends(get_catalog)):
    strategy = catalog.get_strategy(strategy_id)
    if not strategy:
        raise HTTPException(status_code=404, detail="Strategy not found")
    return strategy


@router.post("", response_model=Strategy, status_code=status.HTTP_201_CREATED)
async def add_strategy(payload: StrategyCreate, catalog: CatalogStore = Depends(get_catalog)):
    """Add a strategy to the catalog."""
    try:
        return catalog.add_strategy(payload)
    except DuplicateStrategyError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.put("/{strategy_id}", response_model=Strategy)
async def update_strategy(
    strategy_id: str,
    payload: StrategyUpdate,
    catalog: CatalogStore = Depends(get_catalog)
):
    """Edit a strategy in place. Built-in strategies are editable too."""
    strategy = catalog.update_strategy(strategy_id, payload)
    if not strategy:
        raise HTTPException(status_code=404, detail="Strategy not found")
    return strategy


@router.delete("/{strategy_id}")
async def delete_strategy(strategy_id: str, catalog: CatalogStore = Depends(get_catalog)):
    """
    Delete a custom strategy.

    Stored client configurations referencing it are pruned. Built-in
    strategies cannot be deleted (409).
    """
    try:
        deleted = catalog.delete_strategy(strategy_id)
    except ProtectedStrategyError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    if not deleted:
        raise HTTPException(status_code=404, detail="Strategy not found")

    return {"message": "Strategy deleted successfully"}
