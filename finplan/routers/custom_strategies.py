"""User-authored strategy routes."""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status

from finplan.dependencies import get_catalog
from finplan.schemas.strategy import CustomStrategyWrite, Strategy
from finplan.services.catalog import CatalogStore


router = APIRouter(
    prefix="/api/custom-strategies",
    tags=["custom-strategies"],
)


@router.get("", response_model=List[Strategy])
async def list_custom_strategies(catalog: CatalogStore = Depends(get_catalog)):
    return catalog.get_custom_strategies()


@router.post("", response_model=Strategy, status_code=status.HTTP_201_CREATED)
async def add_custom_strategy(payload: CustomStrategyWrite, catalog: CatalogStore = Depends(get_catalog)):
    return catalog.add_custom_strategy(payload.title, payload.content, payload.section)


@router.put("/{strategy_id}", response_model=Strategy)
async def update_custom_strategy(
    strategy_id: str,
    payload: CustomStrategyWrite,
    catalog: CatalogStore = Depends(get_catalog)
):
    strategy = catalog.update_custom_strategy(strategy_id, payload.title, payload.content, payload.section)
    if not strategy:
        raise HTTPException(status_code=404, detail="Custom strategy not found")
    return strategy


@router.delete("/{strategy_id}")
async def delete_custom_strategy(strategy_id: str, catalog: CatalogStore = Depends(get_catalog)):
    if not catalog.remove_custom_strategy(strategy_id):
        raise HTTPException(status_code=404, detail="Custom strategy not found")
    return {"message": "Custom strategy deleted successfully"}
