"""Stored client strategy configuration routes."""
from typing import List
from fastapi import APIRouter, Depends

from finplan.dependencies import get_catalog
from finplan.schemas.strategy import ClientStrategyConfig
from finplan.services.catalog import CatalogStore
from finplan.settings import settings


router = APIRouter(
    prefix="/api/client-strategy-configs",
    tags=["client-strategy-configs"],
)


def _client_key(client_id: str) -> str:
    return settings.DEFAULT_CLIENT_ID if client_id == "current" else client_id


@router.get("/{client_id}", response_model=List[ClientStrategyConfig])
async def get_client_configs(client_id: str, catalog: CatalogStore = Depends(get_catalog)):
    """
    A client's stored configuration list ("current" = the default client).

    Returns an empty list when nothing has been stored.
    """
    return catalog.get_client_configs(_client_key(client_id))


@router.post("/{client_id}", response_model=List[ClientStrategyConfig])
async def save_client_configs(
    client_id: str,
    configs: List[ClientStrategyConfig],
    catalog: CatalogStore = Depends(get_catalog)
):
    """Replace a client's configuration list; unknown strategy ids are dropped."""
    return catalog.save_client_configs(_client_key(client_id), configs)
