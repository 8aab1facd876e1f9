"""In-memory strategy catalog with lazily rebuilt secondary indices."""
import logging
import re
import threading
import uuid
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from finplan.schemas.strategy import (
    ClientStrategyConfig,
    Strategy,
    StrategyCreate,
    StrategyUpdate,
)

logger = logging.getLogger(__name__)

# Fields a partial update may clear by sending null
NULLABLE_FIELDS = {"section", "subsection"}


class ProtectedStrategyError(ValueError):
    """Raised when deleting a built-in strategy."""

    def __init__(self, strategy_id: str):
        self.strategy_id = strategy_id
        super().__init__(f"Built-in strategy '{strategy_id}' cannot be deleted")


class DuplicateStrategyError(ValueError):
    """Raised when adding a strategy whose id is already taken."""

    def __init__(self, strategy_id: str):
        self.strategy_id = strategy_id
        super().__init__(f"Strategy id '{strategy_id}' already exists")


class IndexState(Enum):
    """Freshness of the secondary indices."""
    FRESH = "fresh"
    DIRTY = "dirty"


def slugify(text: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")
    return slug or "strategy"


class CatalogStore:
    """
    Repository of built-in and custom strategies.

    Built-in and custom strategies share one map and one id space; is_custom
    only decides deletability. Writes mark the indices DIRTY; the next index
    read rebuilds all three in one pass and marks them FRESH. One lock guards
    the map, the indices and the stored client configurations.

    Stored client configurations never reference a deleted strategy: deletes
    cascade into them and unknown ids are pruned on save.
    """

    def __init__(self, strategies: Optional[Iterable[Union[Strategy, Mapping[str, Any]]]] = None):
        self._lock = threading.RLock()
        self._strategies: Dict[str, Strategy] = {}
        self._client_configs: Dict[str, List[ClientStrategyConfig]] = {}
        self._by_category: Dict[str, List[Strategy]] = {}
        self._by_section: Dict[str, List[Strategy]] = {}
        self._by_subsection: Dict[str, List[Strategy]] = {}
        self._state = IndexState.DIRTY

        for strategy in strategies or ():
            self.add_strategy(strategy)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Drop every strategy and stored configuration."""
        with self._lock:
            self._strategies.clear()
            self._client_configs.clear()
            self._state = IndexState.DIRTY

    def seed_defaults(self) -> int:
        """
        Add the built-in strategy set, skipping ids already present.

        Returns:
            Number of strategies added
        """
        from finplan.services.defaults import default_strategies

        added = 0
        with self._lock:
            for strategy in default_strategies():
                if strategy.id not in self._strategies:
                    self._strategies[strategy.id] = strategy
                    added += 1
            if added:
                self._state = IndexState.DIRTY

        logger.info(f"Seeded {added} built-in strategies")
        return added

    @property
    def index_state(self) -> IndexState:
        return self._state

    def __len__(self) -> int:
        return len(self._strategies)

    def __contains__(self, strategy_id: object) -> bool:
        return strategy_id in self._strategies

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_strategy(self, strategy_id: str) -> Optional[Strategy]:
        return self._strategies.get(strategy_id)

    def get_strategies(self) -> List[Strategy]:
        """Whole catalog, built-in and custom, in insertion order."""
        with self._lock:
            return list(self._strategies.values())

    def get_custom_strategies(self) -> List[Strategy]:
        with self._lock:
            return [s for s in self._strategies.values() if s.is_custom]

    def get_by_category(self, category: str) -> List[Strategy]:
        with self._lock:
            self._ensure_indices()
            return list(self._by_category.get(category, []))

    def get_by_section(self, section: str) -> List[Strategy]:
        with self._lock:
            self._ensure_indices()
            return list(self._by_section.get(section, []))

    def get_by_subsection(self, subsection: str) -> List[Strategy]:
        with self._lock:
            self._ensure_indices()
            return list(self._by_subsection.get(subsection, []))

    def _ensure_indices(self) -> None:
        """Rebuild all indices if a write happened since the last read."""
        if self._state is IndexState.FRESH:
            return

        by_category: Dict[str, List[Strategy]] = {}
        by_section: Dict[str, List[Strategy]] = {}
        by_subsection: Dict[str, List[Strategy]] = {}

        for strategy in self._strategies.values():
            if strategy.category:
                by_category.setdefault(strategy.category, []).append(strategy)
            if strategy.section:
                by_section.setdefault(strategy.section, []).append(strategy)
            if strategy.subsection:
                by_subsection.setdefault(strategy.subsection, []).append(strategy)

        self._by_category = by_category
        self._by_section = by_section
        self._by_subsection = by_subsection
        self._state = IndexState.FRESH
        logger.debug(f"Rebuilt catalog indices over {len(self._strategies)} strategies")

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def _new_id(self, prefix: str, title: str) -> str:
        while True:
            candidate = f"{prefix}-{slugify(title)}-{uuid.uuid4().hex[:8]}"
            if candidate not in self._strategies:
                return candidate

    def add_strategy(self, data: Union[StrategyCreate, Mapping[str, Any]]) -> Strategy:
        """
        Add a strategy. An explicit id is kept, otherwise one is generated.

        Raises:
            DuplicateStrategyError: If the explicit id is already in use
        """
        if not isinstance(data, StrategyCreate):
            data = StrategyCreate.model_validate(data)

        with self._lock:
            if data.id:
                if data.id in self._strategies:
                    raise DuplicateStrategyError(data.id)
                strategy_id = data.id
            else:
                strategy_id = self._new_id("strategy", data.title)

            strategy = Strategy.model_validate({**data.model_dump(), "id": strategy_id})
            self._strategies[strategy_id] = strategy
            self._state = IndexState.DIRTY

        logger.info(f"Added strategy: {strategy.title} (ID: {strategy_id})")
        return strategy

    def update_strategy(
        self,
        strategy_id: str,
        updates: Union[StrategyUpdate, Mapping[str, Any]]
    ) -> Optional[Strategy]:
        """
        Merge a partial update into a strategy. The id and is_custom never change.

        Returns:
            Updated strategy, or None if the id is unknown
        """
        if not isinstance(updates, StrategyUpdate):
            updates = StrategyUpdate.model_validate(updates)

        changes = {
            key: value for key, value in updates.model_dump(exclude_unset=True).items()
            if value is not None or key in NULLABLE_FIELDS
        }

        with self._lock:
            existing = self._strategies.get(strategy_id)
            if existing is None:
                return None

            merged = {**existing.model_dump(), **changes, "id": strategy_id, "is_custom": existing.is_custom}
            strategy = Strategy.model_validate(merged)
            self._strategies[strategy_id] = strategy
            self._state = IndexState.DIRTY

        logger.info(f"Updated strategy: {strategy.title} (ID: {strategy_id})")
        return strategy

    def delete_strategy(self, strategy_id: str) -> bool:
        """
        Delete a custom strategy and prune it from stored configurations.

        Returns:
            True if deleted, False if the id is unknown

        Raises:
            ProtectedStrategyError: If the strategy is built-in
        """
        with self._lock:
            existing = self._strategies.get(strategy_id)
            if existing is None:
                return False
            if not existing.is_custom:
                raise ProtectedStrategyError(strategy_id)

            del self._strategies[strategy_id]
            self._state = IndexState.DIRTY
            pruned = self._prune_configs(strategy_id)

        logger.info(f"Deleted strategy with ID: {strategy_id} (pruned from {pruned} client configurations)")
        return True

    def _prune_configs(self, strategy_id: str) -> int:
        pruned = 0
        for client_id, configs in self._client_configs.items():
            kept = [c for c in configs if c.strategy_id != strategy_id]
            if len(kept) != len(configs):
                self._client_configs[client_id] = kept
                pruned += 1
        return pruned

    # ------------------------------------------------------------------
    # Custom strategy variants
    # ------------------------------------------------------------------

    def add_custom_strategy(self, title: str, content: str, section: Optional[str] = None) -> Strategy:
        """Add a user-authored strategy."""
        with self._lock:
            strategy = Strategy(
                id=self._new_id("custom", title),
                title=title,
                content=content,
                section=section,
                is_custom=True,
            )
            self._strategies[strategy.id] = strategy
            self._state = IndexState.DIRTY

        logger.info(f"Added custom strategy: {title} (ID: {strategy.id})")
        return strategy

    def update_custom_strategy(
        self,
        strategy_id: str,
        title: str,
        content: str,
        section: str
    ) -> Optional[Strategy]:
        """Replace title, content and section of a custom strategy."""
        existing = self.get_strategy(strategy_id)
        if existing is None or not existing.is_custom:
            return None
        return self.update_strategy(
            strategy_id,
            StrategyUpdate(title=title, content=content, section=section),
        )

    def remove_custom_strategy(self, strategy_id: str) -> bool:
        """Delete a custom strategy; built-in ids are reported as not found."""
        existing = self.get_strategy(strategy_id)
        if existing is None or not existing.is_custom:
            return False
        return self.delete_strategy(strategy_id)

    # ------------------------------------------------------------------
    # Export / import
    # ------------------------------------------------------------------

    def export_strategies(self) -> List[Dict[str, Any]]:
        """All custom strategies as JSON-ready dictionaries."""
        return [s.model_dump(by_alias=True, mode="json") for s in self.get_custom_strategies()]

    def import_strategies(self, items: Iterable[Union[StrategyCreate, Mapping[str, Any]]]) -> List[Strategy]:
        """
        Import strategies under fresh ids, all marked custom.

        Every item is validated before any is stored.

        Raises:
            pydantic.ValidationError: If an item is malformed
        """
        validated = [
            item if isinstance(item, StrategyCreate) else StrategyCreate.model_validate(item)
            for item in items
        ]

        imported = []
        with self._lock:
            for data in validated:
                strategy_id = self._new_id("imported", data.title)
                strategy = Strategy.model_validate({
                    **data.model_dump(),
                    "id": strategy_id,
                    "is_custom": True,
                })
                self._strategies[strategy_id] = strategy
                imported.append(strategy)
            if imported:
                self._state = IndexState.DIRTY

        logger.info(f"Imported {len(imported)} strategies")
        return imported

    # ------------------------------------------------------------------
    # Stored client configurations
    # ------------------------------------------------------------------

    def save_client_configs(
        self,
        client_id: str,
        configs: Iterable[Union[ClientStrategyConfig, Mapping[str, Any]]]
    ) -> List[ClientStrategyConfig]:
        """
        Store a client's configuration list (last write wins).

        Entries for unknown strategies are dropped.
        """
        validated = [
            c if isinstance(c, ClientStrategyConfig) else ClientStrategyConfig.model_validate(c)
            for c in configs
        ]

        with self._lock:
            kept = [c for c in validated if c.strategy_id in self._strategies]
            self._client_configs[client_id] = kept

        dropped = len(validated) - len(kept)
        if dropped:
            logger.info(f"Dropped {dropped} configurations for unknown strategies (client {client_id})")
        return list(kept)

    def get_client_configs(self, client_id: str) -> List[ClientStrategyConfig]:
        with self._lock:
            return list(self._client_configs.get(client_id, []))

    def get_client_ids(self) -> List[str]:
        with self._lock:
            return list(self._client_configs)
