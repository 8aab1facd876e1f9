"""Report compilation: enabled strategy configurations -> one plain-text plan."""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from finplan.schemas.strategy import ClientStrategyConfig, Strategy
from finplan.services.catalog import CatalogStore
from finplan.services.fields import resolve_fields
from finplan.services.sections import order_sections, section_key, section_title
from finplan.services.templates import substitute

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedStrategy:
    """A strategy's content after field resolution and substitution."""
    strategy_id: str
    section: str
    content: str


def render_strategy(strategy: Strategy, input_values: Optional[Mapping[str, Any]] = None) -> str:
    """Resolve a strategy's declared fields and substitute them into its content."""
    values, extra_texts = resolve_fields(strategy.input_fields, input_values or {})
    return substitute(strategy.content, values, extra_texts)


def _index_catalog(catalog: Union[CatalogStore, Mapping[str, Strategy], Iterable[Strategy]]) -> Dict[str, Strategy]:
    if isinstance(catalog, CatalogStore):
        # One consistent snapshot for the whole compile
        catalog = catalog.get_strategies()
    if isinstance(catalog, Mapping):
        return dict(catalog)
    return {strategy.id: strategy for strategy in catalog}


def render_enabled(
    configs: Iterable[ClientStrategyConfig],
    catalog: Union[CatalogStore, Mapping[str, Strategy], Iterable[Strategy]]
) -> List[RenderedStrategy]:
    """
    Render every enabled configuration, in configuration order.

    Configurations pointing at a strategy that no longer exists are dropped.
    """
    by_id = _index_catalog(catalog)
    rendered = []

    for config in configs:
        if not config.is_enabled:
            continue
        strategy = by_id.get(config.strategy_id)
        if strategy is None:
            logger.info(f"Skipping configuration for unknown strategy '{config.strategy_id}'")
            continue
        rendered.append(RenderedStrategy(
            strategy_id=strategy.id,
            section=section_key(strategy.section),
            content=render_strategy(strategy, config.input_values),
        ))

    return rendered


def assemble(rendered: Iterable[RenderedStrategy]) -> str:
    """
    Concatenate rendered strategies section by section.

    Sections appear in canonical order and only when they have members.
    Within a section the supplied order is kept (no title sort).
    """
    by_section: Dict[str, List[RenderedStrategy]] = {}
    for item in rendered:
        by_section.setdefault(item.section, []).append(item)

    blocks = []
    for key in order_sections(by_section):
        block = section_title(key) + "\n"
        block += "".join("\n" + item.content + "\n" for item in by_section[key])
        blocks.append(block + "\n")

    return "".join(blocks).rstrip()


def compile_report(
    client_data: Any,
    configs: Iterable[ClientStrategyConfig],
    catalog: Union[CatalogStore, Mapping[str, Strategy], Iterable[Strategy]]
) -> str:
    """
    Compile a client's enabled strategy configurations into the report body.

    Never fails on data shape: unknown strategies are omitted and fields with
    no value leave their {{id}} placeholder in the text. client_data is not
    read here; it travels with the stored report.

    Args:
        client_data: Validated client data (opaque)
        configs: Client strategy configurations
        catalog: Catalog store, or its strategies as a list or id mapping

    Returns:
        Plain-text report
    """
    rendered = render_enabled(configs, catalog)
    report = assemble(rendered)
    logger.info(
        f"Compiled report: {len(rendered)} strategies in "
        f"{len({item.section for item in rendered})} sections"
    )
    return report
