"""Catalog browsing view: filter strategies and group them by section and subsection."""
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from finplan.schemas.strategy import Strategy
from finplan.services.sections import order_sections, section_key, section_title

ALL_SECTIONS = "all"


@dataclass
class SectionGroup:
    """
    Strategies of one section, as shown when browsing the catalog.

    Attributes:
        section: Section key
        direct: Strategies with no subsection, sorted by title
        subsections: Subsection name -> strategies, both sorted
    """
    section: str
    direct: List[Strategy] = field(default_factory=list)
    subsections: Dict[str, List[Strategy]] = field(default_factory=dict)

    @property
    def title(self) -> str:
        return section_title(self.section)

    @property
    def count(self) -> int:
        return len(self.direct) + sum(len(members) for members in self.subsections.values())

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary (camelCase strategy payloads)."""
        return {
            "section": self.section,
            "title": self.title,
            "count": self.count,
            "direct": [s.model_dump(by_alias=True) for s in self.direct],
            "subsections": [
                {"name": name, "strategies": [s.model_dump(by_alias=True) for s in members]}
                for name, members in self.subsections.items()
            ],
        }


def grouping_key(strategy: Strategy) -> Optional[str]:
    """
    Subsection a strategy is listed under.

    Subsection wins. Category stands in only for legacy records that predate
    sections; a sectioned strategy without a subsection is listed directly.
    """
    if strategy.subsection:
        return strategy.subsection
    if not strategy.section:
        return strategy.category or None
    return None


def matches_search(strategy: Strategy, search_text: Optional[str]) -> bool:
    """Case-insensitive substring match on the browsable text fields."""
    if not search_text:
        return True
    needle = search_text.lower()
    haystack = (
        strategy.title,
        strategy.content,
        strategy.description,
        strategy.category,
        strategy.subsection,
    )
    return any(needle in value.lower() for value in haystack if value)


def matches_section(strategy: Strategy, section: Optional[str]) -> bool:
    if not section or section == ALL_SECTIONS:
        return True
    return section_key(strategy.section) == section


def filter_strategies(
    strategies: Iterable[Strategy],
    search_text: Optional[str] = None,
    section: Optional[str] = None
) -> List[Strategy]:
    return [
        s for s in strategies
        if matches_search(s, search_text) and matches_section(s, section)
    ]


def organize(
    strategies: Iterable[Strategy],
    search_text: Optional[str] = None,
    section: Optional[str] = None
) -> Dict[str, SectionGroup]:
    """
    Group a flat strategy list for browsing.

    Built-in and custom strategies are treated alike. Sections follow the
    canonical order with unknown sections after them and the uncategorized
    bucket last; members are sorted by title, subsections by name. Pure
    projection, safe to recompute on every keystroke.

    Args:
        strategies: Catalog strategies
        search_text: Optional free-text filter
        section: Optional section key, or "all"

    Returns:
        Ordered mapping of section key to SectionGroup
    """
    grouped: Dict[str, SectionGroup] = {}

    for strategy in filter_strategies(strategies, search_text, section):
        key = section_key(strategy.section)
        group = grouped.setdefault(key, SectionGroup(section=key))
        sub = grouping_key(strategy)
        if sub:
            group.subsections.setdefault(sub, []).append(strategy)
        else:
            group.direct.append(strategy)

    organized: Dict[str, SectionGroup] = {}
    for key in order_sections(grouped):
        group = grouped[key]
        group.direct.sort(key=lambda s: s.title)
        group.subsections = {
            name: sorted(group.subsections[name], key=lambda s: s.title)
            for name in sorted(group.subsections)
        }
        organized[key] = group

    return organized
