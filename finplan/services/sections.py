"""Report section taxonomy shared by the organizer and the compiler."""
import re
from typing import Dict, Iterable, List, Optional

RECOMMENDATIONS = "recommendations"
BUILD_NET_WORTH = "buildNetWorth"
IMPLEMENTING_TAX_STRATEGIES = "implementingTaxStrategies"
PROTECTING_WHAT_MATTERS = "protectingWhatMatters"
LEAVING_A_LEGACY = "leavingALegacy"

# Bucket for strategies without a section; always placed last
UNCATEGORIZED = "uncategorized"

SECTION_ORDER: List[str] = [
    RECOMMENDATIONS,
    BUILD_NET_WORTH,
    IMPLEMENTING_TAX_STRATEGIES,
    PROTECTING_WHAT_MATTERS,
    LEAVING_A_LEGACY,
]

SECTION_TITLES: Dict[str, str] = {
    RECOMMENDATIONS: "RECOMMENDATIONS",
    BUILD_NET_WORTH: "BUILD NET WORTH",
    IMPLEMENTING_TAX_STRATEGIES: "IMPLEMENTING TAX EFFICIENT STRATEGIES",
    PROTECTING_WHAT_MATTERS: "PROTECTING WHAT MATTERS",
    LEAVING_A_LEGACY: "LEAVING A LEGACY",
    UNCATEGORIZED: "ADDITIONAL STRATEGIES",
}

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def section_title(section: str) -> str:
    """
    Human-readable uppercase heading for a section key.

    Unknown keys are split on camelCase boundaries, e.g.
    "planningForRetirement" -> "PLANNING FOR RETIREMENT".
    """
    if section in SECTION_TITLES:
        return SECTION_TITLES[section]
    words = _CAMEL_BOUNDARY.sub(" ", section).replace("_", " ").replace("-", " ")
    return " ".join(words.split()).upper()


def section_key(section: Optional[str]) -> str:
    """Section key a strategy is grouped under."""
    return section or UNCATEGORIZED


def order_sections(keys: Iterable[str]) -> List[str]:
    """
    Put section keys in canonical order.

    Known sections come first in SECTION_ORDER, unknown keys follow in the
    order they were first seen, and the uncategorized bucket is last.
    """
    seen = []
    for key in keys:
        if key not in seen:
            seen.append(key)

    ordered = [key for key in SECTION_ORDER if key in seen]
    ordered.extend(key for key in seen if key not in SECTION_ORDER and key != UNCATEGORIZED)
    if UNCATEGORIZED in seen:
        ordered.append(UNCATEGORIZED)
    return ordered
