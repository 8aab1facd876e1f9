"""Placeholder substitution for strategy content."""
import re
from typing import Any, Iterable, Mapping, Optional

from finplan.services.fields import format_value

# {{identifier}} where identifier is word characters only
PLACEHOLDER_PATTERN = re.compile(r"\{\{([A-Za-z0-9_]+)\}\}")


def find_placeholders(content: str) -> list:
    """Return placeholder identifiers in order of first appearance."""
    found = []
    for match in PLACEHOLDER_PATTERN.finditer(content):
        if match.group(1) not in found:
            found.append(match.group(1))
    return found


def substitute(
    content: str,
    resolved_values: Mapping[str, Any],
    extra_texts: Optional[Iterable[str]] = None
) -> str:
    """
    Replace {{id}} placeholders with resolved values.

    Single pass: replacement text is never scanned again, so a value that
    itself looks like a placeholder is emitted literally. Identifiers with no
    resolved value are left untouched, braces included.

    Args:
        content: Template text
        resolved_values: Values keyed by field id
        extra_texts: Conditional texts appended afterwards, one per line

    Returns:
        Rendered text
    """
    def replace(match: re.Match) -> str:
        key = match.group(1)
        if key not in resolved_values or resolved_values[key] is None:
            return match.group(0)
        return format_value(resolved_values[key])

    result = PLACEHOLDER_PATTERN.sub(replace, content)

    for text in extra_texts or ():
        if text:
            result += "\n" + text

    return result
