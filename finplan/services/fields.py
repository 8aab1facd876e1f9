"""Field resolution: turn a client's entered values into concrete field values."""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from finplan.schemas.strategy import InputFieldSpec, InputFieldType

logger = logging.getLogger(__name__)

KIND_TEXT = "text"
KIND_NUMBER = "number"
KIND_BOOLEAN = "boolean"
KIND_DATE = "date"

KIND_BY_FIELD_TYPE = {
    InputFieldType.TEXT: KIND_TEXT,
    InputFieldType.TEXTAREA: KIND_TEXT,
    InputFieldType.SELECT: KIND_TEXT,
    InputFieldType.NUMBER: KIND_NUMBER,
    InputFieldType.DATE: KIND_DATE,
    InputFieldType.TOGGLE: KIND_BOOLEAN,
}

TRUE_STRINGS = {"true", "yes", "on", "1"}


@dataclass(frozen=True)
class FieldValue:
    """
    Uniform internal value of a resolved field.

    Attributes:
        kind: One of "text", "number", "boolean", "date"
        raw: String form substituted into content
    """
    kind: str
    raw: str

    def as_bool(self) -> bool:
        """Boolean reading of the value (only meaningful for toggles)."""
        if self.kind == KIND_BOOLEAN:
            return self.raw == "true"
        return is_truthy(self.raw)

    def __str__(self) -> str:
        return self.raw


@dataclass(frozen=True)
class ResolvedField:
    """Outcome of resolving one declared field."""
    field_id: str
    value: Optional[FieldValue]
    extra_text: Optional[str] = None


def is_truthy(value: Any) -> bool:
    """
    Interpret an entered value as a toggle state.

    Strings are true only for true/yes/on/1 (any case); numbers when non-zero.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in TRUE_STRINGS
    return bool(value)


def format_value(value: Any) -> str:
    """String representation used for substitution."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_field_value(field_type: InputFieldType, value: Any) -> FieldValue:
    """Convert a raw entered value into a FieldValue for the given field type."""
    kind = KIND_BY_FIELD_TYPE[InputFieldType(field_type)]
    if kind == KIND_BOOLEAN:
        return FieldValue(kind=kind, raw=format_value(is_truthy(value)))
    return FieldValue(kind=kind, raw=format_value(value))


def resolve_field(field: InputFieldSpec, supplied_values: Mapping[str, Any]) -> ResolvedField:
    """
    Resolve one declared field against the values a client supplied.

    Explicit value first, then the field default, else no value: the
    placeholder is then left in the output as a visible marker. Toggle
    fields also yield their conditional text for the resolved state.
    """
    raw = supplied_values.get(field.id)
    if raw is None:
        raw = field.default_value

    if raw is None:
        return ResolvedField(field_id=field.id, value=None)

    value = to_field_value(field.type, raw)

    extra_text = None
    if field.type == InputFieldType.TOGGLE and field.conditional_text:
        if value.as_bool():
            extra_text = field.conditional_text.when_true or None
        else:
            extra_text = field.conditional_text.when_false or None

    return ResolvedField(field_id=field.id, value=value, extra_text=extra_text)


def resolve_fields(
    fields: Iterable[InputFieldSpec],
    supplied_values: Mapping[str, Any]
) -> Tuple[Dict[str, FieldValue], List[str]]:
    """
    Resolve every declared field of a strategy.

    Returns:
        Tuple of (values keyed by field id, conditional texts in declaration order)
    """
    values: Dict[str, FieldValue] = {}
    extra_texts: List[str] = []

    for field in fields:
        resolved = resolve_field(field, supplied_values)
        if resolved.value is None:
            logger.debug(f"No value for field '{field.id}'; placeholder left unexpanded")
            continue
        values[field.id] = resolved.value
        if resolved.extra_text:
            extra_texts.append(resolved.extra_text)

    return values, extra_texts
