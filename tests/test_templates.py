"""Placeholder substitution tests."""
from finplan.services.fields import FieldValue
from finplan.services.templates import find_placeholders, substitute


def test_content_without_placeholders_is_unchanged():
    """Any map leaves placeholder-free content as it was."""
    content = "Review beneficiary designations on RRSPs, RRIFs and TFSAs {not a placeholder}."

    assert substitute(content, {}) == content
    assert substitute(content, {"amount": 100, "rate": "5%"}) == content


def test_unresolved_placeholder_stays_visible():
    assert substitute("Save {{amount}} monthly", {}) == "Save {{amount}} monthly"


def test_resolved_placeholders_are_replaced():
    values = {"amt": FieldValue(kind="number", raw="250"), "freq": "month"}

    result = substitute("Save {{amt}} per {{freq}}. Again: {{amt}}.", values)

    assert result == "Save 250 per month. Again: 250."


def test_only_known_identifiers_are_replaced():
    result = substitute("{{known}} and {{unknown}}", {"known": "yes"})

    assert result == "yes and {{unknown}}"


def test_replaced_values_are_not_rescanned():
    """A value that looks like a placeholder is emitted literally."""
    values = {"a": "{{b}}", "b": "expanded"}

    assert substitute("Value: {{a}}", values) == "Value: {{b}}"


def test_self_referencing_value_does_not_expand():
    values = {"loop": "{{loop}}{{loop}}"}

    assert substitute("{{loop}}", values) == "{{loop}}{{loop}}"


def test_substituting_twice_is_safe():
    values = {"amt": "250"}

    once = substitute("Save {{amt}} and {{other}}", values)

    assert substitute(once, values) == once


def test_non_identifier_tokens_are_left_alone():
    content = "{{ amount }} {{monthly-amount}} {amount} {{{amount}}}"

    result = substitute(content, {"amount": "X", "monthly-amount": "Y"})

    assert result == "{{ amount }} {{monthly-amount}} {amount} {X}"


def test_extra_texts_appended_on_new_lines():
    result = substitute("Base text.", {}, ["First extra.", "", "Second extra."])

    assert result == "Base text.\nFirst extra.\nSecond extra."


def test_native_values_are_formatted():
    result = substitute("{{n}} {{f}} {{b}}", {"n": 3, "f": 4.0, "b": False})

    assert result == "3 4 false"


def test_find_placeholders():
    assert find_placeholders("{{b}} {{a}} {{b}} {{ c }}") == ["b", "a"]
