"""Report compilation tests."""
from finplan.schemas.strategy import ClientStrategyConfig, Strategy
from finplan.services.compiler import assemble, compile_report, render_enabled, render_strategy
from finplan.services.sections import section_title


def make_strategy(strategy_id: str, section, content: str, input_fields=None, **overrides) -> Strategy:
    data = {
        "id": strategy_id,
        "title": strategy_id.title(),
        "section": section,
        "content": content,
        "inputFields": input_fields or [],
    }
    data.update(overrides)
    return Strategy.model_validate(data)


def enabled(strategy_id: str, **values) -> ClientStrategyConfig:
    return ClientStrategyConfig(strategy_id=strategy_id, is_enabled=True, input_values=values)


CLIENT = {"firstName": "Ada"}


def test_end_to_end_scenario():
    catalog = [
        make_strategy(
            "s1", "buildNetWorth", "Save {{amt}} per month.",
            [{"id": "amt", "label": "Amount", "type": "number", "defaultValue": 0}],
        )
    ]

    report = compile_report(CLIENT, [enabled("s1", amt=250)], catalog)

    assert report == "BUILD NET WORTH\n\nSave 250 per month."


def test_default_used_when_no_value_supplied():
    catalog = [
        make_strategy(
            "s1", "buildNetWorth", "Save {{amt}} per month.",
            [{"id": "amt", "label": "Amount", "type": "number", "defaultValue": 0}],
        )
    ]

    assert compile_report(CLIENT, [enabled("s1")], catalog) == "BUILD NET WORTH\n\nSave 0 per month."


def test_sections_follow_canonical_order():
    catalog = [
        make_strategy("legacy", "leavingALegacy", "Write a will."),
        make_strategy("networth", "buildNetWorth", "Open a TFSA."),
    ]

    report = compile_report(CLIENT, [enabled("legacy"), enabled("networth")], catalog)

    assert report.index("BUILD NET WORTH") < report.index("LEAVING A LEGACY")
    assert report == "BUILD NET WORTH\n\nOpen a TFSA.\n\nLEAVING A LEGACY\n\nWrite a will."


def test_empty_sections_are_omitted():
    catalog = [
        make_strategy("a", "buildNetWorth", "A."),
        make_strategy("b", "protectingWhatMatters", "B."),
    ]

    report = compile_report(CLIENT, [enabled("a")], catalog)

    assert "PROTECTING WHAT MATTERS" not in report
    assert "RECOMMENDATIONS" not in report
    assert "LEAVING A LEGACY" not in report


def test_dangling_reference_is_dropped():
    catalog = [make_strategy("a", "buildNetWorth", "A.")]

    report = compile_report(CLIENT, [enabled("deleted-strategy"), enabled("a")], catalog)

    assert report == "BUILD NET WORTH\n\nA."


def test_only_dangling_references_give_empty_report():
    assert compile_report(CLIENT, [enabled("gone")], []) == ""


def test_disabled_configs_are_skipped():
    catalog = [make_strategy("a", "buildNetWorth", "A."), make_strategy("b", "buildNetWorth", "B.")]
    configs = [enabled("a"), ClientStrategyConfig(strategy_id="b", is_enabled=False)]

    assert compile_report(CLIENT, configs, catalog) == "BUILD NET WORTH\n\nA."


def test_configuration_order_kept_within_section():
    """Compilation keeps configuration order; titles are not sorted."""
    catalog = [
        make_strategy("a", "buildNetWorth", "Alpha.", title="Alpha"),
        make_strategy("z", "buildNetWorth", "Zulu.", title="Zulu"),
    ]

    report = compile_report(CLIENT, [enabled("z"), enabled("a")], catalog)

    assert report == "BUILD NET WORTH\n\nZulu.\n\nAlpha."


def test_unresolved_placeholder_left_in_report():
    catalog = [make_strategy("a", "buildNetWorth", "Save {{amount}} monthly.")]

    assert compile_report(CLIENT, [enabled("a")], catalog) == "BUILD NET WORTH\n\nSave {{amount}} monthly."


def test_undeclared_input_values_are_not_substituted():
    catalog = [make_strategy("a", "buildNetWorth", "Save {{amount}} monthly.")]

    report = compile_report(CLIENT, [enabled("a", amount=100)], catalog)

    assert "{{amount}}" in report


def test_toggle_conditional_text_appended():
    toggle = {
        "id": "hasTrust",
        "label": "Trust?",
        "type": "toggle",
        "conditionalText": {"whenTrue": "Review the trust deed.", "whenFalse": "Consider a trust."},
    }
    catalog = [make_strategy("t", "leavingALegacy", "Estate review.", [toggle])]

    assert compile_report(CLIENT, [enabled("t", hasTrust=True)], catalog) == (
        "LEAVING A LEGACY\n\nEstate review.\nReview the trust deed."
    )
    assert compile_report(CLIENT, [enabled("t", hasTrust=False)], catalog) == (
        "LEAVING A LEGACY\n\nEstate review.\nConsider a trust."
    )


def test_custom_strategies_compile_like_built_in():
    catalog = [
        make_strategy("builtin", "buildNetWorth", "Built in."),
        make_strategy("mine", "buildNetWorth", "Mine.", is_custom=True),
    ]

    report = compile_report(CLIENT, [enabled("mine"), enabled("builtin")], catalog)

    assert report == "BUILD NET WORTH\n\nMine.\n\nBuilt in."


def test_unknown_and_missing_sections_come_last():
    catalog = [
        make_strategy("loose", None, "Loose."),
        make_strategy("cash", "optimizeCashflow", "Cash."),
        make_strategy("rec", "recommendations", "Rec."),
    ]

    report = compile_report(CLIENT, [enabled("loose"), enabled("cash"), enabled("rec")], catalog)

    assert report == (
        "RECOMMENDATIONS\n\nRec.\n\n"
        "OPTIMIZE CASHFLOW\n\nCash.\n\n"
        "ADDITIONAL STRATEGIES\n\nLoose."
    )


def test_catalog_may_be_a_mapping():
    strategy = make_strategy("a", "buildNetWorth", "A.")

    assert compile_report(CLIENT, [enabled("a")], {"a": strategy}) == "BUILD NET WORTH\n\nA."


def test_catalog_store_is_read_directly(catalog):
    catalog.add_strategy(make_strategy("a", "buildNetWorth", "A.").model_dump())
    catalog.add_custom_strategy("Mine", "Mine.", "buildNetWorth")
    custom_id = catalog.get_custom_strategies()[0].id

    report = compile_report(CLIENT, [enabled(custom_id), enabled("a")], catalog)

    assert report == "BUILD NET WORTH\n\nMine.\n\nA."


def test_recompiling_gives_same_report():
    catalog = [make_strategy("a", "buildNetWorth", "Save {{x}}.", [{"id": "x", "label": "X"}])]
    configs = [enabled("a", x="10")]

    assert compile_report(CLIENT, configs, catalog) == compile_report(CLIENT, configs, catalog)


def test_render_helpers():
    strategy = make_strategy("a", "implementingTaxStrategies", "Rate {{r}}.", [{"id": "r", "label": "R"}])

    assert render_strategy(strategy, {"r": "5%"}) == "Rate 5%."
    assert render_strategy(strategy) == "Rate {{r}}."

    rendered = render_enabled([enabled("a", r="3%")], [strategy])
    assert rendered[0].section == "implementingTaxStrategies"
    assert assemble(rendered) == "IMPLEMENTING TAX EFFICIENT STRATEGIES\n\nRate 3%."


def test_section_titles():
    assert section_title("buildNetWorth") == "BUILD NET WORTH"
    assert section_title("planningForRetirement") == "PLANNING FOR RETIREMENT"
