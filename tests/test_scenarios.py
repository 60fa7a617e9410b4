import pandas as pd

from config import PALETTE
from investment_calc import ProjectionInput
from scenarios import ScenarioList, color_for, comparison_frame

# unit test for the scenario list file


def make_list(n=3):
    scenarios = ScenarioList()
    for i in range(n):
        scenarios.add(ProjectionInput(monthly_contribution=1000 * (i + 1), years=10, annual_return_pct=12.0, annual_inflation_pct=6.0))
    return scenarios


def test_add_names_and_ids():
    scenarios = make_list()
    assert [s.name for s in scenarios] == ["Scenario 1", "Scenario 2", "Scenario 3"]
    assert len({s.id for s in scenarios}) == 3
    assert scenarios[1].result.invested_amount == 2000 * 12 * 10


def test_remove_by_id():
    scenarios = make_list()
    target = scenarios[1]
    scenarios.remove(target.id)
    assert len(scenarios) == 2
    assert target.id not in [s.id for s in scenarios]

    scenarios.remove("does-not-exist")
    assert len(scenarios) == 2


def test_reset_and_latest():
    scenarios = make_list()
    assert scenarios.latest().name == "Scenario 3"
    scenarios.reset()
    assert len(scenarios) == 0
    assert scenarios.latest() is None


def test_nominal_only_scenario():
    scenarios = ScenarioList()
    s = scenarios.add(ProjectionInput(monthly_contribution=1000, years=5, annual_return_pct=10.0), include_real=False)
    assert s.result.total_wealth_real is None


def test_color_cycles_through_palette():
    assert color_for(0) == PALETTE[0]
    assert color_for(len(PALETTE)) == PALETTE[0]
    assert color_for(len(PALETTE) + 3) == PALETTE[3]


def test_comparison_frame():
    df = comparison_frame(make_list(2))
    assert isinstance(df, pd.DataFrame)
    assert list(df["Scenario"]) == ["Scenario 1", "Scenario 2"]
    assert (df["Total Wealth"] > df["Invested"]).all()
