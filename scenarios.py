from __future__ import annotations

import logging
import uuid
from typing import Dict, Iterator, List, Optional

import pandas as pd
from pydantic import BaseModel, ConfigDict

from config import PALETTE
from investment_calc import ProjectionInput, ProjectionResult, compute_projection

# scenarios.py — in-memory list of calculated scenarios for side-by-side comparison

logger = logging.getLogger(__name__)


def new_scenario_id() -> str:
    return uuid.uuid4().hex[:9]


# Line color for a scenario by its position in the list.
def color_for(index: int) -> str:
    return PALETTE[index % len(PALETTE)]


class Scenario(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    inputs: ProjectionInput
    result: ProjectionResult


class ScenarioList:
    """Ordered scenarios for the current session. Nothing is persisted."""

    def __init__(self) -> None:
        self._items: List[Scenario] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Scenario]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Scenario:
        return self._items[index]

    def add(self, inputs: ProjectionInput, include_real: bool = True) -> Scenario:
        result = compute_projection(inputs, include_real=include_real)
        scenario = Scenario(
            id=new_scenario_id(),
            name=f"Scenario {len(self._items) + 1}",
            inputs=inputs,
            result=result,
        )
        self._items.append(scenario)
        logger.info("Added %s (%s)", scenario.name, scenario.id)
        return scenario

    def remove(self, scenario_id: str) -> None:
        before = len(self._items)
        self._items = [s for s in self._items if s.id != scenario_id]
        if len(self._items) < before:
            logger.info("Removed scenario %s", scenario_id)

    def reset(self) -> None:
        self._items = []
        logger.info("Cleared all scenarios")

    def latest(self) -> Optional[Scenario]:
        return self._items[-1] if self._items else None


# One row per scenario with its inputs and final totals.
def comparison_frame(scenarios: ScenarioList) -> pd.DataFrame:
    rows: List[Dict] = []
    for s in scenarios:
        res = s.result
        rows.append(
            {
                "Scenario": s.name,
                "Monthly Investment": s.inputs.monthly_contribution,
                "Years": s.inputs.years,
                "Return Rate (%)": s.inputs.annual_return_pct,
                "Inflation Rate (%)": res.inflation_pct,
                "Invested": res.invested_amount,
                "Total Wealth": res.total_wealth,
                "Total Earnings": res.total_earnings,
                "Total Wealth (Real)": res.total_wealth_real,
                "Total Earnings (Real)": res.total_earnings_real,
            }
        )
    return pd.DataFrame(rows)
