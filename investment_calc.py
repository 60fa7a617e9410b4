from __future__ import annotations

import logging
import math
from typing import Dict, List, Optional, Tuple

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from config import DEFAULT_INFLATION_RATE, MAX_MONTHLY_CONTRIBUTION, MAX_YEARS

# investment_calc.py — monthly SIP projection engine (nominal and inflation-adjusted)

logger = logging.getLogger(__name__)


class ProjectionError(ValueError):
    """Raised when projection inputs violate the engine's preconditions."""


class ProjectionInput(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    monthly_contribution: float = Field(gt=0, le=MAX_MONTHLY_CONTRIBUTION, allow_inf_nan=False)
    years: int = Field(ge=1, le=MAX_YEARS, strict=True)
    annual_return_pct: float = Field(ge=-100, allow_inf_nan=False)
    annual_inflation_pct: Optional[float] = Field(default=None, allow_inf_nan=False)

    @model_validator(mode="after")
    def check_inflation(self) -> "ProjectionInput":
        # (1 + inflation) is the Fisher divisor
        if self.annual_inflation_pct is not None and self.annual_inflation_pct <= -100:
            raise ValueError("annual_inflation_pct must be greater than -100")
        return self


class YearlyRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    year: int
    investment: int
    wealth: int
    earnings: int
    wealth_real: Optional[int] = None
    earnings_real: Optional[int] = None


class ProjectionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    inputs: ProjectionInput
    inflation_pct: Optional[float]
    invested_amount: int
    total_wealth: int
    total_earnings: int
    total_wealth_real: Optional[int]
    total_earnings_real: Optional[int]
    yearly_data: Tuple[YearlyRecord, ...]

    @property
    def has_real(self) -> bool:
        return self.inflation_pct is not None


def build_input(**values) -> ProjectionInput:
    """Validate raw values into a ProjectionInput, raising ProjectionError on bad input."""
    try:
        return ProjectionInput.model_validate(values)
    except (ValidationError, OverflowError) as exc:
        raise ProjectionError(str(exc)) from exc


# Round halves up like the browser's Math.round; Python's round() is banker's rounding.
def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def monthly_rate(annual_return_pct: float) -> float:
    return annual_return_pct / 12 / 100


# Fisher relation: deflate the nominal annual return by inflation, then spread it monthly.
def real_monthly_rate(annual_return_pct: float, annual_inflation_pct: float) -> float:
    return (((1 + annual_return_pct / 100) / (1 + annual_inflation_pct / 100)) - 1) / 12


def annuity_due_value(contribution: float, rate: float, months: int) -> float:
    """Future value of `months` equal deposits made at the start of each month.

    ((1 + r)^n - 1) / r is evaluated as expm1(n * log1p(r)) / r, which stays
    accurate when 1 + r rounds to 1.0. A zero rate has no geometric growth,
    so the value is just the deposits.
    """
    if rate == 0:
        return contribution * months
    return contribution * (math.expm1(months * math.log1p(rate)) / rate) * (1 + rate)


def compute_projection(inputs: ProjectionInput, include_real: bool = True) -> ProjectionResult:
    """Project year-by-year invested amount, wealth and earnings for a monthly SIP.

    Contributions are made at the start of each month (annuity-due) and
    compound monthly at annual_return_pct / 12. When include_real is set the
    same formula is run on the Fisher-deflated rate, using
    annual_inflation_pct or DEFAULT_INFLATION_RATE when it is missing.

    Values are rounded to whole currency units once per record; earnings are
    rounded from the unrounded difference.
    """
    inflation_pct: Optional[float] = None
    if include_real:
        inflation_pct = (
            inputs.annual_inflation_pct
            if inputs.annual_inflation_pct is not None
            else DEFAULT_INFLATION_RATE
        )

    contribution = inputs.monthly_contribution
    r = monthly_rate(inputs.annual_return_pct)
    r_real = real_monthly_rate(inputs.annual_return_pct, inflation_pct) if inflation_pct is not None else None

    rows: List[YearlyRecord] = []
    for yr in range(1, inputs.years + 1):
        months = yr * 12
        investment = contribution * months
        wealth_real = earnings_real = None
        try:
            wealth = annuity_due_value(contribution, r, months)
            if r_real is not None:
                w_real = annuity_due_value(contribution, r_real, months)
                wealth_real = round_half_up(w_real)
                earnings_real = round_half_up(w_real - investment)
            record = YearlyRecord(
                year=yr,
                investment=round_half_up(investment),
                wealth=round_half_up(wealth),
                earnings=round_half_up(wealth - investment),
                wealth_real=wealth_real,
                earnings_real=earnings_real,
            )
        except OverflowError as exc:
            raise ProjectionError(f"projection overflows at year {yr}") from exc
        rows.append(record)

    last = rows[-1]
    logger.debug(
        "Projected %s/month for %d years at %s%% (inflation %s): wealth=%d",
        contribution, inputs.years, inputs.annual_return_pct, inflation_pct, last.wealth,
    )
    return ProjectionResult(
        inputs=inputs,
        inflation_pct=inflation_pct,
        invested_amount=last.investment,
        total_wealth=last.wealth,
        total_earnings=last.earnings,
        total_wealth_real=last.wealth_real,
        total_earnings_real=last.earnings_real,
        yearly_data=tuple(rows),
    )


#     Tabular view of the yearly series for tables, charts, CSV and the PDF report.
def projection_frame(result: ProjectionResult) -> pd.DataFrame:
    rows: List[Dict] = []
    for rec in result.yearly_data:
        row = {
            "Year": rec.year,
            "Investment": rec.investment,
            "Wealth": rec.wealth,
            "Earnings": rec.earnings,
        }
        if result.has_real:
            row["Wealth (Real)"] = rec.wealth_real
            row["Earnings (Real)"] = rec.earnings_real
        rows.append(row)
    return pd.DataFrame(rows)
