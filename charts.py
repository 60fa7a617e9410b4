from __future__ import annotations

import math
from typing import List, Tuple

import plotly.graph_objects as go

from formatting import format_axis_value, format_currency
from investment_calc import ProjectionResult
from scenarios import ScenarioList, color_for

# charts.py — Plotly chart builders


# Pick round tick positions from 0 to max_value and label them with Lakh/Crore suffixes.
def _axis_ticks(max_value: float, target: int = 6) -> Tuple[List[float], List[str]]:
    if max_value <= 0:
        return [0.0], ["0"]
    raw_step = max_value / target
    magnitude = 10 ** math.floor(math.log10(raw_step))
    step = next(m * magnitude for m in (1, 2, 2.5, 5, 10) if m * magnitude >= raw_step)
    count = int(math.ceil(max_value / step))
    vals = [i * step for i in range(count + 1)]
    return vals, [format_axis_value(v) for v in vals]


def _apply_currency_axis(fig: go.Figure, max_value: float) -> None:
    vals, text = _axis_ticks(max_value)
    fig.update_yaxes(tickmode="array", tickvals=vals, ticktext=text)


# Plot nominal wealth by year, one line per scenario.
def wealth_comparison_chart(scenarios: ScenarioList) -> go.Figure:
    fig = go.Figure()
    if len(scenarios) == 0:
        return fig.update_layout(title="No scenarios to display")

    top = 0.0
    for idx, s in enumerate(scenarios):
        years = [r.year for r in s.result.yearly_data]
        wealth = [r.wealth for r in s.result.yearly_data]
        top = max(top, max(wealth))
        fig.add_trace(
            go.Scatter(
                x=years,
                y=wealth,
                mode="lines",
                name=s.name,
                line=dict(color=color_for(idx), width=2, shape="spline"),
                customdata=[format_currency(w) for w in wealth],
                hovertemplate="Year %{x}<br>%{customdata}<extra>%{fullData.name}</extra>",
            )
        )

    fig.update_layout(
        title="Wealth Growth Comparison",
        xaxis_title="Year",
        yaxis_title="Wealth",
        hovermode="x unified",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
        margin=dict(l=40, r=30, t=60, b=40),
    )
    _apply_currency_axis(fig, top)
    return fig


# Plot invested amount vs. nominal and real wealth for a single scenario.
def growth_breakdown_chart(result: ProjectionResult, title: str = "Projected Wealth Over Time") -> go.Figure:
    fig = go.Figure()
    years = [r.year for r in result.yearly_data]

    series = [
        ("Invested", [r.investment for r in result.yearly_data], "dash"),
        ("Wealth", [r.wealth for r in result.yearly_data], "solid"),
    ]
    if result.has_real:
        series.append(("Wealth (Real)", [r.wealth_real for r in result.yearly_data], "dot"))

    top = 0.0
    for name, values, dash in series:
        top = max(top, max(values))
        fig.add_trace(
            go.Scatter(
                x=years,
                y=values,
                mode="lines",
                name=name,
                line=dict(dash=dash),
                customdata=[format_currency(v) for v in values],
                hovertemplate="%{customdata}",
            )
        )

    fig.update_layout(
        title=title,
        xaxis_title="Year",
        yaxis_title="Amount",
        hovermode="x unified",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
        margin=dict(l=40, r=30, t=60, b=40),
    )
    _apply_currency_axis(fig, top)
    return fig
