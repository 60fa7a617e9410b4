from __future__ import annotations

from typing import Optional

from config import CRORE, CURRENCY_SYMBOL, LAKH
from investment_calc import round_half_up

# formatting.py — display helpers for rupee amounts (Lakh / Crore), rates and durations


# Format an amount with Indian magnitude suffixes: ₹1.23 Cr, ₹2.35 Lakh, ₹5,000.
def format_currency(amount: Optional[float]) -> str:
    if amount is None:
        return "—"
    amount = round_half_up(amount)
    if amount >= CRORE:
        return f"{CURRENCY_SYMBOL}{amount / CRORE:.2f} Cr"
    if amount >= LAKH:
        return f"{CURRENCY_SYMBOL}{amount / LAKH:.2f} Lakh"
    return f"{CURRENCY_SYMBOL}{amount:,}"


# Compact y-axis tick label: 1.2Cr, 3.5L, or the grouped number.
def format_axis_value(value: float) -> str:
    if value >= CRORE:
        return f"{value / CRORE:.1f}Cr"
    if value >= LAKH:
        return f"{value / LAKH:.1f}L"
    return f"{value:,.0f}"


def format_rate(pct: Optional[float]) -> str:
    """Render a percent input the way it was typed: 15 -> '15%', 7.5 -> '7.5%'."""
    if pct is None:
        return "—"
    return f"{pct:g}%"


def format_years(years: int) -> str:
    return f"{years} year" if years == 1 else f"{years} years"
