from __future__ import annotations

import logging
import os
from typing import Callable, Union

# config.py — app-wide defaults, constants and logging setup

logger = logging.getLogger(__name__)

Number = Union[int, float]


# Read a numeric override from the environment; a malformed value keeps the default.
def _env_number(name: str, default: Number, cast: Callable[[str], Number]) -> Number:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        logger.warning("Ignoring %s=%r: not a valid number, using %s", name, raw, default)
        return default


# Form defaults (the classic "15 x 15 x 15" plan)
DEFAULT_MONTHLY_INVESTMENT = _env_number("SIP_CALC_MONTHLY_INVESTMENT", 15000, int)
DEFAULT_DURATION_YEARS = _env_number("SIP_CALC_DURATION_YEARS", 15, int)
DEFAULT_RETURN_RATE = _env_number("SIP_CALC_RETURN_RATE", 15.0, float)
DEFAULT_INFLATION_RATE = _env_number("SIP_CALC_INFLATION_RATE", 9.0, float)

# Input bounds
MAX_MONTHLY_CONTRIBUTION = 1_000_000_000_000
MAX_YEARS = 100

# Currency display
CURRENCY_SYMBOL = "₹"
LAKH = 100_000
CRORE = 10_000_000

# Scenario line colors, cycled by list position
PALETTE = [
    "#1e40af",
    "#15803d",
    "#047857",
    "#b91c1c",
    "#c2410c",
    "#a16207",
    "#854d0e",
    "#0f766e",
    "#0369a1",
    "#7e22ce",
]

REPORT_FILENAME = os.environ.get("SIP_CALC_REPORT_FILENAME", "investment-calculation.pdf")

LOG_LEVEL = os.environ.get("SIP_CALC_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once; Streamlit reruns leave existing handlers alone."""
    logging.basicConfig(level=getattr(logging, level or LOG_LEVEL, logging.WARNING), format=LOG_FORMAT)
