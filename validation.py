from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Dict, Mapping, Optional, Tuple

from pydantic import ValidationError

from config import (
    DEFAULT_DURATION_YEARS,
    DEFAULT_INFLATION_RATE,
    DEFAULT_MONTHLY_INVESTMENT,
    DEFAULT_RETURN_RATE,
)
from investment_calc import ProjectionInput

# validation.py — turn the four calculator text fields into a ProjectionInput

INTEGER_RE = re.compile(r"^\d+$")
DECIMAL_RE = re.compile(r"^\d+(\.\d+)?$")

# form field -> (ProjectionInput field, label, pattern, parser)
FIELDS: Dict[str, Tuple[str, str, "re.Pattern[str]", Callable[[str], float]]] = {
    "monthly_investment": ("monthly_contribution", "Monthly investment", INTEGER_RE, float),
    "duration": ("years", "Duration", INTEGER_RE, int),
    "return_rate": ("annual_return_pct", "Return rate", DECIMAL_RE, float),
    "inflation_rate": ("annual_inflation_pct", "Inflation rate", DECIMAL_RE, float),
}

MODEL_TO_FORM = {model_name: form_name for form_name, (model_name, *_rest) in FIELDS.items()}

DEFAULT_FORM_VALUES: Dict[str, str] = {
    "monthly_investment": str(DEFAULT_MONTHLY_INVESTMENT),
    "duration": str(DEFAULT_DURATION_YEARS),
    "return_rate": f"{DEFAULT_RETURN_RATE:g}",
    "inflation_rate": f"{DEFAULT_INFLATION_RATE:g}",
}


@dataclass
class FormResult:
    inputs: Optional[ProjectionInput] = None
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.inputs is not None


# Check one raw field's format; return (value, error message).
def parse_field(name: str, raw: Optional[str]) -> Tuple[Optional[float], Optional[str]]:
    _, label, pattern, parser = FIELDS[name]
    text = (raw or "").strip()
    if not text:
        return None, f"{label} is required"
    if not pattern.match(text):
        return None, "Must be a valid number"
    try:
        return parser(text), None
    except ValueError:
        # int() refuses digit strings past the interpreter's length limit
        return None, "Must be a valid number"


# Turn one pydantic error into the message shown under the field.
def describe_error(label: str, err: Dict) -> str:
    ctx = err.get("ctx") or {}
    kind = err.get("type")
    if kind == "greater_than":
        return f"{label} must be greater than {ctx['gt']:g}"
    if kind == "greater_than_equal":
        return f"{label} must be at least {ctx['ge']:g}"
    if kind in ("less_than_equal", "less_than"):
        return f"{label} is too large"
    if kind in ("finite_number", "float_parsing", "int_parsing"):
        return "Must be a valid number"
    return f"{label}: {err.get('msg', 'invalid value')}"


def parse_form(fields: Mapping[str, Optional[str]], with_inflation: bool = True) -> FormResult:
    """Validate the calculator form. Every failing field gets its own message.

    Format checks run on the raw text first; ProjectionInput's constraints
    then decide ranges. With with_inflation=False the inflation field is
    ignored and the resulting input carries no inflation rate.
    """
    values: Dict[str, float] = {}
    errors: Dict[str, str] = {}
    for name, (model_name, *_rest) in FIELDS.items():
        if name == "inflation_rate" and not with_inflation:
            continue
        value, err = parse_field(name, fields.get(name))
        if err is not None:
            errors[name] = err
        else:
            values[model_name] = value

    if errors:
        return FormResult(errors=errors)

    try:
        inputs = ProjectionInput.model_validate(values)
    except ValidationError as exc:
        for err in exc.errors():
            loc = err.get("loc") or ()
            form_name = MODEL_TO_FORM.get(loc[0]) if loc else None
            if form_name is None:
                errors.setdefault("form", err.get("msg", "Invalid input"))
            else:
                errors.setdefault(form_name, describe_error(FIELDS[form_name][1], err))
        return FormResult(errors=errors)

    return FormResult(inputs=inputs)
