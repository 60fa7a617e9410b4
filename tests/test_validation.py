from validation import DEFAULT_FORM_VALUES, parse_form

# unit test for the form validation file


def form(**overrides):
    fields = dict(DEFAULT_FORM_VALUES)
    fields.update(overrides)
    return fields


def test_defaults_parse():
    result = parse_form(DEFAULT_FORM_VALUES)
    assert result.ok
    assert result.errors == {}
    assert result.inputs.monthly_contribution == 15000
    assert result.inputs.years == 15
    assert result.inputs.annual_return_pct == 15.0
    assert result.inputs.annual_inflation_pct == 9.0


def test_required_fields():
    result = parse_form(form(monthly_investment="", duration="   "))
    assert not result.ok
    assert result.errors["monthly_investment"] == "Monthly investment is required"
    assert result.errors["duration"] == "Duration is required"


def test_malformed_numbers():
    result = parse_form(form(monthly_investment="15k", duration="2.5", return_rate="-3", inflation_rate="9."))
    assert result.inputs is None
    assert set(result.errors) == {"monthly_investment", "duration", "return_rate", "inflation_rate"}
    assert all(msg == "Must be a valid number" for msg in result.errors.values())


def test_decimal_rates_and_whitespace():
    result = parse_form(form(monthly_investment=" 2500 ", return_rate="7.25", inflation_rate="0"))
    assert result.ok
    assert result.inputs.monthly_contribution == 2500
    assert result.inputs.annual_return_pct == 7.25
    assert result.inputs.annual_inflation_pct == 0.0


def test_zero_amount_and_duration_rejected():
    result = parse_form(form(monthly_investment="0", duration="0"))
    assert result.errors["monthly_investment"] == "Monthly investment must be greater than 0"
    assert result.errors["duration"] == "Duration must be at least 1"


def test_inflation_ignored_without_inflation_modeling():
    fields = form()
    del fields["inflation_rate"]
    result = parse_form(fields, with_inflation=False)
    assert result.ok
    assert result.inputs.annual_inflation_pct is None

    result = parse_form(fields)
    assert result.errors == {"inflation_rate": "Inflation rate is required"}


def test_oversized_amount_is_rejected_not_crashed():
    result = parse_form(form(monthly_investment="9" * 400))
    assert result.inputs is None
    assert result.errors == {"monthly_investment": "Must be a valid number"}


def test_amount_above_limit_is_too_large():
    result = parse_form(form(monthly_investment="1" + "0" * 13))
    assert result.errors == {"monthly_investment": "Monthly investment is too large"}


def test_duration_above_limit_is_too_large():
    result = parse_form(form(duration="1000000000"))
    assert result.inputs is None
    assert result.errors == {"duration": "Duration is too large"}


def test_duration_past_int_digit_limit():
    result = parse_form(form(duration="9" * 5000))
    assert result.errors == {"duration": "Must be a valid number"}


def test_tiny_return_rate_projects_contributions():
    from investment_calc import compute_projection

    result = parse_form(form(return_rate="0.0000000000000001", inflation_rate="0"))
    assert result.ok
    for rec in compute_projection(result.inputs).yearly_data:
        assert rec.wealth == rec.investment
        assert rec.wealth_real == rec.investment
