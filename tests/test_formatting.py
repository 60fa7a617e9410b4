from formatting import format_axis_value, format_currency, format_rate, format_years

# unit test for the formatting file


def test_format_currency_crore_lakh_and_plain():
    assert format_currency(12345678) == "₹1.23 Cr"
    assert format_currency(234567) == "₹2.35 Lakh"
    assert format_currency(5000) == "₹5,000"


def test_format_currency_thresholds():
    assert format_currency(10_000_000) == "₹1.00 Cr"
    assert format_currency(9_999_999) == "₹100.00 Lakh"
    assert format_currency(100_000) == "₹1.00 Lakh"
    assert format_currency(99_999) == "₹99,999"


def test_format_currency_missing_value():
    assert format_currency(None) == "—"


def test_format_axis_value():
    assert format_axis_value(25_000_000) == "2.5Cr"
    assert format_axis_value(350_000) == "3.5L"
    assert format_axis_value(50_000) == "50,000"


def test_format_rate_and_years():
    assert format_rate(15.0) == "15%"
    assert format_rate(7.5) == "7.5%"
    assert format_rate(None) == "—"
    assert format_years(1) == "1 year"
    assert format_years(15) == "15 years"


def test_format_currency_rounds_before_choosing_unit():
    assert format_currency(99_999.6) == "₹1.00 Lakh"
    assert format_currency(9_999_999.5) == "₹1.00 Cr"
    assert format_currency(99_999.4) == "₹99,999"
