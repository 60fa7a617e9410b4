import plotly.graph_objects as go
import pytest

import reporting
from investment_calc import ProjectionInput, compute_projection
from reporting import ReportError, generate_pdf_report

# unit test for the reporting file


def test_report_is_pdf():
    res = compute_projection(ProjectionInput(monthly_contribution=15000, years=15, annual_return_pct=15.0, annual_inflation_pct=9.0))
    pdf = generate_pdf_report(res)
    assert pdf.startswith(b"%PDF")


def test_long_nominal_report():
    res = compute_projection(ProjectionInput(monthly_contribution=2000, years=60, annual_return_pct=10.0), include_real=False)
    assert generate_pdf_report(res).startswith(b"%PDF")


def test_chart_export_failure_is_skipped(monkeypatch):
    def no_kaleido(self, *args, **kwargs):
        raise RuntimeError("kaleido missing")

    monkeypatch.setattr(go.Figure, "to_image", no_kaleido)
    res = compute_projection(ProjectionInput(monthly_contribution=1000, years=5, annual_return_pct=8.0, annual_inflation_pct=5.0))
    assert generate_pdf_report(res, figure=go.Figure()).startswith(b"%PDF")


def test_render_failure_raises_report_error(monkeypatch):
    def broken_canvas(*args, **kwargs):
        raise IOError("disk full")

    monkeypatch.setattr(reporting.canvas, "Canvas", broken_canvas)
    res = compute_projection(ProjectionInput(monthly_contribution=1000, years=5, annual_return_pct=8.0, annual_inflation_pct=5.0))
    with pytest.raises(ReportError):
        generate_pdf_report(res)
