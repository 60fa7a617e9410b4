from __future__ import annotations

import logging
from datetime import datetime
from io import BytesIO
from typing import List, Optional, Tuple

import plotly.graph_objects as go
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import inch
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from config import CURRENCY_SYMBOL
from formatting import format_currency, format_rate, format_years
from investment_calc import ProjectionResult

# reporting.py — PDF export of a calculated scenario

logger = logging.getLogger(__name__)


class ReportError(RuntimeError):
    """Raised when the PDF report cannot be produced."""


# The built-in Helvetica has no rupee glyph.
def _pdf_money(amount: Optional[float]) -> str:
    return format_currency(amount).replace(CURRENCY_SYMBOL, "Rs. ")


def _fig_to_imgreader(fig: go.Figure) -> Optional[ImageReader]:
    """Rasterize the scenario chart for the report; None when kaleido cannot export it."""
    try:
        png = fig.to_image(format="png", scale=2)
        return ImageReader(BytesIO(png))
    except Exception as exc:
        logger.warning("Chart image export failed, leaving it out of the report: %s", exc)
        return None


def _input_rows(result: ProjectionResult) -> List[Tuple[str, str]]:
    inp = result.inputs
    rows = [
        ("Monthly Investment", _pdf_money(inp.monthly_contribution)),
        ("Duration", format_years(inp.years)),
        ("Return Rate", format_rate(inp.annual_return_pct)),
    ]
    if result.has_real:
        rows.append(("Inflation Rate", format_rate(result.inflation_pct)))
    return rows


def _result_rows(result: ProjectionResult) -> List[Tuple[str, str]]:
    rows = [
        ("Total Investment", _pdf_money(result.invested_amount)),
        ("Total Wealth", _pdf_money(result.total_wealth)),
        ("Total Earnings", _pdf_money(result.total_earnings)),
    ]
    if result.has_real:
        rows += [
            ("Total Wealth (Real)", _pdf_money(result.total_wealth_real)),
            ("Total Earnings (Real)", _pdf_money(result.total_earnings_real)),
        ]
    return rows


def generate_pdf_report(
    result: ProjectionResult,
    title: str = "Investment Calculator Report",
    figure: Optional[go.Figure] = None,
) -> bytes:
    """Build the report (inputs, totals, optional chart, yearly table) and return PDF bytes."""
    try:
        return _render(result, title, figure)
    except Exception as exc:
        raise ReportError(f"Could not generate the PDF report: {exc}") from exc


def _render(result: ProjectionResult, title: str, figure: Optional[go.Figure]) -> bytes:
    buf = BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.setTitle(title)

    W, H = A4
    M = 0.6 * inch
    page_num = 1

    def header() -> float:
        y0 = H - M
        c.setFont("Helvetica-Bold", 20)
        c.drawCentredString(W / 2, y0 - 6, title)
        c.setFont("Helvetica", 9)
        c.drawCentredString(W / 2, y0 - 22, f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}")
        c.drawRightString(W - M, M / 2, f"Page {page_num}")
        return y0 - 48

    def new_page() -> float:
        nonlocal page_num
        c.showPage()
        page_num += 1
        return header()

    def section(name: str, rows: List[Tuple[str, str]], y_pos: float) -> float:
        c.setFont("Helvetica-Bold", 14)
        c.drawString(M, y_pos, name)
        y_pos -= 22
        c.setFont("Helvetica", 11)
        for label, value in rows:
            c.drawString(M + 6, y_pos, label)
            c.drawRightString(W - M - 6, y_pos, value)
            c.setStrokeColorRGB(0.898, 0.906, 0.922)  # #E5E7EB
            c.line(M, y_pos - 6, W - M, y_pos - 6)
            y_pos -= 22
        return y_pos - 12

    y = header()
    y = section("Input Parameters", _input_rows(result), y)
    y = section("Results", _result_rows(result), y)

    if figure is not None:
        imgR = _fig_to_imgreader(figure)
        if imgR is not None:
            iw, ih = imgR.getSize()
            max_w = W - 2 * M
            tgt_h = (max_w * ih) / iw
            max_h = H - 2 * M - 80
            if tgt_h > max_h:
                tgt_h = max_h
            if y - tgt_h < M:
                y = new_page()
            c.drawImage(imgR, M, y - tgt_h, width=max_w, height=tgt_h, preserveAspectRatio=True, mask="auto")
            y -= tgt_h + 16

    # Yearly breakdown table
    cols = ["Year", "Invested", "Wealth", "Earnings"]
    if result.has_real:
        cols += ["Wealth (Real)", "Earnings (Real)"]
    col_w = (W - 2 * M) / len(cols)

    def table_header(y_pos: float) -> float:
        c.setFont("Helvetica-Bold", 12)
        c.drawString(M, y_pos, "Yearly Breakdown")
        y_pos -= 18
        c.setFont("Helvetica-Bold", 9)
        for i, col in enumerate(cols):
            c.drawRightString(M + (i + 1) * col_w - 4, y_pos, col)
        return y_pos - 14

    if y - 60 < M:
        y = new_page()
    y = table_header(y)
    c.setFont("Helvetica", 9)
    for rec in result.yearly_data:
        if y < M + 12:
            y = table_header(new_page())
            c.setFont("Helvetica", 9)
        cells = [str(rec.year), f"{rec.investment:,}", f"{rec.wealth:,}", f"{rec.earnings:,}"]
        if result.has_real:
            cells += [f"{rec.wealth_real:,}", f"{rec.earnings_real:,}"]
        for i, cell in enumerate(cells):
            c.drawRightString(M + (i + 1) * col_w - 4, y, cell)
        y -= 13

    c.save()
    buf.seek(0)
    return buf.getvalue()
