# app.py — Streamlit SIP Investment Calculator (scenarios, comparison chart, yearly table, PDF export)
# Run: streamlit run app.py

from __future__ import annotations

import logging
from typing import Dict

import streamlit as st

from charts import growth_breakdown_chart, wealth_comparison_chart
from config import REPORT_FILENAME, configure_logging
from formatting import format_currency, format_rate, format_years
from investment_calc import ProjectionError, projection_frame
from reporting import ReportError, generate_pdf_report
from scenarios import Scenario, ScenarioList, color_for, comparison_frame
from validation import DEFAULT_FORM_VALUES, FIELDS, parse_form

configure_logging()
logger = logging.getLogger(__name__)

st.set_page_config(page_title="SIP Investment Calculator", page_icon="🧮", layout="centered")


# Session state
if "scenarios" not in st.session_state:
    st.session_state["scenarios"] = ScenarioList()
    st.session_state["form_errors"] = {}
    for _name, _value in DEFAULT_FORM_VALUES.items():
        st.session_state[f"field_{_name}"] = _value

scenarios: ScenarioList = st.session_state["scenarios"]


def _reset() -> None:
    for name, value in DEFAULT_FORM_VALUES.items():
        st.session_state[f"field_{name}"] = value
    st.session_state["form_errors"] = {}
    st.session_state.pop("pdf_bytes", None)
    scenarios.reset()


def _remove(scenario_id: str) -> None:
    scenarios.remove(scenario_id)
    st.session_state.pop("pdf_bytes", None)


def _field(name: str, label: str, placeholder: str, disabled: bool = False) -> str:
    value = st.text_input(label, key=f"field_{name}", placeholder=placeholder, disabled=disabled)
    err = st.session_state["form_errors"].get(name)
    if err:
        st.error(err)
    return value


def render_scenario_card(scenario: Scenario, index: int) -> None:
    res = scenario.result
    inp = scenario.inputs
    with st.container(border=True):
        head, btn = st.columns([6, 1])
        with head:
            st.markdown(
                f"<h4 style='color:{color_for(index)};margin:0'>{scenario.name}</h4>",
                unsafe_allow_html=True,
            )
        with btn:
            st.button("🗑️", key=f"del_{scenario.id}", help=f"Remove {scenario.name}",
                      on_click=_remove, args=(scenario.id,))

        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Monthly Investment", format_currency(inp.monthly_contribution))
        c2.metric("Duration", format_years(inp.years))
        c3.metric("Return Rate", format_rate(inp.annual_return_pct))
        c4.metric("Inflation Rate", format_rate(res.inflation_pct))

        k1, k2, k3, k4 = st.columns(4)
        k1.metric("Invested", format_currency(res.invested_amount))
        k2.metric("Total Wealth", format_currency(res.total_wealth))
        k3.metric("Total Wealth (Real)", format_currency(res.total_wealth_real))
        k4.metric("Total Earnings (Real)", format_currency(res.total_earnings_real))


# UI section
st.title("🧮 15 x 15 x 15 Investment Calculator")
st.markdown(
    "Enter a monthly investment, a duration and an expected return. Each submission adds a scenario "
    "so you can compare plans side by side. Nothing is saved between sessions."
)

with_inflation = st.toggle("Adjust for inflation", value=True)

with st.form("calculator"):
    _field("monthly_investment", "Monthly Investment (₹)", DEFAULT_FORM_VALUES["monthly_investment"])
    _field("duration", "Investment Duration (Years)", DEFAULT_FORM_VALUES["duration"])
    _field("return_rate", "Expected Return Rate (%)", DEFAULT_FORM_VALUES["return_rate"])
    _field("inflation_rate", "Expected Inflation Rate (%)", DEFAULT_FORM_VALUES["inflation_rate"],
           disabled=not with_inflation)

    b1, b2 = st.columns([3, 1])
    submitted = b1.form_submit_button("➕ Add Scenario", use_container_width=True)
    b2.form_submit_button("🔄 Reset", use_container_width=True, on_click=_reset)

if st.session_state["form_errors"].get("form"):
    st.error(st.session_state["form_errors"]["form"])

if submitted:
    raw: Dict[str, str] = {name: st.session_state.get(f"field_{name}", "") for name in FIELDS}
    form = parse_form(raw, with_inflation=with_inflation)
    st.session_state["form_errors"] = form.errors
    if form.ok:
        try:
            scenarios.add(form.inputs, include_real=with_inflation)
            st.session_state.pop("pdf_bytes", None)
        except ProjectionError as e:
            logger.warning("Projection rejected: %s", e)
            st.session_state["form_errors"] = {"form": str(e)}
    st.rerun()

if len(scenarios) == 0:
    st.info("Add a scenario to see the projection.")
    st.stop()

st.divider()
st.subheader("Scenarios Comparison")

for idx, scenario in enumerate(scenarios):
    render_scenario_card(scenario, idx)

fig_compare = wealth_comparison_chart(scenarios)
st.plotly_chart(fig_compare, use_container_width=True)

with st.expander("Comparison table"):
    st.dataframe(comparison_frame(scenarios), use_container_width=True, hide_index=True)

# Yearly breakdown of the most recent scenario
latest = scenarios.latest()
st.subheader(f"Yearly Breakdown — {latest.name}")
fig_latest = growth_breakdown_chart(latest.result, title=f"{latest.name} — Projected Wealth")
st.plotly_chart(fig_latest, use_container_width=True)

df_latest = projection_frame(latest.result)
st.dataframe(df_latest, use_container_width=True, hide_index=True)
st.download_button(
    "Download yearly table (CSV)",
    data=df_latest.to_csv(index=False).encode("utf-8"),
    file_name=f"{latest.name.lower().replace(' ', '-')}-yearly.csv",
    mime="text/csv",
    use_container_width=True,
)
st.download_button(
    "Download projection (JSON)",
    data=latest.result.model_dump_json(indent=2),
    file_name=f"{latest.name.lower().replace(' ', '-')}-projection.json",
    mime="application/json",
    use_container_width=True,
)

# PDF report button
st.divider()
include_chart = st.checkbox("Include chart in PDF (requires kaleido)", value=False)
if st.button("📄 Generate PDF Report", use_container_width=True):
    with st.spinner("Generating PDF..."):
        try:
            st.session_state["pdf_bytes"] = generate_pdf_report(
                latest.result,
                figure=fig_latest if include_chart else None,
            )
        except ReportError as e:
            st.session_state.pop("pdf_bytes", None)
            st.error("Could not generate the PDF report.")
            st.exception(e)

if "pdf_bytes" in st.session_state:
    st.download_button(
        "⬇️ Export PDF",
        data=st.session_state["pdf_bytes"],
        file_name=REPORT_FILENAME,
        mime="application/pdf",
        use_container_width=True,
    )

st.divider()
with st.expander("Notes & Tips"):
    st.markdown(
        "- Contributions are made at the **start** of each month and compound monthly.\n"
        "- **Real** values deflate the return by inflation: (1 + return) / (1 + inflation) − 1.\n"
        "- Amounts above ₹1 Lakh (1,00,000) and ₹1 Crore (1,00,00,000) are shown with those suffixes.\n"
        "- PDF export uses `reportlab`; the optional chart image uses `kaleido`."
    )
