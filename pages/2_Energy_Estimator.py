"""
Energy Estimator - Monthly generation and payback for a household.
"""

import streamlit as st
import pandas as pd
import plotly.graph_objects as go

from core.theme import get_page_config, inject_theme, section_header, COLORS

st.set_page_config(**get_page_config("Energy Estimator"))
inject_theme()

from core.analyzer import NOT_FOUND_MESSAGE
from core.estimator import HouseholdInputs, estimate
from loaders.geocoder import get_geocoder
from loaders.weather import get_weather_loader

st.title("🏠 Household Energy Estimator")
st.markdown("Estimate what a rooftop solar array or a small wind turbine could generate at your address.")

# ═══════════════════════════════════════════════════════════════════════════
# ADDRESS
# ═══════════════════════════════════════════════════════════════════════════
with st.form("address_form"):
    address = st.text_input("Address", placeholder="e.g., Rua Augusta 10, Lisbon")
    looked_up = st.form_submit_button("📍 Find climate", width="stretch")

if looked_up and address.strip():
    with st.spinner("Looking up address..."):
        location = get_geocoder().geocode(address)
    if location is None:
        st.error(NOT_FOUND_MESSAGE)
    else:
        climate = get_weather_loader().daily_climate(location.lat, location.lng)
        if climate is None:
            st.warning("Climate data unavailable for this address.")
        st.session_state.estimate_location = location
        st.session_state.estimate_climate = climate

location = st.session_state.get("estimate_location")
climate = st.session_state.get("estimate_climate")

if location is None:
    st.info("Enter an address to start.")
    st.stop()

st.caption(f"📍 {location.name}")
if climate is not None:
    c1, c2 = st.columns(2)
    c1.metric("UV index", f"{climate.uv_index:.1f}" if climate.uv_index is not None else "n/a")
    c2.metric("Wind speed", f"{climate.wind_speed_ms:.1f} m/s" if climate.wind_speed_ms is not None else "n/a")

# ═══════════════════════════════════════════════════════════════════════════
# HOUSEHOLD
# ═══════════════════════════════════════════════════════════════════════════
section_header("⚙️ Your installation", "Adjust the system size and your tariff.")
defaults = HouseholdInputs()
col1, col2, col3 = st.columns(3)
with col1:
    panel_area = st.number_input("Panel area (m²)", min_value=0.0, value=defaults.panel_area_m2, step=1.0)
    rotor_radius = st.number_input("Rotor radius (m)", min_value=0.0, value=defaults.rotor_radius_m, step=0.5)
with col2:
    consumption = st.number_input("Monthly use (kWh)", min_value=0.0,
                                  value=defaults.monthly_consumption_kwh, step=10.0)
    tariff = st.number_input("Cost per kWh", min_value=0.0, value=defaults.cost_per_kwh, step=0.05)
with col3:
    solar_cost = st.number_input("Solar install cost", min_value=0.0,
                                 value=defaults.solar_install_cost, step=1000.0)
    wind_cost = st.number_input("Wind install cost", min_value=0.0,
                                value=defaults.wind_install_cost, step=1000.0)

result = estimate(climate, HouseholdInputs(
    panel_area_m2=panel_area,
    rotor_radius_m=rotor_radius,
    monthly_consumption_kwh=consumption,
    cost_per_kwh=tariff,
    solar_install_cost=solar_cost,
    wind_install_cost=wind_cost,
))

# ═══════════════════════════════════════════════════════════════════════════
# RESULTS
# ═══════════════════════════════════════════════════════════════════════════
section_header("📊 Monthly estimate", "30-day month, figures are rough guides.")
st.metric("Current monthly bill", f"{result.monthly_bill:,.2f}")


def payback_text(months):
    if months is None:
        return "never"
    return f"{months / 12:.1f} years"


solar_col, wind_col = st.columns(2)
for col, label, tech in ((solar_col, "☀️ Solar", result.solar), (wind_col, "🌬️ Wind", result.wind)):
    with col:
        st.markdown(f"**{label}**")
        st.metric("Generation", f"{tech.monthly_kwh:,.1f} kWh")
        st.metric("Savings", f"{tech.monthly_savings:,.2f}")
        st.metric("Payback", payback_text(tech.payback_months))
        st.progress(tech.coverage_pct / 100, text=f"{tech.coverage_pct:.0f}% of your use")

fig = go.Figure(go.Bar(
    x=["Solar", "Wind"],
    y=[result.solar.monthly_kwh, result.wind.monthly_kwh],
    marker_color=[COLORS['solar'], COLORS['wind']],
))
fig.add_hline(y=consumption, line_dash="dot", annotation_text="monthly use")
fig.update_layout(height=300, margin=dict(l=10, r=10, t=20, b=10), yaxis_title="kWh / month")
st.plotly_chart(fig, width="stretch")

with st.expander("Details"):
    st.dataframe(pd.DataFrame([
        {"technology": "solar", **result.solar.to_dict()},
        {"technology": "wind", **result.wind.to_dict()},
    ]), hide_index=True, width="stretch")
