"""
Renewable Energy Explorer - Main Application

Interactive dashboard showing how wind and sun conditions affect the
output of a small wind farm and solar array.
"""

import streamlit as st
import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from core.theme import get_page_config, inject_theme, COLORS

# ═══════════════════════════════════════════════════════════════════════════
# PAGE CONFIG
# ═══════════════════════════════════════════════════════════════════════════
st.set_page_config(**get_page_config("Dashboard"), initial_sidebar_state="expanded")
inject_theme()

# ═══════════════════════════════════════════════════════════════════════════
# IMPORTS
# ═══════════════════════════════════════════════════════════════════════════
from core.config import get_settings, configure_logging
from core.simulator import WeatherConditions, SLIDER_RANGES, simulate, update, output_curve

settings = get_settings()
configure_logging(settings)

# Conditions are replaced on every change, never edited in place
if "conditions" not in st.session_state:
    st.session_state.conditions = WeatherConditions()

# ═══════════════════════════════════════════════════════════════════════════
# SIDEBAR
# ═══════════════════════════════════════════════════════════════════════════
st.sidebar.title("🌱 Renewable Energy Explorer")
st.sidebar.markdown("---")
if settings.weather_mocked:
    st.sidebar.info("🌤️ Weather: sample data (no API key)")
else:
    st.sidebar.success("🌤️ Weather: live OpenWeatherMap")

if st.sidebar.button("↺ Reset conditions"):
    st.session_state.conditions = WeatherConditions()
    st.rerun()

# ═══════════════════════════════════════════════════════════════════════════
# MAIN PAGE
# ═══════════════════════════════════════════════════════════════════════════
st.title("🌱 Renewable Energy Dashboard")
st.markdown("Explore how environmental conditions affect wind and solar generation.")

with st.expander("ℹ️ About wind and solar energy", expanded=False):
    col1, col2 = st.columns(2)
    with col1:
        st.markdown("**🌬️ Wind energy** harnesses the kinetic energy of moving air "
                    "with turbines. Output rises with wind speed up to the turbine's "
                    "rated capacity, and modern turbines run at 30-45% efficiency.")
    with col2:
        st.markdown("**☀️ Solar energy** converts sunlight directly into electricity "
                    "with photovoltaic panels. Sun angle and cloud cover drive "
                    "how much of the available light is captured.")
    st.caption("Did you know? Wind often blows harder at night when solar is idle, "
               "so combining both gives a steadier supply.")

# ═══════════════════════════════════════════════════════════════════════════
# CONTROLS
# ═══════════════════════════════════════════════════════════════════════════
st.subheader("🎛️ Environmental conditions")
current = st.session_state.conditions

SLIDER_LABELS = {
    "wind_speed_kmh": "🌬️ Wind speed (km/h)",
    "wind_direction_deg": "🧭 Wind direction (°)",
    "sun_intensity_pct": "☀️ Sun intensity (%)",
    "sun_angle_deg": "📐 Sun angle (°)",
    "cloud_cover_pct": "☁️ Cloud cover (%)",
}

cols = st.columns(3)
changes = {}
for i, (name, label) in enumerate(SLIDER_LABELS.items()):
    low, high, step = SLIDER_RANGES[name]
    with cols[i % 3]:
        changes[name] = st.slider(
            label, min_value=low, max_value=high, step=step,
            value=int(getattr(current, name)), key=f"slider_{name}",
        )

conditions = update(current, **changes)
st.session_state.conditions = conditions
result = simulate(conditions)

# ═══════════════════════════════════════════════════════════════════════════
# OUTPUT
# ═══════════════════════════════════════════════════════════════════════════
def gauge(value: int, title: str, color: str) -> go.Figure:
    fig = go.Figure(go.Indicator(
        mode="gauge+number",
        value=value,
        number={"suffix": "%"},
        title={"text": title},
        gauge={"axis": {"range": [0, 100]}, "bar": {"color": color}},
    ))
    fig.update_layout(height=220, margin=dict(l=20, r=20, t=50, b=10))
    return fig


tab_both, tab_wind, tab_solar = st.tabs(["⚡ Both", "🌬️ Wind energy", "☀️ Solar energy"])

with tab_both:
    m1, m2, m3, m4 = st.columns(4)
    m1.metric("Wind output", f"{result.wind_output}%")
    m2.metric("Wind efficiency", f"{result.wind_efficiency}%")
    m3.metric("Solar output", f"{result.solar_output}%")
    m4.metric("Solar efficiency", f"{result.solar_efficiency}%")

    col1, col2 = st.columns(2)
    col1.plotly_chart(gauge(result.wind_output, "Wind output", COLORS['wind']), width="stretch")
    col2.plotly_chart(gauge(result.solar_output, "Solar output", COLORS['solar']), width="stretch")

with tab_wind:
    st.write(f"Wind blowing from **{result.wind_heading}** "
             f"({conditions.wind_direction_deg:.0f}°) at **{conditions.wind_speed_kmh:.0f} km/h**")
    df = pd.DataFrame(output_curve(conditions, "wind_speed_kmh"))
    fig = px.line(df, x="wind_speed_kmh", y=["wind_output", "wind_efficiency"],
                  labels={"wind_speed_kmh": "Wind speed (km/h)", "value": "%"},
                  color_discrete_sequence=[COLORS['wind'], COLORS['secondary']])
    fig.add_vline(x=conditions.wind_speed_kmh, line_dash="dot")
    st.plotly_chart(fig, width="stretch")

with tab_solar:
    df = pd.DataFrame(output_curve(conditions, "sun_angle_deg", points=19))
    fig = px.line(df, x="sun_angle_deg", y=["solar_output", "solar_efficiency"],
                  labels={"sun_angle_deg": "Sun angle (°)", "value": "%"},
                  color_discrete_sequence=[COLORS['solar'], COLORS['secondary']])
    fig.add_vline(x=conditions.sun_angle_deg, line_dash="dot")
    st.plotly_chart(fig, width="stretch")

    df = pd.DataFrame(output_curve(conditions, "cloud_cover_pct"))
    fig = px.area(df, x="cloud_cover_pct", y="solar_output",
                  labels={"cloud_cover_pct": "Cloud cover (%)", "solar_output": "Solar output (%)"},
                  color_discrete_sequence=[COLORS['solar']])
    st.plotly_chart(fig, width="stretch")
