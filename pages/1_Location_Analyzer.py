"""
Location Analyzer - Score a place's wind and solar potential.
"""

import streamlit as st
import pandas as pd
import plotly.graph_objects as go
import pydeck as pdk

from core.theme import get_page_config, inject_theme, recommendation_badge, COLORS

st.set_page_config(**get_page_config("Location Analyzer"))
inject_theme()

from core.analyzer import LocationAnalyzer
from core.models import Location
from core.scoring import get_wind_weights, list_weight_profiles
from core.terrain import SAMPLE_LOCATIONS, search_samples, terrain_label

# One analyzer per browser session; it owns the current result
if "analyzer" not in st.session_state:
    st.session_state.analyzer = LocationAnalyzer()
analyzer: LocationAnalyzer = st.session_state.analyzer

st.title("📍 Location Energy Analyzer")
st.markdown("Search for a place, pick a sample, or enter coordinates to see its renewable potential.")

col_select, col_result = st.columns([1, 1])

# ═══════════════════════════════════════════════════════════════════════════
# SELECT LOCATION
# ═══════════════════════════════════════════════════════════════════════════
with col_select:
    st.subheader("Select location")
    use_weather = st.toggle(
        "Use current weather data",
        value=False,
        help="Score from live wind and irradiance readings instead of terrain heuristics",
    )

    with st.form("search_form"):
        query = st.text_input("Search", placeholder="e.g., Sahara Desert, Swiss Alps, Lisbon")
        searched = st.form_submit_button("🔍 Search", width="stretch")

    if searched and query and len(query.strip()) >= 3:
        with st.spinner("Looking up location..."):
            outcome = analyzer.analyze_query(query, use_weather=use_weather)
        if outcome.message:
            st.warning(outcome.message)

    suggestions = search_samples(query) if query else []
    sample_names = [s["name"] for s in (suggestions or SAMPLE_LOCATIONS)]
    picked = st.selectbox("Or pick a sample location", options=["(none)"] + sample_names)
    if picked != "(none)" and st.button("Analyze sample"):
        sample = next(s for s in SAMPLE_LOCATIONS if s["name"] == picked)
        outcome = analyzer.analyze_sample(sample, use_weather=use_weather)
        if outcome.message:
            st.warning(outcome.message)

    with st.expander("Enter coordinates"):
        c1, c2 = st.columns(2)
        lat = c1.number_input("Latitude", min_value=-90.0, max_value=90.0, value=41.9028, format="%.4f")
        lng = c2.number_input("Longitude", min_value=-180.0, max_value=180.0, value=12.4964, format="%.4f")
        if st.button("Analyze point"):
            with st.spinner("Identifying terrain..."):
                outcome = analyzer.analyze_point(lat, lng, use_weather=use_weather)
            if outcome.message:
                st.warning(outcome.message)

    result = analyzer.current
    if result:
        view = pdk.ViewState(latitude=result.location.lat, longitude=result.location.lng, zoom=6)
        marker = pdk.Layer(
            "ScatterplotLayer",
            data=pd.DataFrame([{"lat": result.location.lat, "lon": result.location.lng}]),
            get_position="[lon, lat]",
            get_radius=20000,
            get_fill_color=[21, 128, 61, 200],
        )
    else:
        view = pdk.ViewState(latitude=20, longitude=0, zoom=1)
        marker = pdk.Layer("ScatterplotLayer", data=pd.DataFrame(
            [{"lat": s["lat"], "lon": s["lng"]} for s in SAMPLE_LOCATIONS]
        ), get_position="[lon, lat]", get_radius=60000, get_fill_color=[100, 116, 139, 160])

    st.pydeck_chart(pdk.Deck(
        layers=[marker],
        initial_view_state=view,
        map_style="https://basemaps.cartocdn.com/gl/positron-gl-style/style.json",
    ), height=380)

# ═══════════════════════════════════════════════════════════════════════════
# RESULTS
# ═══════════════════════════════════════════════════════════════════════════
def render_result(result):
    location = result.location
    st.markdown(f"### {location.name}")
    st.caption(
        f"Latitude {location.lat:.2f}°, Longitude {location.lng:.2f}°, "
        f"Terrain: {terrain_label(location.terrain)} · scored from {result.source.value}"
    )

    m1, m2 = st.columns(2)
    m1.metric("☀️ Solar potential", f"{result.solar_score:.0f}%")
    m1.progress(min(1.0, result.solar_score / 100))
    m1.caption(result.solar_description)
    m2.metric("🌬️ Wind potential", f"{result.wind_score:.0f}%")
    m2.progress(min(1.0, result.wind_score / 100))
    m2.caption(result.wind_description)

    st.markdown("**Recommendation**")
    st.markdown(recommendation_badge(result.recommendation), unsafe_allow_html=True)

    if result.wind_factors:
        st.markdown("**Wind factors**")
        weights = get_wind_weights(location.terrain)
        names = ["latitude", "altitude", "coastal", "seasonal"]
        fig = go.Figure(go.Bar(
            x=names,
            y=[getattr(result.wind_factors, n) for n in names],
            text=[f"weight {getattr(weights, n):.1f}" for n in names],
            marker_color=COLORS['wind'],
        ))
        fig.update_layout(height=260, margin=dict(l=10, r=10, t=10, b=10), yaxis_range=[0, 100])
        st.plotly_chart(fig, width="stretch")

    with st.expander("Explain this score"):
        st.code(analyzer.engine.explain(result), language=None)


with col_result:
    st.subheader("🧭 Energy potential")
    if analyzer.current:
        render_result(analyzer.current)
    else:
        st.info("Select a location to see its wind and solar potential.")

# ═══════════════════════════════════════════════════════════════════════════
# COMPARE SAMPLES
# ═══════════════════════════════════════════════════════════════════════════
st.markdown("---")
st.subheader("📊 Sample locations compared")

ranked = analyzer.compare([
    Location.create(s["lat"], s["lng"], name=s["name"], terrain=s["terrain"])
    for s in SAMPLE_LOCATIONS
])
st.dataframe(pd.DataFrame([
    {
        "Location": r.location.name,
        "Terrain": terrain_label(r.location.terrain),
        "Solar": round(r.solar_score),
        "Wind": r.wind_score,
        "Recommendation": r.recommendation.value,
    }
    for r in ranked
]), hide_index=True, width="stretch")

with st.expander("Wind factor weights by terrain"):
    st.caption("How much each situational factor counts towards the 30% factor share of the wind score.")
    st.dataframe(pd.DataFrame(list_weight_profiles()), hide_index=True, width="stretch")
