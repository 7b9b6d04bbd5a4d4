"""
Shared theme and styling for all pages.

Provides consistent CSS, color palette, and helper functions.
"""

from core.models import Recommendation

# Color palette - wind blues, solar ambers, leaf greens
COLORS = {
    'primary': '#15803d',      # Leaf green
    'wind': '#0ea5e9',         # Sky blue
    'solar': '#f59e0b',        # Amber
    'secondary': '#64748b',    # Slate gray
    'success': '#059669',      # Emerald
    'warning': '#d97706',      # Amber dark
    'danger': '#dc2626',       # Red
    'background': '#f0fdf4',   # Pale green
    'text': '#14532d',
    'muted': '#64748b',
}

RECOMMENDATION_BADGES = {
    Recommendation.SOLAR: ("☀️ Solar", COLORS['solar']),
    Recommendation.WIND: ("🌬️ Wind", COLORS['wind']),
    Recommendation.BOTH: ("☀️🌬️ Solar + Wind", COLORS['primary']),
}

# Shared CSS for all pages
SHARED_CSS = """
<style>
    /* Hide Streamlit chrome */
    #MainMenu, header, footer, .stDeployButton {
        visibility: hidden; 
        display: none;
    }
    
    /* Page layout */
    .block-container { 
        padding: 1.5rem 2rem; 
        max-width: 1200px;
    }
    
    /* Typography */
    h1 { 
        font-weight: 600; 
        color: #15803d;
        letter-spacing: -0.025em;
    }
    h2 { 
        font-weight: 500; 
        color: #166534;
        margin-top: 1.5rem;
    }
    h3 { 
        font-weight: 500; 
        color: #14532d;
    }
    
    /* Cards and containers */
    .stExpander {
        border: 1px solid #bbf7d0;
        border-radius: 8px;
    }
    
    /* Metrics */
    [data-testid="stMetricValue"] {
        font-weight: 600;
    }
    
    /* Tabs */
    .stTabs [data-baseweb="tab-list"] {
        gap: 8px;
    }
</style>
"""

def get_page_config(title: str):
    """Get consistent page configuration."""
    return {
        'page_title': f"{title} | Renewable Energy Explorer",
        'page_icon': "🌱",
        'layout': "wide",
    }

def inject_theme():
    """Inject shared CSS into the page."""
    import streamlit as st
    st.markdown(SHARED_CSS, unsafe_allow_html=True)

def section_header(title: str, description: str = None):
    """Render a consistent section header."""
    import streamlit as st
    st.header(title)
    if description:
        st.caption(description)

def recommendation_badge(recommendation: Recommendation) -> str:
    """HTML badge for a recommendation."""
    label, color = RECOMMENDATION_BADGES[recommendation]
    return (
        f'<span style="background:{color};color:white;padding:4px 12px;'
        f'border-radius:12px;font-weight:600">{label}</span>'
    )
