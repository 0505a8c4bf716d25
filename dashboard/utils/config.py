"""
Dashboard configuration and styling
"""
import streamlit as st

PAGE_CONFIG = {
    "page_title": "BreatheEasy",
    "page_icon": "🌬️",
    "layout": "wide",
    "initial_sidebar_state": "collapsed"
}

CUSTOM_CSS = """
<style>
    .main-header {
        font-size: 2.5rem;
        font-weight: bold;
        margin-bottom: 1rem;
    }
    .pollutant-card {
        padding: 1rem 1.25rem;
        border-radius: 10px;
        box-shadow: 0 4px 6px rgba(0,0,0,0.1);
        margin: 0.75rem 0;
    }
    .pollutant-card h3 {
        margin: 0 0 0.25rem 0;
    }
    .pollutant-value {
        font-size: 1.6rem;
        font-weight: 600;
    }
    .level-badge {
        padding: 0.1rem 0.5rem;
        border-radius: 5px;
        margin-left: 0.5rem;
        font-weight: bold;
    }
    .muted {
        color: #6b7280;
        font-size: 0.85rem;
    }
</style>
"""

POLLUTANT_LABELS = {
    "carbon_monoxide": "Carbon Monoxide (CO)",
    "carbon_dioxide": "Carbon Dioxide (CO₂)",
    "dust": "Dust",
    "birch_pollen": "Birch Pollen",
    "grass_pollen": "Grass Pollen",
}

POLLUTANT_ICONS = {
    "carbon_monoxide": "💨",
    "carbon_dioxide": "☁️",
    "dust": "⛰️",
    "birch_pollen": "🌳",
    "grass_pollen": "🌾",
}

NO_DATA_HINT = (
    "Detailed air quality data might not be available for this specific point or time. "
    "Try a nearby major area."
)

FOOTER = "Air quality data provided by Open-Meteo.com."


def apply_page_config():
    """Apply Streamlit page configuration"""
    st.set_page_config(**PAGE_CONFIG)


def apply_custom_css():
    """Apply custom CSS styling"""
    st.markdown(CUSTOM_CSS, unsafe_allow_html=True)
