import sys
import logging
from pathlib import Path

project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import streamlit as st

from dashboard.utils.config import FOOTER, apply_page_config, apply_custom_css
from dashboard.utils.data_loader import get_client, load_air_quality, load_app_config
from dashboard.utils.view_state import get_lookup_state
from dashboard.components.map_picker import render_map_picker
from dashboard.components.metrics import display_lookup
from dashboard.components.charts import plot_pollutant_series
from src.api_client.models import REPORTED_POLLUTANTS, LocationSelection
from src.config import MapMissing, load_map_config

log = logging.getLogger("breatheeasy")


def main():
    apply_page_config()
    apply_custom_css()

    cfg = load_app_config()
    logging.basicConfig(
        level=str((cfg.get("logging") or {}).get("level", "INFO")).upper(),
        format="%(asctime)s - %(levelname)s - %(message)s"
    )

    st.markdown('<h1 class="main-header">🌬️ BreatheEasy</h1>', unsafe_allow_html=True)

    lookup = get_lookup_state(st.session_state)
    map_config = load_map_config(cfg)

    selected_now = []

    def on_select(selection: LocationSelection):
        log.info("Location selected: %s", selection.location)
        lookup.request(selection)
        selected_now.append(selection)

    col_map, col_data = st.columns([3, 2], gap="large")

    with col_map:
        if isinstance(map_config, MapMissing):
            st.error("**Map Configuration Error**")
            st.write(map_config.message)
            st.caption(
                "If the issue persists after confirming `.env`, check the MapTiler account "
                "for an invalid key or map id."
            )
        else:
            render_map_picker(map_config, lookup.selection, on_select)

    if selected_now:
        # redraw so the marker moves before the fetch starts
        st.rerun()

    if lookup.pending and lookup.selection is not None:
        selection = lookup.selection
        with col_data:
            with st.spinner("Fetching air quality data..."):
                report, error = load_air_quality(get_client(), selection)
        lookup.resolve(selection, report=report, error=error)

    with col_data:
        display_lookup(lookup)

    if lookup.report is not None and lookup.report.series:
        with st.expander("Hourly window", expanded=False):
            tabs = st.tabs([p.replace("_", " ").title() for p in REPORTED_POLLUTANTS])
            for tab, pollutant in zip(tabs, REPORTED_POLLUTANTS):
                with tab:
                    fig = plot_pollutant_series(lookup.report, pollutant)
                    if fig is None:
                        st.info("No hourly readings for this pollutant.")
                    else:
                        st.plotly_chart(fig, use_container_width=True)

    st.markdown("---")
    st.caption(FOOTER)


if __name__ == "__main__":
    main()
