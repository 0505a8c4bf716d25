import logging
from typing import Any, Callable, Dict, Optional

import folium
import streamlit as st
from streamlit_folium import st_folium

from src.api_client.models import Location, LocationSelection
from src.config.map_config import MapReady
from src.geocoding.place_search import PlaceSearch, PlaceSearchError, make_geocoder

log = logging.getLogger(__name__)


def location_from_click(map_state: Optional[Dict[str, Any]]) -> Optional[Location]:
    """Read the clicked point out of the dict st_folium returns."""
    if not map_state:
        return None
    clicked = map_state.get("last_clicked")
    if not clicked or clicked.get("lat") is None or clicked.get("lng") is None:
        return None
    return Location(latitude=float(clicked["lat"]), longitude=float(clicked["lng"]))


def is_new_click(session_state, key: str, location: Optional[Location]) -> bool:
    """st_folium keeps reporting the last click on every rerun; only act on it once."""
    if location is None:
        return False
    seen_key = f"{key}_seen_click"
    if session_state.get(seen_key) == location:
        return False
    session_state[seen_key] = location
    return True


def forget_click(session_state, key: str) -> None:
    """Let the next click count even if it hits the last clicked point."""
    session_state.pop(f"{key}_seen_click", None)


def build_map(map_config: MapReady, selected: Optional[LocationSelection] = None) -> folium.Map:
    if selected is not None:
        center = [selected.location.latitude, selected.location.longitude]
        zoom = map_config.zoom_selected
    else:
        center = list(map_config.initial_center)
        zoom = map_config.zoom_default

    fmap = folium.Map(
        location=center,
        zoom_start=zoom,
        tiles=map_config.tile_url,
        attr=map_config.attribution,
    )
    if selected is not None:
        folium.Marker(
            [selected.location.latitude, selected.location.longitude],
            tooltip="Selected Location",
            popup=selected.address or None,
        ).add_to(fmap)
    return fmap


def render_map_picker(
    map_config: MapReady,
    selected: Optional[LocationSelection],
    on_select: Callable[[LocationSelection], None],
    key: str = "map_picker",
) -> None:
    with st.form(f"{key}_search", clear_on_submit=False):
        col1, col2 = st.columns([4, 1])
        with col1:
            query = st.text_input(
                "Search for a place",
                key=f"{key}_query",
                label_visibility="collapsed",
                placeholder="Search for a place",
            )
        with col2:
            submitted = st.form_submit_button("Search", use_container_width=True)

    if submitted and query.strip():
        with PlaceSearch(make_geocoder(map_config), on_select) as search:
            try:
                if search.search(query) is None:
                    st.warning(f"No place found for “{query.strip()}”.")
                else:
                    forget_click(st.session_state, key)
            except PlaceSearchError as e:
                st.warning(str(e))

    map_state = st_folium(
        build_map(map_config, selected),
        key=key,
        height=520,
        use_container_width=True,
        returned_objects=["last_clicked"],
    )
    clicked = location_from_click(map_state)
    if is_new_click(st.session_state, key, clicked):
        log.info("Map click at %.4f,%.4f", clicked.latitude, clicked.longitude)
        on_select(LocationSelection(location=clicked))
