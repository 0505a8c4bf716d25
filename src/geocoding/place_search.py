"""
Free-text place search for the map picker.

``PlaceSearch`` is used as a context manager: the callback registered on
construction receives every successful match while the scope is open and is
dropped when the scope closes.
"""
import logging
from typing import Callable, Optional

from geopy.exc import GeocoderServiceError
from geopy.geocoders import MapTiler

from src.api_client.models import Location, LocationSelection
from src.config.map_config import MapReady

log = logging.getLogger(__name__)

USER_AGENT = "breatheeasy"


class PlaceSearchError(Exception):
    pass


def make_geocoder(map_config: MapReady, timeout: int = 10) -> MapTiler:
    return MapTiler(api_key=map_config.api_key, user_agent=USER_AGENT, timeout=timeout)


class PlaceSearch:
    def __init__(self, geocoder, on_select: Callable[[LocationSelection], None]):
        self._geocoder = geocoder
        self._on_select: Optional[Callable[[LocationSelection], None]] = on_select
        self._active = False

    def __enter__(self) -> "PlaceSearch":
        if self._on_select is None:
            raise RuntimeError("PlaceSearch cannot be reopened after it was closed")
        self._active = True
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self._active = False
        self._on_select = None
        return False

    @property
    def active(self) -> bool:
        return self._active

    def search(self, query: str) -> Optional[LocationSelection]:
        """Geocode ``query``; on a match, notify the callback and return the selection."""
        if not self._active:
            raise RuntimeError("PlaceSearch.search called outside its scope")

        query = (query or "").strip()
        if not query:
            return None

        try:
            place = self._geocoder.geocode(query, exactly_one=True)
        except GeocoderServiceError as e:
            log.warning("Place search failed for %r: %s", query, e)
            raise PlaceSearchError(f"Place search failed: {e}") from e

        if place is None:
            log.warning("No place found for %r", query)
            return None

        selection = LocationSelection(
            location=Location(latitude=place.latitude, longitude=place.longitude),
            address=getattr(place, "address", None) or None,
        )
        self._on_select(selection)
        return selection
