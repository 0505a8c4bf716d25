"""
Map credentials as an explicit value.

The dashboard never reads map credentials from the environment itself; it
receives either a ``MapReady`` carrying the tile/geocoding key and the map
style id, or a ``MapMissing`` listing why the map cannot be shown.
"""
import logging
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

log = logging.getLogger(__name__)

TILE_URL_TEMPLATE = "https://api.maptiler.com/maps/{map_id}/256/{{z}}/{{x}}/{{y}}.png?key={api_key}"
TILE_ATTRIBUTION = (
    '&copy; <a href="https://www.maptiler.com/copyright/">MapTiler</a> '
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap contributors</a>'
)

DEFAULT_CENTER = (52.52, 13.41)


class MapReady(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_key: str
    map_id: str
    initial_center: Tuple[float, float] = DEFAULT_CENTER
    zoom_default: int = 3
    zoom_selected: int = 6

    @property
    def tile_url(self) -> str:
        return TILE_URL_TEMPLATE.format(map_id=self.map_id, api_key=self.api_key)

    @property
    def attribution(self) -> str:
        return TILE_ATTRIBUTION


class MapMissing(BaseModel):
    model_config = ConfigDict(frozen=True)

    reasons: Tuple[str, ...]

    @property
    def message(self) -> str:
        return " ".join(self.reasons) + (
            " Please ensure it is set in your .env file and restart the application."
        )


MapConfig = Union[MapReady, MapMissing]


def _credential(value: Any) -> Optional[str]:
    """Normalise a config value; unresolved ${VAR} placeholders count as unset."""
    if value is None:
        return None
    text = str(value).strip()
    if not text or "${" in text:
        return None
    return text


def _coordinate(value: Any, default: float, name: str) -> float:
    if value is None:
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        log.warning("Map centre %s %r is not a number; using %s", name, value, default)
        return default


def load_map_config(cfg: Dict[str, Any]) -> MapConfig:
    """Build the map configuration from the ``map`` section of the app config."""
    section = (cfg or {}).get("map") or {}
    api_key = _credential(section.get("api_key"))
    map_id = _credential(section.get("map_id"))

    reasons: List[str] = []
    if api_key is None:
        log.warning("Map API key (MAPTILER_API_KEY) is not set")
        reasons.append("Map API key (MAPTILER_API_KEY) is missing.")
    if map_id is None:
        log.warning("Map style id (MAPTILER_MAP_ID) is not set")
        reasons.append("Map style id (MAPTILER_MAP_ID) is missing.")
    if reasons:
        return MapMissing(reasons=tuple(reasons))

    center = section.get("initial_center") or {}
    return MapReady(
        api_key=api_key,
        map_id=map_id,
        initial_center=(
            _coordinate(center.get("latitude"), DEFAULT_CENTER[0], "latitude"),
            _coordinate(center.get("longitude"), DEFAULT_CENTER[1], "longitude"),
        ),
        zoom_default=int(section.get("zoom_default", 3)),
        zoom_selected=int(section.get("zoom_selected", 6)),
    )
