import logging
from typing import Any, Dict, Optional, Tuple

import streamlit as st

from src.api_client.air_quality_client import AirQualityClient, AirQualityFetchError
from src.api_client.models import AirQualityReport, LocationSelection
from src.config import load_config

log = logging.getLogger(__name__)


@st.cache_resource
def load_app_config() -> Dict[str, Any]:
    return load_config()


@st.cache_resource
def get_client() -> AirQualityClient:
    return AirQualityClient.from_config(load_app_config())


def load_air_quality(
    client: AirQualityClient, selection: LocationSelection
) -> Tuple[Optional[AirQualityReport], Optional[str]]:
    """Run one lookup. Exactly one of (report, error message) is set."""
    try:
        report = client.fetch_air_quality(selection.location, address=selection.address)
    except AirQualityFetchError as e:
        log.error("Air quality lookup failed: %s", e)
        return None, str(e)
    return report, None
