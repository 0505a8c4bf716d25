"""
Pytest configuration for BreatheEasy tests.

Registers custom markers and provides shared fixtures.
"""

import pytest

from src.api_client.models import Location

AIR_QUALITY_URL = "https://air-quality-api.open-meteo.com/v1/air-quality"


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


def make_payload(times=None, **pollutants):
    """Build an Open-Meteo style air quality response body."""
    times = list(times) if times is not None else []
    hourly = {"time": times}
    units = {"time": "iso8601"}
    for name, spec in pollutants.items():
        values, unit = spec
        hourly[name] = values
        units[name] = unit
    return {
        "latitude": 52.52,
        "longitude": 13.419998,
        "generationtime_ms": 0.5,
        "utc_offset_seconds": 0,
        "timezone": "GMT",
        "timezone_abbreviation": "GMT",
        "hourly_units": units,
        "hourly": hourly,
    }


@pytest.fixture
def berlin():
    """Fixture providing a Location in central Berlin."""
    return Location(latitude=52.5167, longitude=13.3833)


@pytest.fixture
def june_payload():
    """Three hourly slots across two days; CO missing in the first hour."""
    return make_payload(
        times=["2024-06-01T00:00", "2024-06-01T01:00", "2024-06-02T00:00"],
        carbon_monoxide=([None, 250.0, 300.0], "μg/m³"),
        carbon_dioxide=([420.0, 421.0, None], "ppm"),
        dust=([None, None, None], "μg/m³"),
        birch_pollen=([None, None, 3.0], "grains/m³"),
        grass_pollen=([1.0, 2.0, 3.0], "grains/m³"),
    )
