"""
Tests for the dashboard components that do not need a running Streamlit app.

Tests cover:
- Reading map clicks and ignoring repeated clicks
- Map construction around the selection
- Display formatting of values and sample times
- Hourly-window chart preparation
"""

from datetime import date

import folium
import pandas as pd
import plotly.graph_objects as go
import pytest
from conftest import make_payload

from dashboard.components.charts import plot_pollutant_series, series_frame
from dashboard.components.map_picker import build_map, forget_click, is_new_click, location_from_click
from dashboard.components.metrics import format_reading_value, format_sample_time
from src.api_client.air_quality_client import parse_air_quality_payload
from src.api_client.models import Location, LocationSelection, PollutantSeries
from src.config.map_config import MapReady

MAP = MapReady(api_key="key", map_id="streets-v2")


class TestMapClicks:

    def test_click_to_location(self):
        state = {"last_clicked": {"lat": 52.5167, "lng": 13.3833}}
        assert location_from_click(state) == Location(latitude=52.5167, longitude=13.3833)

    @pytest.mark.parametrize(
        "state",
        [None, {}, {"last_clicked": None}, {"last_clicked": {"lat": 52.5, "lng": None}}],
    )
    def test_no_click(self, state):
        assert location_from_click(state) is None

    def test_click_handled_once(self):
        session = {}
        loc = Location(latitude=1.0, longitude=2.0)

        assert is_new_click(session, "map", loc) is True
        assert is_new_click(session, "map", loc) is False
        assert is_new_click(session, "map", Location(latitude=1.5, longitude=2.0)) is True

    def test_missing_click_is_not_new(self):
        assert is_new_click({}, "map", None) is False

    def test_same_click_counts_after_search_moved_selection(self):
        session = {}
        loc = Location(latitude=1.0, longitude=2.0)
        assert is_new_click(session, "map", loc) is True

        forget_click(session, "map")

        assert is_new_click(session, "map", loc) is True
        forget_click({}, "map")


class TestBuildMap:

    def test_initial_center_without_selection(self):
        fmap = build_map(MAP)
        assert isinstance(fmap, folium.Map)
        assert fmap.location == [52.52, 13.41]

    def test_centred_on_selection_with_marker(self):
        sel = LocationSelection(location=Location(latitude=48.85, longitude=2.35), address="Paris")
        fmap = build_map(MAP, sel)
        assert fmap.location == [48.85, 2.35]
        markers = [c for c in fmap._children.values() if isinstance(c, folium.Marker)]
        assert len(markers) == 1


class TestFormatting:

    def test_value_with_unit(self):
        assert format_reading_value(250.0, "μg/m³") == "250.00 μg/m³"

    def test_value_without_unit(self):
        assert format_reading_value(0.5) == "0.50"

    def test_missing_value(self):
        assert format_reading_value(None, "ppm") == "N/A"

    def test_time_with_timezone(self):
        assert format_sample_time("2024-06-01T01:00", "Europe/Berlin") == "Jun 1, 2024 01:00 (Europe/Berlin)"

    def test_time_defaults_to_utc_label(self):
        assert format_sample_time("2024-12-25T18:00") == "Dec 25, 2024 18:00 (UTC)"

    def test_missing_time(self):
        assert format_sample_time(None) == "N/A"

    def test_unparseable_time_shown_raw(self):
        assert format_sample_time("yesterday-ish", "GMT") == "yesterday-ish"


class TestCharts:

    @pytest.fixture
    def report(self):
        payload = make_payload(
            times=["2024-06-01T00:00", "2024-06-01T01:00", "2024-06-02T00:00"],
            carbon_monoxide=([None, 250.0, 300.0], "μg/m³"),
            dust=([None, None, None], "μg/m³"),
        )
        return parse_air_quality_payload(payload, reference_date=date(2024, 6, 1))

    def test_series_frame(self):
        series = PollutantSeries(
            pollutant="dust", times=["2024-06-01T00:00", "2024-06-01T01:00"], values=[None, 3.0]
        )
        df = series_frame(series)
        assert list(df.columns) == ["timestamp", "value"]
        assert pd.api.types.is_datetime64_any_dtype(df["timestamp"])
        assert pd.isna(df["value"].iloc[0])
        assert df["value"].iloc[1] == 3.0

    def test_empty_series_frame(self):
        assert series_frame(None).empty

    def test_chart_marks_reported_sample(self, report):
        fig = plot_pollutant_series(report, "carbon_monoxide")
        assert isinstance(fig, go.Figure)
        reported = [t for t in fig.data if t.name == "Reported"]
        assert len(reported) == 1
        assert list(reported[0].y) == [250.0]

    def test_no_chart_without_values(self, report):
        assert plot_pollutant_series(report, "dust") is None

    def test_no_chart_for_missing_series(self, report):
        assert plot_pollutant_series(report, "carbon_dioxide") is None
