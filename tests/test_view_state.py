"""
Tests for dashboard lookup bookkeeping.

Tests cover:
- Each view state and their precedence
- Stale results being ignored
"""

from datetime import date

from dashboard.utils.view_state import LookupState, ViewState, get_lookup_state
from src.api_client.models import AirQualityReport, Location, LocationSelection


def selection(lat, lon, address=None):
    return LocationSelection(location=Location(latitude=lat, longitude=lon), address=address)


def report_for(sel):
    return AirQualityReport(location=sel.location, reference_date=date(2024, 6, 1))


class TestLookupState:

    def test_idle_before_any_selection(self):
        assert LookupState().view_state() is ViewState.IDLE

    def test_loading_after_request(self):
        lookup = LookupState()
        lookup.request(selection(52.52, 13.41))
        assert lookup.view_state() is ViewState.LOADING

    def test_report_after_resolve(self):
        lookup = LookupState()
        sel = selection(52.52, 13.41)
        lookup.request(sel)

        assert lookup.resolve(sel, report=report_for(sel)) is True
        assert lookup.view_state() is ViewState.REPORT
        assert lookup.error is None

    def test_error_after_resolve(self):
        lookup = LookupState()
        sel = selection(52.52, 13.41)
        lookup.request(sel)

        lookup.resolve(sel, error="API request failed with status 500")

        assert lookup.view_state() is ViewState.ERROR
        assert lookup.report is None

    def test_error_wins_over_report(self):
        lookup = LookupState()
        sel = selection(52.52, 13.41)
        lookup.request(sel)
        lookup.resolve(sel, report=report_for(sel), error="boom")
        assert lookup.view_state() is ViewState.ERROR
        assert lookup.report is None

    def test_new_request_clears_previous_result(self):
        lookup = LookupState()
        first = selection(52.52, 13.41)
        lookup.request(first)
        lookup.resolve(first, error="boom")

        lookup.request(selection(48.85, 2.35))

        assert lookup.error is None
        assert lookup.view_state() is ViewState.LOADING

    # ==================== Staleness ====================

    def test_stale_result_ignored(self):
        lookup = LookupState()
        first = selection(52.52, 13.41)
        second = selection(48.85, 2.35)
        lookup.request(first)
        lookup.request(second)

        assert lookup.resolve(first, report=report_for(first)) is False
        assert lookup.report is None
        assert lookup.view_state() is ViewState.LOADING

        assert lookup.resolve(second, report=report_for(second)) is True
        assert lookup.report.location == second.location

    def test_same_point_different_address_is_a_different_request(self):
        lookup = LookupState()
        lookup.request(selection(52.52, 13.41, "Berlin"))
        assert lookup.resolve(selection(52.52, 13.41), error="x") is False


class TestGetLookupState:

    def test_created_once_per_session(self):
        session = {}
        first = get_lookup_state(session)
        assert get_lookup_state(session) is first
