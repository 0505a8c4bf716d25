"""
Lookup bookkeeping for the dashboard.

Streamlit reruns the whole script on every interaction, so the selection,
its result, and whether a fetch is still owed live in one ``LookupState``
kept in ``st.session_state``. Results are only accepted for the most recent
selection; anything older is dropped.
"""
from enum import Enum
from typing import Optional

from src.api_client.models import AirQualityReport, LocationSelection


class ViewState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"
    REPORT = "report"


class LookupState:
    def __init__(self):
        self.selection: Optional[LocationSelection] = None
        self.report: Optional[AirQualityReport] = None
        self.error: Optional[str] = None
        self.pending = False

    def request(self, selection: LocationSelection) -> None:
        self.selection = selection
        self.report = None
        self.error = None
        self.pending = True

    def resolve(
        self,
        selection: LocationSelection,
        report: Optional[AirQualityReport] = None,
        error: Optional[str] = None,
    ) -> bool:
        """Store a finished lookup. Returns False if it is stale and was ignored."""
        if selection != self.selection:
            return False
        self.report = report if error is None else None
        self.error = error
        self.pending = False
        return True

    def view_state(self) -> ViewState:
        if self.pending:
            return ViewState.LOADING
        if self.error is not None:
            return ViewState.ERROR
        if self.selection is None:
            return ViewState.IDLE
        if self.report is None:
            # selected but nothing fetched yet
            return ViewState.LOADING
        return ViewState.REPORT


def get_lookup_state(session_state, key: str = "lookup") -> LookupState:
    if key not in session_state:
        session_state[key] = LookupState()
    return session_state[key]
