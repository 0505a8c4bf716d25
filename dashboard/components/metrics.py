from typing import Optional

import pandas as pd
import streamlit as st

from dashboard.utils.config import NO_DATA_HINT, POLLUTANT_ICONS, POLLUTANT_LABELS
from dashboard.utils.view_state import LookupState, ViewState
from src.api_client.models import AirQualityReport, POLLEN_POLLUTANTS, PollutantReading, REPORTED_POLLUTANTS
from src.feature_engineering.pollutant_levels import classify_level


def format_sample_time(timestamp: Optional[str], timezone: Optional[str] = None) -> str:
    if not timestamp:
        return "N/A"
    try:
        dt = pd.to_datetime(timestamp)
    except (ValueError, TypeError):
        return timestamp
    if pd.isna(dt):
        return timestamp
    suffix = f" ({timezone})" if timezone else " (UTC)"
    return f"{dt:%b} {dt.day}, {dt:%Y %H:%M}" + suffix


def format_reading_value(value: Optional[float], unit: Optional[str] = None) -> str:
    if value is None:
        return "N/A"
    return f"{value:.2f} {unit}" if unit else f"{value:.2f}"


def display_idle():
    st.subheader("Air Quality")
    st.info("Please select a location on the map to view air quality data.")


def display_loading():
    st.subheader("Air Quality")
    st.caption("Fetching the latest readings...")
    for _ in REPORTED_POLLUTANTS:
        st.markdown('<div class="pollutant-card"><span class="muted">Loading...</span></div>', unsafe_allow_html=True)


def display_error(message: str):
    st.error(f"**Error Fetching Data**\n\n{message}")


def display_reading(reading: Optional[PollutantReading], pollutant: str, timezone: Optional[str]):
    label = POLLUTANT_LABELS.get(pollutant, pollutant)
    icon = POLLUTANT_ICONS.get(pollutant, "")
    value = reading.value if reading else None
    unit = reading.unit if reading else None
    timestamp = reading.timestamp if reading else None

    level = classify_level(pollutant, value, unit)
    badge = ""
    if level:
        badge = (
            f'<span class="level-badge" style="background-color: {level["color"]}40; '
            f'border-left: 4px solid {level["color"]};">{level["category"]}</span>'
        )

    st.markdown(
        f'<div class="pollutant-card">'
        f'<h3>{icon} {label}</h3>'
        f'<span class="pollutant-value">{format_reading_value(value, unit)}</span>{badge}'
        f'<div class="muted">Last updated: {format_sample_time(timestamp, timezone)}</div>'
        f'</div>',
        unsafe_allow_html=True
    )


def display_report(report: AirQualityReport):
    st.subheader("📍 Air Quality Report")
    st.caption(
        f"Coordinates: Lat {report.location.latitude:.2f}, Lng {report.location.longitude:.2f}"
    )
    if report.address:
        st.caption(report.address)
    if report.timezone:
        st.caption(f"Timezone: {report.timezone}")

    for pollutant in REPORTED_POLLUTANTS:
        display_reading(report.reading(pollutant), pollutant, report.timezone)

    if not report.has_data():
        st.caption(NO_DATA_HINT)

    pollen = [p for p in POLLEN_POLLUTANTS if p in report.readings]
    if pollen:
        with st.expander("Pollen"):
            for pollutant in pollen:
                reading = report.readings[pollutant]
                st.metric(
                    POLLUTANT_LABELS.get(pollutant, pollutant),
                    format_reading_value(reading.value, reading.unit),
                    help=f"Last updated: {format_sample_time(reading.timestamp, report.timezone)}",
                )


def display_lookup(lookup: LookupState):
    state = lookup.view_state()
    if state is ViewState.LOADING:
        display_loading()
    elif state is ViewState.ERROR:
        display_error(lookup.error)
    elif state is ViewState.IDLE:
        display_idle()
    else:
        display_report(lookup.report)
