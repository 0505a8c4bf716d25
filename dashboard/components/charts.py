from typing import Optional

import pandas as pd
import plotly.graph_objects as go

from dashboard.utils.config import POLLUTANT_LABELS
from src.api_client.models import AirQualityReport, PollutantSeries
from src.feature_engineering.pollutant_levels import LEVEL_COLORS, thresholds_for


def series_frame(series: Optional[PollutantSeries]) -> pd.DataFrame:
    if series is None or len(series) == 0:
        return pd.DataFrame(columns=["timestamp", "value"])
    df = pd.DataFrame({"timestamp": list(series.times), "value": list(series.values)})
    df["timestamp"] = pd.to_datetime(df["timestamp"])
    df["value"] = pd.to_numeric(df["value"], errors="coerce")
    return df


def plot_pollutant_series(report: AirQualityReport, pollutant: str) -> Optional[go.Figure]:
    series = report.series.get(pollutant)
    df = series_frame(series)
    if df.empty or df["value"].notna().sum() == 0:
        return None

    label = POLLUTANT_LABELS.get(pollutant, pollutant)
    unit = series.unit or ""

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=df["timestamp"],
        y=df["value"],
        mode="lines",
        name=label,
        line=dict(color="#1f77b4", width=2),
        connectgaps=False,
        hovertemplate="Time: %{x}<br>Value: %{y:.2f} " + unit + "<extra></extra>"
    ))

    reading = report.reading(pollutant)
    if reading is not None and reading.sample.is_present:
        fig.add_trace(go.Scatter(
            x=[pd.to_datetime(reading.timestamp)],
            y=[reading.value],
            mode="markers",
            name="Reported",
            marker=dict(color="#d62728", size=10),
            hovertemplate="Reported<br>%{x}<br>%{y:.2f} " + unit + "<extra></extra>"
        ))

    limits = thresholds_for(pollutant, series.unit)
    if limits is not None:
        for threshold, level in zip(limits, ("Moderate", "High", "Very High")):
            fig.add_hline(
                y=threshold,
                line_dash="dash",
                line_color=LEVEL_COLORS[level],
                annotation_text=level,
                annotation_position="right"
            )

    fig.update_layout(
        title=f"{label}: hourly window",
        xaxis_title="Time" + (f" ({report.timezone})" if report.timezone else ""),
        yaxis_title=unit,
        hovermode="x unified",
        height=360,
        showlegend=True,
        template="plotly_white"
    )
    return fig
