"""
Dashboard components package
"""

from .charts import plot_pollutant_series, series_frame
from .map_picker import render_map_picker, location_from_click, build_map
from .metrics import (
    display_lookup,
    display_report,
    format_sample_time,
    format_reading_value
)

__all__ = [
    'plot_pollutant_series',
    'series_frame',
    'render_map_picker',
    'location_from_click',
    'build_map',
    'display_lookup',
    'display_report',
    'format_sample_time',
    'format_reading_value'
]
