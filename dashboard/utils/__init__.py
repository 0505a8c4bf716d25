"""
Dashboard utilities package
"""

from .config import apply_page_config, apply_custom_css, POLLUTANT_LABELS
from .data_loader import load_app_config, get_client, load_air_quality
from .view_state import LookupState, ViewState, get_lookup_state

__all__ = [
    'apply_page_config',
    'apply_custom_css',
    'POLLUTANT_LABELS',
    'load_app_config',
    'get_client',
    'load_air_quality',
    'LookupState',
    'ViewState',
    'get_lookup_state'
]
