from typing import Any, Dict, Optional, Tuple

# (low, high, very_high) in the provider's default unit, μg/m³
POLLUTANT_THRESHOLDS: Dict[str, Tuple[float, float, float]] = {
    "carbon_monoxide": (4400, 9400, 15400),
    # 1 ppm CO2 ~ 1800 μg/m³
    "carbon_dioxide": (700 * 1800, 1000 * 1800, 2000 * 1800),
    "dust": (50, 150, 250),
}

# unit-specific overrides
UNIT_THRESHOLDS: Dict[Tuple[str, str], Tuple[float, float, float]] = {
    ("carbon_dioxide", "ppm"): (700, 1000, 2000),
}

LEVEL_COLORS = {
    "Low": "#00e400",
    "Moderate": "#ffff00",
    "High": "#ff7e00",
    "Very High": "#ff0000",
}


def thresholds_for(pollutant: str, unit: Optional[str] = None) -> Optional[Tuple[float, float, float]]:
    if unit is not None:
        override = UNIT_THRESHOLDS.get((pollutant, unit.strip()))
        if override is not None:
            return override
    return POLLUTANT_THRESHOLDS.get(pollutant)


def classify_level(pollutant: str, value: Optional[float], unit: Optional[str] = None) -> Optional[Dict[str, Any]]:
    """Band a reading as Low / Moderate / High / Very High.

    Returns None when there is no value or no thresholds for the pollutant.
    """
    if value is None:
        return None
    limits = thresholds_for(pollutant, unit)
    if limits is None:
        return None
    low, high, very_high = limits

    if value < low:
        category = "Low"
    elif value > very_high:
        category = "Very High"
    elif value > high:
        category = "High"
    else:
        category = "Moderate"

    return {
        "category": category,
        "color": LEVEL_COLORS[category],
        "thresholds": limits,
    }
