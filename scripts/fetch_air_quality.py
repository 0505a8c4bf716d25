"""
Fetch the current air quality readings for one point and print them as JSON.

Usage examples:
  python scripts/fetch_air_quality.py --lat 52.52 --lon 13.41

  # Label the output with a human-readable address
  python scripts/fetch_air_quality.py --lat 48.8566 --lon 2.3522 --address "Paris, France"

Outputs:
  The flattened report (one value/time/unit triple per pollutant, plus the
  provider's coordinates and timezone) on stdout.
"""
from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Optional

_REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _REPO_ROOT not in sys.path:
    sys.path.insert(0, _REPO_ROOT)

from src.api_client.air_quality_client import AirQualityClient, AirQualityFetchError
from src.api_client.models import Location
from src.config import load_config

LOG = logging.getLogger("fetch_air_quality")


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Fetch air quality readings for a point")
    parser.add_argument("--lat", type=float, required=True, help="Latitude")
    parser.add_argument("--lon", type=float, required=True, help="Longitude")
    parser.add_argument("--address", type=str, default=None, help="Address to attach to the report")
    parser.add_argument("--config", type=str, default="config/config.yaml", help="Config path relative to the repo root")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

    try:
        cfg = load_config(args.config)
    except FileNotFoundError:
        LOG.warning("Config %s not found - using default provider settings", args.config)
        cfg = {}

    client = AirQualityClient.from_config(cfg)
    try:
        report = client.fetch_air_quality(Location(latitude=args.lat, longitude=args.lon), address=args.address)
    except AirQualityFetchError as exc:
        LOG.error("Failed to fetch air quality data: %s", exc)
        return 3

    print(json.dumps(report.to_flat_dict(), indent=2))
    if not report.has_data():
        LOG.warning("No readings available for %s,%s", args.lat, args.lon)
    return 0


if __name__ == "__main__":
    sys.exit(main())
