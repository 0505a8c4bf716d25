"""
Fetch hourly pollutant data from the Open-Meteo Air Quality API (free, no API key needed)
and reduce it to one reading per tracked pollutant.
"""
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional, Sequence
import logging

import requests
from pydantic import BaseModel, Field, ValidationError

from .models import AirQualityReport, Location, PollutantReading, PollutantSeries
from .sample_selector import select_sample

log = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://air-quality-api.open-meteo.com/v1/air-quality"

DEFAULT_HOURLY: List[str] = [
    "birch_pollen",
    "grass_pollen",
    "carbon_monoxide",
    "nitrogen_dioxide",
    "sulphur_dioxide",
    "ozone",
    "dust",
    "pm10",
    "pm2_5",
    "carbon_dioxide",
]

DEFAULT_TRACKED: List[str] = [
    "birch_pollen",
    "grass_pollen",
    "carbon_monoxide",
    "carbon_dioxide",
    "dust",
]

GENERIC_FAILURE = "Failed to fetch air quality data."


class AirQualityFetchError(Exception):
    """A lookup that produced no report. ``str(err)`` is safe to show to the user."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class _AirQualityPayload(BaseModel):
    latitude: float
    longitude: float
    timezone: Optional[str] = None
    hourly_units: Dict[str, Optional[str]] = Field(default_factory=dict)
    hourly: Dict[str, Optional[List[Any]]]


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


class AirQualityClient:
    """Client for the Open-Meteo Air Quality API."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        hourly: Optional[Sequence[str]] = None,
        tracked: Optional[Sequence[str]] = None,
        timeout: float = 30,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url
        self.hourly = list(DEFAULT_HOURLY if hourly is None else hourly)
        self.tracked = list(DEFAULT_TRACKED if tracked is None else tracked)
        self.timeout = timeout
        self.session = session

    @classmethod
    def from_config(cls, cfg: Dict[str, Any], session: Optional[requests.Session] = None) -> "AirQualityClient":
        section = (cfg or {}).get("air_quality") or {}
        return cls(
            base_url=section.get("base_url", DEFAULT_BASE_URL),
            hourly=section.get("hourly"),
            tracked=section.get("tracked"),
            timeout=section.get("timeout", 30),
            session=session,
        )

    def build_params(self, location: Location) -> Dict[str, str]:
        # two decimals is the provider's grid resolution
        requested = list(self.hourly) + [p for p in self.tracked if p not in self.hourly]
        return {
            "latitude": f"{location.latitude:.2f}",
            "longitude": f"{location.longitude:.2f}",
            "hourly": ",".join(requested),
        }

    def fetch_air_quality(
        self,
        location: Location,
        address: Optional[str] = None,
        reference_date: Optional[date] = None,
    ) -> AirQualityReport:
        sess = self.session or requests
        params = self.build_params(location)
        try:
            resp = sess.get(self.base_url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            log.error("Failed to fetch air quality data: %s", e)
            raise AirQualityFetchError(GENERIC_FAILURE) from e

        if not resp.ok:
            raise _error_from_response(resp)

        try:
            raw = resp.json()
        except ValueError as e:
            log.error("Air quality response is not JSON: %s", e)
            raise AirQualityFetchError(GENERIC_FAILURE, resp.status_code) from e

        report = parse_air_quality_payload(
            raw,
            tracked=self.tracked,
            reference_date=reference_date or utc_today(),
            address=address,
        )
        log.info(
            "Fetched air quality for %s,%s (%d pollutants)",
            params["latitude"],
            params["longitude"],
            len(report.readings),
        )
        return report


def _error_from_response(resp: requests.Response) -> AirQualityFetchError:
    try:
        body = resp.json()
    except ValueError:
        log.error("Air quality request failed with status %s and a non-JSON body", resp.status_code)
        return AirQualityFetchError(GENERIC_FAILURE, resp.status_code)

    reason = body.get("reason") if isinstance(body, dict) else None
    if isinstance(reason, str) and reason:
        message = reason
    else:
        message = f"API request failed with status {resp.status_code}"
    log.error("Air quality request failed: %s", message)
    return AirQualityFetchError(message, resp.status_code)


def parse_air_quality_payload(
    raw: Any,
    tracked: Sequence[str] = DEFAULT_TRACKED,
    reference_date: Optional[date] = None,
    address: Optional[str] = None,
) -> AirQualityReport:
    """Turn a successful provider response into a report.

    Raises AirQualityFetchError when the payload does not have the expected shape.
    """
    reference_date = reference_date or utc_today()
    try:
        payload = _AirQualityPayload.model_validate(raw)
        times = payload.hourly.get("time") or []
        series: Dict[str, PollutantSeries] = {}
        for pollutant in tracked:
            values = payload.hourly.get(pollutant)
            if values is None:
                continue
            series[pollutant] = PollutantSeries(
                pollutant=pollutant,
                times=times,
                values=values,
                unit=payload.hourly_units.get(pollutant),
            )
    except ValidationError as e:
        log.error("Unexpected air quality response shape: %s", e)
        raise AirQualityFetchError("Unexpected response from the air quality provider.") from e

    readings = {
        pollutant: PollutantReading(
            pollutant=pollutant,
            sample=select_sample(series.get(pollutant), reference_date),
            unit=payload.hourly_units.get(pollutant),
        )
        for pollutant in tracked
    }
    return AirQualityReport(
        location=Location(latitude=payload.latitude, longitude=payload.longitude),
        timezone=payload.timezone,
        address=address,
        reference_date=reference_date,
        readings=readings,
        series=series,
    )


def fetch_air_quality(
    location: Location,
    address: Optional[str] = None,
    session: Optional[requests.Session] = None,
    reference_date: Optional[date] = None,
) -> AirQualityReport:
    """Fetch a report for ``location`` with the default client settings."""
    return AirQualityClient(session=session).fetch_air_quality(
        location, address=address, reference_date=reference_date
    )
