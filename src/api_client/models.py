from datetime import date
from typing import Any, Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, field_validator, model_validator


class Location(BaseModel):
    """A point on the map."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float


class LocationSelection(BaseModel):
    """What the map picker hands back per user action: a point and maybe an address."""

    model_config = ConfigDict(frozen=True)

    location: Location
    address: Optional[str] = None


class PollutantSeries(BaseModel):
    model_config = ConfigDict(frozen=True)

    pollutant: str
    times: Tuple[str, ...] = ()
    # JSON numbers only; booleans and numeric strings are a malformed response
    values: Tuple[Optional[Union[StrictFloat, StrictInt]], ...] = ()
    unit: Optional[str] = None

    @field_validator("values", mode="before")
    @classmethod
    def _nan_to_none(cls, v: Any) -> Any:
        if v is None:
            return ()
        return tuple(None if isinstance(x, float) and x != x else x for x in v)

    @model_validator(mode="after")
    def _parallel(self) -> "PollutantSeries":
        if len(self.times) != len(self.values):
            raise ValueError(
                f"{self.pollutant}: {len(self.values)} values for {len(self.times)} timestamps"
            )
        return self

    def __len__(self) -> int:
        return len(self.times)


class PollutantSample(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: Optional[float] = None
    timestamp: Optional[str] = None

    @property
    def is_present(self) -> bool:
        return self.value is not None


class PollutantReading(BaseModel):
    model_config = ConfigDict(frozen=True)

    pollutant: str
    sample: PollutantSample = Field(default_factory=PollutantSample)
    unit: Optional[str] = None

    @property
    def value(self) -> Optional[float]:
        return self.sample.value

    @property
    def timestamp(self) -> Optional[str]:
        return self.sample.timestamp


REPORTED_POLLUTANTS = ("carbon_monoxide", "carbon_dioxide", "dust")
POLLEN_POLLUTANTS = ("birch_pollen", "grass_pollen")


class AirQualityReport(BaseModel):
    """One lookup's result: a reading per tracked pollutant plus where and when."""

    model_config = ConfigDict(frozen=True)

    location: Location
    timezone: Optional[str] = None
    address: Optional[str] = None
    reference_date: date
    readings: Dict[str, PollutantReading] = Field(default_factory=dict)
    series: Dict[str, PollutantSeries] = Field(default_factory=dict)

    def reading(self, pollutant: str) -> Optional[PollutantReading]:
        return self.readings.get(pollutant)

    def has_data(self, pollutants: Tuple[str, ...] = REPORTED_POLLUTANTS) -> bool:
        return any(
            self.readings[p].sample.is_present for p in pollutants if p in self.readings
        )

    def to_flat_dict(self) -> Dict[str, Any]:
        flat: Dict[str, Any] = {}
        for name, reading in self.readings.items():
            flat[name] = reading.value
            flat[f"{name}_time"] = reading.timestamp
            flat[f"{name}_unit"] = reading.unit
        flat["latitude"] = self.location.latitude
        flat["longitude"] = self.location.longitude
        flat["timezone"] = self.timezone
        flat["address"] = self.address
        return flat
