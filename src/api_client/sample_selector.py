from datetime import date
from typing import Optional, Union

from .models import PollutantSample, PollutantSeries


def _date_part(timestamp: str) -> str:
    return timestamp.split("T", 1)[0]


def select_sample(
    series: Optional[PollutantSeries], reference_date: Union[date, str]
) -> PollutantSample:
    """Pick the one reading to report for a pollutant.

    The earliest present value dated on ``reference_date`` wins. If that day
    has no present value, the first present value anywhere in the series is
    used instead, scanning again from the start of the series. A missing or
    empty series, or one without any present value, gives an empty sample.
    """
    if series is None or len(series) == 0:
        return PollutantSample()

    day = reference_date.isoformat() if isinstance(reference_date, date) else str(reference_date)

    for ts, value in zip(series.times, series.values):
        if _date_part(ts) == day and value is not None:
            return PollutantSample(value=value, timestamp=ts)

    for ts, value in zip(series.times, series.values):
        if value is not None:
            return PollutantSample(value=value, timestamp=ts)

    return PollutantSample()
