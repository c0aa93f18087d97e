"""Fare estimation.

A trip is simulated minute by minute at constant average speed. Each minute
is billed at the tariff period in effect at its start, so a trip crossing
e.g. 18:00 on a weekday is split between ``dag`` and ``kveld``.
"""

import logging
import math
from collections.abc import Iterable, Mapping
from datetime import UTC, date, datetime, timedelta, tzinfo

from .exceptions import InvalidTripError, UnknownTariffError
from .holidays import as_holiday_set, norwegian_holidays
from .models import FareResult, Rate, Segment
from .periods import tariff_period_at, to_local
from .settings import get_settings
from .tariffs import GROUP_KEYS, PERIOD_KEYS, get_tariff, round_to_kr

logger = logging.getLogger(__name__)

TIER_LIMIT_KM = 10.0


def _check_distance(distance_km: float) -> float:
    distance_km = float(distance_km)
    if not math.isfinite(distance_km) or distance_km < 0:
        raise InvalidTripError(f"Distance must be a non-negative number, got {distance_km}")
    return distance_km


def _check_duration(duration_min: float) -> float:
    duration_min = float(duration_min)
    if not math.isfinite(duration_min) or duration_min < 0:
        raise InvalidTripError(f"Duration must be a non-negative number, got {duration_min}")
    return duration_min


def distance_cost(distance_km: float, rate: Rate) -> float:
    if distance_km <= TIER_LIMIT_KM:
        return distance_km * rate.km0_10
    return TIER_LIMIT_KM * rate.km0_10 + (distance_km - TIER_LIMIT_KM) * rate.km_over_10


def single_period_price(distance_km: float, duration_min: float, rate: Rate) -> int:
    """Price a whole trip at one rate, ignoring period changes."""
    distance_km = _check_distance(distance_km)
    duration_min = _check_duration(duration_min)
    return round_to_kr(rate.start + distance_cost(distance_km, rate) + duration_min * rate.min)


def build_price_matrix(
    distance_km: float,
    duration_min: float,
    tariffs: Mapping,
) -> dict[str, dict[str, int]]:
    """Static prices for every vehicle group and period, for tariff tables."""
    return {
        group: {
            period: single_period_price(distance_km, duration_min, get_tariff(tariffs, group, period))
            for period in PERIOD_KEYS
        }
        for group in GROUP_KEYS
    }


def _minute_distance_cost(before_km: float, km: float, rate: Rate) -> float:
    after_km = before_km + km
    if before_km >= TIER_LIMIT_KM:
        return km * rate.km_over_10
    if after_km <= TIER_LIMIT_KM:
        return km * rate.km0_10
    # This minute crosses the 10 km mark
    within = TIER_LIMIT_KM - before_km
    return within * rate.km0_10 + (km - within) * rate.km_over_10


def _group_rates(tariffs: Mapping, group_key: str) -> dict[str, Rate]:
    if group_key not in GROUP_KEYS:
        raise UnknownTariffError(f"Unknown vehicle group {group_key!r}")
    return {period: get_tariff(tariffs, group_key, period) for period in PERIOD_KEYS}


class _SegmentBuilder:
    def __init__(self) -> None:
        self.segments: list[Segment] = []
        self.type: str | None = None
        self.minutes = 0
        self.km = 0.0
        self.price = 0.0

    def add(self, period: str, km: float, cost: float) -> None:
        if self.type is None:
            self.type = period
        elif period != self.type:
            self.flush()
            self.type = period
        self.minutes += 1
        self.km += km
        self.price += cost

    def flush(self) -> None:
        if self.type is not None and self.minutes > 0:
            self.segments.append(
                Segment(type=self.type, minutes=self.minutes, km=self.km, price=round_to_kr(self.price))
            )
        self.minutes = 0
        self.km = 0.0
        self.price = 0.0


def estimate_fare(
    distance_km: float,
    duration_min: float,
    tariffs: Mapping,
    group_key: str,
    start: datetime,
    holidays: Iterable[date] | None = None,
    tz: tzinfo | None = None,
) -> FareResult:
    """Estimate the fare of a trip that may span several tariff periods.

    The start fee of the period in effect at ``start`` is charged once and
    booked on the first segment. Naive ``start`` values are wall-clock time
    in the tariff zone; aware values advance in elapsed minutes and are
    converted to the tariff zone before each minute is classified.
    """
    distance_km = _check_distance(distance_km)
    duration_min = _check_duration(duration_min)
    if not duration_min.is_integer():
        raise InvalidTripError(f"Duration must be whole minutes, got {duration_min}")
    minutes = int(duration_min)
    max_minutes = get_settings().max_trip_minutes
    if minutes > max_minutes:
        raise InvalidTripError(f"Trips longer than {max_minutes} minutes are not supported")

    if minutes == 0 or distance_km == 0:
        return FareResult(total=0, segments=())

    rates = _group_rates(tariffs, group_key)
    if holidays is None:
        holidays = norwegian_holidays(to_local(start, tz).year)
    else:
        holidays = as_holiday_set(holidays)

    km_per_min = distance_km / minutes
    clock = start.astimezone(UTC) if start.tzinfo is not None else start

    start_period = tariff_period_at(start, holidays, tz)
    total = rates[start_period].start
    builder = _SegmentBuilder()
    builder.type = start_period
    builder.price = total

    cumulative_km = 0.0
    for step in range(minutes):
        period = tariff_period_at(clock + timedelta(minutes=step), holidays, tz)
        rate = rates[period]
        cost = _minute_distance_cost(cumulative_km, km_per_min, rate) + rate.min
        total += cost
        cumulative_km += km_per_min
        builder.add(period, km_per_min, cost)
    builder.flush()

    result = FareResult(total=round_to_kr(total), segments=tuple(builder.segments))
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Group %s, %.2f km, %d min: total %d kr", group_key, distance_km, minutes, result.total)
        for index, segment in enumerate(result.segments, start=1):
            logger.debug(
                "  %d. %s %d min %.2f km %d kr", index, segment.type, segment.minutes, segment.km, segment.price
            )
    return result
