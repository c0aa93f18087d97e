"""Which tariff period applies at a given moment."""

from collections.abc import Iterable
from datetime import date, datetime, tzinfo

from .holidays import is_holiday, norwegian_holidays
from .settings import get_settings

SATURDAY = 5
SUNDAY = 6


def to_local(instant: datetime, tz: tzinfo | None = None) -> datetime:
    """Express ``instant`` as wall-clock time in the tariff zone.

    Naive datetimes are already wall-clock time and are returned unchanged.
    """
    if instant.tzinfo is None:
        return instant
    return instant.astimezone(tz or get_settings().tzinfo)


def tariff_period_at(
    instant: datetime,
    holidays: Iterable[date] | None = None,
    tz: tzinfo | None = None,
) -> str:
    local = to_local(instant, tz)
    if holidays is None:
        holidays = norwegian_holidays(local.year)

    if is_holiday(local, holidays):
        return "hoytid"

    hour = local.hour
    weekday = local.weekday()

    # Night applies to every day of the week
    if hour < 6:
        return "helgNatt"
    if weekday == SATURDAY and hour < 15:
        return "laurdag"
    if weekday in (SATURDAY, SUNDAY):
        return "helgNatt"
    if hour < 18:
        return "dag"
    return "kveld"
