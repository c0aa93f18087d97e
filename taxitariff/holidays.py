"""Norwegian public holidays (helligdager).

All holidays are billed with the ``hoytid`` tariff. The calendar holds five
fixed dates and seven dates that move with Easter Sunday.
"""

from collections.abc import Iterable
from datetime import date, datetime, timedelta
from functools import lru_cache

# (month, day, name)
FIXED_HOLIDAYS = [
    (1, 1, "Nyttårsdag"),
    (5, 1, "Arbeidernes dag"),
    (5, 17, "Grunnlovsdag"),
    (12, 25, "1. juledag"),
    (12, 26, "2. juledag"),
]

# (days from Easter Sunday, name)
EASTER_HOLIDAYS = [
    (-3, "Skjærtorsdag"),
    (-2, "Langfredag"),
    (0, "Påskedag"),
    (1, "2. påskedag"),
    (39, "Kristi himmelfartsdag"),
    (49, "Pinsedag"),
    (50, "2. pinsedag"),
]


def easter_sunday(year: int) -> date:
    """Gregorian Easter Sunday (Anonymous Gregorian algorithm)."""
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month, day = divmod(h + l - 7 * m + 114, 31)
    return date(year, month, day + 1)


def holiday_list_for_year(year: int) -> list[tuple[date, str]]:
    """Named holidays for ``year``, sorted by date."""
    easter = easter_sunday(year)
    named = [(date(year, month, day), name) for month, day, name in FIXED_HOLIDAYS]
    named += [(easter + timedelta(days=offset), name) for offset, name in EASTER_HOLIDAYS]
    return sorted(named)


@lru_cache(maxsize=64)
def holidays_for_year(year: int) -> frozenset[date]:
    return frozenset(day for day, _ in holiday_list_for_year(year))


def norwegian_holidays(reference_year: int | None = None) -> frozenset[date]:
    """Holidays from the year before ``reference_year`` to two years after.

    The span tolerates trips booked slightly in the past or up to two years
    ahead. ``None`` uses the current year.
    """
    if reference_year is None:
        reference_year = date.today().year
    days: set[date] = set()
    for year in range(reference_year - 1, reference_year + 3):
        days |= holidays_for_year(year)
    return frozenset(days)


def as_holiday_set(holidays: Iterable[date | datetime]) -> frozenset[date]:
    return frozenset(h.date() if isinstance(h, datetime) else h for h in holidays)


def is_holiday(day: date | datetime, holidays: Iterable[date]) -> bool:
    # datetime is a date subclass; compare the calendar day only
    if isinstance(day, datetime):
        day = day.date()
    return day in as_holiday_set(holidays)
