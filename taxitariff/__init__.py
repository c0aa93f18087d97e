"""Norwegian taxi tariff engine."""

from .estimate import build_price_matrix, estimate_fare, single_period_price
from .exceptions import InvalidTripError, TariffError, UnknownTariffError
from .holidays import easter_sunday, holidays_for_year, is_holiday, norwegian_holidays
from .models import BaseTariff14, FareResult, Rate, Segment
from .periods import tariff_period_at
from .tariffs import (
    GROUP_KEYS,
    PERIOD_KEYS,
    derive_all_tariffs,
    get_tariff,
    normalize_base_tariff,
    round_to_kr,
)

__all__ = [
    "BaseTariff14",
    "FareResult",
    "GROUP_KEYS",
    "InvalidTripError",
    "PERIOD_KEYS",
    "Rate",
    "Segment",
    "TariffError",
    "UnknownTariffError",
    "build_price_matrix",
    "derive_all_tariffs",
    "easter_sunday",
    "estimate_fare",
    "get_tariff",
    "holidays_for_year",
    "is_holiday",
    "norwegian_holidays",
    "normalize_base_tariff",
    "round_to_kr",
    "single_period_price",
    "tariff_period_at",
]
