"""Tariff derivation.

Every rate is derived from one base tariff (1-4 seats, daytime). Distance
rates and the start fee scale with both the vehicle group and the period;
the minute rate scales with the period only.
"""

import logging
import math
from collections.abc import Mapping

from .exceptions import UnknownTariffError
from .models import BaseTariff14, Rate

logger = logging.getLogger(__name__)

GROUP_KEYS = ("1-4", "5-6", "7-8", "9-16")
PERIOD_KEYS = ("dag", "kveld", "laurdag", "helgNatt", "hoytid")

GROUP_FACTORS = {"1-4": 1.0, "5-6": 1.3, "7-8": 1.6, "9-16": 2.0}
PERIOD_FACTORS = {"dag": 1.0, "kveld": 1.21, "laurdag": 1.30, "helgNatt": 1.35, "hoytid": 1.45}

GROUP_LABELS = {"1-4": "1–4 seter", "5-6": "5–6 seter", "7-8": "7–8 seter", "9-16": "9–16 seter"}
PERIOD_LABELS = {
    "dag": "Dag",
    "kveld": "Kveld",
    "laurdag": "Laurdag",
    "helgNatt": "Helg/Natt",
    "hoytid": "Høytid",
}

DEFAULT_BASE_TARIFF_14 = BaseTariff14()

# (python name, wire name)
_BASE_FIELDS = [
    ("start", "start"),
    ("km0_10", "km0_10"),
    ("km_over_10", "kmOver10"),
    ("min", "min"),
]


def _as_number(value) -> float | None:
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def normalize_base_tariff(data: Mapping | BaseTariff14 | None) -> BaseTariff14:
    """Return a complete base tariff, filling bad or missing fields with defaults.

    Negative values are kept as they are; this is a configuration surface,
    not a constraint check.
    """
    if isinstance(data, BaseTariff14):
        data = data.model_dump(by_alias=True)
    elif not isinstance(data, Mapping):
        if data is not None:
            logger.debug("Base tariff of type %s is not a mapping, using defaults", type(data).__name__)
        data = {}
    values = {}
    for name, wire_name in _BASE_FIELDS:
        raw = data.get(wire_name, data.get(name))
        number = _as_number(raw)
        if number is None:
            number = getattr(DEFAULT_BASE_TARIFF_14, name)
            logger.debug("Base tariff field %s=%r invalid, using default %s", wire_name, raw, number)
        values[name] = number
    return BaseTariff14(**values)


def derive_all_tariffs(base: Mapping | BaseTariff14 | None) -> dict[str, dict[str, Rate]]:
    base = normalize_base_tariff(base)
    tariffs: dict[str, dict[str, Rate]] = {}
    for group in GROUP_KEYS:
        group_factor = GROUP_FACTORS[group]
        tariffs[group] = {}
        for period in PERIOD_KEYS:
            period_factor = PERIOD_FACTORS[period]
            tariffs[group][period] = Rate(
                start=base.start * group_factor * period_factor,
                km0_10=base.km0_10 * group_factor * period_factor,
                km_over_10=base.km_over_10 * group_factor * period_factor,
                min=base.min * period_factor,
            )
    return tariffs


def get_tariff(tariffs: Mapping, group_key: str, period_key: str) -> Rate:
    try:
        return tariffs[group_key][period_key]
    except (KeyError, TypeError) as exc:
        raise UnknownTariffError(
            f"No rate for vehicle group {group_key!r} in period {period_key!r}"
        ) from exc


def round_to_kr(value: float) -> int:
    """Round half up to whole kroner; non-finite values give 0."""
    if not math.isfinite(value):
        return 0
    # absorb float drift from minute-by-minute sums
    return math.floor(round(value, 6) + 0.5)
