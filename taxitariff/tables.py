"""pandas views of engine results for display."""

import pandas as pd

from .holidays import holiday_list_for_year
from .models import FareResult
from .tariffs import GROUP_LABELS, PERIOD_KEYS, PERIOD_LABELS, get_tariff

WEEKDAYS = ["mandag", "tirsdag", "onsdag", "torsdag", "fredag", "lørdag", "søndag"]


def price_matrix_frame(matrix: dict[str, dict[str, int]]) -> pd.DataFrame:
    df = pd.DataFrame.from_dict(matrix, orient="index")
    df = df[[p for p in PERIOD_KEYS if p in df.columns]]
    df.index = [GROUP_LABELS.get(g, g) for g in df.index]
    df.columns = [PERIOD_LABELS[p] for p in df.columns]
    return df


def segments_frame(result: FareResult) -> pd.DataFrame:
    """Segment breakdown with a closing total row."""
    rows = [
        {
            "Periode": PERIOD_LABELS.get(s.type, s.type),
            "Minutter": s.minutes,
            "Kilometer": round(s.km, 2),
            "Pris (kr)": s.price,
        }
        for s in result.segments
    ]
    if rows:
        rows.append(
            {
                "Periode": "Totalt",
                "Minutter": sum(s.minutes for s in result.segments),
                "Kilometer": round(sum(s.km for s in result.segments), 2),
                "Pris (kr)": sum(s.price for s in result.segments),
            }
        )
    return pd.DataFrame(rows, columns=["Periode", "Minutter", "Kilometer", "Pris (kr)"])


def rates_frame(tariffs: dict, group_key: str) -> pd.DataFrame:
    rows = []
    for period in PERIOD_KEYS:
        rate = get_tariff(tariffs, group_key, period)
        rows.append(
            {
                "Periode": PERIOD_LABELS[period],
                "Start": round(rate.start, 2),
                "Km 0–10": round(rate.km0_10, 2),
                "Km over 10": round(rate.km_over_10, 2),
                "Minutt": round(rate.min, 2),
            }
        )
    return pd.DataFrame(rows)


def holidays_frame(year: int) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"Dato": day.isoformat(), "Ukedag": WEEKDAYS[day.weekday()], "Helligdag": name}
            for day, name in holiday_list_for_year(year)
        ]
    )
