from datetime import datetime

from taxitariff import build_price_matrix, estimate_fare
from taxitariff.models import FareResult
from taxitariff.tables import holidays_frame, price_matrix_frame, rates_frame, segments_frame


class TestPriceMatrixFrame:
    def test_labels(self, tariffs):
        df = price_matrix_frame(build_price_matrix(15.04, 22, tariffs))
        assert df.shape == (4, 5)
        assert list(df.index) == ["1–4 seter", "5–6 seter", "7–8 seter", "9–16 seter"]
        assert list(df.columns) == ["Dag", "Kveld", "Laurdag", "Helg/Natt", "Høytid"]


class TestSegmentsFrame:
    def test_total_row(self, tariffs, holidays):
        result = estimate_fare(10, 20, tariffs, "1-4", datetime(2025, 3, 10, 17, 50), holidays)
        df = segments_frame(result)
        assert list(df["Periode"]) == ["Dag", "Kveld", "Totalt"]
        total = df.iloc[-1]
        assert total["Minutter"] == 20
        assert total["Kilometer"] == 10.0
        assert total["Pris (kr)"] == 237 + 169

    def test_empty_result(self):
        df = segments_frame(FareResult(total=0))
        assert df.empty
        assert list(df.columns) == ["Periode", "Minutter", "Kilometer", "Pris (kr)"]


class TestRatesFrame:
    def test_one_row_per_period(self, tariffs):
        df = rates_frame(tariffs, "9-16")
        assert len(df) == 5
        assert df.iloc[0]["Start"] == 194.0
        assert df.iloc[0]["Minutt"] == 8.42


class TestHolidaysFrame:
    def test_year(self):
        df = holidays_frame(2025)
        assert len(df) == 12
        row = df[df["Helligdag"] == "Grunnlovsdag"].iloc[0]
        assert row["Dato"] == "2025-05-17"
        assert row["Ukedag"] == "lørdag"
