from datetime import date, datetime, time

import pandas as pd
import streamlit as st

from taxitariff import (
    GROUP_KEYS,
    TariffError,
    build_price_matrix,
    derive_all_tariffs,
    estimate_fare,
    norwegian_holidays,
    normalize_base_tariff,
    tariff_period_at,
)
from taxitariff.log import setup_logging
from taxitariff.settings import get_settings
from taxitariff.tables import holidays_frame, price_matrix_frame, rates_frame, segments_frame
from taxitariff.tariffs import DEFAULT_BASE_TARIFF_14, GROUP_LABELS, PERIOD_LABELS

settings = get_settings()
setup_logging(settings.log_level)

st.set_page_config(page_title="Taxi prisestimat", page_icon="🚕", layout="centered")


@st.cache_data
def holidays_around(year: int):
    return norwegian_holidays(year)


# ---------------------- TARIFF EDITOR ----------------------
st.sidebar.header("Grunntakst 1–4 seter (dag)")
base = normalize_base_tariff(
    {
        "start": st.sidebar.number_input("Frammøte / start (kr)", value=DEFAULT_BASE_TARIFF_14.start, step=1.0),
        "km0_10": st.sidebar.number_input("Km 0–10 (kr/km)", value=DEFAULT_BASE_TARIFF_14.km0_10, step=0.01),
        "kmOver10": st.sidebar.number_input("Km over 10 (kr/km)", value=DEFAULT_BASE_TARIFF_14.km_over_10, step=0.01),
        "min": st.sidebar.number_input("Minutt (kr/min)", value=DEFAULT_BASE_TARIFF_14.min, step=0.01),
    }
)
tariffs = derive_all_tariffs(base)

with st.sidebar.expander("Forhåndsvisning"):
    st.caption(f"{settings.preview_km} km / {settings.preview_minutes} min")
    st.dataframe(
        price_matrix_frame(build_price_matrix(settings.preview_km, settings.preview_minutes, tariffs)),
        use_container_width=True,
    )

# ---------------------- UI ----------------------
st.title("🚕 Taxi prisestimat")

st.subheader("Tur")
col1, col2 = st.columns(2)

with col1:
    distance_km = st.number_input("Avstand (km)", min_value=0.0, value=15.5, step=0.1)
    duration_min = st.number_input("Tid (minutter)", min_value=0, max_value=settings.max_trip_minutes, value=25, step=1)
    group = st.selectbox("Gruppe", GROUP_KEYS, format_func=lambda g: GROUP_LABELS[g])

with col2:
    trip_date = st.date_input("Dato", value=date.today())
    trip_time = st.time_input("Klokkeslett", value=time(10, 0))

start = datetime.combine(trip_date, trip_time)
holidays = holidays_around(trip_date.year)

if st.button("Beregn", type="primary"):
    try:
        res = estimate_fare(distance_km, duration_min, tariffs, group, start, holidays)
    except TariffError as exc:
        st.error(str(exc))
    else:
        left, right = st.columns(2)
        with left:
            st.metric("Gruppe", GROUP_LABELS[group])
            st.metric("Periode ved start", PERIOD_LABELS[tariff_period_at(start, holidays)])
            st.metric("Avstand", f"{distance_km:.1f} km")
        with right:
            st.metric("Tid", f"{duration_min} min")
            st.metric("Estimert pris", f"kr {res.total:,}".replace(",", " "))

        if res.segments:
            st.write("---")
            st.subheader("Fordeling per takstperiode")
            st.dataframe(segments_frame(res), use_container_width=True, hide_index=True)
        st.caption("Prisen er et estimat. Endelig pris avhenger av faktisk kjørerute, tid og trafikk.")

st.markdown("---")
st.subheader("Pristabell")
st.caption("Pris for hele turen i én takstperiode. Minuttprisen skaleres bare med periode, ikke med gruppe.")
try:
    st.dataframe(price_matrix_frame(build_price_matrix(distance_km, duration_min, tariffs)), use_container_width=True)
except TariffError as exc:
    st.error(str(exc))

with st.expander("Takster for valgt gruppe"):
    st.dataframe(rates_frame(tariffs, group), use_container_width=True, hide_index=True)

with st.expander(f"Helligdager {trip_date.year}"):
    st.dataframe(holidays_frame(trip_date.year), use_container_width=True, hide_index=True)

# ---------------------- EXAMPLE SCENARIOS ----------------------
with st.expander("Kjør eksempelturer"):
    scenarios = [
        ("Hverdag dag, 1–4", dict(distance_km=8, duration_min=15, group_key="1-4", start=datetime(2025, 3, 10, 10, 0))),
        ("Hverdag over kl. 18, 1–4", dict(distance_km=10, duration_min=20, group_key="1-4", start=datetime(2025, 3, 10, 17, 50))),
        ("Laurdag til helg, 5–6", dict(distance_km=20, duration_min=40, group_key="5-6", start=datetime(2025, 3, 15, 14, 40))),
        ("Natt til laurdag, 7–8", dict(distance_km=12, duration_min=30, group_key="7-8", start=datetime(2025, 3, 14, 23, 45))),
        ("17. mai, 1–4", dict(distance_km=15.5, duration_min=25, group_key="1-4", start=datetime(2025, 5, 17, 10, 0))),
        ("Langtur 9–16", dict(distance_km=120, duration_min=95, group_key="9-16", start=datetime(2025, 6, 2, 16, 30))),
    ]
    rows = []
    for name, kw in scenarios:
        res = estimate_fare(tariffs=tariffs, holidays=holidays_around(kw["start"].year), **kw)
        rows.append(
            {
                "Tur": name,
                "Gruppe": GROUP_LABELS[kw["group_key"]],
                "Km": kw["distance_km"],
                "Min": kw["duration_min"],
                "Perioder": " → ".join(PERIOD_LABELS[s.type] for s in res.segments),
                "Pris (kr)": res.total,
            }
        )
    st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)
