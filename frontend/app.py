# app.py
import logging
import math
from datetime import datetime, timezone

import plotly.graph_objects as go
import streamlit as st

from api.weather import ForecastLoadError
from backend.frame import observations_to_frame
from config import BMKG_ADM4, LOG_LEVEL, WINDOW_HOURS
from services.forecast import ForecastService

logging.basicConfig(level=LOG_LEVEL)

# --------------------------------- SETUP ---------------------------------
st.set_page_config(page_title="Prakiraan Cuaca", page_icon="🌦️", layout="wide")
st.title("🌦️ Prakiraan Cuaca")
st.caption("Data: BMKG (api.bmkg.go.id)")

# ---------------------------- SIDEBAR CONTROLS ----------------------------
st.sidebar.header("Lokasi")
adm4 = st.sidebar.text_input("Kode wilayah ADM4", value=BMKG_ADM4, help="Contoh: 31.71.03.1001")
if not adm4.strip():
    st.info("Masukkan kode wilayah ADM4 di sidebar untuk melihat prakiraan.")
    st.stop()

# ---------------------------------- LOAD ----------------------------------
try:
    with st.spinner("Memuat prakiraan..."):
        series = ForecastService.load_forecast(adm4.strip())
except ForecastLoadError as e:
    st.error(f"Gagal memuat prakiraan: {e}")
    st.stop()

now = datetime.now(timezone.utc)

# ----------------------- HELPERS ------------------------
def _metric(value: float, unit: str, digits: int = 0) -> str:
    return "–" if math.isnan(value) else f"{value:.{digits}f} {unit}"

def plot_series(df, title):
    fig = go.Figure()
    fig.add_trace(go.Scatter(x=df["time"], y=df["temperature_c"], mode="lines+markers",
                             name="Suhu (°C)", yaxis="y1"))
    fig.add_trace(go.Scatter(x=df["time"], y=df["humidity_pct"], mode="lines+markers",
                             name="Kelembapan (%)", yaxis="y2"))
    fig.add_trace(go.Scatter(x=df["time"], y=df["wind_speed_kmh"], mode="lines+markers",
                             name="Angin (km/j)", yaxis="y3", line=dict(dash="dot")))
    fig.update_layout(
        title=title,
        xaxis=dict(title="Waktu"),
        yaxis=dict(title="Suhu (°C)", side="left"),
        yaxis2=dict(title="Kelembapan (%)", overlaying="y", side="right", range=[0, 100], showgrid=False),
        yaxis3=dict(title="Angin (km/j)", overlaying="y", side="right", position=0.94, showgrid=False),
        legend=dict(orientation="h"),
        margin=dict(l=40, r=40, t=40, b=30),
    )
    return fig

# --------------------------------- HEADER ---------------------------------
st.subheader(series.location_summary or adm4)
if series.analysis_instant is not None:
    st.caption(f"Analisis: {series.analysis_instant.strftime('%d/%m/%Y %H:%M')} UTC")

latest = series.latest
if latest is None:
    st.warning("Tidak ada data prakiraan untuk lokasi ini.")
    st.stop()

# ------------------ METRICS ------------------
c1, c2, c3, c4 = st.columns(4)
c1.metric("Waktu", latest.instant.strftime("%d/%m %H:%M"))
c2.metric("Suhu", _metric(latest.temperature_celsius, "°C"))
c3.metric("Kelembapan", _metric(latest.relative_humidity_percent, "%"))
c4.metric("Angin", _metric(latest.wind_speed_kmh, "km/j", 1))
if latest.icon_uri:
    st.image(latest.icon_uri, caption=latest.condition, width=64)
else:
    st.write(latest.condition)

averages = series.averages(now)
st.markdown(f"**Rata-rata {WINDOW_HOURS} jam terakhir**")
a1, a2, a3 = st.columns(3)
a1.metric("Suhu", _metric(averages.temperature_celsius, "°C", 1))
a2.metric("Kelembapan", _metric(averages.relative_humidity_percent, "%", 1))
a3.metric("Angin", _metric(averages.wind_speed_kmh, "km/j", 1))

# ------------------ TABS ------------------
df = observations_to_frame(series.observations)
tab_chart, tab_table, tab_text = st.tabs(["📈 Grafik", "📋 Tabel", "📝 Ringkasan"])

with tab_chart:
    st.plotly_chart(plot_series(df, f"Prakiraan: {series.location_summary}"), use_container_width=True)

with tab_table:
    df_show = df.drop(columns=["icon_uri"]).copy()
    df_show["time"] = df_show["time"].dt.strftime("%d/%m %H:%M")
    st.dataframe(df_show, use_container_width=True)

with tab_text:
    st.text(series.to_context(now))
