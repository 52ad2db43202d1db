"""
frontend/app.py — Streamlit forecast page for the Weather Reminder app.

Looks up current conditions and a five-day forecast from OpenWeatherMap, then
asks the reminder server for advice about the current reading.
"""

import asyncio
import os
import sys

import streamlit as st

# Ensure reminder-server/ is on the path for the client modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "reminder-server"))

from models import Severity
from reminder_client import fetch_reminder
from weather_client import WeatherServiceError, fetch_weather, icon_url

SEVERITY_BOXES = {
    Severity.info: st.info,
    Severity.warning: st.warning,
    Severity.danger: st.error,
}


async def _lookup(location: str):
    report = await fetch_weather(location)
    reminder = await fetch_reminder(
        report.temperature,
        report.humidity,
        report.wind_speed,
        report.display_name,
    )
    return report, reminder


st.set_page_config(page_title="Weather Forecast", page_icon="🌤️", layout="centered")
st.title("🌤️ Weather Forecast")

# ── Search ─────────────────────────────────────────────────────────────────────

with st.form("search"):
    location = st.text_input(
        "Location",
        placeholder="Enter location name (e.g., London, New York)",
    )
    submitted = st.form_submit_button("Get Weather")

if submitted:
    try:
        with st.spinner("Fetching weather data..."):
            st.session_state.result = asyncio.run(_lookup(location))
    except WeatherServiceError as exc:
        st.session_state.pop("result", None)
        st.error(str(exc))

# ── Results ────────────────────────────────────────────────────────────────────

if "result" in st.session_state:
    report, reminder = st.session_state.result

    header, icon = st.columns([4, 1])
    header.subheader(report.display_name)
    header.markdown(f"## {report.temperature}°C")
    header.write(report.description.title())
    icon.image(icon_url(report.icon))

    feels, humidity, wind = st.columns(3)
    feels.metric("Feels like", f"{report.feels_like}°C")
    humidity.metric("Humidity", f"{report.humidity:g}%")
    wind.metric("Wind", f"{report.wind_speed} km/h")

    SEVERITY_BOXES[reminder.severity](reminder.message)
    for tip in reminder.tips:
        st.markdown(f"- {tip}")

    if report.forecast:
        st.subheader("5-Day Forecast")
        for column, day in zip(st.columns(len(report.forecast)), report.forecast):
            column.caption(day.date)
            column.image(icon_url(day.icon), width=48)
            column.markdown(f"**{day.temp}°C**")
            column.caption(day.description)
