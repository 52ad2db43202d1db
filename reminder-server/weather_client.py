import logging
import math
import os
from datetime import datetime, timedelta, timezone
from pathlib import Path

import httpx
from dotenv import load_dotenv
from pydantic import BaseModel

# Load .env from project root (one level above reminder-server/)
load_dotenv(dotenv_path=Path(__file__).parent.parent / ".env")

OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"
OPENWEATHER_ICON_URL = "https://openweathermap.org/img/wn/{code}@2x.png"
OPENWEATHER_API_KEY = os.getenv("OPENWEATHER_API_KEY")

# The forecast endpoint returns 3-hourly entries; every 8th is one day apart
_ENTRIES_PER_DAY = 8
_FORECAST_DAYS = 5

logger = logging.getLogger(__name__)


class WeatherServiceError(Exception):
    pass


class LocationNotFoundError(WeatherServiceError):
    pass


class ForecastDay(BaseModel):
    date: str
    temp: int
    description: str
    icon: str


class WeatherReport(BaseModel):
    name: str
    country: str
    temperature: int
    description: str
    humidity: float
    wind_speed: int  # km/h
    feels_like: int
    icon: str
    forecast: list[ForecastDay]

    @property
    def display_name(self) -> str:
        return f"{self.name}, {self.country}"


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _format_day(epoch: int, utc_offset: int = 0) -> str:
    dt = datetime.fromtimestamp(epoch, tz=timezone(timedelta(seconds=utc_offset)))
    return f"{dt:%a}, {dt:%b} {dt.day}"


def icon_url(code: str) -> str:
    return OPENWEATHER_ICON_URL.format(code=code)


def daily_forecast(entries: list[dict], utc_offset: int = 0) -> list[ForecastDay]:
    """Pick one entry per day from the 3-hourly forecast list.

    Dates are labelled in the location's local time, ``utc_offset`` seconds from UTC.
    """
    return [
        ForecastDay(
            date=_format_day(item["dt"], utc_offset),
            temp=_round_half_up(item["main"]["temp"]),
            description=item["weather"][0]["description"],
            icon=item["weather"][0]["icon"],
        )
        for item in entries[::_ENTRIES_PER_DAY][:_FORECAST_DAYS]
    ]


def parse_report(current: dict, forecast: dict) -> WeatherReport:
    weather = current["weather"][0]
    main = current["main"]
    return WeatherReport(
        name=current["name"],
        country=current.get("sys", {}).get("country", ""),
        temperature=_round_half_up(main["temp"]),
        description=weather["description"],
        humidity=main["humidity"],
        wind_speed=_round_half_up(current["wind"]["speed"] * 3.6),
        feels_like=_round_half_up(main["feels_like"]),
        icon=weather["icon"],
        forecast=daily_forecast(
            forecast.get("list", []),
            forecast.get("city", {}).get("timezone", 0),
        ),
    )


async def _get(client: httpx.AsyncClient, path: str, params: dict) -> dict:
    try:
        response = await client.get(f"{OPENWEATHER_BASE_URL}/{path}", params=params)
        response.raise_for_status()
    except httpx.TimeoutException:
        logger.error("OpenWeatherMap /%s timed out for q=%r", path, params["q"])
        raise WeatherServiceError("Weather service timed out.")
    except httpx.HTTPStatusError as exc:
        status = exc.response.status_code
        try:
            body = exc.response.json()
        except ValueError:
            body = None
        message = body.get("message") if isinstance(body, dict) else None
        if status == 404:
            logger.warning("Location not found: %r", params["q"])
            raise LocationNotFoundError(
                "Location not found. Please check the location name and try again."
            )
        logger.error("OpenWeatherMap HTTP error %s for q=%r: %s", status, params["q"], message)
        raise WeatherServiceError(
            message or "Failed to fetch weather data. Please try again."
        )
    except httpx.RequestError as exc:
        logger.error("OpenWeatherMap unreachable: %s", exc)
        raise WeatherServiceError("Weather service is unreachable.")

    try:
        return response.json()
    except ValueError as exc:
        logger.error("OpenWeatherMap /%s returned a non-JSON body for q=%r", path, params["q"])
        raise WeatherServiceError("Weather service returned an unexpected response.") from exc


async def fetch_weather(location: str, api_key: str | None = None) -> WeatherReport:
    """Fetch current conditions and a five-day forecast for a location name."""
    location = location.strip()
    if not location:
        raise WeatherServiceError("Please enter a location name")

    api_key = api_key or OPENWEATHER_API_KEY
    if not api_key:
        raise WeatherServiceError(
            "Weather service is unavailable: API key not configured."
        )

    params = {"q": location, "appid": api_key, "units": "metric"}
    logger.info("Fetching weather for %r", location)

    async with httpx.AsyncClient(timeout=10.0) as client:
        current = await _get(client, "weather", params)
        forecast = await _get(client, "forecast", params)

    try:
        return parse_report(current, forecast)
    except (AttributeError, KeyError, IndexError, TypeError, ValueError) as exc:
        logger.error("Unexpected OpenWeatherMap payload for %r: %s", location, exc)
        raise WeatherServiceError("Weather service returned an unexpected response.") from exc
