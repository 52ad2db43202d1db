import logging
import os
from pathlib import Path

import httpx
from dotenv import load_dotenv
from pydantic import ValidationError

from models import Advisory, Severity

# Load .env from project root (one level above reminder-server/)
load_dotenv(dotenv_path=Path(__file__).parent.parent / ".env")

REMINDER_API_URL = os.getenv("REMINDER_API_URL", "http://localhost:3000")
REMINDER_TIMEOUT = 5.0

logger = logging.getLogger(__name__)

FALLBACK_ADVISORY = Advisory(
    message="📱 Weather reminder service unavailable",
    severity=Severity.info,
    icon_hint="information-circle",
    tips=(
        "Check current temperature and dress accordingly",
        "Stay hydrated and protect yourself from extreme weather",
        "Weather reminder server may be offline",
    ),
)


async def fetch_reminder(
    temperature: float,
    humidity: float,
    wind_speed: float,
    location: str,
    reminder_url: str = REMINDER_API_URL,
) -> Advisory:
    """Ask the reminder server for advice. Never raises; falls back to a static reminder."""
    url = f"{reminder_url.rstrip('/')}/api/reminder"
    payload = {
        "temperature": temperature,
        "humidity": humidity,
        "windSpeed": wind_speed,
        "location": location,
    }
    try:
        async with httpx.AsyncClient() as client:
            response = await client.post(url, json=payload, timeout=REMINDER_TIMEOUT)
            response.raise_for_status()
        advisory = Advisory.model_validate(response.json()["reminder"])
    except httpx.TimeoutException:
        logger.error("Reminder service timed out: url=%s", url)
        return FALLBACK_ADVISORY
    except httpx.HTTPStatusError as exc:
        logger.error(
            "Reminder service error %d: url=%s, body=%s",
            exc.response.status_code,
            url,
            exc.response.text,
        )
        return FALLBACK_ADVISORY
    except httpx.RequestError as exc:
        logger.error("Reminder service unreachable: url=%s (%s)", url, exc)
        return FALLBACK_ADVISORY
    except (ValidationError, ValueError, KeyError, TypeError) as exc:
        logger.error("Malformed reminder response from %s: %s", url, exc)
        return FALLBACK_ADVISORY

    logger.info("Fetched reminder for %r: %s", location, advisory.message)
    return advisory
