import math
from typing import Any

from models import Reading
from reminders import DEFAULT_HUMIDITY, DEFAULT_WIND_SPEED

EXAMPLE_QUERY = "/api/reminder?temperature=25&humidity=60&windSpeed=10"

_MISSING = object()


class ReadingError(Exception):
    """Raised when request input cannot be turned into a Reading."""

    def __init__(self, message: str, **extra: str):
        super().__init__(message)
        self.message = message
        self.extra = extra

    def to_dict(self) -> dict[str, str]:
        return {"error": self.message, **self.extra}


class MissingRequiredField(ReadingError):
    pass


class InvalidNumericValue(ReadingError):
    pass


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_number(value: Any, field: str) -> float:
    """Coerce a query/body value to a finite float.

    Accepts ints, floats and numeric strings. Booleans, NaN and infinities
    are rejected.
    """
    if isinstance(value, bool):
        raise InvalidNumericValue(f"Invalid {field} value")
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        raise InvalidNumericValue(f"Invalid {field} value")
    if not math.isfinite(number):
        raise InvalidNumericValue(f"Invalid {field} value")
    return number


def _optional_number(value: Any, field: str, default: float) -> float:
    if value is _MISSING or _is_blank(value):
        return default
    return parse_number(value, field)


def reading_from_query(
    temperature: str | None,
    humidity: str | None = None,
    wind_speed: str | None = None,
) -> Reading:
    if _is_blank(temperature):
        raise MissingRequiredField(
            "Temperature parameter is required", example=EXAMPLE_QUERY
        )
    return Reading(
        temperature=parse_number(temperature, "temperature"),
        humidity=_optional_number(humidity, "humidity", DEFAULT_HUMIDITY),
        wind_speed=_optional_number(wind_speed, "windSpeed", DEFAULT_WIND_SPEED),
    )


def reading_from_body(body: dict[str, Any]) -> Reading:
    """Build a Reading from a decoded JSON body.

    Only an absent ``temperature`` key counts as missing; an explicit null is
    an invalid value.
    """
    temperature = body.get("temperature", _MISSING)
    if temperature is _MISSING:
        raise MissingRequiredField("Temperature is required in request body")
    return Reading(
        temperature=parse_number(temperature, "temperature"),
        humidity=_optional_number(body.get("humidity", _MISSING), "humidity", DEFAULT_HUMIDITY),
        wind_speed=_optional_number(
            body.get("windSpeed", _MISSING), "windSpeed", DEFAULT_WIND_SPEED
        ),
    )
