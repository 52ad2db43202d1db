from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    info = "info"
    warning = "warning"
    danger = "danger"


class Reading(BaseModel):
    """A single temperature/humidity/wind observation submitted for classification."""
    model_config = ConfigDict(frozen=True)

    temperature: float
    humidity: float = 50.0
    wind_speed: float = 0.0


class Advisory(BaseModel):
    """Reminder produced for a Reading.

    Serialized with the field names the mobile client expects:
    ``severity`` goes out as ``type`` and ``icon_hint`` as ``icon``.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    message: str
    severity: Severity = Field(alias="type")
    icon_hint: str = Field(alias="icon")
    tips: tuple[str, ...] = ()


# ── Wire models ──────────────────────────────────────────────────────────────

class ReminderRequest(BaseModel):
    # Numeric fields are untyped; readings.reading_from_body validates them.
    temperature: Any = None
    humidity: Any = None
    windSpeed: Any = None
    location: Any = None


class ReminderResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    temperature: float
    humidity: float
    wind_speed: float = Field(alias="windSpeed")
    reminder: Advisory
    timestamp: str


class LocatedReminderResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Echoed as sent by the client
    location: Any
    temperature: float
    humidity: float
    wind_speed: float = Field(alias="windSpeed")
    reminder: Advisory
    timestamp: str


class HealthResponse(BaseModel):
    status: str
    timestamp: str


class ServiceInfoResponse(BaseModel):
    message: str
    status: str
    endpoints: dict[str, str]
