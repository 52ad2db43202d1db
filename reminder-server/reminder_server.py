import logging
import os
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from models import (
    HealthResponse,
    LocatedReminderResponse,
    ReminderRequest,
    ReminderResponse,
    ServiceInfoResponse,
)
from readings import ReadingError, reading_from_body, reading_from_query
from reminders import reminder_for

# Load .env from project root (one level above reminder-server/)
load_dotenv(dotenv_path=Path(__file__).parent.parent / ".env")

REMINDER_PORT = int(os.getenv("REMINDER_PORT", "3000"))
CORS_ORIGINS = [
    origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
]

AVAILABLE_ENDPOINTS = [
    "GET /",
    "GET /api/reminder",
    "POST /api/reminder",
    "GET /health",
]

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Weather Reminder Server running on port %d", REMINDER_PORT)
    logger.info("Example: http://localhost:%d/api/reminder?temperature=25", REMINDER_PORT)
    yield


app = FastAPI(
    title="Weather Reminder Server",
    description="Maps a temperature, humidity and wind reading to a weather reminder.",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a Z suffix."""
    now = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return now.replace("+00:00", "Z")


# ── Custom exception handlers ────────────────────────────────────────────────

@app.exception_handler(ReadingError)
async def reading_error_handler(request: Request, exc: ReadingError):
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=400, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Return 400 (not FastAPI's default 422) for malformed request bodies."""
    return JSONResponse(status_code=400, content={"error": "Invalid request body."})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return JSONResponse(
            status_code=404,
            content={
                "error": "Endpoint not found",
                "availableEndpoints": AVAILABLE_ENDPOINTS,
            },
        )
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled error in %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"error": "Something went wrong!", "message": str(exc)},
    )


# ── Endpoints ────────────────────────────────────────────────────────────────

@app.get("/", response_model=ServiceInfoResponse)
async def index() -> ServiceInfoResponse:
    return ServiceInfoResponse(
        message="Weather Reminder API Server",
        status="running",
        endpoints={
            "GET /api/reminder": "Get temperature-based reminder",
            "POST /api/reminder": "Get reminder with weather data",
            "GET /health": "Service health check",
        },
    )


@app.get("/api/reminder", response_model=ReminderResponse)
async def get_reminder(
    temperature: str | None = Query(None),
    humidity: str | None = Query(None),
    wind_speed: str | None = Query(None, alias="windSpeed"),
) -> ReminderResponse:
    logger.info(
        "Incoming GET /api/reminder: temperature=%r humidity=%r windSpeed=%r",
        temperature,
        humidity,
        wind_speed,
    )
    reading = reading_from_query(temperature, humidity, wind_speed)
    return ReminderResponse(
        temperature=reading.temperature,
        humidity=reading.humidity,
        wind_speed=reading.wind_speed,
        reminder=reminder_for(reading),
        timestamp=_timestamp(),
    )


@app.post("/api/reminder", response_model=LocatedReminderResponse)
async def post_reminder(request: ReminderRequest | None = None) -> LocatedReminderResponse:
    # An empty body is treated as an empty object
    request = request or ReminderRequest()
    body = request.model_dump(exclude_unset=True)
    logger.info("Incoming POST /api/reminder: %r", body)
    reading = reading_from_body(body)
    return LocatedReminderResponse(
        location=request.location or "Unknown",
        temperature=reading.temperature,
        humidity=reading.humidity,
        wind_speed=reading.wind_speed,
        reminder=reminder_for(reading),
        timestamp=_timestamp(),
    )


@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="healthy", timestamp=_timestamp())


if __name__ == "__main__":
    uvicorn.run(
        "reminder_server:app",
        host="0.0.0.0",
        port=REMINDER_PORT,
        reload=False,
    )
