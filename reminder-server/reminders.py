"""Temperature-based weather reminders.

The threshold table is walked in ascending order and the first template whose
upper bound is >= the temperature wins, so a reading sitting exactly on a
breakpoint belongs to the colder bucket. Humidity and wind only ever append
tips; they never change the selected template.
"""

from pydantic import BaseModel, ConfigDict

from models import Advisory, Reading, Severity

DEFAULT_HUMIDITY = 50.0
DEFAULT_WIND_SPEED = 0.0

HIGH_HUMIDITY = 80.0
LOW_HUMIDITY = 30.0
STRONG_WIND = 20.0

HIGH_HUMIDITY_TIP = "High humidity - expect it to feel hotter than actual temperature"
LOW_HUMIDITY_TIP = "Low humidity - use moisturizer and stay hydrated"
STRONG_WIND_TIP = "Strong winds - secure loose items outdoors"


class ReminderTemplate(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    upper_bound: float | None
    message: str
    severity: Severity
    icon: str
    tips: tuple[str, ...]


THRESHOLD_TABLE: tuple[ReminderTemplate, ...] = (
    ReminderTemplate(
        name="VERY_COLD",
        upper_bound=-10,
        message="🥶 Extremely Cold Weather Alert!",
        severity=Severity.danger,
        icon="snow",
        tips=(
            "Dress in multiple layers",
            "Wear warm gloves and a hat",
            "Limit time outdoors",
            "Stay hydrated with warm drinks",
            "Check on elderly neighbors",
        ),
    ),
    ReminderTemplate(
        name="COLD",
        upper_bound=5,
        message="❄️ Cold Weather - Bundle Up!",
        severity=Severity.warning,
        icon="snow",
        tips=(
            "Wear a warm jacket",
            "Don't forget gloves and scarf",
            "Warm up your car before driving",
            "Drink hot beverages",
        ),
    ),
    ReminderTemplate(
        name="COOL",
        upper_bound=15,
        message="🧥 Cool Weather - Light Jacket Recommended",
        severity=Severity.info,
        icon="cloud",
        tips=(
            "Wear a light jacket or sweater",
            "Perfect weather for outdoor activities",
            "Great time for a walk",
        ),
    ),
    ReminderTemplate(
        name="WARM",
        upper_bound=25,
        message="🌤️ Pleasant Weather - Perfect Day!",
        severity=Severity.info,
        icon="partly-sunny",
        tips=(
            "Comfortable temperature for all activities",
            "Great day to spend time outdoors",
            "Light clothing recommended",
        ),
    ),
    ReminderTemplate(
        name="HOT",
        upper_bound=30,
        message="☀️ Hot Weather - Stay Cool!",
        severity=Severity.warning,
        icon="sunny",
        tips=(
            "Wear light, breathable clothing",
            "Stay hydrated - drink plenty of water",
            "Seek shade during peak hours",
            "Use sunscreen SPF 30+",
        ),
    ),
    ReminderTemplate(
        name="VERY_HOT",
        upper_bound=35,
        message="🔥 Very Hot Weather - Take Precautions!",
        severity=Severity.warning,
        icon="sunny",
        tips=(
            "Avoid outdoor activities during 10AM-4PM",
            "Drink water frequently",
            "Wear light-colored, loose clothing",
            "Stay in air-conditioned areas",
            "Watch for heat exhaustion symptoms",
        ),
    ),
)

EXTREME_HEAT = ReminderTemplate(
    name="EXTREME_HEAT",
    upper_bound=None,
    message="🌡️ Extreme Heat Warning!",
    severity=Severity.danger,
    icon="sunny",
    tips=(
        "Stay indoors during peak hours",
        "Drink water every 15-20 minutes",
        "Never leave anyone in a parked car",
        "Seek immediate medical attention for heat illness",
        "Check on vulnerable family members",
    ),
)


def select_template(temperature: float) -> ReminderTemplate:
    for template in THRESHOLD_TABLE:
        if temperature <= template.upper_bound:
            return template
    return EXTREME_HEAT


def _condition_tips(humidity: float, wind_speed: float) -> list[str]:
    tips = []
    if humidity > HIGH_HUMIDITY:
        tips.append(HIGH_HUMIDITY_TIP)
    elif humidity < LOW_HUMIDITY:
        tips.append(LOW_HUMIDITY_TIP)
    if wind_speed > STRONG_WIND:
        tips.append(STRONG_WIND_TIP)
    return tips


def build_reminder(
    temperature: float,
    humidity: float = DEFAULT_HUMIDITY,
    wind_speed: float = DEFAULT_WIND_SPEED,
) -> Advisory:
    """Map a reading to its reminder. Never raises for real-valued input."""
    template = select_template(temperature)
    return Advisory(
        message=template.message,
        severity=template.severity,
        icon_hint=template.icon,
        tips=template.tips + tuple(_condition_tips(humidity, wind_speed)),
    )


def reminder_for(reading: Reading) -> Advisory:
    return build_reminder(reading.temperature, reading.humidity, reading.wind_speed)
