import os
import sys

import pytest

# Ensure reminder-server/ is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models import Reading, Severity
from reminders import (
    HIGH_HUMIDITY_TIP,
    LOW_HUMIDITY_TIP,
    STRONG_WIND_TIP,
    THRESHOLD_TABLE,
    build_reminder,
    reminder_for,
    select_template,
)


# ── Buckets ───────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "temperature, severity, icon",
    [
        (-40, Severity.danger, "snow"),
        (-10, Severity.danger, "snow"),
        (-9.9, Severity.warning, "snow"),
        (5, Severity.warning, "snow"),
        (5.1, Severity.info, "cloud"),
        (15, Severity.info, "cloud"),
        (20, Severity.info, "partly-sunny"),
        (25, Severity.info, "partly-sunny"),
        (28, Severity.warning, "sunny"),
        (30, Severity.warning, "sunny"),
        (33, Severity.warning, "sunny"),
        (35, Severity.warning, "sunny"),
        (35.1, Severity.danger, "sunny"),
        (55, Severity.danger, "sunny"),
    ],
)
def test_severity_and_icon_per_bucket(temperature, severity, icon):
    reminder = build_reminder(temperature)
    assert reminder.severity is severity
    assert reminder.icon_hint == icon


def test_boundary_belongs_to_colder_bucket():
    assert select_template(-10).name == "VERY_COLD"
    assert select_template(5).name == "COLD"
    assert select_template(35).name == "VERY_HOT"
    assert select_template(35.0001).name == "EXTREME_HEAT"


def test_threshold_table_is_ascending():
    bounds = [template.upper_bound for template in THRESHOLD_TABLE]
    assert bounds == [-10, 5, 15, 25, 30, 35]


# ── Condition tips ────────────────────────────────────────────────────────────

def test_high_humidity_tip_appended():
    reminder = build_reminder(20, humidity=85)
    assert reminder.tips[-1] == HIGH_HUMIDITY_TIP
    assert LOW_HUMIDITY_TIP not in reminder.tips


def test_low_humidity_tip_appended():
    reminder = build_reminder(20, humidity=20)
    assert reminder.tips[-1] == LOW_HUMIDITY_TIP


@pytest.mark.parametrize("humidity", [30, 50, 80])
def test_moderate_humidity_adds_nothing(humidity):
    assert build_reminder(20, humidity=humidity).tips == select_template(20).tips


def test_wind_tip_threshold():
    assert build_reminder(20, wind_speed=25).tips[-1] == STRONG_WIND_TIP
    assert STRONG_WIND_TIP not in build_reminder(20, wind_speed=10).tips
    assert STRONG_WIND_TIP not in build_reminder(20, wind_speed=20).tips


def test_defaults_add_no_tips():
    for template in THRESHOLD_TABLE:
        assert build_reminder(template.upper_bound).tips == template.tips


def test_base_templates_are_not_mutated():
    build_reminder(-15, humidity=85, wind_speed=25)
    assert len(select_template(-15).tips) == 5


# ── Scenarios ─────────────────────────────────────────────────────────────────

def test_pleasant_day_scenario():
    reminder = build_reminder(25, humidity=60, wind_speed=10)
    assert reminder.message == "🌤️ Pleasant Weather - Perfect Day!"
    assert reminder.severity is Severity.info
    assert reminder.tips == (
        "Comfortable temperature for all activities",
        "Great day to spend time outdoors",
        "Light clothing recommended",
    )


def test_extreme_cold_humid_windy_scenario():
    reminder = build_reminder(-15, humidity=85, wind_speed=25)
    assert reminder.severity is Severity.danger
    assert len(reminder.tips) == 7
    assert reminder.tips[:5] == select_template(-15).tips
    assert reminder.tips[5] == HIGH_HUMIDITY_TIP
    assert reminder.tips[6] == STRONG_WIND_TIP


def test_identical_input_gives_identical_output():
    assert build_reminder(31, 90, 30) == build_reminder(31, 90, 30)


def test_reminder_for_reading_uses_defaults():
    assert reminder_for(Reading(temperature=10)) == build_reminder(10)


def test_serialized_with_client_field_names():
    data = build_reminder(0).model_dump(by_alias=True, mode="json")
    assert data["type"] == "warning"
    assert data["icon"] == "snow"
    assert isinstance(data["tips"], list)
