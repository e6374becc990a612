from __future__ import annotations

import pytest

from cityweather.core.abstractions import Observation
from cityweather.core.icons import (
    DESCRIPTION_ICONS,
    ConditionIcon,
    HumidityIcon,
    TemperatureIcon,
    description_icon,
    humidity_icon,
    select_icons,
    temperature_icon,
)


@pytest.mark.parametrize(
    "temperature, expected",
    [
        (-40, TemperatureIcon.COLD),
        (0, TemperatureIcon.COLD),
        (0.0001, TemperatureIcon.BRISK),
        (10, TemperatureIcon.BRISK),
        (10.0001, TemperatureIcon.MILD),
        (20, TemperatureIcon.MILD),
        (20.0001, TemperatureIcon.WARM),
        (30, TemperatureIcon.WARM),
        (30.0001, TemperatureIcon.HOT),
        (55, TemperatureIcon.HOT),
    ],
)
def test_temperature_bands(temperature, expected):
    assert temperature_icon(temperature) is expected


@pytest.mark.parametrize(
    "humidity, expected",
    [
        (0, HumidityIcon.DRY),
        (29.99, HumidityIcon.DRY),
        (30, HumidityIcon.MODERATE),
        (60, HumidityIcon.MODERATE),
        (60.01, HumidityIcon.HUMID),
        (100, HumidityIcon.HUMID),
    ],
)
def test_humidity_bands(humidity, expected):
    assert humidity_icon(humidity) is expected


def test_description_lookup_known_phrase():
    assert description_icon("clear sky") is ConditionIcon.SUN
    assert description_icon("clear sky").value == "☀️"
    assert description_icon("heavy intensity rain") is ConditionIcon.HEAVY_RAIN


def test_description_lookup_falls_back_for_unknown_phrase():
    assert description_icon("zephyr breeze") is ConditionIcon.UNKNOWN
    assert description_icon("zephyr breeze").value == "❓"


def test_description_lookup_is_case_sensitive():
    assert description_icon("Clear Sky") is ConditionIcon.UNKNOWN
    assert description_icon("clear sky ") is ConditionIcon.UNKNOWN


def test_every_known_phrase_has_a_specific_icon():
    assert len(DESCRIPTION_ICONS) == 11
    assert ConditionIcon.UNKNOWN not in DESCRIPTION_ICONS.values()


def test_select_icons_uses_all_three_fields():
    observation = Observation(location="Cairo", temperature_c=35.5, humidity_percent=12, description="mist")

    icons = select_icons(observation)

    assert icons.temperature is TemperatureIcon.HOT
    assert icons.humidity is HumidityIcon.DRY
    assert icons.description is ConditionIcon.FOG
    assert icons.as_dict() == {"temperature": "🔥", "humidity": "🌵", "description": "🌫️"}
