"""Map observation fields onto the emoji shown next to them."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict

from .abstractions import Observation


class TemperatureIcon(str, Enum):
    COLD = "❄️"
    BRISK = "🌬️"
    MILD = "🌤️"
    WARM = "☀️"
    HOT = "🔥"


class HumidityIcon(str, Enum):
    DRY = "🌵"
    MODERATE = "☁️"
    HUMID = "💧"


class ConditionIcon(str, Enum):
    SUN = "☀️"
    SUN_SMALL_CLOUD = "🌤️"
    SUN_CLOUD = "⛅"
    SUN_LARGE_CLOUD = "🌥️"
    CLOUD = "☁️"
    SUN_RAIN = "🌦️"
    RAIN = "🌧️"
    HEAVY_RAIN = "🌧️💦"
    THUNDERSTORM = "⛈️"
    SNOW = "❄️"
    FOG = "🌫️"
    UNKNOWN = "❓"


# Exact, case-sensitive phrases as OpenWeatherMap reports them.
DESCRIPTION_ICONS: Dict[str, ConditionIcon] = {
    "clear sky": ConditionIcon.SUN,
    "few clouds": ConditionIcon.SUN_SMALL_CLOUD,
    "scattered clouds": ConditionIcon.SUN_CLOUD,
    "broken clouds": ConditionIcon.SUN_LARGE_CLOUD,
    "overcast clouds": ConditionIcon.CLOUD,
    "light rain": ConditionIcon.SUN_RAIN,
    "moderate rain": ConditionIcon.RAIN,
    "heavy intensity rain": ConditionIcon.HEAVY_RAIN,
    "thunderstorm": ConditionIcon.THUNDERSTORM,
    "snow": ConditionIcon.SNOW,
    "mist": ConditionIcon.FOG,
}


@dataclass(frozen=True)
class IconSelection:
    temperature: TemperatureIcon
    humidity: HumidityIcon
    description: ConditionIcon

    def as_dict(self) -> Dict[str, str]:
        return {
            "temperature": self.temperature.value,
            "humidity": self.humidity.value,
            "description": self.description.value,
        }


def temperature_icon(temperature_c: float) -> TemperatureIcon:
    """Pick a band; each band is closed at its upper bound."""
    if temperature_c <= 0:
        return TemperatureIcon.COLD
    if temperature_c <= 10:
        return TemperatureIcon.BRISK
    if temperature_c <= 20:
        return TemperatureIcon.MILD
    if temperature_c <= 30:
        return TemperatureIcon.WARM
    return TemperatureIcon.HOT


def humidity_icon(humidity_percent: float) -> HumidityIcon:
    if humidity_percent < 30:
        return HumidityIcon.DRY
    if humidity_percent <= 60:
        return HumidityIcon.MODERATE
    return HumidityIcon.HUMID


def description_icon(description: str) -> ConditionIcon:
    return DESCRIPTION_ICONS.get(description, ConditionIcon.UNKNOWN)


def select_icons(observation: Observation) -> IconSelection:
    return IconSelection(
        temperature=temperature_icon(observation.temperature_c),
        humidity=humidity_icon(observation.humidity_percent),
        description=description_icon(observation.description),
    )


__all__ = [
    "ConditionIcon",
    "DESCRIPTION_ICONS",
    "HumidityIcon",
    "IconSelection",
    "TemperatureIcon",
    "description_icon",
    "humidity_icon",
    "select_icons",
    "temperature_icon",
]
