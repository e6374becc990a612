"""Core abstractions for the weather domain."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Protocol


@dataclass(frozen=True)
class Observation:
    """Current conditions for one location at fetch time.

    - temperature in Celsius
    - relative humidity in percent (not clamped to 0..100)
    - description as reported by the provider, e.g. ``"few clouds"``
    """

    location: str
    temperature_c: float
    humidity_percent: float
    description: str
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)


class WeatherProvider(Protocol):
    """A data source capable of returning current conditions for a city."""

    name: str

    def fetch_current_conditions(self, location_name: str) -> Observation:
        """Fetch the current observation for ``location_name``.

        Implementations may also define this as a coroutine function.
        """
        ...


__all__ = ["Observation", "WeatherProvider"]
