"""Presenter that drives a single weather lookup and derives its icons."""
from __future__ import annotations

import inspect
import logging
from typing import Any, Dict, Optional

from asgiref.sync import sync_to_async

from cityweather.core.abstractions import Observation, WeatherProvider
from cityweather.core.icons import IconSelection, select_icons
from cityweather.core.providers.base import ProviderError
from cityweather.core.state import Failure, Idle, Loading, RequestState, Success


class WeatherPresenter:
    """Own the lookup state for one city input.

    Every call to :meth:`fetch_weather` takes a new generation number. When an
    older call settles after a newer one was issued, its result is dropped, so
    the state always reflects the most recently requested city.
    """

    EMPTY_QUERY_MESSAGE = "Please enter a city name or use your location."
    PROVIDER_ERROR_MESSAGE = "City not found or API error."

    def __init__(
        self,
        provider: WeatherProvider,
        *,
        city: str = "",
    ) -> None:
        self.provider = provider
        self.city = city
        self._state: RequestState = Idle()
        self._last_success: Optional[Success] = None
        self._generation = 0
        self._log = logging.getLogger(self.__class__.__name__)

    # Public API ---------------------------------------------------------
    @property
    def state(self) -> RequestState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return isinstance(self._state, Loading)

    @property
    def error_message(self) -> Optional[str]:
        if isinstance(self._state, Failure):
            return self._state.message
        return None

    @property
    def observation(self) -> Optional[Observation]:
        if self._last_success is None:
            return None
        return self._last_success.observation

    @property
    def icons(self) -> Optional[IconSelection]:
        if self._last_success is None:
            return None
        return self._last_success.icons

    async def fetch_weather(self) -> RequestState:
        self._generation += 1
        generation = self._generation
        self._state = Loading(previous=self._last_success)

        city = self.city
        if not city:
            self._state = Failure(self.EMPTY_QUERY_MESSAGE, previous=self._last_success)
            return self._state

        try:
            observation = await self._call_provider(city)
        except ProviderError as exc:
            if self._is_stale(generation, city):
                return self._state
            self._log.warning("Weather lookup for %r failed: %s", city, exc)
            self._state = Failure(self.PROVIDER_ERROR_MESSAGE, previous=self._last_success)
            return self._state

        if self._is_stale(generation, city):
            return self._state
        self._last_success = Success(observation=observation, icons=select_icons(observation))
        self._state = self._last_success
        return self._state

    def snapshot(self) -> Dict[str, Any]:
        observation = self.observation
        icons = self.icons
        return {
            "city": self.city,
            "state": _state_name(self._state),
            "loading": self.is_loading,
            "error": self.error_message,
            "observation": _observation_dict(observation) if observation else None,
            "icons": icons.as_dict() if icons else None,
        }

    # Helpers ------------------------------------------------------------
    async def _call_provider(self, city: str) -> Observation:
        fetch = self.provider.fetch_current_conditions
        if inspect.iscoroutinefunction(fetch):
            return await fetch(city)
        return await sync_to_async(fetch, thread_sensitive=False)(city)

    def _is_stale(self, generation: int, city: str) -> bool:
        if generation == self._generation:
            return False
        self._log.debug("Dropping superseded result for %r", city)
        return True


def _state_name(state: RequestState) -> str:
    return {
        Idle: "idle",
        Loading: "loading",
        Success: "success",
        Failure: "failure",
    }[type(state)]


def _observation_dict(observation: Observation) -> Dict[str, Any]:
    return {
        "location": observation.location,
        "temperature_c": observation.temperature_c,
        "humidity_percent": observation.humidity_percent,
        "description": observation.description,
    }


__all__ = ["WeatherPresenter"]
