"""OpenWeather weather provider."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests
from pydantic import ValidationError

from cityweather.core.abstractions import Observation
from cityweather.core.providers.base import HTTPWeatherProvider, ProviderError, RequestConfig
from cityweather.core.providers.schemas import CurrentWeatherPayload


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5"


class OpenWeatherProvider(HTTPWeatherProvider):
    """Integration with the OpenWeather current weather endpoint."""

    name = "openweather"
    units = "metric"

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        super().__init__(session=session, request_config=request_config)
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        if not api_key:
            self._log.warning("OpenWeather API key is empty; requests will be rejected")

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/weather"

    def build_params(self, location_name: str) -> Dict[str, str]:
        return {"q": location_name, "appid": self.api_key, "units": self.units}

    def fetch_current_conditions(self, location_name: str) -> Observation:  # noqa: D401
        """Return current conditions for ``location_name`` from OpenWeather."""
        response = self._request("GET", self.endpoint, params=self.build_params(location_name))
        data = self._json(response)
        return self._parse(data, location_name)

    def _parse(self, data: Any, location_name: str) -> Observation:
        try:
            payload = CurrentWeatherPayload.model_validate(data)
        except ValidationError as exc:
            self._log.error("Unexpected OpenWeather payload: %s", exc)
            raise ProviderError("malformed payload") from exc

        logger.debug("OpenWeather returned %s for %r", payload.description, location_name)
        return Observation(
            location=payload.name or location_name,
            temperature_c=payload.main.temp,
            humidity_percent=payload.main.humidity,
            description=payload.description,
            raw=data,
        )


__all__ = ["DEFAULT_BASE_URL", "OpenWeatherProvider"]
