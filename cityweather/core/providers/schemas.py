"""Payload schema for the OpenWeatherMap current weather endpoint."""
from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["ConditionEntry", "CurrentWeatherPayload", "MainBlock"]


class MainBlock(BaseModel):
    """Readings pass through as sent; NaN and infinities are rejected."""

    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    temp: Union[int, float]
    humidity: Union[int, float]


class ConditionEntry(BaseModel):
    model_config = ConfigDict(extra="ignore")

    description: str


class CurrentWeatherPayload(BaseModel):
    """Only the fields the presenter consults; everything else is ignored."""

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    main: MainBlock
    weather: List[ConditionEntry] = Field(min_length=1)

    @property
    def description(self) -> str:
        return self.weather[0].description
