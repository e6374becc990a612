"""Request lifecycle states owned by the weather presenter."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .abstractions import Observation
from .icons import IconSelection


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Success:
    observation: Observation
    icons: IconSelection


@dataclass(frozen=True)
class Loading:
    previous: Optional[Success] = None


@dataclass(frozen=True)
class Failure:
    """A user-facing error; ``previous`` is the result still on display."""

    message: str
    previous: Optional[Success] = None


RequestState = Union[Idle, Loading, Success, Failure]


__all__ = ["Failure", "Idle", "Loading", "RequestState", "Success"]
