from __future__ import annotations

from typing import Any, Dict

import pytest

from requests_mock import Mocker


@pytest.fixture
def requests_mock():
    with Mocker() as mock:
        yield mock


@pytest.fixture
def openweather_payload() -> Dict[str, Any]:
    return {
        "name": "London",
        "main": {"temp": 22, "humidity": 45, "pressure": 1012},
        "weather": [{"id": 801, "main": "Clouds", "description": "few clouds"}],
        "cod": 200,
    }
