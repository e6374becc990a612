"""Management command to fetch weather using the same stack as the API."""
from __future__ import annotations

import json
from typing import Any

from asgiref.sync import async_to_sync
from django.core.management.base import BaseCommand, CommandError

from cityweather.api.views import get_weather_provider
from cityweather.core.services.weather_presenter import WeatherPresenter
from cityweather.core.state import Failure


class Command(BaseCommand):
    help = "Fetch current weather for the provided city"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--city", type=str, default="", help="City name, e.g. London")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        presenter = WeatherPresenter(get_weather_provider(), city=options.get("city") or "")
        state = async_to_sync(presenter.fetch_weather)()
        if isinstance(state, Failure):
            raise CommandError(state.message)

        self.stdout.write(json.dumps(presenter.snapshot(), ensure_ascii=False))
