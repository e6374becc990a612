"""Views exposing the weather presenter over HTTP."""
from __future__ import annotations

from functools import lru_cache

from asgiref.sync import async_to_sync
from django.conf import settings
from django.shortcuts import render
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from cityweather.api.forms import CityForm
from cityweather.core.providers.base import RequestConfig
from cityweather.core.providers.openweather import OpenWeatherProvider
from cityweather.core.services.weather_presenter import WeatherPresenter
from cityweather.core.state import Failure


@lru_cache(maxsize=1)
def get_weather_provider() -> OpenWeatherProvider:
    return OpenWeatherProvider(
        api_key=settings.OPENWEATHER_API_KEY,
        base_url=settings.OPENWEATHER_BASE_URL,
        request_config=RequestConfig(timeout=settings.OPENWEATHER_TIMEOUT),
    )


class WeatherView(APIView):
    """Provide current conditions and icons for the requested city."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):  # noqa: D401
        """Return the presenter snapshot for ``?city=``."""
        presenter = WeatherPresenter(get_weather_provider(), city=request.query_params.get("city", ""))
        state = async_to_sync(presenter.fetch_weather)()

        if isinstance(state, Failure):
            code = status.HTTP_400_BAD_REQUEST if not presenter.city else status.HTTP_502_BAD_GATEWAY
            return Response({"detail": state.message}, status=code)
        return Response(presenter.snapshot(), status=status.HTTP_200_OK)


async def weather_page(request):
    """Render the city form and, once submitted, the lookup result."""
    form = CityForm(request.GET or None)
    presenter = WeatherPresenter(get_weather_provider())
    if form.is_bound and form.is_valid():
        presenter.city = form.cleaned_data["city"]
        await presenter.fetch_weather()
    return render(request, "weather/index.html", {"form": form, "presenter": presenter})
