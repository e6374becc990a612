"""Root URL configuration."""
from __future__ import annotations

from django.urls import include, path

from cityweather.api.views import weather_page

urlpatterns = [
    path("", weather_page, name="weather-page"),
    path("api/", include("cityweather.api.urls")),
]
