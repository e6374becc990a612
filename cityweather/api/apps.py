from django.apps import AppConfig


class WeatherApiConfig(AppConfig):
    name = "cityweather.api"
    label = "weather_api"
    verbose_name = "City weather"
