"""ASGI entry point; the weather page is an async view."""
from __future__ import annotations

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "cityweather.settings")

application = get_asgi_application()
