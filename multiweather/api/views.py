"""HTTP views for the temperature service."""
from __future__ import annotations

from functools import lru_cache
import logging
import time
from typing import Any, Dict

from django.conf import settings
from django.http import HttpResponse
from rest_framework import status
from rest_framework.negotiation import BaseContentNegotiation
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from multiweather.core.abstractions import TemperatureService
from multiweather.core.providers import build_providers
from multiweather.core.services.aggregator import TemperatureAggregator
from multiweather.core.units import format_duration


logger = logging.getLogger(__name__)

TEXT_PLAIN = "text/plain; charset=utf-8"


@lru_cache(maxsize=1)
def get_temperature_service() -> TemperatureAggregator:
    providers = build_providers(
        settings.WEATHER_PROVIDERS,
        api_keys=settings.WEATHER_API_KEYS,
        base_urls=settings.WEATHER_BASE_URLS,
        timeout=settings.WEATHER_PROVIDER_TIMEOUT,
    )
    return TemperatureAggregator(providers, concurrent=settings.WEATHER_CONCURRENT)


def city_from_path(path: str) -> str:
    """Return everything after the second ``/`` of ``path``.

    Raises ``ValueError`` when the path has fewer than three segments.
    """
    segments = path.split("/", 2)
    if len(segments) < 3:
        raise ValueError(f"expected /weather/<city>, got {path!r}")
    return segments[2]


def measure_temperature(service: TemperatureService, city: str) -> Dict[str, Any]:
    """Query ``service`` and build the ``{city, temp, took}`` payload."""
    begin = time.perf_counter_ns()
    temp = service.temperature(city)
    return {
        "city": city,
        "temp": temp,
        "took": format_duration(time.perf_counter_ns() - begin),
    }


class IgnoreClientContentNegotiation(BaseContentNegotiation):
    """Always answer with the first configured renderer."""

    def select_parser(self, request, parsers):
        return parsers[0] if parsers else None

    def select_renderer(self, request, renderers, format_suffix=None):
        return (renderers[0], renderers[0].media_type)


class WeatherView(APIView):
    """Average the current temperature of a city across all providers."""

    permission_classes = [AllowAny]
    content_negotiation_class = IgnoreClientContentNegotiation

    def get(self, request, *args, **kwargs):  # noqa: D401
        """Return ``{city, temp, took}`` for the city named in the path."""
        try:
            city = city_from_path(request.path_info)
        except ValueError as exc:
            return HttpResponse(str(exc), status=status.HTTP_400_BAD_REQUEST, content_type=TEXT_PLAIN)

        try:
            payload = measure_temperature(get_temperature_service(), city)
        except Exception as exc:  # noqa: BLE001 - any provider failure becomes a plain-text 500
            logger.error("Temperature lookup for %s failed: %s", city, exc)
            return HttpResponse(str(exc), status=status.HTTP_500_INTERNAL_SERVER_ERROR, content_type=TEXT_PLAIN)

        return Response(payload, status=status.HTTP_200_OK)


def hello(request):
    return HttpResponse("hello!", content_type=TEXT_PLAIN)
