"""Provider registry used to build the configured provider list."""
from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Type

import requests
from django.core.exceptions import ImproperlyConfigured

from .base import DecodeError, HTTPTemperatureProvider, ProviderError, TransportError
from .openweathermap import OpenWeatherMapProvider
from .weatherunderground import WeatherUndergroundProvider

PROVIDER_CLASSES: Dict[str, Type[HTTPTemperatureProvider]] = {
    OpenWeatherMapProvider.name: OpenWeatherMapProvider,
    WeatherUndergroundProvider.name: WeatherUndergroundProvider,
}


def build_providers(
    names: Iterable[str],
    *,
    api_keys: Mapping[str, str],
    base_urls: Optional[Mapping[str, str]] = None,
    timeout: Optional[float] = None,
    session: Optional[requests.Session] = None,
) -> List[HTTPTemperatureProvider]:
    """Instantiate providers in the given order.

    Names may repeat; every entry yields its own provider instance. Unless
    ``session`` is given, each provider builds its own ``requests.Session``.
    """
    base_urls = base_urls or {}
    providers: List[HTTPTemperatureProvider] = []
    for name in names:
        try:
            provider_cls = PROVIDER_CLASSES[name]
        except KeyError:
            known = ", ".join(sorted(PROVIDER_CLASSES))
            raise ImproperlyConfigured(f"Unknown weather provider {name!r} (known: {known})") from None
        providers.append(
            provider_cls(
                api_key=api_keys.get(name, ""),
                base_url=base_urls.get(name),
                timeout=timeout,
                session=session,
            )
        )
    return providers


__all__ = [
    "PROVIDER_CLASSES",
    "build_providers",
    "HTTPTemperatureProvider",
    "OpenWeatherMapProvider",
    "WeatherUndergroundProvider",
    "ProviderError",
    "TransportError",
    "DecodeError",
]
