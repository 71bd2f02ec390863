from __future__ import annotations

from typing import Callable, List

import pytest

from multiweather.api.views import get_temperature_service
from multiweather.core.providers import TransportError

# Matches the endpoint overrides set in the root conftest.
OWM_URL = "https://owm.test/data/2.5/weather"
WU_URL = "https://wu.test/api"


class StaticProvider:
    """Provider double returning a fixed Kelvin reading."""

    def __init__(self, kelvin: float, name: str = "static") -> None:
        self.kelvin = kelvin
        self.name = name
        self.cities: List[str] = []

    @property
    def calls(self) -> int:
        return len(self.cities)

    def temperature(self, city: str) -> float:
        self.cities.append(city)
        return self.kelvin


class FailingProvider:
    name = "failing"

    def __init__(self, message: str = "connection refused", error: type[Exception] = TransportError) -> None:
        self.message = message
        self.error = error
        self.calls = 0

    def temperature(self, city: str) -> float:
        self.calls += 1
        raise self.error(self.message)


@pytest.fixture(autouse=True)
def _fresh_temperature_service():
    get_temperature_service.cache_clear()
    yield
    get_temperature_service.cache_clear()


@pytest.fixture
def static_provider() -> type[StaticProvider]:
    return StaticProvider


@pytest.fixture
def failing_provider() -> type[FailingProvider]:
    return FailingProvider


@pytest.fixture
def owm_url() -> str:
    return OWM_URL


@pytest.fixture
def wu_base_url() -> str:
    return WU_URL


@pytest.fixture
def wu_url() -> Callable[..., str]:
    def build(city: str, key: str = "wu-key") -> str:
        return f"{WU_URL}/{key}/conditions/q/{city}.json"

    return build
