"""Weather Underground temperature provider."""
from __future__ import annotations

from typing import Optional

from ..units import celsius_to_kelvin
from .base import HTTPTemperatureProvider


class WeatherUndergroundProvider(HTTPTemperatureProvider):
    name = "weatherunderground"
    base_url = "http://api.wunderground.com/api"

    def __init__(self, api_key: str, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(base_url=base_url, **kwargs)
        self.api_key = api_key

    def conditions_url(self, city: str) -> str:
        # The city goes into the path as given.
        return f"{self.base_url}/{self.api_key}/conditions/q/{city}.json"

    def temperature(self, city: str) -> float:
        data = self._get_json(self.conditions_url(city))
        celsius = self._extract_number(data, "current_observation", "temp_c")
        kelvin = celsius_to_kelvin(celsius)
        self._log.info("%s: %s %.2f", self.name, city, kelvin)
        return kelvin


__all__ = ["WeatherUndergroundProvider"]
