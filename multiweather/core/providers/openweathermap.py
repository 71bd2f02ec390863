"""OpenWeatherMap temperature provider."""
from __future__ import annotations

from typing import Optional

from .base import HTTPTemperatureProvider


class OpenWeatherMapProvider(HTTPTemperatureProvider):
    """Integration with the OpenWeatherMap current weather endpoint.

    The endpoint reports ``main.temp`` in Kelvin when no ``units`` parameter
    is sent, so the reading is returned unchanged.
    """

    name = "openweathermap"
    base_url = "http://api.openweathermap.org/data/2.5/weather"

    def __init__(self, api_key: str, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(base_url=base_url, **kwargs)
        self.api_key = api_key

    def temperature(self, city: str) -> float:
        data = self._get_json(self.base_url, params={"APPID": self.api_key, "q": city})
        kelvin = self._extract_number(data, "main", "temp")
        self._log.info("%s: %s %.2f", self.name, city, kelvin)
        return kelvin


__all__ = ["OpenWeatherMapProvider"]
