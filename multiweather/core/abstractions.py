"""Core abstractions for the temperature domain."""
from __future__ import annotations

from typing import Protocol


class TemperatureProvider(Protocol):
    """A data source capable of returning one temperature reading per city."""

    name: str

    def temperature(self, city: str) -> float:
        """Return the current temperature for ``city`` in Kelvin."""
        ...


class TemperatureService(Protocol):
    """High level service that exposes temperatures to the API layer."""

    def temperature(self, city: str) -> float:
        """Return a single Kelvin reading for ``city``."""
        ...
