"""Temperature service that averages readings from several providers."""
from __future__ import annotations

from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import Iterable, List, Sequence

import logging

from multiweather.core.abstractions import TemperatureProvider, TemperatureService


logger = logging.getLogger(__name__)


def average_temperature(city: str, *providers: TemperatureProvider) -> float:
    """Query ``providers`` in order and return the mean Kelvin reading.

    The first failing provider aborts the call; its exception propagates
    unchanged and the remaining providers are not queried.
    """
    if not providers:
        raise ValueError("at least one provider is required")
    total = 0.0
    for provider in providers:
        try:
            total += provider.temperature(city)
        except Exception as exc:
            logger.warning("Weather provider %s failed for %s: %s", _name(provider), city, exc)
            raise
    return total / len(providers)


class TemperatureAggregator(TemperatureService):
    """Combine several temperature providers into one averaged reading.

    All providers must succeed for a result to be returned; there is no
    partial averaging, no retry and no caching. With ``concurrent=True`` the
    providers are queried in parallel threads and the first failure wins;
    successful readings are still summed in provider order.
    """

    def __init__(self, providers: Iterable[TemperatureProvider], *, concurrent: bool = False) -> None:
        self._providers: List[TemperatureProvider] = list(providers)
        if not self._providers:
            raise ValueError("at least one provider is required")
        self.concurrent = concurrent

    @property
    def providers(self) -> Sequence[TemperatureProvider]:
        return tuple(self._providers)

    def temperature(self, city: str) -> float:
        if self.concurrent and len(self._providers) > 1:
            return self._temperature_concurrent(city)
        return average_temperature(city, *self._providers)

    def _temperature_concurrent(self, city: str) -> float:
        executor = ThreadPoolExecutor(max_workers=len(self._providers), thread_name_prefix="provider")
        try:
            futures = [executor.submit(provider.temperature, city) for provider in self._providers]
            wait(futures, return_when=FIRST_EXCEPTION)
            for provider, future in zip(self._providers, futures):
                if future.done() and not future.cancelled() and future.exception() is not None:
                    exc = future.exception()
                    logger.warning("Weather provider %s failed for %s: %s", _name(provider), city, exc)
                    raise exc
            readings = [future.result() for future in futures]
        finally:
            executor.shutdown(wait=False, cancel_futures=True)
        return sum(readings) / len(readings)


def _name(provider: TemperatureProvider) -> str:
    return getattr(provider, "name", provider.__class__.__name__)


__all__ = ["TemperatureAggregator", "average_temperature"]
