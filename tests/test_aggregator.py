from __future__ import annotations

import random

import pytest

from multiweather.core.providers import ProviderError, TransportError
from multiweather.core.services.aggregator import TemperatureAggregator, average_temperature


def test_single_provider_returns_its_reading(static_provider) -> None:
    service = TemperatureAggregator([static_provider(300.0)])

    assert service.temperature("Boston") == 300.0


def test_two_providers_are_averaged(static_provider) -> None:
    service = TemperatureAggregator([static_provider(290.0), static_provider(310.0)])

    assert service.temperature("Tokyo") == 300.0


@pytest.mark.parametrize("seed", range(10))
def test_result_is_arithmetic_mean(static_provider, seed: int) -> None:
    rng = random.Random(seed)
    readings = [rng.uniform(200.0, 330.0) for _ in range(rng.randint(1, 8))]
    service = TemperatureAggregator([static_provider(k) for k in readings])

    assert service.temperature("Lima") == pytest.approx(sum(readings) / len(readings), abs=1e-9)


def test_providers_are_queried_in_order_with_city_verbatim(static_provider) -> None:
    calls = []

    class Recording(static_provider):
        def temperature(self, city: str) -> float:
            calls.append(self.name)
            return super().temperature(city)

    first, second = Recording(280.0, "first"), Recording(290.0, "second")
    TemperatureAggregator([first, second]).temperature("São Paulo/Centro")

    assert calls == ["first", "second"]
    assert first.cities == second.cities == ["São Paulo/Centro"]


def test_same_provider_may_appear_twice(static_provider) -> None:
    provider = static_provider(275.0)
    service = TemperatureAggregator([provider, provider])

    assert service.temperature("Oslo") == 275.0
    assert provider.calls == 2


def test_failure_aborts_and_skips_remaining_providers(static_provider, failing_provider) -> None:
    first = static_provider(280.0)
    failing = failing_provider("dial tcp: lookup api.example: no such host")
    last = static_provider(290.0)
    service = TemperatureAggregator([first, failing, last])

    with pytest.raises(TransportError) as excinfo:
        service.temperature("Paris")

    assert str(excinfo.value) == "dial tcp: lookup api.example: no such host"
    assert first.calls == 1
    assert failing.calls == 1
    assert last.calls == 0


def test_error_is_propagated_unchanged(static_provider) -> None:
    error = ProviderError("bad payload")

    class Raising:
        name = "raising"

        def temperature(self, city: str) -> float:
            raise error

    with pytest.raises(ProviderError) as excinfo:
        TemperatureAggregator([static_provider(300.0), Raising()]).temperature("Paris")

    assert excinfo.value is error


def test_empty_provider_list_is_rejected() -> None:
    with pytest.raises(ValueError):
        TemperatureAggregator([])


def test_average_temperature_function(static_provider) -> None:
    assert average_temperature("Tokyo", static_provider(290.0), static_provider(310.0)) == 300.0
    with pytest.raises(ValueError):
        average_temperature("Tokyo")


def test_concurrent_mode_matches_sequential(static_provider) -> None:
    readings = [271.3, 288.9, 301.05, 296.4]
    sequential = TemperatureAggregator([static_provider(k) for k in readings])
    concurrent = TemperatureAggregator([static_provider(k) for k in readings], concurrent=True)

    assert concurrent.temperature("Rome") == sequential.temperature("Rome")


def test_concurrent_mode_fails_whole_request(static_provider, failing_provider) -> None:
    service = TemperatureAggregator(
        [static_provider(290.0), failing_provider("timeout"), static_provider(300.0)],
        concurrent=True,
    )

    with pytest.raises(TransportError, match="timeout"):
        service.temperature("Rome")


def test_providers_property_is_read_only_snapshot(static_provider) -> None:
    provider = static_provider(300.0)
    service = TemperatureAggregator([provider])

    assert service.providers == (provider,)
