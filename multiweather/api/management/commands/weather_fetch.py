"""Management command to fetch a temperature using the same stack as the API."""
from __future__ import annotations

import json
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from multiweather.api.views import get_temperature_service, measure_temperature


class Command(BaseCommand):
    help = "Fetch the averaged current temperature (Kelvin) for a city"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--city", type=str, required=True, help="City name, passed to providers as given")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        city = options["city"]
        try:
            payload = measure_temperature(get_temperature_service(), city)
        except Exception as exc:  # noqa: BLE001 - reported like the API reports it
            raise CommandError(str(exc)) from exc

        self.stdout.write(json.dumps(payload))
