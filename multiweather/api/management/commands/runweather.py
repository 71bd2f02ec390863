"""Run the development server on the configured weather port."""
from __future__ import annotations

from typing import Any

from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand


class Command(BaseCommand):
    help = "Serve the temperature API (defaults to 0.0.0.0:$WEATHER_PORT)"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("addrport", nargs="?", help="Optional ipaddr:port to bind instead of the default")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        addrport = options.get("addrport") or f"0.0.0.0:{settings.WEATHER_PORT}"
        call_command("runserver", addrport, use_reloader=False)
