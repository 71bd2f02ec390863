from __future__ import annotations

import os

import django
import pytest
import requests_mock as requests_mock_lib


os.environ.setdefault("DJANGO_SECRET_KEY", "test-secret")
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "multiweather.settings")
os.environ.setdefault("WEATHER_PROVIDERS", "openweathermap,weatherunderground")
os.environ.setdefault("OPENWEATHERMAP_API_KEY", "owm-key")
os.environ.setdefault("WEATHERUNDERGROUND_API_KEY", "wu-key")
os.environ.setdefault("OPENWEATHERMAP_URL", "https://owm.test/data/2.5/weather")
os.environ.setdefault("WEATHERUNDERGROUND_URL", "https://wu.test/api")

django.setup()


@pytest.fixture()
def requests_mock():
    with requests_mock_lib.Mocker() as mocker:
        yield mocker
