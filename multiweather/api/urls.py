"""API URL configuration."""
from __future__ import annotations

from django.urls import path, re_path

from multiweather.api.views import WeatherView, hello

urlpatterns = [
    # The view itself splits the path so that short paths get a 400.
    re_path(r"^weather(?:/.*)?$", WeatherView.as_view(), name="weather"),
    path("hello", hello, name="hello"),
]
