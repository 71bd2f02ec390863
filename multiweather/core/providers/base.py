from __future__ import annotations

import logging
import math
import threading
from typing import Any, Mapping, Optional

import requests


class ProviderError(RuntimeError):
    """Base provider error."""


class TransportError(ProviderError):
    """Raised when the provider could not be reached or answered with an error status."""


class DecodeError(ProviderError):
    """Raised when the provider body is not JSON or lacks the expected fields."""


class HTTPTemperatureProvider:
    """Base class for providers backed by one JSON-over-HTTP endpoint.

    Each call performs exactly one GET. The response is closed on every
    exit path and its body is decoded once. There is no retry and, unless
    ``timeout`` is given, no timeout either.

    Without an explicit ``session`` every thread gets its own
    ``requests.Session``, since sessions are not thread-safe.
    """

    name = "http"
    base_url = ""

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = (base_url or self.base_url).rstrip("/")
        self.timeout = timeout
        self._session = session
        self._local = threading.local()
        self._log = logging.getLogger(self.__class__.__name__)

    @property
    def session(self) -> requests.Session:
        if self._session is not None:
            return self._session
        session = getattr(self._local, "session", None)
        if session is None:
            session = self._local.session = self._build_session()
        return session

    def temperature(self, city: str) -> float:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self.base_url!r})"

    # helpers ------------------------------------------------------------
    def _build_session(self) -> requests.Session:
        return requests.Session()

    def _get_json(self, url: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            self._log.error("Request to %s failed", self.name, exc_info=exc)
            raise TransportError(str(exc)) from exc

        with response:
            try:
                response.raise_for_status()
            except requests.HTTPError as exc:
                self._log.error("Provider %s returned %s: %s", self.name, response.status_code, response.text[:200])
                raise TransportError(str(exc)) from exc
            try:
                return response.json()
            except ValueError as exc:
                self._log.error("Failed to decode JSON from %s", self.name, exc_info=exc)
                raise DecodeError(str(exc)) from exc

    def _extract_number(self, payload: Any, *path: str) -> float:
        field = ".".join(path)
        value = payload
        for key in path:
            if not isinstance(value, Mapping) or key not in value:
                raise DecodeError(f"{self.name}: missing {field} in response")
            value = value[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise DecodeError(f"{self.name}: {field} is not a number: {value!r}")
        try:
            number = float(value)
        except OverflowError as exc:
            raise DecodeError(f"{self.name}: {field} is out of range: {exc}") from exc
        if not math.isfinite(number):
            raise DecodeError(f"{self.name}: {field} is not a finite number: {value!r}")
        return number


__all__ = ["HTTPTemperatureProvider", "ProviderError", "TransportError", "DecodeError"]
