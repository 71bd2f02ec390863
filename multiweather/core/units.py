"""Unit helpers shared by providers and the API layer."""
from __future__ import annotations

ZERO_CELSIUS_IN_KELVIN = 273.15

_MICROSECOND = 1_000
_MILLISECOND = 1_000_000
_SECOND = 1_000_000_000
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE


def celsius_to_kelvin(celsius: float) -> float:
    return celsius + ZERO_CELSIUS_IN_KELVIN


def format_duration(nanoseconds: int) -> str:
    """Render an elapsed time the way Go's ``time.Duration`` prints it.

    Sub-second values use the largest unit below one second (``850ns``,
    ``1.5µs``, ``12.345ms``); longer values are split into hours, minutes
    and fractional seconds (``1.5s``, ``1m30s``, ``2h0m5s``).
    """
    if nanoseconds == 0:
        return "0s"
    sign = "-" if nanoseconds < 0 else ""
    nanoseconds = abs(nanoseconds)

    if nanoseconds < _MICROSECOND:
        return f"{sign}{nanoseconds}ns"
    if nanoseconds < _MILLISECOND:
        return f"{sign}{_fraction(nanoseconds, _MICROSECOND)}µs"
    if nanoseconds < _SECOND:
        return f"{sign}{_fraction(nanoseconds, _MILLISECOND)}ms"

    hours, rest = divmod(nanoseconds, _HOUR)
    minutes, rest = divmod(rest, _MINUTE)
    seconds = f"{_fraction(rest, _SECOND)}s"
    if hours:
        return f"{sign}{hours}h{minutes}m{seconds}"
    if minutes:
        return f"{sign}{minutes}m{seconds}"
    return f"{sign}{seconds}"


def _fraction(value: int, unit: int) -> str:
    whole, remainder = divmod(value, unit)
    if not remainder:
        return str(whole)
    width = len(str(unit)) - 1
    return f"{whole}.{remainder:0{width}d}".rstrip("0")


__all__ = ["ZERO_CELSIUS_IN_KELVIN", "celsius_to_kelvin", "format_duration"]
