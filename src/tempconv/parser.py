"""Parse free-form temperature literals such as ``"36.9C"`` or ``"−40 °F"``."""
from __future__ import annotations

import re
from functools import lru_cache

import numpy as np

from .errors import EmptyTemperatureError, InvalidTemperatureError, TemperatureValueError
from .models import Temperature
from .units import TemperatureUnit, unit_for_symbol

__all__ = ["parse_temperature", "temperature_pattern"]

_MINUS_SIGN = "−"

# Pattern examples handled:
#   36.9C
#   98.6 °f
#   −40°C
#   0K
_VALUE_PATTERN = rf"(?P<value>[-{_MINUS_SIGN}]?\d+(?:\.\d+)?)"


@lru_cache(maxsize=None)
def temperature_pattern() -> re.Pattern[str]:
    """Return the compiled literal pattern built from the unit registry."""

    units = "|".join(unit.pattern for unit in TemperatureUnit)
    return re.compile(rf"{_VALUE_PATTERN}\s?(?P<unit>{units})", re.IGNORECASE)


def _parse_value(raw: str) -> np.float32:
    normalized = raw.replace(_MINUS_SIGN, "-")
    if not normalized.isascii():
        cause = ValueError(f"{raw} contains non-ASCII digits")
        raise TemperatureValueError(raw, cause) from cause
    try:
        number = float(normalized)
    except ValueError as exc:
        raise TemperatureValueError(raw, exc) from exc
    with np.errstate(over="ignore"):
        value = np.float32(number)
    if not np.isfinite(value):
        cause = OverflowError(f"{raw} does not fit in a 32-bit float")
        raise TemperatureValueError(raw, cause) from cause
    return value


def parse_temperature(text: str) -> Temperature:
    """Parse ``text`` into a :class:`Temperature`.

    The whole string must match; callers are expected to strip surrounding
    whitespace. Raises :class:`EmptyTemperatureError` for ``""``,
    :class:`InvalidTemperatureError` for anything outside the literal grammar
    and :class:`TemperatureValueError` when the digits cannot be read.
    """

    if not text:
        raise EmptyTemperatureError()

    match = temperature_pattern().fullmatch(text)
    if match is None:
        raise InvalidTemperatureError(text)

    value = _parse_value(match.group("value"))
    unit = unit_for_symbol(match.group("unit"))
    if unit is None:
        raise InvalidTemperatureError(text)
    return Temperature(value=value, unit=unit)
