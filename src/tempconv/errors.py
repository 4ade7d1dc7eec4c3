"""Exceptions raised while parsing and converting temperatures.

Parsing and conversion failures live in two separate hierarchies so callers
can tell malformed input apart from an unsupported pair of units.
"""
from __future__ import annotations

from .units import TemperatureUnit

__all__ = [
    "ConversionNotSupportedError",
    "EmptyTemperatureError",
    "InvalidTemperatureError",
    "TemperatureConversionError",
    "TemperatureParseError",
    "TemperatureValueError",
]


class TemperatureParseError(ValueError):
    """Base class for failures while reading a temperature literal."""


class EmptyTemperatureError(TemperatureParseError):
    """Raised when there is no input at all."""

    def __init__(self) -> None:
        super().__init__("cannot parse temperature from empty string")


class InvalidTemperatureError(TemperatureParseError):
    """Raised when the input does not look like a temperature literal."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"invalid temperature literal: {text!r}")


class TemperatureValueError(TemperatureParseError):
    """Raised when the numeric part of a well-formed literal cannot be read."""

    def __init__(self, raw_value: str, cause: Exception) -> None:
        self.raw_value = raw_value
        self.cause = cause
        super().__init__(f"invalid temperature value: {raw_value!r} ({cause})")


class TemperatureConversionError(ValueError):
    """Base class for failures while converting between units."""


class ConversionNotSupportedError(TemperatureConversionError):
    """Raised when no direct or composed rule exists for a pair of units."""

    def __init__(self, from_unit: TemperatureUnit, to_unit: TemperatureUnit) -> None:
        self.from_unit = from_unit
        self.to_unit = to_unit
        super().__init__(f"conversion from {from_unit.symbol} to {to_unit.symbol} is not supported")
