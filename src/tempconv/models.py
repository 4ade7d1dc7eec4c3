"""Value objects shared by the parser and the converter."""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .units import TemperatureUnit

__all__ = ["Temperature", "format_temperature", "format_value"]


@dataclass(frozen=True)
class Temperature:
    """A temperature reading with 32-bit precision.

    The value is narrowed to ``numpy.float32`` on construction so parsed and
    converted readings share the same precision.
    """

    value: np.float32
    unit: TemperatureUnit

    def __post_init__(self) -> None:
        if not isinstance(self.value, np.float32):
            object.__setattr__(self, "value", np.float32(self.value))

    def __str__(self) -> str:
        return format_temperature(self)

    def as_dict(self) -> dict:
        """Expose the reading as JSON-friendly primitives."""

        return {
            "value": float(self.value),
            "unit": self.unit.name.lower(),
            "symbol": self.unit.symbol,
            "text": format_temperature(self),
        }


def format_value(value: np.float32) -> str:
    # Shortest digits that round-trip at 32 bits, never in scientific notation.
    return np.format_float_positional(np.float32(value), trim="-")


def format_temperature(temperature: Temperature) -> str:
    """Render ``temperature`` as ``"<value> <symbol>"``."""

    return f"{format_value(temperature.value)} {temperature.unit.symbol}"
