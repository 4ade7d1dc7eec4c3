"""Registry of the supported temperature scales."""
from __future__ import annotations

import re
from enum import Enum
from typing import Optional

__all__ = ["TemperatureUnit", "resolve_unit", "unit_for_symbol"]


class TemperatureUnit(Enum):
    """Supported temperature scales, in the order used for parsing and batching.

    Each member carries a canonical display ``symbol`` and a recognition
    ``pattern``. The pattern is more permissive than the symbol: ``"C"`` and
    ``"°c"`` both denote Celsius while output always reads ``"°C"``.
    """

    CELSIUS = ("°C", r"°?C")
    FAHRENHEIT = ("°F", r"°?F")
    KELVIN = ("K", r"K")

    def __init__(self, symbol: str, pattern: str) -> None:
        self.symbol = symbol
        self.pattern = pattern
        self._regex = re.compile(pattern, re.IGNORECASE)

    def matches(self, text: str) -> bool:
        """Return ``True`` when ``text`` as a whole denotes this unit."""

        return self._regex.fullmatch(text) is not None

    def __str__(self) -> str:
        return self.symbol


def unit_for_symbol(text: str) -> Optional[TemperatureUnit]:
    """Return the first unit, in declared order, whose pattern accepts ``text``."""

    for unit in TemperatureUnit:
        if unit.matches(text):
            return unit
    return None


def resolve_unit(token: str) -> TemperatureUnit:
    """Resolve a unit from its name (``"kelvin"``) or any recognised symbol."""

    cleaned = token.strip()
    by_name = TemperatureUnit.__members__.get(cleaned.upper())
    if by_name is not None:
        return by_name
    unit = unit_for_symbol(cleaned)
    if unit is None:
        known = ", ".join(f"{unit.name.lower()} ({unit.symbol})" for unit in TemperatureUnit)
        raise ValueError(f"Unknown temperature unit '{token}'. Expected one of: {known}")
    return unit
