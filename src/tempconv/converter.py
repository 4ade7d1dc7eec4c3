"""Conversions between temperature scales.

Direct rules cover every pair involving Celsius. The remaining pairs are
composed through Celsius, one hop at a time, so a missing hop fails the whole
conversion instead of producing a silent result.
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, List, Tuple

import numpy as np

from .errors import ConversionNotSupportedError
from .models import Temperature
from .units import TemperatureUnit

__all__ = ["PIVOT_UNIT", "convert", "convert_to_others"]

logger = logging.getLogger(__name__)

CELSIUS_TO_FAHRENHEIT_RATIO = np.float32(1.8)
CELSIUS_TO_FAHRENHEIT_OFFSET = np.float32(32.0)
CELSIUS_TO_KELVIN_OFFSET = np.float32(273.15)

PIVOT_UNIT = TemperatureUnit.CELSIUS

Rule = Callable[[np.float32], np.float32]


def _celsius_to_fahrenheit(value: np.float32) -> np.float32:
    return value * CELSIUS_TO_FAHRENHEIT_RATIO + CELSIUS_TO_FAHRENHEIT_OFFSET


def _celsius_to_kelvin(value: np.float32) -> np.float32:
    return value + CELSIUS_TO_KELVIN_OFFSET


def _fahrenheit_to_celsius(value: np.float32) -> np.float32:
    return (value - CELSIUS_TO_FAHRENHEIT_OFFSET) / CELSIUS_TO_FAHRENHEIT_RATIO


def _kelvin_to_celsius(value: np.float32) -> np.float32:
    return value - CELSIUS_TO_KELVIN_OFFSET


_DIRECT_RULES: Dict[Tuple[TemperatureUnit, TemperatureUnit], Rule] = {
    (TemperatureUnit.CELSIUS, TemperatureUnit.FAHRENHEIT): _celsius_to_fahrenheit,
    (TemperatureUnit.CELSIUS, TemperatureUnit.KELVIN): _celsius_to_kelvin,
    (TemperatureUnit.FAHRENHEIT, TemperatureUnit.CELSIUS): _fahrenheit_to_celsius,
    (TemperatureUnit.KELVIN, TemperatureUnit.CELSIUS): _kelvin_to_celsius,
}

_COMPOSED_PAIRS = frozenset(
    {
        (TemperatureUnit.FAHRENHEIT, TemperatureUnit.KELVIN),
        (TemperatureUnit.KELVIN, TemperatureUnit.FAHRENHEIT),
    }
)


def convert(temperature: Temperature, target: TemperatureUnit) -> Temperature:
    """Convert ``temperature`` to ``target``.

    Converting to the current unit returns ``temperature`` itself so no-op
    conversions never drift. Raises :class:`ConversionNotSupportedError` when
    neither a direct nor a composed rule exists for the pair.
    """

    source = temperature.unit
    if source is target:
        return temperature

    pair = (source, target)
    rule = _DIRECT_RULES.get(pair)
    if rule is not None:
        # Readings near the float32 limit overflow to inf.
        with np.errstate(over="ignore"):
            value = rule(temperature.value)
        return Temperature(value=value, unit=target)

    if pair in _COMPOSED_PAIRS:
        return convert(convert(temperature, PIVOT_UNIT), target)

    raise ConversionNotSupportedError(source, target)


def convert_to_others(temperature: Temperature) -> List[Temperature]:
    """Convert ``temperature`` to every other unit, in registry order.

    Unsupported pairs are skipped; any other conversion error propagates.
    """

    results: List[Temperature] = []
    for unit in TemperatureUnit:
        if unit is temperature.unit:
            continue
        try:
            results.append(convert(temperature, unit))
        except ConversionNotSupportedError as exc:
            logger.debug("Skipping unsupported conversion: %s", exc)
    return results
