"""tempconv – temperature literal parsing and conversion."""

from ._version import __version__
from .converter import convert, convert_to_others
from .errors import (
    ConversionNotSupportedError,
    EmptyTemperatureError,
    InvalidTemperatureError,
    TemperatureConversionError,
    TemperatureParseError,
    TemperatureValueError,
)
from .models import Temperature, format_temperature
from .parser import parse_temperature
from .units import TemperatureUnit, resolve_unit, unit_for_symbol

__all__ = [
    "__version__",
    "ConversionNotSupportedError",
    "EmptyTemperatureError",
    "InvalidTemperatureError",
    "Temperature",
    "TemperatureConversionError",
    "TemperatureParseError",
    "TemperatureUnit",
    "TemperatureValueError",
    "convert",
    "convert_to_others",
    "format_temperature",
    "parse_temperature",
    "resolve_unit",
    "unit_for_symbol",
]
