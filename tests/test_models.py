import numpy as np
import pytest

from tempconv.models import Temperature, format_temperature
from tempconv.units import TemperatureUnit


def test_value_is_narrowed_to_32_bits() -> None:
    temperature = Temperature(36.9, TemperatureUnit.CELSIUS)
    assert isinstance(temperature.value, np.float32)
    assert temperature.value == np.float32(36.9)


def test_temperature_is_immutable() -> None:
    temperature = Temperature(1.0, TemperatureUnit.KELVIN)
    with pytest.raises(AttributeError):
        temperature.value = 2.0  # type: ignore[misc]


@pytest.mark.parametrize(
    "value, unit, expected",
    [
        (36.9, TemperatureUnit.CELSIUS, "36.9 °C"),
        (98.6, TemperatureUnit.FAHRENHEIT, "98.6 °F"),
        (0.0, TemperatureUnit.KELVIN, "0 K"),
        (-273.15, TemperatureUnit.CELSIUS, "-273.15 °C"),
    ],
)
def test_format_temperature(value: float, unit: TemperatureUnit, expected: str) -> None:
    temperature = Temperature(value, unit)
    assert format_temperature(temperature) == expected
    assert str(temperature) == expected


def test_as_dict() -> None:
    payload = Temperature(0.0, TemperatureUnit.KELVIN).as_dict()
    assert payload == {"value": 0.0, "unit": "kelvin", "symbol": "K", "text": "0 K"}
