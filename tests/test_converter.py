import itertools
import warnings

import numpy as np
import pytest

from tempconv import converter
from tempconv.converter import convert, convert_to_others
from tempconv.errors import ConversionNotSupportedError, TemperatureConversionError
from tempconv.models import Temperature
from tempconv.parser import parse_temperature
from tempconv.units import TemperatureUnit

C = TemperatureUnit.CELSIUS
F = TemperatureUnit.FAHRENHEIT
K = TemperatureUnit.KELVIN


@pytest.mark.parametrize(
    "source, target, expected",
    [
        (Temperature(100.0, C), F, 212.0),
        (Temperature(0.0, C), K, 273.15),
        (Temperature(212.0, F), C, 100.0),
        (Temperature(273.15, K), C, 0.0),
        (Temperature(-40.0, F), K, 233.15),
        (Temperature(233.15, K), F, -40.0),
    ],
)
def test_convert_known_points(source: Temperature, target: TemperatureUnit, expected: float) -> None:
    result = convert(source, target)
    assert result.unit is target
    assert float(result.value) == pytest.approx(expected, abs=1e-3)


@pytest.mark.parametrize("unit", list(TemperatureUnit))
def test_identity_returns_input_unchanged(unit: TemperatureUnit) -> None:
    temperature = Temperature(36.9, unit)
    result = convert(temperature, unit)
    assert result is temperature
    assert result.value == temperature.value


@pytest.mark.parametrize("source, target", list(itertools.permutations(TemperatureUnit, 2)))
@pytest.mark.parametrize("value", [-40.0, 0.0, 36.9, 98.6, 310.15])
def test_round_trip_restores_value(source: TemperatureUnit, target: TemperatureUnit, value: float) -> None:
    original = Temperature(value, source)
    back = convert(convert(original, target), source)
    assert back.unit is source
    assert float(back.value) == pytest.approx(value, abs=1e-4)


def test_fahrenheit_to_kelvin_goes_through_celsius() -> None:
    temperature = Temperature(98.6, F)
    direct = convert(temperature, K)
    composed = convert(convert(temperature, C), K)
    assert float(direct.value) == pytest.approx(float(composed.value), abs=1e-4)


def test_kelvin_to_fahrenheit_goes_through_celsius() -> None:
    temperature = Temperature(0.0, K)
    direct = convert(temperature, F)
    composed = convert(convert(temperature, C), F)
    assert float(direct.value) == pytest.approx(float(composed.value), abs=1e-4)


@pytest.mark.parametrize(
    "text, value, unit, expected",
    [
        ("36.9C", 36.9, C, {F: 98.42, K: 310.05}),
        ("98.6F", 98.6, F, {C: 37.0, K: 310.15}),
        ("0K", 0.0, K, {C: -273.15, F: -459.67}),
    ],
)
def test_end_to_end_scenarios(text: str, value: float, unit: TemperatureUnit, expected: dict) -> None:
    temperature = parse_temperature(text)
    assert temperature.unit is unit
    assert float(temperature.value) == pytest.approx(value, abs=1e-4)

    results = convert_to_others(temperature)
    assert [result.unit for result in results] == list(expected)
    for result in results:
        assert float(result.value) == pytest.approx(expected[result.unit], abs=1e-3)


def test_convert_to_others_follows_registry_order() -> None:
    results = convert_to_others(Temperature(20.0, F))
    assert [result.unit for result in results] == [C, K]


def test_missing_rule_is_reported(monkeypatch) -> None:
    monkeypatch.delitem(converter._DIRECT_RULES, (C, K))

    with pytest.raises(ConversionNotSupportedError) as excinfo:
        convert(Temperature(0.0, C), K)
    assert excinfo.value.from_unit is C
    assert excinfo.value.to_unit is K
    assert "°C" in str(excinfo.value) and "K" in str(excinfo.value)


def test_composed_conversion_fails_when_a_hop_is_missing(monkeypatch) -> None:
    monkeypatch.delitem(converter._DIRECT_RULES, (C, K))

    with pytest.raises(ConversionNotSupportedError) as excinfo:
        convert(Temperature(32.0, F), K)
    assert excinfo.value.from_unit is C


def test_batch_drops_unsupported_pairs(monkeypatch) -> None:
    monkeypatch.delitem(converter._DIRECT_RULES, (C, K))

    results = convert_to_others(Temperature(100.0, C))
    assert [result.unit for result in results] == [F]


def test_batch_propagates_other_conversion_errors(monkeypatch) -> None:
    def broken(temperature, target):
        raise TemperatureConversionError("boom")

    monkeypatch.setattr(converter, "convert", broken)

    with pytest.raises(TemperatureConversionError, match="boom"):
        convert_to_others(Temperature(100.0, C))


def test_overflow_near_float32_limit_is_silent() -> None:
    temperature = Temperature(3e38, C)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        result = convert(temperature, F)
    assert result.unit is F
    assert np.isinf(result.value)
