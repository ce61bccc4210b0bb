import pytest
from pydantic import ValidationError

from app.models.measurement import (
    HEIGHT_UNITS,
    WEIGHT_UNITS,
    Height,
    HeightUnit,
    Weight,
    WeightUnit,
)


def test_unit_choices_start_with_base_unit():
    assert HEIGHT_UNITS == ["cm", "in"]
    assert WEIGHT_UNITS == ["kg", "lbs"]


def test_height_defaults_to_centimeters():
    height = Height(value=170)
    assert height.unit == HeightUnit.CM
    assert height.to_cm() == 170


def test_height_in_inches_is_converted():
    height = Height(value=70, unit="in")
    assert height.unit == HeightUnit.IN
    assert height.to_cm() == pytest.approx(177.8)


def test_weight_defaults_to_kilograms():
    assert Weight(value=70).to_kg() == 70


def test_weight_in_pounds_is_converted():
    weight = Weight(value=150, unit=WeightUnit.LBS)
    assert weight.to_kg() == pytest.approx(68.0388)


def test_unknown_unit_is_rejected():
    with pytest.raises(ValidationError):
        Height(value=170, unit="ft")
    with pytest.raises(ValidationError):
        Weight(value=70, unit="st")
