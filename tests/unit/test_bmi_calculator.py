import logging

import pytest

from app.services.bmi_calculator import calculate_bmi


@pytest.mark.parametrize("weight_kg", [0, 0.0, 70, -5, 1e6])
def test_zero_height_returns_sentinel(weight_kg):
    assert calculate_bmi(0, weight_kg) == "0.0"


def test_zero_height_is_logged(caplog):
    with caplog.at_level(logging.INFO, logger="app.services.bmi_calculator"):
        calculate_bmi(0.0, 70)
    assert "Height is zero" in caplog.text


@pytest.mark.parametrize(
    "height_cm, weight_kg, expected",
    [
        (170, 70, "24.22"),
        (100, 100, "100"),
        (200, 62, "15.5"),
        (180, 81, "25"),
    ],
)
def test_calculate_bmi(height_cm, weight_kg, expected):
    assert calculate_bmi(height_cm, weight_kg) == expected


def test_calculate_bmi_is_idempotent():
    assert calculate_bmi(172.5, 68.3) == calculate_bmi(172.5, 68.3)


def test_calculate_bmi_zero_weight():
    assert calculate_bmi(170, 0) == "0"


def test_calculate_bmi_does_not_validate_negative_input():
    assert calculate_bmi(100, -50) == "-50"


def test_calculate_bmi_height_underflow_does_not_raise():
    assert calculate_bmi(1e-200, 70) == "∞"
    assert calculate_bmi(1e-200, 0) == "NaN"


def test_calculate_bmi_propagates_nan():
    assert calculate_bmi(170, float("nan")) == "NaN"


@pytest.mark.parametrize("height_cm", [150.3, 163.7, 177.77, 191.1])
@pytest.mark.parametrize("weight_kg", [48.2, 63.35, 99.9])
def test_calculate_bmi_has_at_most_two_decimals(height_cm, weight_kg):
    bmi = calculate_bmi(height_cm, weight_kg)
    if "." in bmi:
        assert len(bmi.split(".")[1]) <= 2
