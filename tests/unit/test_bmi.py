"""Unit tests for BMI helpers (hardman/utils/bmi.py)"""
import pytest

from hardman.utils.bmi import (
    assess_bmi,
    classify_bmi,
    color_for_bmi,
    compute_bmi,
    gauge_fraction,
    UNDETERMINED_LABEL,
)


def test_compute_bmi_normal():
    """70 kg at 175 cm is a normal BMI"""
    bmi = compute_bmi("70", "175")

    assert bmi == pytest.approx(22.857, abs=0.01)
    assert classify_bmi(bmi) == "Normal"


@pytest.mark.parametrize("weight,height", [
    ("", "170"),
    ("70", "0"),
    ("70", ""),
    ("abc", "170"),
    ("-70", "170"),
    ("70", "nan"),
    (None, "170"),
])
def test_compute_bmi_undetermined(weight, height):
    """Missing, non-numeric or non-positive input gives no BMI"""
    assert compute_bmi(weight, height) is None


def test_compute_bmi_tolerates_whitespace():
    assert compute_bmi(" 80 ", "180 ") == pytest.approx(24.69, abs=0.01)


def test_classify_bmi_boundaries():
    """Lower bounds are inclusive"""
    assert classify_bmi(18.49) == "Underweight"
    assert classify_bmi(18.5) == "Normal"
    assert classify_bmi(24.99) == "Normal"
    assert classify_bmi(25.0) == "Overweight"
    assert classify_bmi(29.99) == "Overweight"
    assert classify_bmi(30.0) == "Obese"


def test_color_table_is_fixed():
    assert color_for_bmi(17) == "#6C8A3F"
    assert color_for_bmi(22) == "#C59B2A"
    assert color_for_bmi(27) == "#B5651D"
    assert color_for_bmi(35) == "#8E2F2A"


def test_gauge_fraction_clamped():
    assert gauge_fraction(None) == 0.0
    assert gauge_fraction(5) == 0.0
    assert gauge_fraction(25) == pytest.approx(0.5)
    assert gauge_fraction(55) == 1.0


def test_assess_bmi_determined():
    result = assess_bmi("95", "175")

    assert result.is_determined
    assert result.label == "Obese"
    assert result.color == "#8E2F2A"
    assert 0 < result.gauge < 1


def test_assess_bmi_undetermined():
    result = assess_bmi("", "")

    assert not result.is_determined
    assert result.value is None
    assert result.label == UNDETERMINED_LABEL
    assert result.gauge == 0.0
