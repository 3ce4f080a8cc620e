"""
Body-mass-index helpers

BMI = weight(kg) / height(m)^2, with height entered in centimeters.

Categories:
- < 18.5: Underweight
- 18.5 - 25: Normal
- 25 - 30: Overweight
- >= 30: Obese
"""
import logging
import math
from typing import Optional

from hardman.models.settings import BmiAssessment

logger = logging.getLogger(__name__)

UNDETERMINED_LABEL = "Complete weight and height"
UNDETERMINED_COLOR = "#3A3F34"

# (upper bound exclusive, label, gauge color)
BMI_CATEGORIES = [
    (18.5, "Underweight", "#6C8A3F"),
    (25.0, "Normal", "#C59B2A"),
    (30.0, "Overweight", "#B5651D"),
    (math.inf, "Obese", "#8E2F2A"),
]

# Gauge spans BMI 10..40
GAUGE_MIN = 10.0
GAUGE_SPAN = 30.0


def parse_measurement(raw: Optional[str]) -> Optional[float]:
    """Parse a free-form numeric field; None for blank or invalid input"""
    if raw is None:
        return None
    try:
        value = float(str(raw).strip())
    except ValueError:
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def compute_bmi(weight: Optional[str], height: Optional[str]) -> Optional[float]:
    """
    Compute BMI from weight (kg) and height (cm) strings

    Returns:
        BMI value, or None when either measurement is missing or invalid
    """
    w = parse_measurement(weight)
    h = parse_measurement(height)
    if w is None or h is None:
        logger.debug(f"BMI undetermined for weight={weight!r} height={height!r}")
        return None
    meters = h / 100
    return w / (meters * meters)


def _category(bmi: float):
    for upper, label, color in BMI_CATEGORIES:
        if bmi < upper:
            return label, color
    return BMI_CATEGORIES[-1][1], BMI_CATEGORIES[-1][2]


def classify_bmi(bmi: float) -> str:
    """Category label for a BMI value"""
    return _category(bmi)[0]


def color_for_bmi(bmi: float) -> str:
    """Gauge color (hex) for a BMI value"""
    return _category(bmi)[1]


def gauge_fraction(bmi: Optional[float]) -> float:
    """Fill level of the BMI gauge, clamped to 0..1"""
    if bmi is None:
        return 0.0
    return min(max((bmi - GAUGE_MIN) / GAUGE_SPAN, 0.0), 1.0)


def assess_bmi(weight: Optional[str], height: Optional[str]) -> BmiAssessment:
    """Compute BMI and bundle label, color and gauge level for display"""
    bmi = compute_bmi(weight, height)
    if bmi is None:
        return BmiAssessment(value=None, label=UNDETERMINED_LABEL, color=UNDETERMINED_COLOR, gauge=0.0)

    label, color = _category(bmi)
    return BmiAssessment(value=bmi, label=label, color=color, gauge=gauge_fraction(bmi))
