"""
BMI calculation service.

BMI = weight_kg / (height_m)²
"""

import logging
import math

from app.utils.formatters import format_bmi

logger = logging.getLogger(__name__)

ZERO_HEIGHT_RESULT = "0.0"


def calculate_bmi(height_cm: float, weight_kg: float) -> str:
    """
    Calculate BMI from height (cm) and weight (kg).

    Args:
        height_cm: Height in centimeters
        weight_kg: Weight in kilograms

    Returns:
        BMI formatted with at most two decimal digits, or "0.0" when the
        height is zero

    Examples:
        >>> calculate_bmi(170, 70)
        '24.22'
        >>> calculate_bmi(100, 100)
        '100'
    """
    if height_cm == 0:
        logger.info("Height is zero, skipping BMI calculation")
        return ZERO_HEIGHT_RESULT

    height_m = height_cm / 100
    height_m_squared = height_m * height_m
    if height_m_squared == 0:
        # Height squared underflowed; follow IEEE division semantics
        bmi = math.nan if weight_kg == 0 else math.copysign(math.inf, weight_kg)
    else:
        bmi = weight_kg / height_m_squared
    logger.debug(f"BMI for {height_cm}cm / {weight_kg}kg: {bmi}")
    return format_bmi(bmi)
