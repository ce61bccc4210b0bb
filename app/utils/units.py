CM_PER_INCH = 2.54
KG_PER_LB = 0.453592


def inches_to_cm(inches: float) -> float:
    """Convert inches to centimeters."""
    return inches * CM_PER_INCH


def lbs_to_kg(lbs: float) -> float:
    """Convert pounds to kilograms."""
    return lbs * KG_PER_LB
