import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

TWO_PLACES = Decimal("0.01")


def format_bmi(value: float) -> str:
    """Format a BMI score with at most two decimal digits.

    Rounds half up and drops trailing zeros, so 100.0 renders as "100",
    15.50 as "15.5" and 24.2214 as "24.22".

    Args:
        value: The raw BMI score

    Returns:
        The formatted score. Non-finite scores are rendered as "NaN", "∞" or "-∞".
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"

    # Round the shortest repr, not the binary expansion, so 24.225 -> 24.23
    decimal_value = Decimal(str(value))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, decimal_value.adjusted() + 4)
        rounded = decimal_value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)

    text = format(rounded, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
