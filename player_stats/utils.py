"""
Numeric helpers shared by the player statistics modules.
"""

from decimal import Decimal, ROUND_HALF_UP, localcontext


def round_half_up(value: float, decimals: int) -> float:
    """
    Round a value to a number of decimal places, rounding halves up.

    The value is rounded from its shortest decimal representation, so
    round_half_up(2.675, 2) gives 2.68 where round() gives 2.67.

    Args:
        value: Value to round
        decimals: Number of decimal places (>= 0)

    Returns:
        float: The rounded value
    """
    if isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0:
        raise ValueError(f"Decimal places must be a non-negative integer, got {decimals!r}")

    number = Decimal(repr(float(value)))
    if not number.is_finite():
        return float(value)

    # Precision must cover every digit left of the point plus the decimals
    with localcontext() as context:
        context.prec = max(context.prec, number.adjusted() + decimals + 2)
        return float(number.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP))
