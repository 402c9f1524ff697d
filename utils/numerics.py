"""
Floating-point helpers with IEEE-754 semantics.

Python raises ZeroDivisionError for float division by zero, whereas the
value types of this package propagate infinities and NaN instead of
signalling failure.
"""
import math

__all__ = ["ieee_divide"]


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Divide two floats the way IEEE-754 hardware does.

    Examples:
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(-1.0, 0.0)
        -inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> math.isnan(ieee_divide(0.0, 0.0))
        True
    """
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if math.isnan(numerator) or numerator == 0:
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
