import math
import pytest
from utils.numerics import ieee_divide


class TestIeeeDivide:
    def test_regular_division(self):
        assert ieee_divide(3.0, 2.0) == 1.5
        assert ieee_divide(-3.0, 2.0) == -1.5

    @pytest.mark.parametrize("numerator, denominator, expected", [
        (1.0, 0.0, math.inf),
        (-1.0, 0.0, -math.inf),
        (1.0, -0.0, -math.inf),
        (-1.0, -0.0, math.inf),
        (math.inf, 0.0, math.inf),
    ])
    def test_division_by_zero_is_infinite(self, numerator, denominator, expected):
        assert ieee_divide(numerator, denominator) == expected

    def test_zero_by_zero_is_nan(self):
        assert math.isnan(ieee_divide(0.0, 0.0))
        assert math.isnan(ieee_divide(-0.0, 0.0))

    def test_nan_propagates(self):
        assert math.isnan(ieee_divide(math.nan, 0.0))
        assert math.isnan(ieee_divide(math.nan, 2.0))

    def test_integer_operands(self):
        assert ieee_divide(1, 0) == math.inf
