"""Constants for geometric calculations."""
import sys

# Tolerance for discriminant (w) checks: the gap between 1.0 and the next double
MACHINE_EPSILON = sys.float_info.epsilon

# Default tolerance for approximate comparisons of whole values
EPSILON = 1e-10

# Discriminant values
POINT_W = 1.0
VECTOR_W = 0.0
