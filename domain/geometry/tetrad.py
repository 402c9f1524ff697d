# domain/geometry/tetrad.py
"""
Homogeneous coordinates for 3D space.

A tetrad carries four components x, y, z and w. The fourth component
discriminates positions (w = 1.0) from directions (w = 0.0). Point and
Vector split the two cases into distinct types and only expose the
operators that make geometric sense between them:

    Vector + Vector -> Vector        Point - Point  -> Vector
    Point  + Vector -> Point         Point - Vector -> Point
    -Vector         -> Vector        Vector - Vector -> Vector

Every other combination (Point + Point, -Point, Vector - Point, ...)
raises TypeError.
"""
import logging
import math
from typing import Union

from pydantic import Field, field_validator

from domain.geometry.constants import MACHINE_EPSILON, POINT_W, VECTOR_W
from utils.base_model import ImmutableModel
from utils.numerics import ieee_divide

logger = logging.getLogger(__name__)

__all__ = ["Point", "Vector", "TetradLike", "point", "vector"]


def _check_scalar(factor) -> None:
    if not isinstance(factor, (int, float)):
        raise TypeError(f"Scale factor must be a number, got {type(factor).__name__}")


class _Tetrad(ImmutableModel):
    """
    Shared base of Point and Vector holding the four components.

    Not instantiable on its own: every value is either a Point (w = 1.0)
    or a Vector (w = 0.0), created through point() and vector().
    """
    x: float = Field(description="X coordinate")
    y: float = Field(description="Y coordinate")
    z: float = Field(description="Z coordinate")
    w: float = Field(description="Discriminant: 1.0 for points, 0.0 for vectors")

    def model_post_init(self, __context) -> None:
        super().model_post_init(__context)
        if type(self) is _Tetrad:
            raise TypeError("Use point() or vector() to create a tetrad")

    def is_point(self) -> bool:
        """Check whether the discriminant denotes a point."""
        return abs(self.w - POINT_W) < MACHINE_EPSILON

    def is_vector(self) -> bool:
        """Check whether the discriminant denotes a vector."""
        return abs(self.w - VECTOR_W) < MACHINE_EPSILON

    def _with_xyz(self, x: float, y: float, z: float):
        return self.__class__(x=x, y=y, z=z, w=self.w)

    def scale(self, factor: float):
        """
        Multiply x, y and z by a scalar, keeping the discriminant.

        Raises:
            TypeError: If factor is not a number
        """
        _check_scalar(factor)
        return self._with_xyz(self.x * factor, self.y * factor, self.z * factor)

    def scale_inverse(self, factor: float):
        """
        Divide x, y and z by a scalar, keeping the discriminant.

        Division by zero is not guarded: components become infinite, or NaN
        where the component itself is zero.

        Raises:
            TypeError: If factor is not a number
        """
        _check_scalar(factor)
        if factor == 0:
            logger.debug(f"Scaling {self} by the inverse of zero")
        return self._with_xyz(
            ieee_divide(self.x, factor),
            ieee_divide(self.y, factor),
            ieee_divide(self.z, factor),
        )

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        if isinstance(other, (int, float)):
            return self.scale_inverse(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(x={self.x}, y={self.y}, z={self.z}, w={self.w})"


class Point(_Tetrad):
    """
    Represents a position in 3D space (w = 1.0).

    Points do not add to each other and cannot be negated; the difference
    of two points is the Vector between them.
    """
    w: float = Field(default=POINT_W, description="Discriminant, always 1.0")

    @field_validator("w")
    @classmethod
    def validate_discriminant(cls, value: float) -> float:
        """Validate that the discriminant marks a point."""
        if value != POINT_W:
            raise ValueError(f"Point discriminant must be {POINT_W}, got {value}")
        return value

    def __add__(self, other):
        if isinstance(other, Vector):
            return Point(x=self.x + other.x, y=self.y + other.y, z=self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Point):
            return Vector(x=self.x - other.x, y=self.y - other.y, z=self.z - other.z)
        if isinstance(other, Vector):
            return Point(x=self.x - other.x, y=self.y - other.y, z=self.z - other.z)
        return NotImplemented


class Vector(_Tetrad):
    """
    Represents a direction or displacement in 3D space (w = 0.0).

    Vectors form a vector space: they add, subtract, negate and scale,
    and provide the dot and cross products used for lighting and
    intersection math.
    """
    w: float = Field(default=VECTOR_W, description="Discriminant, always 0.0")

    @field_validator("w")
    @classmethod
    def validate_discriminant(cls, value: float) -> float:
        """Validate that the discriminant marks a vector."""
        if value != VECTOR_W:
            raise ValueError(f"Vector discriminant must be {VECTOR_W}, got {value}")
        return value

    def __add__(self, other):
        if isinstance(other, Vector):
            return Vector(x=self.x + other.x, y=self.y + other.y, z=self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector):
            return Vector(x=self.x - other.x, y=self.y - other.y, z=self.z - other.z)
        return NotImplemented

    def __neg__(self) -> "Vector":
        return Vector(x=-self.x, y=-self.y, z=-self.z)

    def magnitude(self) -> float:
        """Euclidean length over all four components."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)

    def normalize(self) -> "Vector":
        """
        Scale the vector to unit length.

        The zero vector has no direction; normalizing it yields NaN components.
        """
        magnitude = self.magnitude()
        if magnitude == 0:
            logger.debug(f"Normalizing zero-length vector {self}")
        return self.scale_inverse(magnitude)

    def dot(self, other: "Vector") -> float:
        """
        Calculate the dot product with another vector.

        Args:
            other: The second vector in the product

        Returns:
            The sum of the component-wise products over all four components

        Raises:
            TypeError: If other is not a Vector
        """
        if not isinstance(other, Vector):
            raise TypeError(f"Dot product requires a Vector, got {type(other).__name__}")
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other: "Vector") -> "Vector":
        """
        Calculate the cross product with another vector (left-handed system).

        The product is anticommutative: a.cross(b) == -b.cross(a).

        Raises:
            TypeError: If other is not a Vector
        """
        if not isinstance(other, Vector):
            raise TypeError(f"Cross product requires a Vector, got {type(other).__name__}")
        return Vector(
            x=self.y * other.z - self.z * other.y,
            y=self.z * other.x - self.x * other.z,
            z=self.x * other.y - self.y * other.x,
        )


TetradLike = Union[Point, Vector]


def point(x: float, y: float, z: float) -> Point:
    """Create a point at (x, y, z)."""
    return Point(x=x, y=y, z=z)


def vector(x: float, y: float, z: float) -> Vector:
    """Create a vector with components (x, y, z)."""
    return Vector(x=x, y=y, z=z)
