# utils/base_model.py
from typing import TypeVar, Any, Tuple, cast
from pydantic import BaseModel
from domain.geometry.constants import EPSILON

T = TypeVar('T', bound='ImmutableModel')


class ImmutableModel(BaseModel):
    """
    Base class for all value types providing immutability and copy functionality.

    All domain values inherit from this class to ensure consistent behavior:
    - Immutability: All instances are frozen (and therefore hashable) after creation
    - Copyability: Modified copies are created via with_changes(), re-running validation
    """
    model_config = {
        "frozen": True,
    }

    def with_changes(self: T, **changes: Any) -> T:
        """
        Create a new instance with specified changes.

        Args:
            **changes: Keyword arguments with field values to change

        Returns:
            New instance of the same concrete class with updated values

        Raises:
            ValueError: If an invalid field name is provided, or the changed
                values fail the validators of the concrete class
        """
        current_data = self.model_dump()

        for key, value in changes.items():
            if key not in current_data:
                raise ValueError(f"Invalid field: {key}")
            current_data[key] = value

        return cast(T, self.__class__.model_validate(current_data))

    def components(self) -> Tuple[float, ...]:
        """Field values in declaration order."""
        return tuple(getattr(self, name) for name in self.__class__.model_fields)

    def format_as_tuple(self) -> str:
        """Format the value as a tuple string."""
        return "(" + ", ".join(str(value) for value in self.components()) + ")"

    def is_close_to(self, other: Any, tolerance: float = None) -> bool:
        """
        Check if another value of the same type matches this one component-wise.

        Args:
            other: The value to compare with
            tolerance: Maximum absolute difference per component.
                      If None, uses the default EPSILON value.

        Returns:
            True if both values have the same type and every pair of
            components lies within the tolerance
        """
        if tolerance is None:
            tolerance = EPSILON
        if type(other) is not type(self):
            return False
        return all(
            abs(mine - theirs) <= tolerance
            for mine, theirs in zip(self.components(), other.components())
        )

    def __str__(self) -> str:
        return self.format_as_tuple()
