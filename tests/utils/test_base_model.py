import pytest
from pydantic import field_validator
from utils.base_model import ImmutableModel


class Pair(ImmutableModel):
    """Simple test model with two numeric fields."""
    first: float
    second: float


class PositivePair(Pair):
    """Model whose validator must run again on copies."""

    @field_validator("second")
    @classmethod
    def validate_second(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("second must be positive")
        return value


class TestImmutableModel:
    """Test suite for ImmutableModel base class."""

    def test_immutability(self):
        """Test that models are immutable after creation."""
        model = Pair(first=1.0, second=2.0)

        with pytest.raises(Exception):
            model.first = 5.0

    def test_with_changes_basic(self):
        """Test creating modified copies with with_changes() method."""
        original = Pair(first=1.0, second=2.0)
        modified = original.with_changes(first=4.0)

        assert original.first == 1.0
        assert modified.first == 4.0
        assert modified.second == 2.0
        assert original is not modified

    def test_with_changes_keeps_concrete_class(self):
        modified = PositivePair(first=1.0, second=2.0).with_changes(first=3.0)
        assert type(modified) is PositivePair

    def test_with_changes_invalid_field(self):
        """Test that with_changes() raises error for invalid field names."""
        model = Pair(first=1.0, second=2.0)

        with pytest.raises(ValueError) as exc_info:
            model.with_changes(third=3.0)

        assert "Invalid field: third" in str(exc_info.value)

    def test_with_changes_revalidates(self):
        model = PositivePair(first=1.0, second=2.0)

        with pytest.raises(ValueError):
            model.with_changes(second=-1.0)

    def test_chained_with_changes(self):
        """Test that with_changes can be chained."""
        original = Pair(first=0.0, second=0.0)

        result = original.with_changes(first=1.0) \
            .with_changes(second=2.0) \
            .with_changes(first=3.0)

        assert result == Pair(first=3.0, second=2.0)
        assert original == Pair(first=0.0, second=0.0)

    def test_components_and_formatting(self):
        model = Pair(first=1.5, second=-2.0)

        assert model.components() == (1.5, -2.0)
        assert model.format_as_tuple() == "(1.5, -2.0)"
        assert str(model) == "(1.5, -2.0)"

    def test_is_close_to(self):
        model = Pair(first=1.0, second=2.0)

        assert model.is_close_to(Pair(first=1.0 + 1e-12, second=2.0))
        assert not model.is_close_to(Pair(first=1.001, second=2.0))
        assert model.is_close_to(Pair(first=1.001, second=2.0), tolerance=0.01)

    def test_is_close_to_requires_same_type(self):
        assert not Pair(first=1.0, second=2.0).is_close_to(PositivePair(first=1.0, second=2.0))
        assert not Pair(first=1.0, second=2.0).is_close_to((1.0, 2.0))

    def test_is_close_to_nan_never_close(self):
        model = Pair(first=float("nan"), second=2.0)
        assert not model.is_close_to(model)
