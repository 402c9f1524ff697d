from pydantic import Field
from utils.base_model import ImmutableModel


class Color(ImmutableModel):
    """
    Represents an RGB color used for shading composition.

    Components are not clamped: values below 0 or above 1 are valid here
    and are left for a presentation layer to map into a displayable range.
    """
    r: float = Field(description="Red component")
    g: float = Field(description="Green component")
    b: float = Field(description="Blue component")

    @classmethod
    def new(cls, r: float, g: float, b: float) -> "Color":
        """Create a color from positional components."""
        return cls(r=r, g=g, b=b)

    def __add__(self, other):
        """Component-wise sum of two colors."""
        if isinstance(other, Color):
            return Color(r=self.r + other.r, g=self.g + other.g, b=self.b + other.b)
        return NotImplemented

    def __sub__(self, other):
        """Component-wise difference of two colors."""
        if isinstance(other, Color):
            return Color(r=self.r - other.r, g=self.g - other.g, b=self.b - other.b)
        return NotImplemented

    def __mul__(self, other):
        """
        Scale by a scalar (brightness) or blend with another color.

        Multiplying two colors takes the component-wise (Hadamard) product,
        which tints one color by the other.
        """
        if isinstance(other, (int, float)):
            return Color(r=self.r * other, g=self.g * other, b=self.b * other)
        if isinstance(other, Color):
            return Color(r=self.r * other.r, g=self.g * other.g, b=self.b * other.b)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (int, float)):
            return self.__mul__(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Color(r={self.r}, g={self.g}, b={self.b})"


RGB = Color
