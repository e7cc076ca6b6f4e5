"""Shape templates for the prototype registry."""

from dataclasses import dataclass, replace


@dataclass
class Circle:
    """A circle template."""

    radius: int
    color: str

    def clone(self) -> "Circle":
        """Return a new Circle with the same radius and color."""
        return replace(self)

    def __str__(self) -> str:
        return f"Circle{{radius={self.radius}, color={self.color!r}}}"


@dataclass
class Rectangle:
    """A rectangle template."""

    width: int
    height: int
    color: str

    def clone(self) -> "Rectangle":
        """Return a new Rectangle with the same width, height and color."""
        return replace(self)

    def __str__(self) -> str:
        return (
            f"Rectangle{{width={self.width}, height={self.height}, "
            f"color={self.color!r}}}"
        )
