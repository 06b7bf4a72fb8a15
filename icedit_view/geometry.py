"""Plain geometric and editor value types used for layout and drawing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Point:
    """A point in widget coordinates."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Size:
    """A width and a height."""

    width: float = 0.0
    height: float = 0.0


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_parts(cls, position: Point, size: Size) -> Rectangle:
        """Build a rectangle from a corner point and a size."""
        return cls(position.x, position.y, size.width, size.height)

    def position(self) -> Point:
        """Return the top-left corner."""
        return Point(self.x, self.y)

    def size(self) -> Size:
        """Return the rectangle's size."""
        return Size(self.width, self.height)

    def contains(self, point: Point) -> bool:
        """Return whether ``point`` lies inside; right and bottom edges are excluded."""
        return (
            self.x <= point.x < self.x + self.width
            and self.y <= point.y < self.y + self.height
        )


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components in ``[0, 1]``."""

    r: float
    g: float
    b: float
    a: float = 1.0

    WHITE: ClassVar[Color]
    BLACK: ClassVar[Color]

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float) -> Color:
        """Return an opaque colour."""
        return cls(r, g, b, 1.0)

    @classmethod
    def from_rgba(cls, r: float, g: float, b: float, a: float) -> Color:
        """Return a colour with the given alpha."""
        return cls(r, g, b, a)


Color.WHITE = Color(1.0, 1.0, 1.0, 1.0)
Color.BLACK = Color(0.0, 0.0, 0.0, 1.0)


@dataclass(frozen=True, order=True)
class Position:
    """A location in the buffer; ordered by line, then column."""

    line: int = 0
    column: int = 0


@dataclass(frozen=True)
class Selection:
    """A selected range from ``start`` to ``end``."""

    start: Position
    end: Position