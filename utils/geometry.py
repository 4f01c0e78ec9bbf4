from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


ROTATION_STEPS = 4


class Rotation(Enum):
    """Page display rotation, as clockwise quarter-turn steps."""
    ROTATE_0 = 0
    ROTATE_90 = 1
    ROTATE_180 = 2
    ROTATE_270 = 3

    @property
    def degrees(self) -> int:
        return self.value * 90

    @property
    def is_quarter_turn(self) -> bool:
        """True when width and height swap roles under this rotation."""
        return self in (Rotation.ROTATE_90, Rotation.ROTATE_270)

    @classmethod
    def from_degrees(cls, degrees: int) -> Rotation:
        """Create a rotation from any multiple of 90 degrees."""
        if degrees % 90 != 0:
            raise ValueError(f"Rotation must be a multiple of 90 degrees: {degrees}")
        return cls(_modulo(degrees // 90, ROTATION_STEPS))

    def inverse(self) -> Rotation:
        """Rotation that undoes this one."""
        return Rotation(_modulo(-self.value, ROTATION_STEPS))

    def __add__(self, other: Rotation) -> Rotation:
        if not isinstance(other, Rotation):
            return NotImplemented
        return Rotation(_modulo(self.value + other.value, ROTATION_STEPS))

    def __sub__(self, other: Rotation) -> Rotation:
        if not isinstance(other, Rotation):
            return NotImplemented
        return Rotation(_modulo(self.value - other.value, ROTATION_STEPS))


@dataclass(frozen=True)
class Size:
    """Width and height of a page or rectangle."""
    width: float
    height: float

    def to_tuple(self) -> Tuple[float, float]:
        return (self.width, self.height)


@dataclass(frozen=True)
class Point:
    """Point in PDF space (origin bottom-left, y increasing upward)."""
    x: float
    y: float

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Rectangle:
    """
    Axis-aligned rectangle anchored at its bottom-left corner.

    In document space y increases upward, so ``top`` is ``y + height``.
    The same type carries device rectangles, where (x, y) is the
    top-left pixel instead.
    """
    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def bottom(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y + self.height

    @property
    def bottom_left(self) -> Point:
        return Point(self.left, self.bottom)

    @property
    def top_right(self) -> Point:
        return Point(self.right, self.top)

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)

    @classmethod
    def from_points(cls, a: Point, b: Point) -> Rectangle:
        """
        Build a rectangle from two diagonally opposite corners.

        The corners may come in any order. Passing two adjacent corners
        is not detected and yields a degenerate rectangle.
        """
        return cls(
            min(a.x, b.x),
            min(a.y, b.y),
            abs(a.x - b.x),
            abs(a.y - b.y),
        )


def _modulo(amount: int, modulus: int) -> int:
    """Non-negative remainder, e.g. _modulo(-1, 4) == 3."""
    return ((amount % modulus) + modulus) % modulus


def translate_size(size: Size, rotation: Rotation) -> Size:
    """Return the size as it appears when the page is shown with ``rotation``."""
    if rotation.is_quarter_turn:
        return Size(size.height, size.width)
    return size


def diff_rotation(old_rotation: Rotation, new_rotation: Rotation) -> Rotation:
    """Additional rotation needed to go from ``old_rotation`` to ``new_rotation``."""
    return Rotation(_modulo(new_rotation.value - old_rotation.value, ROTATION_STEPS))


def rotate_point(
    point: Point,
    page_size: Size,
    rotation_to_apply: Rotation,
) -> Point:
    """
    Rotate a PDF point clockwise about the page extent.

    Args:
        point: Point in the unrotated frame.
        page_size: Page size in that same unrotated frame.
        rotation_to_apply: Quarter turns to apply.

    Returns:
        The point expressed in the rotated frame.
    """
    if rotation_to_apply is Rotation.ROTATE_0:
        return point

    minus_x = page_size.width - point.x
    minus_y = page_size.height - point.y

    if rotation_to_apply is Rotation.ROTATE_90:
        return Point(point.y, minus_x)
    if rotation_to_apply is Rotation.ROTATE_180:
        return Point(minus_x, minus_y)
    return Point(minus_y, point.x)


def rotate_rectangle(
    rect: Rectangle,
    page_size: Size,
    rotation: Rotation,
) -> Rectangle:
    """
    Rotate a PDF rectangle clockwise about the page extent.

    Args:
        rect: Rectangle in the frame of ``page_size``.
        page_size: Page size in that frame.
        rotation: Quarter turns to apply; ``ROTATE_0`` returns ``rect`` as is.

    Returns:
        The rectangle in the rotated frame, with non-negative size.
    """
    if rotation is Rotation.ROTATE_0:
        return rect

    # Rotated corners no longer know which one is bottom-left.
    corner_a = rotate_point(rect.bottom_left, page_size, rotation)
    corner_b = rotate_point(rect.top_right, page_size, rotation)

    return Rectangle.from_points(corner_a, corner_b)
