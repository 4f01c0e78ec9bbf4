from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from utils.geometry import (
    Rectangle,
    Rotation,
    Size,
    diff_rotation,
    rotate_rectangle,
    translate_size,
)


@dataclass(frozen=True)
class Color:
    """Immutable RGBA color representation."""

    red: int = 0
    green: int = 0
    blue: int = 0
    alpha: int = 255

    def to_hex(self) -> str:
        """Convert to hex string (#RRGGBB or #RRGGBBAA)."""
        if self.alpha == 255:
            return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}{self.alpha:02x}"

    def to_rgba_tuple(self) -> Tuple[int, int, int, int]:
        return (self.red, self.green, self.blue, self.alpha)

    @classmethod
    def from_hex(cls, hex_string: str) -> Color:
        """Create color from hex string."""
        digits = hex_string.lstrip("#")
        if len(digits) not in (6, 8):
            raise ValueError(f"Invalid hex color: {hex_string}")
        channels = [int(digits[index:index + 2], 16) for index in range(0, len(digits), 2)]
        return cls(*channels)

    @classmethod
    def transparent(cls) -> Color:
        return cls(0, 0, 0, 0)

    @property
    def is_transparent(self) -> bool:
        return self.alpha == 0


@dataclass(frozen=True)
class Marker:
    """
    Rectangular overlay on a single page.

    ``bounds`` is expressed in the page frame that was on screen when the
    marker was created, i.e. the page shown with ``rotation_at_creation``.
    The page size is never cached here; callers pass the document's
    current unrotated size every time the marker is placed.
    """

    page: int
    bounds: Rectangle
    color: Color
    border_color: Color = field(default_factory=Color.transparent)
    border_width: float = 0.0
    rotation_at_creation: Rotation = Rotation.ROTATE_0

    @classmethod
    def filled(
        cls,
        page: int,
        bounds: Rectangle,
        color: Color,
        rotation_at_creation: Rotation = Rotation.ROTATE_0,
    ) -> Marker:
        """Create a marker without a border."""
        return cls(page, bounds, color, rotation_at_creation=rotation_at_creation)

    @property
    def has_border(self) -> bool:
        return self.border_width > 0

    def current_frame_bounds(
        self,
        unrotated_page_size: Size,
        current_rotation: Rotation,
    ) -> Rectangle:
        """
        Re-express ``bounds`` in the frame of ``current_rotation``.

        The rotation is applied about the page as it looked at creation
        time, so the unrotated size is first turned into that apparent size.
        """
        page_size_at_creation = translate_size(unrotated_page_size, self.rotation_at_creation)
        delta = diff_rotation(self.rotation_at_creation, current_rotation)
        return rotate_rectangle(self.bounds, page_size_at_creation, delta)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "page": self.page,
            "bounds": self.bounds.to_tuple(),
            "color": self.color.to_hex(),
            "border_color": self.border_color.to_hex(),
            "border_width": self.border_width,
            "rotation_at_creation": self.rotation_at_creation.name,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Marker:
        return cls(
            page=data["page"],
            bounds=Rectangle(*data["bounds"]),
            color=Color.from_hex(data["color"]),
            border_color=Color.from_hex(data.get("border_color", "#00000000")),
            border_width=data.get("border_width", 0.0),
            rotation_at_creation=Rotation[data.get("rotation_at_creation", "ROTATE_0")],
        )
