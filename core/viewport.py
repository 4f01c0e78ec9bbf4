from __future__ import annotations
from typing import Dict, Optional, Tuple

from PyQt6.QtCore import QPointF
from PyQt6.QtGui import QTransform

from core.interfaces import PageSizeSource
from utils.geometry import Point, Rectangle, Rotation, Size, translate_size


class ViewportContext:
    """
    Maps page rectangles in the current display frame to device pixels.

    PDF coordinates have origin at bottom-left with Y increasing upward.
    Device coordinates have origin at top-left with Y increasing downward.
    Each page is laid out with its top-left corner at its page origin; pages
    without an explicit origin sit at (0, 0).
    """

    def __init__(
        self,
        page_sizes: PageSizeSource,
        rotation: Rotation = Rotation.ROTATE_0,
        scale: float = 1.0,
        page_origins: Optional[Dict[int, Tuple[float, float]]] = None,
    ):
        self._page_sizes = page_sizes
        self._rotation = rotation
        self._scale = scale
        self._page_origins = dict(page_origins or {})

    @property
    def rotation(self) -> Rotation:
        return self._rotation

    @property
    def scale(self) -> float:
        return self._scale

    def page_size(self, page: int) -> Size:
        """Unrotated size of ``page``."""
        return self._page_sizes.page_size(page)

    def apparent_page_size(self, page: int) -> Size:
        """Size of ``page`` as displayed with the current rotation."""
        return translate_size(self.page_size(page), self._rotation)

    def page_origin(self, page: int) -> Tuple[float, float]:
        return self._page_origins.get(page, (0.0, 0.0))

    def _build_transform(self, page: int) -> QTransform:
        """Build the page to device transformation matrix."""
        offset_x, offset_y = self.page_origin(page)
        apparent_height = self.apparent_page_size(page).height

        transform = QTransform()
        transform.translate(offset_x, offset_y)
        transform.scale(self._scale, self._scale)
        transform.scale(1, -1)
        transform.translate(0, -apparent_height)
        return transform

    def point_from_document(self, page: int, point: Point) -> Point:
        """Transform a current-frame page point to device coordinates."""
        mapped = self._build_transform(page).map(QPointF(point.x, point.y))
        return Point(mapped.x(), mapped.y())

    def bounds_from_document(self, page: int, rect: Rectangle) -> Rectangle:
        """Transform a current-frame page rectangle to device coordinates."""
        transform = self._build_transform(page)
        corner_a = transform.map(QPointF(rect.left, rect.top))
        corner_b = transform.map(QPointF(rect.right, rect.bottom))

        min_x = min(corner_a.x(), corner_b.x())
        min_y = min(corner_a.y(), corner_b.y())
        max_x = max(corner_a.x(), corner_b.x())
        max_y = max(corner_a.y(), corner_b.y())

        return Rectangle(min_x, min_y, max_x - min_x, max_y - min_y)

    def with_rotation(self, new_rotation: Rotation) -> ViewportContext:
        """Create a new context with different rotation."""
        return ViewportContext(self._page_sizes, new_rotation, self._scale, self._page_origins)

    def with_scale(self, new_scale: float) -> ViewportContext:
        """Create a new context with different scale."""
        return ViewportContext(self._page_sizes, self._rotation, new_scale, self._page_origins)

    def with_page_origin(self, page: int, offset_x: float, offset_y: float) -> ViewportContext:
        """Create a new context with ``page`` laid out at a different origin."""
        origins = dict(self._page_origins)
        origins[page] = (offset_x, offset_y)
        return ViewportContext(self._page_sizes, self._rotation, self._scale, origins)
