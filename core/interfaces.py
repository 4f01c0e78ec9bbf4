"""Collaborators the marker renderer depends on."""

from __future__ import annotations
from typing import Protocol, runtime_checkable

from models.marker import Color
from utils.geometry import Rectangle, Rotation, Size


@runtime_checkable
class PageSizeSource(Protocol):
    """Looks up the unrotated size of a document page."""

    def page_size(self, page: int) -> Size:
        ...


@runtime_checkable
class BoundsTranslator(Protocol):
    """Maps a document rectangle in the current display frame to device pixels."""

    def bounds_from_document(self, page: int, rect: Rectangle) -> Rectangle:
        ...


@runtime_checkable
class MarkerRenderContext(PageSizeSource, BoundsTranslator, Protocol):
    """Everything a marker needs from the view it is drawn into."""

    rotation: Rotation


@runtime_checkable
class PaintSurface(Protocol):
    """Receives fill and stroke requests in device coordinates."""

    def fill_rectangle(self, rect: Rectangle, color: Color) -> None:
        ...

    def stroke_rectangle(self, rect: Rectangle, color: Color, width: float) -> None:
        ...
