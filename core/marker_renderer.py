from __future__ import annotations
from typing import Any, Iterable, List, Optional
import logging

from core.error_types import (
    Result,
    Success,
    Failure,
    InvalidArgumentError,
    combine_results,
)
from core.interfaces import MarkerRenderContext, PaintSurface
from models.marker import Marker
from utils.geometry import Rectangle

logger = logging.getLogger(__name__)


def _reject(field_name: str, value: Any, expected: str) -> Failure:
    error = InvalidArgumentError(
        message=f"{field_name} must be a {expected}",
        field_name=field_name,
        invalid_value=repr(value),
    )
    error.log(logger)
    return Failure(error)


def draw(
    marker: Marker,
    context: MarkerRenderContext,
    surface: PaintSurface,
) -> Result[Rectangle]:
    """
    Paint a marker onto a surface at its place in the current view.

    Args:
        marker: Marker to paint.
        context: View providing page sizes, the current rotation and the
            document-to-device mapping.
        surface: Receiver of the fill and stroke requests.

    Returns:
        Result containing the device rectangle that was painted, or an
        InvalidArgumentError when ``context`` or ``surface`` is unusable.
        Errors raised by the context or surface propagate unchanged.
    """
    if context is None or not isinstance(context, MarkerRenderContext):
        return _reject("context", context, "MarkerRenderContext")
    if surface is None or not isinstance(surface, PaintSurface):
        return _reject("surface", surface, "PaintSurface")

    unrotated_page_size = context.page_size(marker.page)
    rotated_bounds = marker.current_frame_bounds(unrotated_page_size, context.rotation)
    device_bounds = context.bounds_from_document(marker.page, rotated_bounds)

    logger.debug(
        f"Drawing marker on page {marker.page}: {rotated_bounds.to_tuple()} "
        f"-> {device_bounds.to_tuple()} at {context.rotation.degrees} degrees"
    )

    surface.fill_rectangle(device_bounds, marker.color)

    if marker.has_border:
        surface.stroke_rectangle(device_bounds, marker.border_color, marker.border_width)

    return Success(device_bounds)


def draw_markers(
    markers: Iterable[Marker],
    context: MarkerRenderContext,
    surface: PaintSurface,
    pages: Optional[Iterable[int]] = None,
) -> Result[List[Rectangle]]:
    """
    Paint markers in order, optionally only those on the given pages.

    Stops at the first rejected marker and returns its error.
    """
    visible_pages = set(pages) if pages is not None else None

    results: List[Result[Rectangle]] = []
    for marker in markers:
        if visible_pages is not None and marker.page not in visible_pages:
            continue
        result = draw(marker, context, surface)
        results.append(result)
        if result.is_failure():
            break

    return combine_results(results)
