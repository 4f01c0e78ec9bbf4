from __future__ import annotations
import math

from core.error_types import (
    Result,
    Success,
    Failure,
    ValidationError,
)
from models.marker import Marker
from utils.geometry import Rotation


def validate_marker(marker: Marker) -> Result[Marker]:
    """
    Validate a marker before it joins a collection.

    Args:
        marker: Marker to validate.

    Returns:
        Result containing the marker or the first validation error.
    """
    if not isinstance(marker, Marker):
        return Failure(ValidationError(
            message="Expected a Marker",
            field_name="marker",
            invalid_value=repr(marker),
        ))

    if not isinstance(marker.page, int) or marker.page < 0:
        return Failure(ValidationError(
            message="Page index must be a non-negative integer",
            field_name="page",
            invalid_value=str(marker.page),
        ))

    if not isinstance(marker.rotation_at_creation, Rotation):
        return Failure(ValidationError(
            message="Rotation at creation must be a Rotation",
            field_name="rotation_at_creation",
            invalid_value=str(marker.rotation_at_creation),
        ))

    if not math.isfinite(marker.border_width) or marker.border_width < 0:
        return Failure(ValidationError(
            message="Border width must be zero or positive",
            field_name="border_width",
            invalid_value=str(marker.border_width),
        ))

    bounds = marker.bounds
    if bounds.width < 0 or bounds.height < 0:
        return Failure(ValidationError(
            message="Bounds must have a non-negative size",
            field_name="bounds",
            invalid_value=str(bounds.to_tuple()),
        ))

    return Success(marker)

