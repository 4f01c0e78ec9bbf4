"""Utilities package - page geometry and validation."""

__all__ = [
    "Rotation",
    "Size",
    "Point",
    "Rectangle",
    "translate_size",
    "diff_rotation",
    "rotate_point",
    "rotate_rectangle",
    "validate_marker",
]

# Lazy imports to avoid circular dependencies
def __getattr__(name):
    if name == "validate_marker":
        from utils.validators import validate_marker
        return validate_marker
    elif name in __all__:
        from utils import geometry
        return getattr(geometry, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
