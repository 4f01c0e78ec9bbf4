"""Core package - marker drawing, view mapping, and collaborator adapters."""

__all__ = [
    "Result",
    "Success",
    "Failure",
    "ValidationError",
    "InvalidArgumentError",
    "SerializationError",
    "MarkerRenderContext",
    "PaintSurface",
    "PageSizeSource",
    "draw",
    "draw_markers",
    "ViewportContext",
    "QPainterSurface",
    "FitzPageSizes",
]

# Lazy imports to avoid circular dependencies
def __getattr__(name):
    if name in ("Result", "Success", "Failure", "ValidationError", "InvalidArgumentError", "SerializationError"):
        from core import error_types
        return getattr(error_types, name)
    elif name in ("MarkerRenderContext", "PaintSurface", "PageSizeSource"):
        from core import interfaces
        return getattr(interfaces, name)
    elif name in ("draw", "draw_markers"):
        from core import marker_renderer
        return getattr(marker_renderer, name)
    elif name == "ViewportContext":
        from core.viewport import ViewportContext
        return ViewportContext
    elif name == "QPainterSurface":
        from core.qt_surface import QPainterSurface
        return QPainterSurface
    elif name == "FitzPageSizes":
        from core.document_sizes import FitzPageSizes
        return FitzPageSizes
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
