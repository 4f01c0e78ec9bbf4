"""Models package - markers, marker collections, and settings."""

__all__ = [
    "Color",
    "Marker",
    "MarkerCollection",
    "MarkerSettings",
    "AppSettings",
]

# Lazy imports to avoid circular dependencies
def __getattr__(name):
    if name in ("Color", "Marker"):
        from models import marker
        return getattr(marker, name)
    elif name == "MarkerCollection":
        from models.marker_collection import MarkerCollection
        return MarkerCollection
    elif name in ("MarkerSettings", "AppSettings"):
        from models import settings
        return getattr(settings, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
