from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional
import json
import logging

from PyQt6.QtCore import QSettings

from models.marker import Color, Marker
from utils.geometry import Rectangle, Rotation

logger = logging.getLogger(__name__)


@dataclass
class MarkerSettings:
    """Defaults applied to newly created markers."""

    default_fill_color: str = "#ffff0080"
    default_border_color: str = "#ff0000"
    default_border_width: float = 1.0
    default_rotation: Rotation = Rotation.ROTATE_0

    def create_marker(
        self,
        page: int,
        bounds: Rectangle,
        rotation: Optional[Rotation] = None,
    ) -> Marker:
        """Create a marker styled with these defaults."""
        return Marker(
            page=page,
            bounds=bounds,
            color=Color.from_hex(self.default_fill_color),
            border_color=Color.from_hex(self.default_border_color),
            border_width=self.default_border_width,
            rotation_at_creation=rotation if rotation is not None else self.default_rotation,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            "default_fill_color": self.default_fill_color,
            "default_border_color": self.default_border_color,
            "default_border_width": self.default_border_width,
            "default_rotation": self.default_rotation.name,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> MarkerSettings:
        """
        Create settings from dictionary.

        Raises:
            KeyError: Unknown rotation name.
            ValueError: Malformed color or negative border width.
        """
        defaults = cls()
        fill_color = Color.from_hex(data.get("default_fill_color", defaults.default_fill_color))
        border_color = Color.from_hex(data.get("default_border_color", defaults.default_border_color))

        border_width = float(data.get("default_border_width", defaults.default_border_width))
        if border_width < 0:
            raise ValueError(f"Border width must be zero or positive: {border_width}")

        return cls(
            default_fill_color=fill_color.to_hex(),
            default_border_color=border_color.to_hex(),
            default_border_width=border_width,
            default_rotation=Rotation[data.get("default_rotation", defaults.default_rotation.name)],
        )


class AppSettings:
    """Marker settings manager with QSettings persistence."""

    ORGANIZATION_NAME = "PDFMarkers"
    APPLICATION_NAME = "PDFMarkers"

    MARKER_KEY = "settings/markers"

    def __init__(self, qsettings: Optional[QSettings] = None):
        self._qsettings = qsettings or QSettings(self.ORGANIZATION_NAME, self.APPLICATION_NAME)
        self.markers = self._load_marker_settings()

    def _load_marker_settings(self) -> MarkerSettings:
        """Load marker settings from QSettings."""
        data = self._qsettings.value(self.MARKER_KEY)
        if data:
            try:
                return MarkerSettings.from_dict(json.loads(data))
            except (json.JSONDecodeError, KeyError, ValueError, TypeError, AttributeError) as exception:
                logger.warning(f"Ignoring stored marker settings: {exception}")
        return MarkerSettings()

    def save(self) -> None:
        """Save all settings to persistent storage."""
        self._qsettings.setValue(self.MARKER_KEY, json.dumps(self.markers.to_dict()))
        self._qsettings.sync()
        logger.info("Saved marker settings")

    def reset_to_defaults(self) -> None:
        """Reset all settings to defaults."""
        self.markers = MarkerSettings()
