"""
Unit tests for models.settings module.
"""
import json

import pytest
from PyQt6.QtCore import QSettings

from models.marker import Color
from models.settings import AppSettings, MarkerSettings
from utils.geometry import Rectangle, Rotation


@pytest.fixture
def qsettings(tmp_path):
    """QSettings backed by a throwaway INI file."""
    return QSettings(str(tmp_path / "markers.ini"), QSettings.Format.IniFormat)


class TestMarkerSettings:
    """Tests for MarkerSettings."""

    def test_create_marker_uses_defaults(self, sample_rect):
        settings = MarkerSettings(default_border_width=2.5, default_rotation=Rotation.ROTATE_180)

        marker = settings.create_marker(1, sample_rect)

        assert marker.color == Color(255, 255, 0, 128)
        assert marker.border_color == Color(255, 0, 0)
        assert marker.border_width == 2.5
        assert marker.rotation_at_creation is Rotation.ROTATE_180

    def test_create_marker_rotation_override(self, sample_rect):
        marker = MarkerSettings().create_marker(0, sample_rect, Rotation.ROTATE_90)

        assert marker.rotation_at_creation is Rotation.ROTATE_90

    def test_dict_round_trip(self):
        settings = MarkerSettings("#00ff00", "#0000ff80", 3.0, Rotation.ROTATE_270)

        assert MarkerSettings.from_dict(settings.to_dict()) == settings

    def test_from_dict_normalizes_colors(self):
        settings = MarkerSettings.from_dict({"default_fill_color": "ABCDEF"})

        assert settings.default_fill_color == "#abcdef"

    def test_from_dict_rejects_bad_color(self):
        with pytest.raises(ValueError):
            MarkerSettings.from_dict({"default_border_color": "red"})

    def test_from_dict_rejects_non_hex_digits(self):
        with pytest.raises(ValueError):
            MarkerSettings.from_dict({"default_fill_color": "#zzzzzz"})

    def test_from_dict_rejects_negative_width(self):
        with pytest.raises(ValueError):
            MarkerSettings.from_dict({"default_border_width": -1})


class TestAppSettings:
    """Tests for AppSettings persistence."""

    def test_defaults_when_empty(self, qsettings):
        settings = AppSettings(qsettings)

        assert settings.markers == MarkerSettings()

    def test_save_and_reload(self, qsettings):
        settings = AppSettings(qsettings)
        settings.markers.default_border_width = 4.0
        settings.markers.default_rotation = Rotation.ROTATE_90
        settings.save()

        reloaded = AppSettings(qsettings)

        assert reloaded.markers.default_border_width == 4.0
        assert reloaded.markers.default_rotation is Rotation.ROTATE_90

    def test_corrupt_value_falls_back_to_defaults(self, qsettings):
        qsettings.setValue(AppSettings.MARKER_KEY, "{not json")

        assert AppSettings(qsettings).markers == MarkerSettings()

    def test_unknown_rotation_falls_back_to_defaults(self, qsettings):
        qsettings.setValue(AppSettings.MARKER_KEY, json.dumps({"default_rotation": "ROTATE_45"}))

        assert AppSettings(qsettings).markers == MarkerSettings()

    def test_bad_stored_color_falls_back_to_defaults(self, qsettings):
        qsettings.setValue(AppSettings.MARKER_KEY, json.dumps({"default_border_color": "red"}))

        assert AppSettings(qsettings).markers == MarkerSettings()

    def test_reset_to_defaults(self, qsettings):
        settings = AppSettings(qsettings)
        settings.markers = MarkerSettings(default_border_width=9.0)

        settings.reset_to_defaults()

        assert settings.markers == MarkerSettings()

    def test_created_marker_fits_rectangle(self, qsettings):
        marker = AppSettings(qsettings).markers.create_marker(0, Rectangle(1, 1, 2, 2))

        assert marker.bounds == Rectangle(1, 1, 2, 2)
