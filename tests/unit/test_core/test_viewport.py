"""
Unit tests for core.viewport module.
"""
import pytest

from core.interfaces import MarkerRenderContext
from core.marker_renderer import draw
from core.viewport import ViewportContext
from models.marker import Color, Marker
from utils.geometry import Point, Rotation, Size


@pytest.fixture
def viewport(page_sizes_factory):
    return ViewportContext(page_sizes_factory([Size(600, 800), Size(600, 800)]))


class TestViewportContext:
    """Tests for ViewportContext mapping."""

    def test_is_a_render_context(self, viewport):
        assert isinstance(viewport, MarkerRenderContext)

    def test_flips_y_axis(self, viewport):
        assert viewport.point_from_document(0, Point(0, 0)) == Point(0, 800)
        assert viewport.point_from_document(0, Point(600, 800)) == Point(600, 0)

    def test_bounds_unscaled(self, viewport, sample_rect):
        bounds = viewport.bounds_from_document(0, sample_rect)

        assert bounds.to_tuple() == pytest.approx((50, 700, 100, 50))

    def test_bounds_scaled_and_offset(self, viewport, sample_rect):
        context = viewport.with_scale(2.0).with_page_origin(0, 10, 20)

        bounds = context.bounds_from_document(0, sample_rect)

        assert bounds.to_tuple() == pytest.approx((110, 1420, 200, 100))

    def test_rotation_uses_apparent_height(self, viewport):
        context = viewport.with_rotation(Rotation.ROTATE_90)

        assert context.apparent_page_size(0) == Size(800, 600)
        assert context.point_from_document(0, Point(0, 0)) == Point(0, 600)

    def test_page_origins_are_per_page(self, viewport):
        context = viewport.with_page_origin(1, 0, 810)

        assert context.page_origin(0) == (0.0, 0.0)
        assert context.point_from_document(1, Point(0, 800)) == Point(0, 810)

    def test_copies_leave_original_untouched(self, viewport):
        viewport.with_scale(3.0).with_rotation(Rotation.ROTATE_180).with_page_origin(0, 5, 5)

        assert viewport.scale == 1.0
        assert viewport.rotation is Rotation.ROTATE_0
        assert viewport.page_origin(0) == (0.0, 0.0)

    def test_draw_through_viewport(self, viewport, surface, sample_rect):
        context = viewport.with_rotation(Rotation.ROTATE_90)
        marker = Marker(0, sample_rect, Color(255, 0, 0))

        device = draw(marker, context, surface).unwrap()

        # Current frame rectangle (50, 450, 50, 100) on a 800 x 600 display.
        assert device.to_tuple() == pytest.approx((50, 50, 50, 100))
        assert surface.calls[0][1] == device
