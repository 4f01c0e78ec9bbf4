"""
Pytest configuration and global fixtures.
"""
import os
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

# Offscreen platform for Qt
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from utils.geometry import Rectangle, Rotation, Size


class FakePageSizes:
    """Page size lookup over a fixed list of sizes."""

    def __init__(self, sizes):
        self.sizes = list(sizes)
        self.lookups = []

    def page_size(self, page):
        self.lookups.append(page)
        return self.sizes[page]


class FakeRenderContext(FakePageSizes):
    """Render context whose device mapping is the identity."""

    def __init__(self, sizes, rotation=Rotation.ROTATE_0):
        super().__init__(sizes)
        self.rotation = rotation
        self.translated = []

    def bounds_from_document(self, page, rect):
        self.translated.append((page, rect))
        return rect


class RecordingSurface:
    """Paint surface that records every request."""

    def __init__(self):
        self.calls = []

    def fill_rectangle(self, rect, color):
        self.calls.append(("fill", rect, color))

    def stroke_rectangle(self, rect, color, width):
        self.calls.append(("stroke", rect, color, width))


@pytest.fixture
def page_size():
    """Unrotated portrait page."""
    return Size(600, 800)


@pytest.fixture
def sample_rect():
    return Rectangle(50, 50, 100, 50)


@pytest.fixture
def render_context(page_size):
    return FakeRenderContext([page_size, Size(800, 600)])


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture(scope="session")
def qt_app():
    """Shared QGuiApplication for tests that paint."""
    from PyQt6.QtGui import QGuiApplication

    app = QGuiApplication.instance() or QGuiApplication(sys.argv)
    yield app


@pytest.fixture
def context_factory():
    """Build render contexts for arbitrary page sizes and rotations."""
    return FakeRenderContext


@pytest.fixture
def page_sizes_factory():
    return FakePageSizes
