import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path so `import card_maker` works
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from card_maker.surface import Surface  # noqa: E402


class RecordingSurface(Surface):
    """Surface with deterministic metrics that records every draw call.

    Every character is half the font size wide.
    """

    def __init__(self, width=1080, height=1920):
        self.width = width
        self.height = height
        self.calls = []
        self.draws = []
        self.font = (400, 16, False)
        self.color = "#ffffff"

    def clear(self, region=None):
        self.calls.append(("clear", region))
        self.draws = []

    def fill(self, color):
        self.calls.append(("fill", color))

    def set_font(self, weight, size_px, italic=False):
        self.font = (weight, size_px, italic)
        self.calls.append(("set_font", self.font))

    def set_fill_color(self, color):
        self.color = color
        self.calls.append(("set_fill_color", color))

    def measure_width(self, text):
        return len(text) * self.font[1] / 2

    def draw_text(self, text, x, y):
        draw = {"text": text, "x": x, "y": y, "font": self.font, "color": self.color}
        self.draws.append(draw)
        self.calls.append(("draw_text", draw))

    def draw_image(self, image, x, y, w, h):
        self.calls.append(("draw_image", (x, y, w, h)))

    def export_raster(self):
        self.calls.append(("export_raster", None))
        return b"\x89PNG\r\n\x1a\n" + repr(self.draws).encode()


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def surface_cls():
    return RecordingSurface
