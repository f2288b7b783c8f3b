"""Test the Pillow raster surface."""

import io
import logging

from PIL import Image

from card_maker.css_utils import CSSParser
from card_maker.surface import FontCache, PillowSurface


def make_surface(width=200, height=100):
    return PillowSurface(width, height, CSSParser("story").get_font_files())


def test_measure_width_grows_with_text_and_size():
    """Test that measured widths are monotonic in length and font size."""
    surface = make_surface()
    surface.set_font(400, 20)
    short = surface.measure_width("ab ")
    longer = surface.measure_width("abcdef ")
    surface.set_font(400, 40)
    bigger = surface.measure_width("ab ")

    assert 0 < short < longer
    assert bigger > short


def test_draw_text_paints_pixels():
    """Test that drawing text leaves opaque pixels in the fill color."""
    surface = make_surface()
    surface.set_font(700, 40)
    surface.set_fill_color("#ff0000")
    surface.draw_text("Hi", 10, 10)

    colors = {px for px in surface.image.getdata() if px[3] == 255}
    assert (255, 0, 0, 255) in colors


def test_clear_resets_canvas():
    """Test that clearing returns the canvas to transparent."""
    surface = make_surface()
    surface.fill("#111111")
    surface.clear()

    assert surface.image.getextrema()[3] == (0, 0)


def test_draw_image_stretches():
    """Test that a background is stretched over the requested box."""
    surface = make_surface()
    surface.draw_image(Image.new("RGB", (2, 2), (0, 0, 255)), 0, 0, 200, 100)

    assert surface.image.getpixel((199, 99)) == (0, 0, 255, 255)


def test_export_raster_is_png():
    """Test PNG export."""
    surface = make_surface()
    surface.fill("#111111")

    data = surface.export_raster()

    with Image.open(io.BytesIO(data)) as img:
        assert img.format == "PNG"
        assert img.size == (200, 100)


def test_font_cache_falls_back_once(caplog):
    """Test that a missing font file falls back to the built-in font and warns once."""
    cache = FontCache()

    with caplog.at_level(logging.WARNING, logger="card_maker.surface"):
        first = cache.get("no-such-font-file.ttf", 30)
        second = cache.get("no-such-font-file.ttf", 31)

    assert first is not None and second is not None
    assert cache.get("no-such-font-file.ttf", 30) is first
    assert len([r for r in caplog.records if "no-such-font-file" in r.getMessage()]) == 1
