#!/usr/bin/env python3
"""
Drawing surfaces.

The layout engine only talks to a :class:`Surface`: it sets font and fill
state, measures text and draws it. :class:`PillowSurface` is the raster
implementation used to produce cards.
"""

import io
import logging
from typing import Dict, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

logger = logging.getLogger(__name__)

FontKey = Tuple[str, int]


class Surface:
    """
    Drawing contract consumed by the layout engine and the card pipeline.
    """

    width: int
    height: int

    def clear(self, region: Optional[Tuple[int, int, int, int]] = None) -> None:
        raise NotImplementedError

    def fill(self, color: str) -> None:
        raise NotImplementedError

    def set_font(self, weight: int, size_px: int, italic: bool = False) -> None:
        raise NotImplementedError

    def set_fill_color(self, color: str) -> None:
        raise NotImplementedError

    def measure_width(self, text: str) -> float:
        raise NotImplementedError

    def draw_text(self, text: str, x: float, y: float) -> None:
        raise NotImplementedError

    def draw_image(self, image, x: int, y: int, w: int, h: int) -> None:
        raise NotImplementedError

    def export_raster(self) -> bytes:
        raise NotImplementedError


class FontCache:
    """Cache of loaded fonts keyed by (file, size) to avoid repeated truetype calls."""

    def __init__(self, debug: bool = False):
        self.cache: Dict[FontKey, ImageFont.ImageFont] = {}
        self.missing = set()
        self.debug = debug

    def get(self, font_file: str, size: int):
        """
        Load *font_file* at *size*, falling back to Pillow's built-in font.

        Args:
            font_file: Path or file name; bare names are looked up in the
                system font directories by Pillow
            size: Pixel size

        Returns:
            A Pillow font object
        """
        key = (font_file, size)
        if key in self.cache:
            return self.cache[key]

        try:
            font = ImageFont.truetype(font_file, size)
        except OSError as e:
            if font_file not in self.missing:
                self.missing.add(font_file)
                logger.warning(f"⚠️ Could not load font {font_file}: {e}; using built-in font")
            font = ImageFont.load_default(size)

        self.cache[key] = font
        if self.debug:
            logger.debug(f"📦 Cached font {font_file} at {size}px")
        return font


class PillowSurface(Surface):
    """
    RGBA raster surface backed by Pillow.

    ``draw_text`` places the top-left of the text's ascender box at ``(x, y)``.
    """

    def __init__(self, width: int, height: int, font_files: Dict[str, str], font_cache: FontCache = None):
        self.width = width
        self.height = height
        self.font_files = font_files
        self.font_cache = font_cache or FontCache()
        self.image = Image.new("RGBA", (width, height), (0, 0, 0, 0))
        self.draw = ImageDraw.Draw(self.image)
        self.font = None
        self.fill_color = "#ffffff"
        self.set_font(400, 16)

    def _face(self, weight: int, italic: bool) -> str:
        bold = weight >= 600
        if bold and italic:
            return 'bold-italic'
        if bold:
            return 'bold'
        if italic:
            return 'italic'
        return 'regular'

    def clear(self, region=None):
        if region is None:
            region = (0, 0, self.width, self.height)
        x, y, w, h = region
        self.image.paste((0, 0, 0, 0), (x, y, x + w, y + h))

    def fill(self, color):
        self.draw.rectangle((0, 0, self.width, self.height), fill=color)

    def set_font(self, weight, size_px, italic=False):
        font_file = self.font_files[self._face(weight, italic)]
        self.font = self.font_cache.get(font_file, size_px)

    def set_fill_color(self, color):
        self.fill_color = color

    def measure_width(self, text):
        return self.draw.textlength(text, font=self.font)

    def draw_text(self, text, x, y):
        self.draw.text((x, y), text, font=self.font, fill=self.fill_color)

    def draw_image(self, image, x, y, w, h):
        layer = image.convert("RGBA")
        if layer.size != (w, h):
            layer = layer.resize((w, h), Image.LANCZOS)
        self.image.alpha_composite(layer, (x, y))

    def export_raster(self):
        buffer = io.BytesIO()
        self.image.save(buffer, format="PNG")
        return buffer.getvalue()
