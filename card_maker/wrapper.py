"""Greedy line wrapping of styled text runs onto a surface."""
import logging
from typing import Iterable, Tuple

from .models import Cursor, StyleDescriptor
from .surface import Surface

logger = logging.getLogger(__name__)

Segment = Tuple[str, StyleDescriptor]


class LineWrapper:
    """
    Places words left to right and breaks lines greedily.

    The line height is fixed for one call; callers pass the body or header
    line height depending on the context they lay out.
    """

    def __init__(self, surface: Surface):
        self.surface = surface

    def wrap(self, segments: Iterable[Segment], cursor: Cursor, line_height: float) -> Cursor:
        """
        Draw *segments* starting at *cursor*.

        Args:
            segments: ``(text, style)`` pairs in reading order
            cursor: Where the first word goes
            line_height: Vertical advance for every line break

        Returns:
            The cursor after the last word
        """
        for text, style in segments:
            self.surface.set_font(style.font_weight, style.font_size_px, style.italic)
            self.surface.set_fill_color(style.fill_color)
            if style.indent_px:
                cursor = cursor.with_indent(style.indent_px)

            for word in text.split():
                width = self.surface.measure_width(word + " ")
                # A word wider than the whole line overflows instead of leaving an empty line
                if cursor.x + width > cursor.right_edge and not cursor.at_line_start:
                    cursor = cursor.newline(line_height)
                self.surface.draw_text(word, cursor.x, cursor.y)
                cursor = cursor.advance(width)

        return cursor
