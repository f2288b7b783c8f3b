#!/usr/bin/env python3
"""Paragraph and block layout of card markup."""

import logging
from typing import List

from .models import Cursor, LayoutContext, Token
from .styles import StyleResolver
from .surface import Surface
from .tokenizer import tokenize
from .wrapper import LineWrapper, Segment

logger = logging.getLogger(__name__)


class LayoutEngine:
    """
    Lays out one card's markup onto a surface.

    Every line of the markup is a paragraph. Blank paragraphs only add
    vertical space; other paragraphs are tokenized and their runs are handed
    to the :class:`LineWrapper`. Header tokens are laid out in a nested pass
    over their inner text in header context.
    """

    def __init__(self, surface: Surface, resolver: StyleResolver = None, debug: bool = False):
        self.surface = surface
        self.resolver = resolver or StyleResolver()
        self.wrapper = LineWrapper(surface)
        self.debug = debug

    @property
    def body_line_height(self) -> int:
        return self.resolver.sheet.line_height(LayoutContext.BODY)

    @property
    def header_line_height(self) -> int:
        return self.resolver.sheet.line_height(LayoutContext.HEADER)

    def layout(self, markup: str, x: float, y: float, max_width: float) -> Cursor:
        """
        Lay out *markup* with its top-left corner at ``(x, y)``.

        Args:
            markup: Card markup, paragraphs separated by ``\\n``
            x: Left margin
            y: Top of the first line
            max_width: Width available to each line

        Returns:
            The cursor after the last paragraph
        """
        cursor = Cursor(x, y, x, max_width)

        for index, paragraph in enumerate(markup.split("\n")):
            top = cursor.y
            if not paragraph.strip():
                cursor = Cursor(x, cursor.y + self.body_line_height, x, max_width)
            else:
                cursor = self.layout_paragraph(paragraph, Cursor(x, cursor.y, x, max_width))
            if self.debug:
                logger.debug(f"Paragraph {index}: y {top} -> {cursor.y}")

        return cursor

    def layout_paragraph(self, paragraph: str, cursor: Cursor) -> Cursor:
        """Lay out one non-blank paragraph and return the cursor below it."""
        pending: List[Segment] = []

        for token in tokenize(paragraph):
            if token.is_header:
                cursor = self.wrapper.wrap(pending, cursor, self.body_line_height)
                pending = []
                cursor = self.layout_header(token, cursor)
                continue
            style, text = self.resolver.resolve(token, LayoutContext.BODY)
            pending.append((text, style))

        cursor = self.wrapper.wrap(pending, cursor, self.body_line_height)
        return Cursor(cursor.start_x, cursor.y + self.body_line_height, cursor.start_x, cursor.max_width)

    def layout_header(self, token: Token, cursor: Cursor) -> Cursor:
        """
        Lay out the inner text of a header token in header context.

        The header starts on its own line and the returned cursor sits at the
        start of the line after it. Markers inside the header are resolved
        once; their text is not scanned again.
        """
        if not cursor.at_line_start:
            cursor = cursor.newline(self.body_line_height)

        segments: List[Segment] = []
        for inner in tokenize(token.text):
            style, text = self.resolver.resolve(inner, LayoutContext.HEADER)
            segments.append((text, style))

        cursor = self.wrapper.wrap(segments, cursor, self.header_line_height)
        return cursor.newline(self.header_line_height)
