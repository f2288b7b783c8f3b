"""
Data models for the card maker.
"""
import base64
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional


class TokenKind:
    """Kinds of markup tokens, in tokenizer priority order."""
    HEADER = "header"
    BOLD = "bold"
    MARKER = "marker"
    ITALIC = "italic"
    SMALL = "small"
    LIST_ITEM = "listItem"
    PLAIN = "plain"


class LayoutContext:
    """Style context a run of tokens is laid out in."""
    BODY = "body"
    HEADER = "header"


@dataclass(frozen=True)
class Token:
    """
    A classified span of one paragraph.

    ``raw`` is the matched source text including delimiters, ``text`` the
    display text with delimiters stripped. ``start``/``end`` index into the
    paragraph the token was scanned from.
    """
    kind: str
    text: str
    raw: str
    start: int
    end: int

    @property
    def is_header(self) -> bool:
        return self.kind == TokenKind.HEADER


@dataclass(frozen=True)
class StyleDescriptor:
    """Resolved font, color and indent for a run of text."""
    font_weight: int = 400
    font_size_px: int = 75
    italic: bool = False
    fill_color: str = "#ffffff"
    indent_px: int = 0

    @property
    def is_bold(self):
        return self.font_weight >= 600


@dataclass(frozen=True)
class Cursor:
    """
    Drawing position during layout.

    Cursors are values: every layout step takes one and returns a new one.
    ``y`` is the top of the current line and never decreases.
    """
    x: float
    y: float
    start_x: float
    max_width: float
    indent_px: float = 0

    @property
    def line_start(self) -> float:
        return self.start_x + self.indent_px

    @property
    def right_edge(self) -> float:
        return self.start_x + self.max_width

    @property
    def at_line_start(self) -> bool:
        return self.x <= self.line_start

    def advance(self, width: float) -> "Cursor":
        return replace(self, x=self.x + width)

    def newline(self, line_height: float) -> "Cursor":
        """Move to the start of the next line, keeping the active indent."""
        return replace(self, x=self.line_start, y=self.y + line_height)

    def with_indent(self, indent_px: float) -> "Cursor":
        """Activate an indent; a cursor at the start of a line moves to it."""
        cursor = replace(self, indent_px=indent_px)
        if self.x <= self.start_x:
            cursor = replace(cursor, x=cursor.line_start)
        return cursor


@dataclass
class Slide:
    """
    One rendered card.

    ``image`` holds the encoded PNG. ``fallback_background`` is set when the
    background could not be loaded and the solid fallback fill was used;
    ``error`` carries the message of a layout failure, if any.
    """
    index: int
    text: str
    image: bytes
    fallback_background: bool = False
    error: Optional[str] = None

    @property
    def filename(self) -> str:
        return f"card-{self.index + 1}.png"

    @property
    def data_url(self) -> str:
        """Embeddable ``data:`` URI of the card image."""
        b64 = base64.b64encode(self.image).decode()
        return f"data:image/png;base64,{b64}"

    def save(self, directory) -> Path:
        """Write the card into *directory* under :attr:`filename`."""
        path = Path(directory) / self.filename
        path.write_bytes(self.image)
        return path
