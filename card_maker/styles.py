"""Style resolution: token kind + layout context -> StyleDescriptor."""
from dataclasses import dataclass
from typing import Tuple

from .css_utils import CSSParser
from .models import LayoutContext, StyleDescriptor, Token, TokenKind


@dataclass(frozen=True)
class StyleSheet:
    """Numbers a theme contributes to text styling."""
    body_font_size: int = 75
    body_small_size: int = 48
    body_line_height: int = 90
    header_font_size: int = 100
    header_small_size: int = 70
    header_line_height: int = 120
    body_weight: int = 400
    bold_weight: int = 700
    header_weight: int = 700
    header_bold_weight: int = 900
    text_color: str = "#ffffff"
    marker_color: str = "#ffd700"
    list_indent: int = 60
    list_bullet: str = "•"

    @classmethod
    def from_css(cls, css: CSSParser) -> "StyleSheet":
        return cls(
            body_font_size=css.get_px_value('body-font-size'),
            body_small_size=css.get_px_value('body-small-size'),
            body_line_height=css.get_px_value('body-line-height'),
            header_font_size=css.get_px_value('header-font-size'),
            header_small_size=css.get_px_value('header-small-size'),
            header_line_height=css.get_px_value('header-line-height'),
            body_weight=css.get_int_value('body-weight'),
            bold_weight=css.get_int_value('bold-weight'),
            header_weight=css.get_int_value('header-weight'),
            header_bold_weight=css.get_int_value('header-bold-weight'),
            text_color=css.get_color('text-color'),
            marker_color=css.get_color('marker-color'),
            list_indent=css.get_px_value('list-indent'),
            list_bullet=css.get_string_value('list-bullet'),
        )

    def line_height(self, context: str) -> int:
        if context == LayoutContext.HEADER:
            return self.header_line_height
        return self.body_line_height


class StyleResolver:
    """
    Maps tokens to styles for a given :class:`StyleSheet`.

    ``resolve`` has no side effects; the same token and context always give
    the same result.
    """

    def __init__(self, sheet: StyleSheet = None):
        self.sheet = sheet or StyleSheet()

    def base_style(self, context: str = LayoutContext.BODY) -> StyleDescriptor:
        """Style of plain text in *context*."""
        s = self.sheet
        if context == LayoutContext.HEADER:
            return StyleDescriptor(s.header_weight, s.header_font_size, False, s.text_color, 0)
        return StyleDescriptor(s.body_weight, s.body_font_size, False, s.text_color, 0)

    def resolve(self, token: Token, context: str = LayoutContext.BODY) -> Tuple[StyleDescriptor, str]:
        """
        Resolve *token* in *context*.

        Returns:
            ``(style, display_text)``. Headers and list items inside a header
            are not styled further and keep their raw text.
        """
        s = self.sheet
        base = self.base_style(context)
        in_header = context == LayoutContext.HEADER
        kind = token.kind

        if kind == TokenKind.BOLD:
            weight = s.header_bold_weight if in_header else s.bold_weight
            return StyleDescriptor(weight, base.font_size_px, False, s.text_color, 0), token.text
        if kind == TokenKind.MARKER:
            return StyleDescriptor(base.font_weight, base.font_size_px, False, s.marker_color, 0), token.text
        if kind == TokenKind.ITALIC:
            return StyleDescriptor(base.font_weight, base.font_size_px, True, s.text_color, 0), token.text
        if kind == TokenKind.SMALL:
            size = s.header_small_size if in_header else s.body_small_size
            return StyleDescriptor(base.font_weight, size, False, s.text_color, 0), token.text
        if kind == TokenKind.LIST_ITEM and not in_header:
            style = StyleDescriptor(base.font_weight, base.font_size_px, False, s.text_color, s.list_indent)
            return style, f"{s.list_bullet} {token.text}"
        if kind in (TokenKind.HEADER, TokenKind.LIST_ITEM):
            return base, token.raw
        return base, token.text
