"""
Markup tokenizer.

A paragraph is scanned left to right. At every non-whitespace position the
matchers in ``MATCHERS`` are tried in order and the first one that matches
produces the next token; the plain-word matcher always succeeds, so every
character ends up in some token and malformed markup is rendered literally.

Markers::

    #header#   *bold*   @marker@   /italic/   $small$   !!list item
"""
import logging
from typing import List, Optional

from .models import Token, TokenKind

logger = logging.getLogger(__name__)


class DelimitedMatcher:
    """Span opened by ``delimiter`` and closed by its next occurrence."""

    def __init__(self, kind: str, delimiter: str):
        self.kind = kind
        self.delimiter = delimiter

    def match(self, text: str, pos: int) -> Optional[Token]:
        if not text.startswith(self.delimiter, pos):
            return None
        inner_start = pos + len(self.delimiter)
        # Inner text must be non-empty
        close = text.find(self.delimiter, inner_start + 1)
        if close == -1:
            return None
        end = close + len(self.delimiter)
        return Token(self.kind, text[inner_start:close], text[pos:end], pos, end)


class ListLineMatcher:
    """``!!`` followed by the rest of the line."""

    kind = TokenKind.LIST_ITEM
    marker = "!!"

    def match(self, text: str, pos: int) -> Optional[Token]:
        if not text.startswith(self.marker, pos):
            return None
        end = text.find("\n", pos)
        if end == -1:
            end = len(text)
        inner = text[pos + len(self.marker):end].strip()
        return Token(self.kind, inner, text[pos:end], pos, end)


class PlainWordMatcher:
    """Maximal run of non-whitespace characters."""

    kind = TokenKind.PLAIN

    def match(self, text: str, pos: int) -> Optional[Token]:
        end = pos
        while end < len(text) and not text[end].isspace():
            end += 1
        if end == pos:
            return None
        word = text[pos:end]
        return Token(self.kind, word, word, pos, end)


MATCHERS = (
    DelimitedMatcher(TokenKind.HEADER, "#"),
    DelimitedMatcher(TokenKind.BOLD, "*"),
    DelimitedMatcher(TokenKind.MARKER, "@"),
    DelimitedMatcher(TokenKind.ITALIC, "/"),
    DelimitedMatcher(TokenKind.SMALL, "$"),
    ListLineMatcher(),
    PlainWordMatcher(),
)


def tokenize(paragraph: str, matchers=MATCHERS) -> List[Token]:
    """
    Split *paragraph* into tokens.

    Args:
        paragraph: One line of markup
        matchers: Matchers in priority order; the last one must always match
            a non-whitespace position

    Returns:
        Tokens in source order, non-overlapping, covering every
        non-whitespace character
    """
    tokens: List[Token] = []
    pos = 0
    length = len(paragraph)

    while pos < length:
        if paragraph[pos].isspace():
            pos += 1
            continue

        for matcher in matchers:
            token = matcher.match(paragraph, pos)
            if token is not None:
                break
        else:
            raise ValueError(f"No matcher consumed position {pos} of {paragraph!r}")

        tokens.append(token)
        pos = token.end

    logger.debug("Tokenized %r into %d tokens", paragraph, len(tokens))
    return tokens
