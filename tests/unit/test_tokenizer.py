"""Test markup tokenization."""

import pytest
from card_maker.models import TokenKind
from card_maker.tokenizer import tokenize


def kinds(tokens):
    return [t.kind for t in tokens]


def test_plain_words():
    """Test that plain text splits into one token per word."""
    tokens = tokenize("hello   wide world")

    assert kinds(tokens) == [TokenKind.PLAIN] * 3
    assert [t.text for t in tokens] == ["hello", "wide", "world"]


@pytest.mark.parametrize("markup, kind, text", [
    ("#Title#", TokenKind.HEADER, "Title"),
    ("*bold text*", TokenKind.BOLD, "bold text"),
    ("@marked@", TokenKind.MARKER, "marked"),
    ("/slanted words/", TokenKind.ITALIC, "slanted words"),
    ("$fine print$", TokenKind.SMALL, "fine print"),
    ("!!first item", TokenKind.LIST_ITEM, "first item"),
])
def test_each_marker(markup, kind, text):
    """Test that each marker produces a single token with delimiters stripped."""
    tokens = tokenize(markup)

    assert len(tokens) == 1
    assert tokens[0].kind == kind
    assert tokens[0].text == text
    assert tokens[0].raw == markup


def test_bold_wins_over_marker_at_same_start():
    """Test that the outer bold delimiters are consumed before the marker pattern."""
    tokens = tokenize("*@x@*")

    assert kinds(tokens) == [TokenKind.BOLD]
    assert tokens[0].text == "@x@"


def test_header_keeps_inner_markup():
    """Test that markers inside a header stay in the header's text."""
    tokens = tokenize("#Title *bold*#")

    assert kinds(tokens) == [TokenKind.HEADER]
    assert tokens[0].text == "Title *bold*"


def test_mixed_paragraph():
    """Test a paragraph mixing several markers and plain words."""
    tokens = tokenize("Some *bold* and @hot@ then $tiny$ /slant/")

    assert kinds(tokens) == [
        TokenKind.PLAIN, TokenKind.BOLD, TokenKind.PLAIN, TokenKind.MARKER,
        TokenKind.PLAIN, TokenKind.SMALL, TokenKind.ITALIC,
    ]


def test_unterminated_marker_is_literal():
    """Test that a lone delimiter falls through to a plain word."""
    tokens = tokenize("*oops and more")

    assert kinds(tokens) == [TokenKind.PLAIN] * 3
    assert tokens[0].text == "*oops"


def test_empty_pair_is_literal():
    """Test that a delimiter pair with nothing inside is not styled."""
    tokens = tokenize("** ##")

    assert kinds(tokens) == [TokenKind.PLAIN, TokenKind.PLAIN]
    assert [t.text for t in tokens] == ["**", "##"]


def test_marker_inside_word_is_not_styled():
    """Test that styled spans only start at a token boundary."""
    tokens = tokenize("hello*bold*")

    assert kinds(tokens) == [TokenKind.PLAIN]
    assert tokens[0].text == "hello*bold*"


def test_styled_span_followed_by_punctuation():
    """Test that text glued to a closing delimiter becomes its own word."""
    tokens = tokenize("*bold*, then")

    assert kinds(tokens) == [TokenKind.BOLD, TokenKind.PLAIN, TokenKind.PLAIN]
    assert tokens[1].text == ","


def test_list_line_consumes_rest_of_line():
    """Test that a list item swallows any markers after it."""
    tokens = tokenize("intro !!item with *bold*")

    assert kinds(tokens) == [TokenKind.PLAIN, TokenKind.LIST_ITEM]
    assert tokens[1].text == "item with *bold*"


def test_empty_and_blank_input():
    """Test that blank paragraphs produce no tokens."""
    assert tokenize("") == []
    assert tokenize("   \t ") == []


@pytest.mark.parametrize("paragraph", [
    "plain words only",
    "#Head line# then *bold* @mark@ /it/ $sm$ tail",
    "*unterminated @half /slash $ #",
    "!!list item here",
])
def test_tokenization_is_lossless(paragraph):
    """Test that joining raw spans with single spaces rebuilds the paragraph."""
    tokens = tokenize(paragraph)

    assert " ".join(t.raw for t in tokens) == " ".join(paragraph.split())
    for token in tokens:
        assert paragraph[token.start:token.end] == token.raw


def test_tokens_do_not_overlap():
    """Test that token spans are ordered and disjoint."""
    tokens = tokenize("a *b c* #d# e")

    for left, right in zip(tokens, tokens[1:]):
        assert left.end <= right.start
