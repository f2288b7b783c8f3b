"""
Card Maker Package

A package for rendering short inline markup into styled, word-wrapped card
images, one per ``++++``-separated card.
"""

from .generator import CardGenerator, split_slides
from .layout_engine import LayoutEngine
from .models import Cursor, Slide, StyleDescriptor, Token
from .styles import StyleResolver, StyleSheet
from .surface import PillowSurface, Surface
from .tokenizer import tokenize

__all__ = [
    'CardGenerator',
    'LayoutEngine',
    'Cursor',
    'Slide',
    'StyleDescriptor',
    'Token',
    'StyleResolver',
    'StyleSheet',
    'PillowSurface',
    'Surface',
    'tokenize',
    'split_slides',
]
