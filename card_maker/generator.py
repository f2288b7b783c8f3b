#!/usr/bin/env python3
"""
Main card generator module that ties together background loading, layout
and rasterization.
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from .background import BackgroundError, BackgroundLoader, pick_background
from .css_utils import CSSParser
from .layout_engine import LayoutEngine
from .models import Slide
from .paths import prepare_output_dir
from .styles import StyleResolver, StyleSheet
from .surface import PillowSurface, Surface
from .theme_loader import DEFAULT_THEME, list_available_themes, validate_theme

logger = logging.getLogger(__name__)

SLIDE_DELIMITER = "++++"
ERROR_NOTICE = "Rendering error"


def split_slides(markup: str) -> List[str]:
    """Split *markup* on ``++++``, trimming pieces and dropping empty ones."""
    parts = (part.strip() for part in markup.split(SLIDE_DELIMITER))
    return [part for part in parts if part]


class CardGenerator:
    """
    Main class for generating card images from markup.
    """

    def __init__(
        self,
        *,
        theme: str = DEFAULT_THEME,
        base_dir: str = None,
        debug: bool = False,
        surface: Surface = None,
    ):
        """Create a new :class:`CardGenerator`.

        Parameters
        ----------
        theme
            Name of the CSS theme to apply (``story`` / ``square`` / …).
        base_dir
            Base directory for resolving relative background paths.
            If None, defaults to current working directory.
        debug
            Enable verbose logging.
        surface
            Drawing surface to render on. Defaults to a :class:`PillowSurface`
            sized by the theme.
        """
        self.debug = debug
        self.theme = theme
        self.base_dir = Path(base_dir) if base_dir else Path.cwd()

        css = CSSParser(theme)
        dimensions = css.get_slide_dimensions()
        self.width = dimensions['width_px']
        self.height = dimensions['height_px']
        self.padding = dimensions['padding_px']
        self.fallback_color = css.get_color('fallback-color')

        self.surface = surface or PillowSurface(self.width, self.height, css.get_font_files())
        self.resolver = StyleResolver(StyleSheet.from_css(css))
        self.layout_engine = LayoutEngine(self.surface, self.resolver, debug=debug)
        self.background_loader = BackgroundLoader(self.base_dir, debug=debug)

    @property
    def max_width(self) -> int:
        return self.width - 2 * self.padding

    async def _paint_background(self, src: Optional[str]) -> bool:
        """Composite the background; returns True when the fallback fill was used."""
        if src is None:
            self.surface.fill(self.fallback_color)
            return True
        try:
            image = await self.background_loader.load(src)
        except BackgroundError as e:
            logger.warning(f"⚠️ {e}; using fallback fill {self.fallback_color}")
            self.surface.fill(self.fallback_color)
            return True
        self.surface.draw_image(image, 0, 0, self.width, self.height)
        return False

    def _draw_error_notice(self) -> None:
        base = self.resolver.base_style()
        self.surface.set_font(base.font_weight, 24, False)
        self.surface.set_fill_color(base.fill_color)
        self.surface.draw_text(ERROR_NOTICE, 40, 120)

    async def render_slide(self, index: int, text: str, background: Optional[str] = None) -> Slide:
        """
        Render one card.

        Layout errors are logged and recorded on the returned slide; they do
        not propagate.
        """
        self.surface.clear()
        fallback = await self._paint_background(background)

        error = None
        try:
            self.layout_engine.layout(text, self.padding, self.padding, self.max_width)
        except Exception as e:
            logger.exception(f"Layout of card {index + 1} failed")
            error = str(e) or e.__class__.__name__
            self._draw_error_notice()

        return Slide(
            index=index,
            text=text,
            image=self.surface.export_raster(),
            fallback_background=fallback,
            error=error,
        )

    async def generate(self, markup: str, backgrounds: Sequence[str] = ()) -> List[Slide]:
        """
        Render every card of *markup*, in order.

        Args:
            markup: Card markup; cards are separated by ``++++``
            backgrounds: Background sources; card *i* uses ``backgrounds[i]``,
                falling back to ``backgrounds[0]``

        Returns:
            One :class:`Slide` per non-empty card
        """
        parts = split_slides(markup)
        slides: List[Slide] = []

        for index, text in enumerate(parts):
            try:
                slide = await self.render_slide(index, text, pick_background(backgrounds, index))
            except Exception:
                # Surface failures outside layout lose this card only
                logger.exception(f"Card {index + 1} could not be rendered")
                continue
            slides.append(slide)
            if self.debug:
                logger.info(f"Rendered card {index + 1}/{len(parts)} ({len(slide.image)} bytes)")

        return slides

    async def generate_to_dir(self, markup: str, output_dir, backgrounds: Sequence[str] = ()) -> List[Path]:
        """Render all cards and write them as ``card-<n>.png`` into *output_dir*."""
        out_path = prepare_output_dir(output_dir)
        slides = await self.generate(markup, backgrounds)
        return [slide.save(out_path) for slide in slides]


def main():
    """Command-line entry point for the card generator."""
    import argparse
    import asyncio
    import sys

    def _build_parser() -> argparse.ArgumentParser:
        p = argparse.ArgumentParser(prog="cardmaker", description="Render card markup to PNG images, one per ++++-separated card.")
        p.add_argument("markup", type=Path, help="Markup file to render")
        p.add_argument("--output", "-o", type=Path, default=Path("output"), help="Directory for card-<n>.png files")
        p.add_argument("--theme", "-t", default=DEFAULT_THEME, help="CSS theme to use (story, square, …)")
        p.add_argument("--background", "-b", action="append", default=[], help="Background image; repeat for one per card")
        p.add_argument("--debug", action="store_true", help="Enable verbose logging")
        p.add_argument("--asset-base", type=Path, help="Base directory for relative background paths (default: parent of markup file)")
        return p

    async def _generate_async(args):
        """Async wrapper for card generation."""
        markup_path: Path = args.markup
        if not markup_path.exists():
            logger.error(f"Markup file '{markup_path}' not found")
            sys.exit(1)

        asset_base = args.asset_base if args.asset_base else markup_path.parent
        markup_text = markup_path.read_text(encoding="utf-8")

        generator = CardGenerator(theme=args.theme, base_dir=asset_base, debug=args.debug)
        written = await generator.generate_to_dir(markup_text, args.output, args.background)
        logger.info("✅ %d cards written to %s", len(written), args.output)

    parser = _build_parser()
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO, format="%(levelname)s  %(message)s")

    if not validate_theme(args.theme):
        logger.error(f"Unknown theme '{args.theme}'. Available themes: {list_available_themes()}")
        sys.exit(1)

    asyncio.run(_generate_async(args))


if __name__ == "__main__":
    main()
