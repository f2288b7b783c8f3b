#!/usr/bin/env python3
"""
Demo - Card Maker
=================

Renders every markup feature on both themes:
• #headers# with *bold* inside
• *bold*, @marker@, /italic/ and $small$ runs
• !!list items with indented continuation lines
• blank-line spacing and ++++ card breaks

Cards are written to ``output/<theme>/card-<n>.png``.
"""

import asyncio
import logging
import sys
from pathlib import Path

# Add the project root to the path so we can import our modules
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

from card_maker.generator import CardGenerator

logging.basicConfig(level=logging.INFO, format='%(asctime)s [%(levelname)s] %(message)s')
logger = logging.getLogger(__name__)

DEMO_MARKUP = """
#Five habits of *calm* teams#

Ship small, ship @often@ and talk to each other.

!!Write things down before the meeting, not after it
!!Review code the same day
!!Protect /focus/ time

$Swipe for the next card$
++++
#Why it works#
Short feedback loops keep surprises *small*.

A lone * or an unclosed @marker stays literal.
"""


async def generate_demos():
    """Generate the demo deck for every shipped theme."""
    for theme in ("story", "square"):
        output_dir = project_root / "output" / theme
        generator = CardGenerator(theme=theme, debug=True)
        written = await generator.generate_to_dir(DEMO_MARKUP, output_dir)
        logger.info(f"✅ {theme}: {len(written)} cards in {output_dir}")


if __name__ == "__main__":
    asyncio.run(generate_demos())
