"""
Background acquisition for cards.

Backgrounds are loaded asynchronously, the only suspension point of the
card pipeline. Sources are file paths or ``data:`` URIs.
"""
import asyncio
import base64
import binascii
import io
import logging
from pathlib import Path
from typing import Optional, Sequence

from PIL import Image

from .paths import resolve_asset

logger = logging.getLogger(__name__)


class BackgroundError(Exception):
    """A background source could not be loaded."""


def pick_background(sources: Sequence[str], index: int, default: Optional[str] = None) -> Optional[str]:
    """
    Choose the background for card *index*.

    The card's own source is used when there is one, otherwise the first
    source, otherwise *default*.
    """
    if index < len(sources) and sources[index]:
        return sources[index]
    if sources and sources[0]:
        return sources[0]
    return default


def _decode_data_url(src: str) -> bytes:
    header, sep, payload = src.partition(",")
    if not sep:
        raise BackgroundError("Malformed data URI: missing ','")
    if not header.endswith(";base64"):
        raise BackgroundError("Only base64 data URIs are supported")
    try:
        return base64.b64decode(payload, validate=True)
    except binascii.Error as e:
        raise BackgroundError(f"Malformed base64 payload: {e}") from e


class BackgroundLoader:
    """Loads background images, resolving relative paths against *base_dir*."""

    def __init__(self, base_dir: Path = None, debug: bool = False):
        self.base_dir = Path(base_dir) if base_dir else Path.cwd()
        self.debug = debug

    def _load_sync(self, src: str) -> Image.Image:
        resolved = resolve_asset(src, base_dir=self.base_dir)
        try:
            if resolved.startswith("data:"):
                stream = io.BytesIO(_decode_data_url(resolved))
            else:
                stream = io.BytesIO(Path(resolved).read_bytes())
            with Image.open(stream) as img:
                img.load()
                return img.convert("RGBA")
        except (OSError, Image.DecompressionBombError) as e:
            raise BackgroundError(f"Could not load background {src[:80]}: {e}") from e

    async def load(self, src: str) -> Image.Image:
        """Decode *src* off the event loop."""
        if self.debug:
            logger.info(f"Loading background {src[:80]}")
        return await asyncio.to_thread(self._load_sync, src)
