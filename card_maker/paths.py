#!/usr/bin/env python3
"""Utility helpers for resolving output directories and background assets.

This module is the single source-of-truth for all path decisions in the
card_maker package. Cards are written into an explicit ``output_dir``;
background sources given relative to the markup file are resolved against
a base directory.
"""
from __future__ import annotations

from pathlib import Path


__all__ = ["prepare_output_dir", "resolve_asset"]


def prepare_output_dir(output_dir: str | Path) -> Path:
    """Resolve *output_dir* to an absolute path, creating it if needed."""
    out_path = Path(output_dir).expanduser().resolve()
    out_path.mkdir(parents=True, exist_ok=True)
    return out_path


def resolve_asset(src: str, *, base_dir: Path) -> str:
    """Return a loadable source for *src*.

    Rules
    -----
    1. ``data:`` URIs are returned unchanged.
    2. ``file://`` URLs are stripped to an absolute path.
    3. Relative paths are resolved against *base_dir*.
    """
    if src.startswith("data:"):
        return src

    if src.startswith("file://"):
        abs_path = Path(src[7:]).expanduser().resolve()
    else:
        abs_path = (Path(base_dir) / src).expanduser().resolve()

    return str(abs_path)
