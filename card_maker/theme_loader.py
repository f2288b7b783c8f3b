"""Card themes: CSS files under ``card_maker/themes`` selected by name."""
from pathlib import Path
from typing import List

THEMES_DIR = Path(__file__).parent / "themes"
DEFAULT_THEME = "story"


def theme_path(theme: str) -> Path:
    """
    Map a theme name to its CSS file.

    Raises:
        ValueError: If the name could escape the themes directory
        FileNotFoundError: If no such theme ships with the package
    """
    # Names are bare words; anything else could point outside THEMES_DIR
    if not theme.replace("_", "").replace("-", "").isalnum():
        raise ValueError(f"Invalid theme name: {theme!r}")

    path = THEMES_DIR / f"{theme}.css"
    if not path.is_file():
        raise FileNotFoundError(
            f"Theme '{theme}' not found. Available themes: {list_available_themes()}"
        )
    return path


def get_css(theme: str = DEFAULT_THEME) -> str:
    """Return the CSS text of *theme*; see :func:`theme_path` for errors."""
    return theme_path(theme).read_text(encoding="utf-8")


def list_available_themes() -> List[str]:
    """Names of the shipped themes, sorted."""
    if not THEMES_DIR.exists():
        return []
    return sorted(f.stem for f in THEMES_DIR.glob("*.css") if f.is_file())


def validate_theme(theme: str) -> bool:
    """True when *theme* names a shipped theme; used to check the CLI ``--theme``."""
    try:
        theme_path(theme)
    except (FileNotFoundError, ValueError):
        return False
    return True
