"""
Centralized CSS utilities for card themes.

Every tunable number of the renderer (canvas size, margins, font sizes, line
heights, colors, list indent) lives in the ``:root`` block of a theme file.
This module is the only place that reads them.
"""
import re
from typing import Dict, Any

from .theme_loader import DEFAULT_THEME, get_css


class CSSParser:
    """
    Centralized CSS variable extraction for a single theme.
    """

    def __init__(self, theme: str = DEFAULT_THEME):
        self.theme = theme
        self.css_content = get_css(theme)
        self._css_vars = None

    def get_css_variables(self) -> Dict[str, str]:
        """Extract all CSS variables from :root section. Cached for performance."""
        if self._css_vars is not None:
            return self._css_vars

        root_match = re.search(r':root\s*\{([^}]+)\}', self.css_content, re.DOTALL)
        if not root_match:
            raise ValueError(f"No :root section found in theme '{self.theme}'")

        root_content = root_match.group(1)

        variable_pattern = r'--([^:]+):\s*([^;]+);'
        css_vars = re.findall(variable_pattern, root_content)
        self._css_vars = {name.strip(): value.strip() for name, value in css_vars}

        return self._css_vars

    def get_raw_value(self, variable_name: str) -> str:
        """Get raw CSS variable value."""
        vars_dict = self.get_css_variables()
        value = vars_dict.get(variable_name)
        if not value:
            raise ValueError(f"CSS variable '--{variable_name}' not found in theme '{self.theme}'")
        return value

    def get_px_value(self, variable_name: str) -> int:
        """Get pixel value from CSS variable."""
        value = self.get_raw_value(variable_name)

        px_match = re.fullmatch(r'(\d+)px', value)
        if not px_match:
            raise ValueError(f"CSS variable '--{variable_name}' is not a pixel value: {value}")

        return int(px_match.group(1))

    def get_int_value(self, variable_name: str) -> int:
        """Get a unitless integer (font weights)."""
        value = self.get_raw_value(variable_name)
        if not value.isdigit():
            raise ValueError(f"CSS variable '--{variable_name}' is not an integer: {value}")
        return int(value)

    def get_string_value(self, variable_name: str) -> str:
        """Get a quoted string value with the quotes stripped."""
        value = self.get_raw_value(variable_name)
        string_match = re.fullmatch(r'[\'"]([^\'"]*)[\'"]', value)
        if not string_match:
            raise ValueError(f"CSS variable '--{variable_name}' is not a quoted string: {value}")
        return string_match.group(1)

    def get_color(self, variable_name: str) -> str:
        """Get a hex color (#rgb or #rrggbb), normalized to #rrggbb."""
        value = self.get_raw_value(variable_name)
        if not re.fullmatch(r'#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})', value):
            raise ValueError(f"CSS variable '--{variable_name}' is not a hex color: {value}")
        hexval = value[1:]
        if len(hexval) == 3:
            hexval = ''.join([c * 2 for c in hexval])
        return f"#{hexval.lower()}"

    def get_slide_dimensions(self) -> Dict[str, Any]:
        """Extract canvas dimensions from CSS variables."""
        return {
            'width_px': self.get_px_value('slide-width'),
            'height_px': self.get_px_value('slide-height'),
            'padding_px': self.get_px_value('slide-padding'),
        }

    def get_font_files(self) -> Dict[str, str]:
        """Font file per face, keyed by regular / bold / italic / bold-italic."""
        return {
            face: self.get_string_value(f'font-{face}')
            for face in ('regular', 'bold', 'italic', 'bold-italic')
        }
