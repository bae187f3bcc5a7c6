"""Theme definitions for curriculum flowcharts."""

from curriculum_flow.themes.dark import DARK_THEME
from curriculum_flow.themes.light import LIGHT_THEME

THEMES = {
    "light": LIGHT_THEME,
    "dark": DARK_THEME,
}

__all__ = ["THEMES", "LIGHT_THEME", "DARK_THEME"]
