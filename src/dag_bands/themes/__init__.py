"""Theme definitions for DAG diagrams."""

from dag_bands.themes.dark import DARK_THEME
from dag_bands.themes.default import DEFAULT_THEME

THEMES = {
    "default": DEFAULT_THEME,
    "dark": DARK_THEME,
}

__all__ = ["THEMES", "DEFAULT_THEME", "DARK_THEME"]
