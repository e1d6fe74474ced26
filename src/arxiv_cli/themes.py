"""Color palette for list markup and category badges."""

from __future__ import annotations

# Default color for unknown categories (Monokai gray)
DEFAULT_CATEGORY_COLOR = "#888888"

# Category color mapping (Monokai-inspired palette)
CATEGORY_COLORS = {
    "cs.AI": "#f92672",  # Monokai pink
    "cs.CL": "#66d9ef",  # Monokai blue
    "cs.LG": "#a6e22e",  # Monokai green
    "cs.CV": "#e6db74",  # Monokai yellow
    "cs.DS": "#ae81ff",  # Monokai purple
    "cs.CC": "#fd971f",  # Monokai orange
    "cs.DM": "#66d9ef",
    "math.CO": "#a6e22e",
    "stat.ML": "#f92672",
}

THEME_COLORS = {
    "muted": "#75715e",
    "accent": "#66d9ef",
    "green": "#a6e22e",
    "yellow": "#e6db74",
    "orange": "#fd971f",
}


def get_category_color(term: str) -> str:
    """Return the badge color for an arXiv category term."""
    return CATEGORY_COLORS.get(term, DEFAULT_CATEGORY_COLOR)


__all__ = [
    "CATEGORY_COLORS",
    "DEFAULT_CATEGORY_COLOR",
    "THEME_COLORS",
    "get_category_color",
]
