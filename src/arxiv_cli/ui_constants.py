"""Internal UI constants for the ArxivCli app."""

from __future__ import annotations

APP_CSS = """
#main {
    height: 1fr;
    border: tall $primary-background;
}

#main.hidden {
    display: none;
}

#result-list {
    height: 1fr;
    scrollbar-gutter: stable;
}
"""

# Footer hints per mode: (key, label)
BROWSE_FOOTER_HINTS: list[tuple[str, str]] = [
    ("j/k", "move"),
    ("n/p", "page"),
    ("/", "search"),
    ("s/d", "seen"),
    ("o", "pdf"),
    ("t", "html"),
    ("b", "browse all"),
    ("h", "help"),
    ("q", "quit"),
]

SEARCH_FOOTER_HINTS: list[tuple[str, str]] = [
    ("Enter", "search"),
    ("Backspace", "delete"),
    ("Esc", "cancel"),
]

HELP_FOOTER_HINTS: list[tuple[str, str]] = [
    ("any key", "close help"),
]
