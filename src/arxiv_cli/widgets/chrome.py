"""Widget chrome: status bar, live search bar and context footer."""

from __future__ import annotations

from rich.markup import escape as escape_markup
from textual.widgets import Static

from arxiv_cli.themes import THEME_COLORS


def format_status_text(
    *,
    query: str,
    page: int,
    result_count: int,
    seen_count: int,
    pending_amount: str = "",
    loading: bool = False,
) -> str:
    """Build the status line shown under the result list."""
    accent = THEME_COLORS["accent"]
    muted = THEME_COLORS["muted"]
    query_label = escape_markup(query) if query else "[italic]all papers[/]"
    parts = [
        f"[{accent}]Query:[/] {query_label}",
        f"[{accent}]Page:[/] {page}",
        f"[{muted}]{result_count} results · {seen_count} seen[/]",
    ]
    if pending_amount:
        parts.append(f"[bold {THEME_COLORS['yellow']}]{pending_amount}[/]")
    if loading:
        parts.append(f"[italic {THEME_COLORS['orange']}]Loading...[/]")
    return "  ".join(parts)


class StatusBar(Static):
    """One-line summary of the current query, page and pending count."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        padding: 0 1;
        background: $panel;
    }
    """

    def show_status(self, **kwargs) -> None:
        self.update(format_status_text(**kwargs))


class SearchBar(Static):
    """Live view of the search buffer while in search-entry mode."""

    DEFAULT_CSS = """
    SearchBar {
        height: 3;
        padding: 0 1;
        border: tall $accent;
        content-align: center middle;
        display: none;
    }

    SearchBar.visible {
        display: block;
    }
    """

    def show_buffer(self, buffer: str) -> None:
        self.update(f"[bold]/[/] {escape_markup(buffer)}▏")


class ContextFooter(Static):
    """Context-sensitive footer showing relevant key hints."""

    DEFAULT_CSS = """
    ContextFooter {
        dock: bottom;
        height: 1;
        color: $text-muted;
        padding: 0 1;
    }
    """

    def render_bindings(self, bindings: list[tuple[str, str]], mode_badge: str = "") -> None:
        """Update the footer with a list of (key, label) binding hints."""
        accent = THEME_COLORS["accent"]
        muted = THEME_COLORS["muted"]
        parts = []
        if mode_badge:
            parts.append(mode_badge)
        for key, label in bindings:
            parts.append(f"[bold {accent}]{escape_markup(key)}[/] [{muted}]{label}[/]")
        self.update("  ".join(parts))


__all__ = [
    "ContextFooter",
    "SearchBar",
    "StatusBar",
    "format_status_text",
]
