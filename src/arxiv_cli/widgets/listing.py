"""List rendering helpers and the result list widget."""

from __future__ import annotations

from collections.abc import Sequence

from rich.markup import escape as escape_markup
from textual.widgets import OptionList
from textual.widgets.option_list import Option

from arxiv_cli.models import Category, SearchResult
from arxiv_cli.seen import SeenSet
from arxiv_cli.themes import THEME_COLORS, get_category_color

SUMMARY_PREVIEW_MAX_LEN = 200  # Max summary preview length in list rows
AUTHORS_PREVIEW_MAX = 6  # Authors shown before "et al."

_ICON_SETS: dict[str, dict[str, str]] = {
    "unicode": {
        "seen": "✅",
        "unseen": "❌",
    },
    "ascii": {
        "seen": "[v]",
        "unseen": "[x]",
    },
}
_ACTIVE_ICON_SET = _ICON_SETS["unicode"]


def set_ascii_icons(enabled: bool) -> None:
    """Switch list indicators between Unicode and ASCII modes."""
    global _ACTIVE_ICON_SET
    _ACTIVE_ICON_SET = _ICON_SETS["ascii"] if enabled else _ICON_SETS["unicode"]


def seen_indicator(seen: bool) -> str:
    return _ACTIVE_ICON_SET["seen"] if seen else _ACTIVE_ICON_SET["unseen"]


def _collapse(text: str) -> str:
    return " ".join(text.split())


def truncate_summary(summary: str, max_len: int = SUMMARY_PREVIEW_MAX_LEN) -> str:
    """Collapse whitespace and cut the summary at a word boundary."""
    text = _collapse(summary)
    if len(text) <= max_len:
        return text
    return text[:max_len].rsplit(" ", 1)[0] + "..."


def format_authors(result: SearchResult, limit: int = AUTHORS_PREVIEW_MAX) -> str:
    names = result.flat_authors()
    if len(names) > limit:
        return ", ".join(names[:limit]) + " et al."
    return ", ".join(names)


def format_categories(categories: Sequence[Category]) -> str:
    """Format category terms with colors."""
    return " ".join(
        f"[{get_category_color(cat.term)}]{escape_markup(cat.term)}[/]" for cat in categories
    )


def render_result_option(result: SearchResult, *, seen: bool = False) -> str:
    """Render a search result as Rich markup for OptionList display."""
    title = escape_markup(_collapse(result.title))
    if seen:
        title = f"[dim]{title}[/]"
    title_line = f"{escape_markup(seen_indicator(seen))} [bold]{title}[/]"

    meta_parts = [f"[dim]{escape_markup(result.updated)}[/]"]
    categories = format_categories(result.categories)
    if categories:
        meta_parts.append(categories)

    lines = [
        title_line,
        f"[{THEME_COLORS['accent']}]{escape_markup(format_authors(result))}[/]",
        "  ".join(meta_parts),
    ]
    summary = truncate_summary(result.summary)
    if summary:
        lines.append(f"[dim italic]{escape_markup(summary)}[/]")
    return "\n".join(lines)


class ResultList(OptionList, can_focus=False):
    """The current result page.

    Not focusable: every key goes to the app, which drives the
    highlighted row from the session cursor.
    """

    def show_results(self, results: Sequence[SearchResult], seen: SeenSet) -> None:
        """Replace all rows with ``results``."""
        self.clear_options()
        self.add_options(
            [
                Option(render_result_option(result, seen=seen.contains(result.id)))
                for result in results
            ]
        )

    def refresh_seen_at(self, results: Sequence[SearchResult], seen: SeenSet, index: int) -> None:
        """Re-render one row in place after its seen state changed."""
        if not 0 <= index < min(len(results), self.option_count):
            return
        result = results[index]
        self.replace_option_prompt_at_index(
            index, render_result_option(result, seen=seen.contains(result.id))
        )

    def select_row(self, index: int | None) -> None:
        if index is None or self.option_count == 0:
            self.highlighted = None
            return
        self.highlighted = min(index, self.option_count - 1)


__all__ = [
    "AUTHORS_PREVIEW_MAX",
    "SUMMARY_PREVIEW_MAX_LEN",
    "ResultList",
    "format_authors",
    "format_categories",
    "render_result_option",
    "seen_indicator",
    "set_ascii_icons",
    "truncate_summary",
]
