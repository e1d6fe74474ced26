"""Help overlay shown while the session is in help mode."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Label, Static

from arxiv_cli.help_ui import HELP_FOOTER
from arxiv_cli.themes import THEME_COLORS


class HelpOverlay(VerticalScroll, can_focus=False):
    """Static keyboard reference. Hidden unless it has the ``visible`` class."""

    DEFAULT_CSS = """
    HelpOverlay {
        width: 100%;
        height: 1fr;
        background: $surface;
        border: tall $accent;
        padding: 0 2;
        display: none;
    }

    HelpOverlay.visible {
        display: block;
    }

    #help-title {
        text-style: bold;
        width: 100%;
        text-align: center;
        margin-bottom: 1;
    }

    .help-section-title {
        text-style: bold;
    }

    .help-keys {
        padding-left: 2;
        margin-bottom: 1;
    }

    #help-footer {
        width: 100%;
        text-align: center;
        color: $text-muted;
    }
    """

    def __init__(self, sections: list[tuple[str, list[tuple[str, str]]]], **kwargs) -> None:
        super().__init__(**kwargs)
        self._sections = sections

    @staticmethod
    def _render_section_lines(entries: list[tuple[str, str]]) -> str:
        green = THEME_COLORS["green"]
        lines = [f"  [{green}]{key}[/]  {description}" for key, description in entries]
        return "\n".join(lines)

    def compose(self) -> ComposeResult:
        yield Label("Keyboard Shortcuts", id="help-title")
        for section_name, entries in self._sections:
            if not entries:
                continue
            yield Label(
                f"[{THEME_COLORS['accent']}]{section_name}[/]",
                classes="help-section-title",
            )
            yield Static(self._render_section_lines(entries), classes="help-keys")
        yield Label(HELP_FOOTER, id="help-footer")


__all__ = ["HelpOverlay"]
