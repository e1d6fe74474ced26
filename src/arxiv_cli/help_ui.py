"""Help overlay section builders derived from the browse keymap."""

from __future__ import annotations

from collections.abc import Mapping

HELP_SECTION_ACTIONS: list[tuple[str, list[str]]] = [
    (
        "Navigation",
        ["step_forward", "step_backward", "first_item", "last_item"],
    ),
    (
        "Pages & Search",
        ["next_page", "prev_page", "start_search", "browse_all"],
    ),
    (
        "Papers",
        ["mark_seen", "unmark_seen", "open_pdf", "open_html"],
    ),
    (
        "Other",
        ["show_help", "quit"],
    ),
]

HELP_DESCRIPTIONS: dict[str, str] = {
    "step_forward": "Move down <number> items (like 5j)",
    "step_backward": "Move up <number> items (like 5k)",
    "first_item": "Jump to the first item",
    "last_item": "Jump to the last item",
    "next_page": "Go <number> pages forward (like 5n)",
    "prev_page": "Go <number> pages back (like 5p)",
    "start_search": "Search (type, Enter to run, Esc to cancel)",
    "browse_all": "Clear the query and browse everything",
    "mark_seen": "Mark the selected item as seen",
    "unmark_seen": "Unmark the selected item",
    "open_pdf": "Open the selected item's PDF in the browser",
    "open_html": "Open the selected item's HTML version (ar5iv)",
    "show_help": "Show this help",
    "quit": "Save seen items and quit",
}

HELP_COUNT_PREFIX: tuple[str, str] = ("0-9", "Type a number before j/k/n/p to repeat")

HELP_FOOTER = "Press any key to close"


def _format_help_key(key: str) -> str:
    """Normalize Textual key names for user-facing help text."""
    replacements = {
        "slash": "/",
        "question_mark": "?",
        "down": "↓",
        "up": "↑",
    }
    return replacements.get(key, key)


def _keys_for_action(keymap: Mapping[str, str], action_name: str) -> list[str]:
    return [key for key, action in keymap.items() if action == action_name]


def build_help_sections(
    keymap: Mapping[str, str],
) -> list[tuple[str, list[tuple[str, str]]]]:
    """Build help sections from the runtime keymap."""
    sections: list[tuple[str, list[tuple[str, str]]]] = []
    for section_name, actions in HELP_SECTION_ACTIONS:
        entries: list[tuple[str, str]] = []
        for action_name in actions:
            keys = _keys_for_action(keymap, action_name)
            if not keys:
                continue
            label = " / ".join(_format_help_key(key) for key in keys)
            entries.append((label, HELP_DESCRIPTIONS[action_name]))
        if section_name == "Navigation":
            entries.append(HELP_COUNT_PREFIX)
        sections.append((section_name, entries))
    return sections


__all__ = ["HELP_FOOTER", "build_help_sections"]
