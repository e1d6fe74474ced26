"""Interaction state machine for the result browser.

``BrowserSession`` consumes one key event at a time and mutates the
pagination params, the cursor, the seen set or the current mode. Anything
that needs I/O (fetching, opening a browser, quitting) is returned as an
effect for the host app to execute, so every mode can be driven in tests
without a terminal.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from arxiv_cli.cursor import ResultCursor
from arxiv_cli.models import PaginationParams, SearchResult
from arxiv_cli.parsing import find_alternate_link, find_pdf_link, to_html_url
from arxiv_cli.seen import SeenSet

logger = logging.getLogger(__name__)

DEFAULT_AMOUNT = 1

# Browse-mode key -> action name (dispatched to ``BrowserSession.action_<name>``).
# Keys are Textual key names.
BROWSE_KEYMAP: dict[str, str] = {
    "j": "step_forward",
    "down": "step_forward",
    "k": "step_backward",
    "up": "step_backward",
    "G": "last_item",
    "g": "first_item",
    "n": "next_page",
    "p": "prev_page",
    "slash": "start_search",
    "o": "open_pdf",
    "t": "open_html",
    "b": "browse_all",
    "h": "show_help",
    "question_mark": "show_help",
    "s": "mark_seen",
    "d": "unmark_seen",
    "q": "quit",
}


class Mode(str, Enum):
    """Top-level input mode."""

    BROWSE = "browse"
    SEARCH = "search"
    HELP = "help"


@dataclass(slots=True, frozen=True)
class FetchRequested:
    """The params changed; the host must fetch and call ``replace_results``."""

    reason: str


@dataclass(slots=True, frozen=True)
class OpenUrlRequested:
    """The host should open ``url`` in the system browser."""

    url: str


@dataclass(slots=True, frozen=True)
class QuitRequested:
    """The user asked to quit; the host flushes the seen set and exits."""


Effect = FetchRequested | OpenUrlRequested | QuitRequested


class AmountAccumulator:
    """Digit buffer for vim-style count prefixes (``5j``, ``3n``)."""

    __slots__ = ("_digits",)

    def __init__(self) -> None:
        self._digits = ""

    @property
    def pending(self) -> str:
        return self._digits

    def push(self, digit: str) -> None:
        self._digits += digit

    def consume(self) -> int:
        """Return the buffered count (default 1) and clear the buffer."""
        digits = self._digits
        self._digits = ""
        try:
            return int(digits)
        except ValueError:
            return DEFAULT_AMOUNT


class BrowserSession:
    """Owns pagination, cursor, current results and the seen set."""

    def __init__(
        self,
        params: PaginationParams,
        seen: SeenSet,
        results: Sequence[SearchResult] = (),
    ) -> None:
        self.params = params
        self.seen = seen
        self.cursor = ResultCursor()
        self.results: list[SearchResult] = []
        self.mode = Mode.BROWSE
        self.amount = AmountAccumulator()
        self.search_buffer = ""
        self.replace_results(results)

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def replace_results(self, results: Sequence[SearchResult]) -> None:
        """Swap in a freshly fetched page and reset the cursor onto it."""
        self.results = list(results)
        self.cursor.reset(len(self.results))

    def current_result(self) -> SearchResult | None:
        """Return the selected result (row 0 while unset), or None if the page is empty."""
        if not self.results:
            return None
        index = min(self.cursor.current, len(self.results) - 1)
        return self.results[index]

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def handle_key(self, key: str, character: str | None = None) -> Effect | None:
        """Process one key event in the current mode.

        ``key`` is a Textual key name; ``character`` is the printable
        character for the key, if any. Unmapped keys are ignored.
        """
        if character is None and len(key) == 1:
            character = key
        if self.mode is Mode.HELP:
            return self._handle_help_key()
        if self.mode is Mode.SEARCH:
            return self._handle_search_key(key, character)
        return self._handle_browse_key(key)

    def _handle_help_key(self) -> None:
        # Any key dismisses the overlay and is not reprocessed.
        self.mode = Mode.BROWSE

    def _handle_search_key(self, key: str, character: str | None) -> Effect | None:
        if key == "enter":
            self.params.set_query(self.search_buffer)
            self.mode = Mode.BROWSE
            logger.debug("Search confirmed: %r", self.search_buffer)
            return FetchRequested("search")
        if key == "escape":
            self.mode = Mode.BROWSE
            self.search_buffer = ""
            return None
        if key == "backspace":
            self.search_buffer = self.search_buffer[:-1]
            return None
        if character is not None and character.isprintable():
            self.search_buffer += character
        return None

    def _handle_browse_key(self, key: str) -> Effect | None:
        if len(key) == 1 and key.isdigit():
            self.amount.push(key)
            return None
        action = BROWSE_KEYMAP.get(key)
        if action is None:
            return None
        return getattr(self, f"action_{action}")()

    # ------------------------------------------------------------------
    # Browse actions
    # ------------------------------------------------------------------

    def action_step_forward(self) -> None:
        self.cursor.step_forward(self.amount.consume(), len(self.results))

    def action_step_backward(self) -> None:
        self.cursor.step_backward(self.amount.consume(), len(self.results))

    def action_last_item(self) -> None:
        self.cursor.last(len(self.results))

    def action_first_item(self) -> None:
        self.cursor.first()

    def action_next_page(self) -> FetchRequested:
        self.params.advance(self.amount.consume())
        return FetchRequested("next_page")

    def action_prev_page(self) -> FetchRequested:
        self.params.retreat(self.amount.consume())
        return FetchRequested("prev_page")

    def action_start_search(self) -> None:
        self.search_buffer = ""
        self.mode = Mode.SEARCH

    def action_browse_all(self) -> FetchRequested:
        self.params.set_query("")
        return FetchRequested("browse_all")

    def action_show_help(self) -> None:
        self.mode = Mode.HELP

    def action_open_pdf(self) -> OpenUrlRequested | None:
        result = self.current_result()
        link = find_pdf_link(result) if result is not None else None
        if link is None:
            return None
        return OpenUrlRequested(link.href)

    def action_open_html(self) -> OpenUrlRequested | None:
        result = self.current_result()
        link = find_alternate_link(result) if result is not None else None
        if link is None:
            return None
        return OpenUrlRequested(to_html_url(link.href))

    def action_mark_seen(self) -> None:
        result = self.current_result()
        if result is not None:
            self.seen.mark(result.id)

    def action_unmark_seen(self) -> None:
        result = self.current_result()
        if result is not None:
            self.seen.unmark(result.id)

    def action_quit(self) -> QuitRequested:
        return QuitRequested()


__all__ = [
    "BROWSE_KEYMAP",
    "DEFAULT_AMOUNT",
    "AmountAccumulator",
    "BrowserSession",
    "Effect",
    "FetchRequested",
    "Mode",
    "OpenUrlRequested",
    "QuitRequested",
]
