"""arXiv CLI browser TUI - page through search results from the terminal.

Usage:
    arxiv-cli                       # Browse the default query
    arxiv-cli -q "graph neural"     # Start with a query
    arxiv-cli --page 3              # Start on page 3

Key bindings:
    j/k     - Move down/up (prefix a number: 5j)
    g/G     - First/last item
    n/p     - Next/previous page (prefix a number: 3n)
    /       - Search (Enter to run, Esc to cancel)
    b       - Browse all papers (clear the query)
    s/d     - Mark/unmark the selected paper as seen
    o       - Open the selected paper's PDF
    t       - Open the selected paper's HTML version (ar5iv)
    h/?     - Help
    q       - Save seen papers and quit
"""

from __future__ import annotations

import logging
import sys
import webbrowser

import httpx
from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.events import Key
from textual.widgets import Header

from arxiv_cli.action_messages import build_actionable_error, build_open_url_notification
from arxiv_cli.cli import (
    _configure_color_mode,
    _configure_logging,
    _validate_interactive_tty,
)
from arxiv_cli.cli import main as _cli_main
from arxiv_cli.config import load_config
from arxiv_cli.help_ui import build_help_sections
from arxiv_cli.models import UserConfig
from arxiv_cli.seen import SeenSet, load_seen_ids, save_seen_ids
from arxiv_cli.services import FetchError, fetch_page_blocking
from arxiv_cli.services.interfaces import AppServices, build_default_app_services
from arxiv_cli.session import (
    BROWSE_KEYMAP,
    BrowserSession,
    FetchRequested,
    Mode,
    OpenUrlRequested,
    QuitRequested,
)
from arxiv_cli.ui_constants import (
    APP_CSS,
    BROWSE_FOOTER_HINTS,
    HELP_FOOTER_HINTS,
    SEARCH_FOOTER_HINTS,
)
from arxiv_cli.widgets import ContextFooter, HelpOverlay, ResultList, SearchBar, StatusBar
from arxiv_cli.widgets.listing import set_ascii_icons

logger = logging.getLogger(__name__)


class ArxivCli(App[SeenSet]):
    """Render and effect host for a :class:`BrowserSession`.

    Every key goes to the session; the app executes the returned effect
    and repaints from session state. ``run()`` returns the seen set when
    the user quits with ``q`` and ``None`` on any other exit.
    """

    TITLE = "arXiv CLI"
    CSS = APP_CSS
    ENABLE_COMMAND_PALETTE = False

    def __init__(
        self,
        session: BrowserSession,
        *,
        config: UserConfig | None = None,
        services: AppServices | None = None,
        ascii_icons: bool = False,
    ) -> None:
        super().__init__()
        self._session = session
        self._config = config or UserConfig()
        self._services = services
        self._loading = False
        self.fetch_error: FetchError | None = None

        # Shared HTTP client for connection pooling (created in on_mount)
        self._http_client: httpx.AsyncClient | None = None

        set_ascii_icons(ascii_icons)

    @property
    def session(self) -> BrowserSession:
        return self._session

    def _get_services(self) -> AppServices:
        """Return app service interfaces, lazily creating the defaults."""
        services = self._services
        if services is None:
            services = build_default_app_services()
            self._services = services
        return services

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="main"):
            yield SearchBar(id="search-bar")
            yield ResultList(id="result-list")
        yield HelpOverlay(build_help_sections(BROWSE_KEYMAP), id="help-overlay")
        yield StatusBar(id="status-bar")
        yield ContextFooter(id="footer")

    def on_mount(self) -> None:
        self._http_client = httpx.AsyncClient()
        self._refresh_result_list()
        self._render_state()
        logger.debug(
            "App mounted: %d results, q=%r p=%d, %d seen",
            len(self._session.results),
            self._session.params.query,
            self._session.params.page,
            len(self._session.seen),
        )

    async def on_unmount(self) -> None:
        client = self._http_client
        self._http_client = None
        if client is not None:
            try:
                await client.aclose()
            except httpx.HTTPError as e:
                logger.debug("Failed to close HTTP client during shutdown: %s", e, exc_info=True)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    async def on_key(self, event: Key) -> None:
        """Forward every key to the session and run the resulting effect.

        The fetch is awaited here, so the next key is only handled once
        the new page is on screen.
        """
        event.stop()
        event.prevent_default()

        session = self._session
        current = session.current_result()
        was_seen = current is not None and session.seen.contains(current.id)

        effect = session.handle_key(event.key, event.character)

        if isinstance(effect, QuitRequested):
            logger.debug("Quit requested with %d seen ids", len(session.seen))
            self.exit(session.seen)
            return
        if isinstance(effect, FetchRequested):
            await self._run_fetch(effect)
        elif isinstance(effect, OpenUrlRequested):
            self._open_url(effect.url)
        elif current is not None and session.seen.contains(current.id) != was_seen:
            self._refresh_current_row()

        self._render_state()

    async def _run_fetch(self, effect: FetchRequested) -> None:
        params = self._session.params
        logger.debug("Fetch (%s): q=%r p=%d", effect.reason, params.query, params.page)
        self._loading = True
        self._render_state()
        try:
            results = await self._get_services().search.fetch_page(
                client=self._http_client,
                params=params,
                base_url=self._config.base_url,
                timeout_seconds=self._config.timeout_seconds,
            )
        except FetchError as exc:
            logger.error("Fetch failed for q=%r p=%d: %s", params.query, params.page, exc)
            self.fetch_error = exc
            self.exit(None, return_code=1)
            return
        finally:
            self._loading = False
        self._session.replace_results(results)
        self._refresh_result_list()

    def _open_url(self, url: str) -> None:
        try:
            self._get_services().browser.open_url(url)
        except (webbrowser.Error, OSError) as exc:
            logger.warning("Failed to open %s: %s", url, exc)
            self.notify(
                build_actionable_error(
                    "open the browser",
                    why=str(exc) or "the system browser did not start",
                    next_step=f"open {url} manually",
                ),
                title="Browser",
                severity="error",
                timeout=8,
            )
            return
        logger.debug("Opened %s", url)
        self.notify(build_open_url_notification(url), title="Browser")

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _refresh_result_list(self) -> None:
        self.query_one(ResultList).show_results(self._session.results, self._session.seen)

    def _refresh_current_row(self) -> None:
        session = self._session
        index = session.cursor.selected
        if index is None or not session.results:
            return
        self.query_one(ResultList).refresh_seen_at(session.results, session.seen, index)

    def _render_state(self) -> None:
        """Sync every widget with the session."""
        session = self._session
        mode = session.mode
        params = session.params

        self.sub_title = f"{params.query or 'all papers'} · page {params.page}"

        self.query_one("#main").set_class(mode is Mode.HELP, "hidden")
        self.query_one(HelpOverlay).set_class(mode is Mode.HELP, "visible")

        search_bar = self.query_one(SearchBar)
        search_bar.set_class(mode is Mode.SEARCH, "visible")
        if mode is Mode.SEARCH:
            search_bar.show_buffer(session.search_buffer)

        self.query_one(ResultList).select_row(session.cursor.selected)

        self.query_one(StatusBar).show_status(
            query=params.query,
            page=params.page,
            result_count=len(session.results),
            seen_count=len(session.seen),
            pending_amount=session.amount.pending,
            loading=self._loading,
        )

        footer = self.query_one(ContextFooter)
        if mode is Mode.SEARCH:
            footer.render_bindings(SEARCH_FOOTER_HINTS, mode_badge="[bold]SEARCH[/]")
        elif mode is Mode.HELP:
            footer.render_bindings(HELP_FOOTER_HINTS, mode_badge="[bold]HELP[/]")
        else:
            footer.render_bindings(BROWSE_FOOTER_HINTS)


def main() -> int:
    """Main entry point wrapper for CLI/bootstrap logic."""
    return _cli_main(
        load_config_fn=load_config,
        fetch_fn=fetch_page_blocking,
        load_seen_fn=load_seen_ids,
        save_seen_fn=save_seen_ids,
        configure_logging_fn=_configure_logging,
        configure_color_mode_fn=_configure_color_mode,
        validate_interactive_tty_fn=_validate_interactive_tty,
        app_factory=ArxivCli,
    )


if __name__ == "__main__":
    sys.exit(main())
