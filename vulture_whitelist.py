"""Vulture whitelist for Textual framework false positives.

Textual calls lifecycle hooks, event handlers and compose() methods by
name, and BrowserSession dispatches action_* methods through
BROWSE_KEYMAP with getattr. Vulture can't trace these, so we declare
them here.
"""

# ── ArxivCli (App) ────────────────────────────────────────────────────
from arxiv_cli.app import ArxivCli

ArxivCli.TITLE
ArxivCli.CSS
ArxivCli.ENABLE_COMMAND_PALETTE
ArxivCli.compose
ArxivCli.on_mount
ArxivCli.on_unmount
ArxivCli.on_key

# ── BrowserSession (keymap dispatch) ─────────────────────────────────
from arxiv_cli.session import BrowserSession

BrowserSession.action_step_forward
BrowserSession.action_step_backward
BrowserSession.action_last_item
BrowserSession.action_first_item
BrowserSession.action_next_page
BrowserSession.action_prev_page
BrowserSession.action_start_search
BrowserSession.action_browse_all
BrowserSession.action_show_help
BrowserSession.action_open_pdf
BrowserSession.action_open_html
BrowserSession.action_mark_seen
BrowserSession.action_unmark_seen
BrowserSession.action_quit

# ── Widgets ───────────────────────────────────────────────────────────
from arxiv_cli.widgets import ContextFooter, HelpOverlay, SearchBar, StatusBar

ContextFooter.DEFAULT_CSS
HelpOverlay.DEFAULT_CSS
HelpOverlay.compose
SearchBar.DEFAULT_CSS
StatusBar.DEFAULT_CSS

# ── Effects (read by the app via isinstance) ─────────────────────────
from arxiv_cli.session import FetchRequested

FetchRequested.reason
