"""Widget classes for the result browser screen."""

from arxiv_cli.widgets.chrome import ContextFooter, SearchBar, StatusBar
from arxiv_cli.widgets.help import HelpOverlay
from arxiv_cli.widgets.listing import ResultList, render_result_option

__all__ = [
    "ContextFooter",
    "HelpOverlay",
    "ResultList",
    "SearchBar",
    "StatusBar",
    "render_result_option",
]
