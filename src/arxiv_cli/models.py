"""Data models and constants for the arXiv CLI browser."""

from __future__ import annotations

from dataclasses import dataclass

# Application identity, used for platformdirs config paths
CONFIG_APP_NAME = "arxiv-cli"

# Search service constants
SEARCH_API_URL = "https://arxiv-json-api.fly.dev"
DEFAULT_QUERY = "algorithms"
DEFAULT_TIMEOUT_SECONDS = 30
MAX_TIMEOUT_SECONDS = 300

# Pagination bounds (retreat may reach 0, advance saturates at MAX_PAGE)
FIRST_PAGE = 1
MIN_PAGE = 0
MAX_PAGE = 1000

# Seen-set file, relative to the user's home directory
SEEN_FILENAME = ".arxiv-cli"

# Link resolution
PDF_LINK_TITLE = "pdf"
ALTERNATE_LINK_REL = "alternate"
HTML_REWRITE_FROM = "arxiv"
HTML_REWRITE_TO = "ar5iv"


@dataclass(slots=True, frozen=True)
class Link:
    """A link attached to a search result (abstract page, PDF, DOI...)."""

    href: str
    rel: str
    type: str | None = None
    title: str | None = None


@dataclass(slots=True, frozen=True)
class Category:
    """An arXiv category term with its scheme URL."""

    term: str
    scheme: str


@dataclass(slots=True, frozen=True)
class SearchResult:
    """One document returned by the search service."""

    id: str
    title: str
    summary: str
    authors: tuple[tuple[str, ...], ...] = ()
    links: tuple[Link, ...] = ()
    published: str = ""
    updated: str = ""
    categories: tuple[Category, ...] = ()

    def flat_authors(self) -> list[str]:
        """Return every author name in order, flattening the name groups."""
        return [name for group in self.authors for name in group]


@dataclass(slots=True)
class PaginationParams:
    """Current query string and page number sent with every fetch."""

    page: int = FIRST_PAGE
    query: str = DEFAULT_QUERY

    def advance(self, amount: int) -> None:
        """Move forward by ``amount`` pages, saturating at MAX_PAGE."""
        self.page = min(self.page + amount, MAX_PAGE)

    def retreat(self, amount: int) -> None:
        """Move back by ``amount`` pages, flooring at page 0."""
        self.page = MIN_PAGE if amount >= self.page else self.page - amount

    def set_query(self, text: str) -> None:
        """Replace the query verbatim. An empty query browses without a filter."""
        self.query = text

    def as_request_params(self) -> dict[str, str]:
        return {"q": self.query, "p": str(self.page)}


@dataclass(slots=True)
class UserConfig:
    """User configuration loaded from config.json."""

    base_url: str = SEARCH_API_URL
    default_query: str = DEFAULT_QUERY
    start_page: int = FIRST_PAGE
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    seen_file: str = ""  # Empty = use ~/.arxiv-cli
    ascii_icons: bool = False
    version: int = 1


__all__ = [
    "ALTERNATE_LINK_REL",
    "CONFIG_APP_NAME",
    "DEFAULT_QUERY",
    "DEFAULT_TIMEOUT_SECONDS",
    "FIRST_PAGE",
    "HTML_REWRITE_FROM",
    "HTML_REWRITE_TO",
    "MAX_PAGE",
    "MAX_TIMEOUT_SECONDS",
    "MIN_PAGE",
    "PDF_LINK_TITLE",
    "SEARCH_API_URL",
    "SEEN_FILENAME",
    "Category",
    "Link",
    "PaginationParams",
    "SearchResult",
    "UserConfig",
]
