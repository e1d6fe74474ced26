"""Service interfaces + default adapters for app-level dependency injection."""

from __future__ import annotations

import webbrowser
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import httpx

from arxiv_cli.models import PaginationParams, SearchResult
from arxiv_cli.services import search_service as _search


@runtime_checkable
class SearchService(Protocol):
    """Interface for fetching a page of search results."""

    async def fetch_page(
        self,
        *,
        client: httpx.AsyncClient | None,
        params: PaginationParams,
        base_url: str,
        timeout_seconds: int,
    ) -> list[SearchResult]:
        """Fetch one page of results; raise FetchError on failure."""
        ...


@runtime_checkable
class BrowserService(Protocol):
    """Interface for handing a URL to the system browser."""

    def open_url(self, url: str) -> None:
        """Open ``url``; raise ``webbrowser.Error`` or ``OSError`` on failure."""
        ...


class DefaultSearchService:
    """Default adapter that delegates to the function-based search service."""

    async def fetch_page(
        self,
        *,
        client: httpx.AsyncClient | None,
        params: PaginationParams,
        base_url: str,
        timeout_seconds: int,
    ) -> list[SearchResult]:
        return await _search.fetch_page(
            client=client,
            params=params,
            base_url=base_url,
            timeout_seconds=timeout_seconds,
        )


class DefaultBrowserService:
    """Default adapter backed by the standard-library ``webbrowser`` module."""

    def open_url(self, url: str) -> None:
        webbrowser.open(url)


@dataclass(slots=True)
class AppServices:
    """Aggregated service interfaces consumed by the app layer."""

    search: SearchService
    browser: BrowserService


def build_default_app_services() -> AppServices:
    """Build default app services backed by the real network and browser."""
    return AppServices(
        search=DefaultSearchService(),
        browser=DefaultBrowserService(),
    )


__all__ = [
    "AppServices",
    "BrowserService",
    "DefaultBrowserService",
    "DefaultSearchService",
    "SearchService",
    "build_default_app_services",
]
