"""Internal service layer for app orchestration."""

from arxiv_cli.services.search_service import (
    FetchError,
    fetch_page,
    fetch_page_blocking,
)

__all__ = [
    "FetchError",
    "fetch_page",
    "fetch_page_blocking",
]
