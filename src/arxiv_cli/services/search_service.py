"""Search service gateway: one GET per page/query change, parsed to results."""

from __future__ import annotations

import logging
import time

import httpx

from arxiv_cli.models import PaginationParams, SearchResult
from arxiv_cli.parsing import parse_search_response

logger = logging.getLogger(__name__)

USER_AGENT = "arxiv-cli/1.0"


class FetchError(Exception):
    """A fetch failed (network, HTTP status or malformed body). Always fatal."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def _describe_http_error(exc: httpx.HTTPError) -> FetchError:
    if isinstance(exc, httpx.HTTPStatusError):
        status_code = exc.response.status_code
        return FetchError(
            f"search service returned HTTP {status_code}",
            status_code=status_code,
        )
    return FetchError(f"network error talking to the search service: {exc}")


def _parse_response(response: httpx.Response) -> list[SearchResult]:
    response.raise_for_status()
    try:
        return parse_search_response(response.text)
    except ValueError as exc:
        raise FetchError(f"malformed search response: {exc}") from exc


async def fetch_page(
    *,
    client: httpx.AsyncClient | None,
    params: PaginationParams,
    base_url: str,
    timeout_seconds: int,
    user_agent: str = USER_AGENT,
) -> list[SearchResult]:
    """Fetch and parse one page of results for ``params``.

    Raises:
        FetchError: on any transport, status or parse failure.
    """
    request_params = params.as_request_params()
    headers = {"User-Agent": user_agent}
    started_at = time.perf_counter()
    try:
        if client is not None:
            response = await client.get(
                base_url,
                params=request_params,
                headers=headers,
                timeout=timeout_seconds,
            )
        else:
            async with httpx.AsyncClient() as tmp_client:
                response = await tmp_client.get(
                    base_url,
                    params=request_params,
                    headers=headers,
                    timeout=timeout_seconds,
                )
        results = _parse_response(response)
    except httpx.HTTPError as exc:
        raise _describe_http_error(exc) from exc

    logger.debug(
        "Fetched %d results for q=%r p=%d in %.0fms",
        len(results),
        params.query,
        params.page,
        (time.perf_counter() - started_at) * 1000.0,
    )
    return results


def fetch_page_blocking(
    *,
    params: PaginationParams,
    base_url: str,
    timeout_seconds: int,
    user_agent: str = USER_AGENT,
) -> list[SearchResult]:
    """Synchronous variant of :func:`fetch_page` for startup, before the UI runs."""
    try:
        response = httpx.get(
            base_url,
            params=params.as_request_params(),
            headers={"User-Agent": user_agent},
            timeout=timeout_seconds,
        )
        results = _parse_response(response)
    except httpx.HTTPError as exc:
        raise _describe_http_error(exc) from exc
    logger.debug("Startup fetch: %d results for q=%r p=%d", len(results), params.query, params.page)
    return results


__all__ = [
    "USER_AGENT",
    "FetchError",
    "fetch_page",
    "fetch_page_blocking",
]
