"""JSON response parsing and link resolution for search results."""

from __future__ import annotations

import json
from typing import Any

from arxiv_cli.models import (
    ALTERNATE_LINK_REL,
    HTML_REWRITE_FROM,
    HTML_REWRITE_TO,
    PDF_LINK_TITLE,
    Category,
    Link,
    SearchResult,
)

_REQUIRED_STR_FIELDS = ("id", "title", "summary", "published", "updated")


def _require_str(data: dict[str, Any], key: str, context: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ValueError(f"{context}: field {key!r} must be a string")
    return value


def _optional_str(data: dict[str, Any], key: str, context: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"{context}: field {key!r} must be a string or null")
    return value


def _require_list(data: dict[str, Any], key: str, context: str) -> list[Any]:
    value = data.get(key)
    if not isinstance(value, list):
        raise ValueError(f"{context}: field {key!r} must be an array")
    return value


def _parse_authors(raw: list[Any], context: str) -> tuple[tuple[str, ...], ...]:
    groups: list[tuple[str, ...]] = []
    for group in raw:
        if not isinstance(group, list) or not all(isinstance(name, str) for name in group):
            raise ValueError(f"{context}: authors must be an array of string arrays")
        groups.append(tuple(group))
    return tuple(groups)


def _parse_link(raw: Any, context: str) -> Link:
    if not isinstance(raw, dict):
        raise ValueError(f"{context}: link entries must be objects")
    return Link(
        href=_require_str(raw, "href", context),
        rel=_require_str(raw, "rel", context),
        type=_optional_str(raw, "type", context),
        title=_optional_str(raw, "title", context),
    )


def _parse_category(raw: Any, context: str) -> Category:
    if not isinstance(raw, dict):
        raise ValueError(f"{context}: category entries must be objects")
    return Category(
        term=_require_str(raw, "term", context),
        scheme=_require_str(raw, "scheme", context),
    )


def parse_search_result(data: Any) -> SearchResult:
    """Build a SearchResult from one decoded JSON object.

    Raises:
        ValueError: if a required field is missing or has the wrong type.
    """
    if not isinstance(data, dict):
        raise ValueError("Search result entries must be JSON objects")
    context = f"result {data.get('id')!r}"
    fields = {key: _require_str(data, key, context) for key in _REQUIRED_STR_FIELDS}
    return SearchResult(
        authors=_parse_authors(_require_list(data, "authors", context), context),
        links=tuple(_parse_link(item, context) for item in _require_list(data, "links", context)),
        categories=tuple(
            _parse_category(item, context) for item in _require_list(data, "categories", context)
        ),
        **fields,
    )


def parse_search_response(text: str) -> list[SearchResult]:
    """Parse a search service response body into results.

    Results with an identifier already seen earlier in the body are dropped.

    Raises:
        ValueError: if the body is not a JSON array of well-formed results.
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError("Invalid search response JSON") from exc
    if not isinstance(payload, list):
        raise ValueError("Search response must be a JSON array")

    results: list[SearchResult] = []
    seen_ids: set[str] = set()
    for entry in payload:
        result = parse_search_result(entry)
        if result.id in seen_ids:
            continue
        seen_ids.add(result.id)
        results.append(result)
    return results


def find_pdf_link(result: SearchResult) -> Link | None:
    """Return the link titled "pdf", if the result has one."""
    return next((link for link in result.links if link.title == PDF_LINK_TITLE), None)


def find_alternate_link(result: SearchResult) -> Link | None:
    """Return the link with rel="alternate" (the abstract page), if any."""
    return next((link for link in result.links if link.rel == ALTERNATE_LINK_REL), None)


def to_html_url(href: str) -> str:
    """Rewrite an arXiv abstract URL to its ar5iv HTML rendering."""
    return href.replace(HTML_REWRITE_FROM, HTML_REWRITE_TO)


__all__ = [
    "find_alternate_link",
    "find_pdf_link",
    "parse_search_response",
    "parse_search_result",
    "to_html_url",
]
