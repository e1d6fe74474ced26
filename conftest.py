"""Shared test fixtures for arXiv CLI tests."""

from __future__ import annotations

from typing import Any

import pytest

from arxiv_cli.models import Category, Link, SearchResult, UserConfig
from arxiv_cli.widgets.listing import set_ascii_icons

# ── Module-level state isolation ─────────────────────────────────────────────


@pytest.fixture(autouse=True)
def _reset_icon_set():
    """Restore the Unicode seen indicators after each test.

    ArxivCli.__init__ switches the module-level icon set; without this
    fixture an ``ascii_icons=True`` app would leak into later tests.
    """
    yield
    set_ascii_icons(False)


# ── Factories ────────────────────────────────────────────────────────────────


@pytest.fixture
def make_link():
    """Factory fixture for creating Link instances."""

    def _make(
        href: str = "https://arxiv.org/abs/2401.12345v1",
        rel: str = "alternate",
        type: str | None = "text/html",
        title: str | None = None,
    ) -> Link:
        return Link(href=href, rel=rel, type=type, title=title)

    return _make


@pytest.fixture
def make_result(make_link):
    """Factory fixture for creating SearchResult instances with sensible defaults.

    By default the result carries an abstract-page link and a PDF link.
    """

    def _make(
        id: str = "http://arxiv.org/abs/2401.12345v1",
        title: str = "Test Paper",
        summary: str = "Test abstract content.",
        authors: tuple[tuple[str, ...], ...] = (("Test Author",),),
        links: tuple[Link, ...] | None = None,
        published: str = "2024-01-15T00:00:00Z",
        updated: str = "2024-01-16T00:00:00Z",
        categories: tuple[Category, ...] = (
            Category(term="cs.AI", scheme="http://arxiv.org/schemas/atom"),
        ),
    ) -> SearchResult:
        if links is None:
            links = (
                make_link(),
                make_link(
                    href="https://arxiv.org/pdf/2401.12345v1",
                    rel="related",
                    type="application/pdf",
                    title="pdf",
                ),
            )
        return SearchResult(
            id=id,
            title=title,
            summary=summary,
            authors=authors,
            links=links,
            published=published,
            updated=updated,
            categories=categories,
        )

    return _make


@pytest.fixture
def make_results(make_result):
    """Factory fixture for a page of ``count`` distinct results."""

    def _make(count: int, prefix: str = "2401") -> list[SearchResult]:
        return [
            make_result(
                id=f"http://arxiv.org/abs/{prefix}.{i:05d}v1",
                title=f"Paper {i}",
            )
            for i in range(count)
        ]

    return _make


@pytest.fixture
def sample_config():
    """Factory fixture for creating UserConfig with optional overrides."""

    def _make(**kwargs: Any) -> UserConfig:
        return UserConfig(**kwargs)

    return _make


@pytest.fixture
def search_payload():
    """One raw search-service document, as decoded from JSON."""
    return {
        "id": "http://arxiv.org/abs/2401.12345v1",
        "title": "Attention Is Still All You Need",
        "summary": "We revisit attention.\n  It still works.",
        "published": "2024-01-15T18:00:00Z",
        "updated": "2024-01-16T09:30:00Z",
        "authors": [["Alice Author"], ["Bob Builder", "Carol Coder"]],
        "links": [
            {
                "href": "https://arxiv.org/abs/2401.12345v1",
                "rel": "alternate",
                "type": "text/html",
            },
            {
                "href": "https://arxiv.org/pdf/2401.12345v1",
                "rel": "related",
                "type": "application/pdf",
                "title": "pdf",
            },
        ],
        "categories": [
            {"term": "cs.LG", "scheme": "http://arxiv.org/schemas/atom"},
            {"term": "stat.ML", "scheme": "http://arxiv.org/schemas/atom"},
        ],
    }
