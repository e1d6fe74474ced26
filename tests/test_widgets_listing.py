"""Focused tests for list rendering helpers/widgets."""

from __future__ import annotations

from textual.app import App, ComposeResult

from arxiv_cli.models import Category
from arxiv_cli.seen import SeenSet
from arxiv_cli.widgets.chrome import format_status_text
from arxiv_cli.widgets.listing import (
    ResultList,
    format_authors,
    format_categories,
    render_result_option,
    set_ascii_icons,
    truncate_summary,
)


def test_seen_indicator_switches_with_ascii_mode(make_result):
    result = make_result(title="Indicator Test")

    set_ascii_icons(True)
    assert render_result_option(result, seen=True).startswith("\\[v]")
    assert render_result_option(result, seen=False).startswith("\\[x]")

    set_ascii_icons(False)
    assert render_result_option(result, seen=True).startswith("✅")
    assert render_result_option(result, seen=False).startswith("❌")


def test_seen_title_is_dimmed(make_result):
    result = make_result(title="Dim Me")
    assert "[dim]Dim Me[/]" in render_result_option(result, seen=True)
    assert "[dim]Dim Me[/]" not in render_result_option(result, seen=False)


def test_row_contains_authors_date_categories_and_summary(make_result):
    result = make_result(
        title="A  multi-line\n title",
        authors=(("Ada",), ("Grace", "Barbara")),
        summary="Short summary.",
        updated="2024-02-01T00:00:00Z",
        categories=(Category(term="cs.LG", scheme="s"),),
    )
    text = render_result_option(result)
    lines = text.splitlines()
    assert len(lines) == 4
    assert "A multi-line title" in lines[0]
    assert "Ada, Grace, Barbara" in lines[1]
    assert "2024-02-01T00:00:00Z" in lines[2]
    assert "cs.LG" in lines[2]
    assert "Short summary." in lines[3]


def test_row_without_summary_has_three_lines(make_result):
    assert len(render_result_option(make_result(summary="  ")).splitlines()) == 3


def test_markup_in_title_is_escaped(make_result):
    text = render_result_option(make_result(title="[bold]Injected[/bold]"))
    assert "\\[bold]Injected" in text


def test_truncate_summary_cuts_on_word_boundary():
    text = "word " * 100
    truncated = truncate_summary(text, max_len=22)
    assert truncated == "word word word word..."


def test_truncate_summary_short_text_is_collapsed_only():
    assert truncate_summary("a\n  b") == "a b"


def test_format_authors_adds_et_al(make_result):
    result = make_result(authors=tuple((f"A{i}",) for i in range(8)))
    assert format_authors(result, limit=3) == "A0, A1, A2 et al."


def test_format_categories_colors_each_term():
    text = format_categories([Category("cs.AI", "s"), Category("math.CO", "s")])
    assert "cs.AI" in text
    assert "math.CO" in text
    assert text.count("[/]") == 2


def test_status_text_shows_pending_and_loading():
    text = format_status_text(
        query="", page=0, result_count=3, seen_count=1, pending_amount="12", loading=True
    )
    assert "all papers" in text
    assert "Page:[/] 0" in text
    assert "3 results · 1 seen" in text
    assert "12" in text
    assert "Loading..." in text


class _ListApp(App):
    def compose(self) -> ComposeResult:
        yield ResultList(id="list")


async def test_result_list_shows_and_refreshes_rows(make_results):
    results = make_results(3)
    seen = SeenSet()
    app = _ListApp()
    async with app.run_test():
        result_list = app.query_one(ResultList)
        result_list.show_results(results, seen)
        assert result_list.option_count == 3

        seen.mark(results[1].id)
        result_list.refresh_seen_at(results, seen, 1)
        prompt = str(result_list.get_option_at_index(1).prompt)
        assert prompt.startswith("✅")

        result_list.select_row(10)
        assert result_list.highlighted == 2
        result_list.select_row(None)
        assert result_list.highlighted is None

        result_list.show_results([], seen)
        result_list.select_row(0)
        assert result_list.highlighted is None
