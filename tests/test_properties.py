"""Property-based tests using Hypothesis.

Verifies the invariants of pagination, the cursor, the seen set and the
key dispatcher. Each test runs 50 examples in CI, 200 in dev.

Run:
    pytest tests/test_properties.py -v
    pytest tests/test_properties.py -v --hypothesis-seed=0  # reproducible
"""

from __future__ import annotations

import tempfile
from pathlib import Path

import hypothesis.strategies as st
from hypothesis import given, settings

from arxiv_cli.cursor import ResultCursor
from arxiv_cli.models import MAX_PAGE, PaginationParams, SearchResult
from arxiv_cli.seen import SeenSet, load_seen_ids, save_seen_ids
from arxiv_cli.session import BROWSE_KEYMAP, BrowserSession, Mode

# ── Hypothesis profiles ─────────────────────────────────────────────
settings.register_profile("ci", max_examples=50, deadline=None)
settings.register_profile("dev", max_examples=200, deadline=None)
settings.load_profile("ci")

# ── Custom strategies ────────────────────────────────────────────────

pages = st.integers(min_value=0, max_value=MAX_PAGE)
amounts = st.integers(min_value=0, max_value=2000)
lengths = st.integers(min_value=0, max_value=60)
doc_ids = st.text(
    alphabet=st.characters(blacklist_categories=("Cc", "Cs", "Zl", "Zp", "Zs")),
    min_size=1,
    max_size=30,
)
browse_keys = st.sampled_from([*BROWSE_KEYMAP.keys(), *"0123456789", "x", "enter", "escape"])


@st.composite
def cursor_states(draw: st.DrawFn) -> tuple[ResultCursor, int]:
    length = draw(lengths)
    if length == 0:
        selected = draw(st.none() | st.just(0))
    else:
        selected = draw(st.none() | st.integers(min_value=0, max_value=length - 1))
    return ResultCursor(selected=selected), length


def _results(count: int) -> list[SearchResult]:
    return [SearchResult(id=f"id-{i}", title=f"t{i}", summary="") for i in range(count)]


# ── Pagination ───────────────────────────────────────────────────────


@given(page=pages, amount=amounts)
def test_advance_is_additive_or_saturates(page, amount):
    params = PaginationParams(page=page)
    params.advance(amount)
    assert params.page == min(page + amount, MAX_PAGE)


@given(page=pages, amount=amounts)
def test_retreat_never_negative(page, amount):
    params = PaginationParams(page=page)
    params.retreat(amount)
    assert params.page >= 0
    if amount >= page:
        assert params.page == 0
    else:
        assert params.page == page - amount


@given(page=st.integers(min_value=1, max_value=MAX_PAGE), amount=amounts)
def test_advance_then_retreat_round_trips_without_clamping(page, amount):
    params = PaginationParams(page=page)
    params.advance(amount)
    params.retreat(amount)
    if page + amount <= MAX_PAGE:
        assert params.page == page


# ── Cursor ───────────────────────────────────────────────────────────


@given(state=cursor_states(), amount=amounts, forward=st.booleans())
def test_steps_stay_in_bounds(state, amount, forward):
    cursor, length = state
    if forward:
        cursor.step_forward(amount, length)
    else:
        cursor.step_backward(amount, length)
    assert cursor.selected is not None
    if length == 0:
        assert cursor.selected == 0
    else:
        assert 0 <= cursor.selected <= length - 1


@given(length=lengths)
def test_first_then_last(length):
    cursor = ResultCursor()
    cursor.first()
    cursor.last(length)
    assert cursor.selected == max(length - 1, 0)


# ── Seen set ─────────────────────────────────────────────────────────


@given(ids=st.sets(doc_ids, max_size=20))
def test_seen_round_trip(ids):
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "seen"
        save_seen_ids(path, SeenSet(ids))
        loaded = load_seen_ids(path)
    assert set(loaded) == ids


@given(doc_id=doc_ids, times=st.integers(min_value=1, max_value=5))
def test_mark_is_idempotent(doc_id, times):
    seen = SeenSet()
    for _ in range(times):
        seen.mark(doc_id)
    assert len(seen) == 1
    seen.unmark(doc_id)
    assert not seen.contains(doc_id)


# ── Dispatcher ───────────────────────────────────────────────────────


@given(count=lengths, keys=st.lists(browse_keys, max_size=40))
def test_any_key_sequence_keeps_cursor_in_bounds(count, keys):
    session = BrowserSession(PaginationParams(), SeenSet(), _results(count))
    for key in keys:
        session.handle_key(key)
        if session.mode is Mode.BROWSE and session.cursor.selected is not None and count:
            assert 0 <= session.cursor.selected < count
        assert 0 <= session.params.page <= MAX_PAGE


@given(count=st.integers(min_value=1, max_value=60), amount=st.integers(1, 99))
def test_count_prefix_moves_exactly(count, amount):
    session = BrowserSession(PaginationParams(), SeenSet(), _results(count))
    for digit in str(amount):
        session.handle_key(digit)
    session.handle_key("j")
    assert session.cursor.selected == min(amount, count - 1)
    assert session.amount.pending == ""
