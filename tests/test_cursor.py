"""Tests for the result list cursor."""

from __future__ import annotations

import pytest

from arxiv_cli.cursor import ResultCursor


class TestJumps:
    def test_first_on_empty_list(self):
        cursor = ResultCursor()
        cursor.first()
        assert cursor.selected == 0

    def test_last_on_empty_list(self):
        cursor = ResultCursor()
        cursor.last(0)
        assert cursor.selected == 0

    def test_first_then_last(self):
        cursor = ResultCursor()
        cursor.first()
        cursor.last(7)
        assert cursor.selected == 6

    def test_current_defaults_to_zero_while_unset(self):
        cursor = ResultCursor()
        assert cursor.selected is None
        assert cursor.current == 0


class TestStepForward:
    def test_first_move_from_unset_lands_on_zero(self):
        cursor = ResultCursor()
        cursor.step_forward(5, 10)
        assert cursor.selected == 0

    def test_steps_by_amount(self):
        cursor = ResultCursor(selected=2)
        cursor.step_forward(3, 10)
        assert cursor.selected == 5

    @pytest.mark.parametrize("amount", [7, 8, 100])
    def test_clamps_to_last_row(self, amount):
        cursor = ResultCursor(selected=2)
        cursor.step_forward(amount, 10)
        assert cursor.selected == 9

    def test_empty_list_does_not_underflow(self):
        cursor = ResultCursor(selected=3)
        cursor.step_forward(1, 0)
        assert cursor.selected == 0

    def test_zero_amount_stays(self):
        cursor = ResultCursor(selected=4)
        cursor.step_forward(0, 10)
        assert cursor.selected == 4


class TestStepBackward:
    def test_steps_by_amount(self):
        cursor = ResultCursor(selected=6)
        cursor.step_backward(2, 10)
        assert cursor.selected == 4

    @pytest.mark.parametrize("amount", [6, 7, 50])
    def test_clamps_to_zero(self, amount):
        cursor = ResultCursor(selected=6)
        cursor.step_backward(amount, 10)
        assert cursor.selected == 0

    def test_from_unset_lands_on_zero(self):
        cursor = ResultCursor()
        cursor.step_backward(1, 10)
        assert cursor.selected == 0

    def test_empty_list(self):
        cursor = ResultCursor(selected=0)
        cursor.step_backward(3, 0)
        assert cursor.selected == 0


class TestReset:
    def test_reset_non_empty_selects_first_row(self):
        cursor = ResultCursor(selected=8)
        cursor.reset(3)
        assert cursor.selected == 0

    def test_reset_empty_unsets(self):
        cursor = ResultCursor(selected=8)
        cursor.reset(0)
        assert cursor.selected is None
