"""Row cursor for the current result page.

The cursor only knows row indices. Every operation takes the current list
length so it never holds a reference to the results themselves.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ResultCursor:
    """Selected row index into the current result list (``None`` = unset)."""

    selected: int | None = None

    @property
    def current(self) -> int:
        """Index used to resolve the selected result; 0 while nothing is selected."""
        return self.selected if self.selected is not None else 0

    def first(self) -> None:
        self.selected = 0

    def last(self, length: int) -> None:
        self.selected = length - 1 if length > 0 else 0

    def step_forward(self, amount: int, length: int) -> None:
        """Move down by ``amount`` rows, clamping at the last row.

        The first move from an unset selection always lands on row 0.
        """
        index = self.selected
        if index is None or length == 0:
            self.selected = 0
        elif index + amount >= length - 1:
            self.selected = length - 1
        else:
            self.selected = index + amount

    def step_backward(self, amount: int, length: int) -> None:
        """Move up by ``amount`` rows, clamping at row 0."""
        index = self.selected
        if index is None or length == 0 or amount >= index:
            self.selected = 0
        else:
            self.selected = index - amount

    def reset(self, length: int) -> None:
        """Apply the selection policy for a freshly replaced result list."""
        self.selected = 0 if length > 0 else None


__all__ = ["ResultCursor"]
