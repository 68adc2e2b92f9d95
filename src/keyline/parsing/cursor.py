#!/usr/bin/env python3
"""
KEYLINE CURSOR - Positional View over the Input
-----------------------------------------------
The one shared mutable resource of a parse. The engine and the handler it
invokes take turns driving the same Cursor: a handler may read further raw
lines (multi-line values) or rewrite the input, and the engine continues
exactly where the handler left it.

Author: KeyLine Team
Date: 2026-10-17
"""

from typing import Iterable, Iterator, List, Optional

from keyline.core.errors import EndOfInput, CursorStateError


class Cursor:
    """
    An index into an owned, growable list of lines.

    `position` is the zero-based index of the next unread line.
    `line_number` is the 1-based number of the line consumed last; lines
    inserted before the read position do not move it.
    """

    def __init__(self, lines: Iterable[str]):
        self._lines: List[str] = list(lines)
        self._pos = 0
        # Index of the consumed line that line numbers refer to
        self._current: Optional[int] = None
        # Index of the line returned by the last next(), None once mutated
        self._last: Optional[int] = None

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        """Consumes the remaining lines one by one."""
        while self.has_next():
            yield self.next()

    @property
    def lines(self) -> List[str]:
        """A copy of the underlying sequence in its current state."""
        return list(self._lines)

    @property
    def position(self) -> int:
        return self._pos

    @property
    def line_number(self) -> int:
        """1-based number of the most recently consumed line (0 before any)."""
        return self._current + 1 if self._current is not None else 0

    @property
    def current(self) -> Optional[str]:
        if self._current is None:
            return None
        return self._lines[self._current]

    def has_next(self) -> bool:
        return self._pos < len(self._lines)

    def peek(self) -> Optional[str]:
        return self._lines[self._pos] if self.has_next() else None

    def next(self) -> str:
        if not self.has_next():
            raise EndOfInput(f"No line left after line {self.line_number}")
        line = self._lines[self._pos]
        self._current = self._last = self._pos
        self._pos += 1
        return line

    # --- Mutation ---

    def insert_before(self, lines: Iterable[str]):
        """Inserts lines just before the read position; they are never visited."""
        new_lines = list(lines)
        self._lines[self._pos:self._pos] = new_lines
        self._pos += len(new_lines)
        self._last = None

    def insert_after(self, lines: Iterable[str]):
        """Inserts lines at the read position; the next next() returns the first."""
        self._lines[self._pos:self._pos] = list(lines)
        self._last = None

    def remove(self) -> str:
        """Deletes the most recently consumed line and returns it."""
        return self._splice("remove", [])

    def replace(self, lines: Iterable[str]):
        """Substitutes the most recently consumed line; replacements count as consumed."""
        self._splice("replace", list(lines))

    def _splice(self, operation: str, new_lines: List[str]) -> str:
        if self._last is None:
            raise CursorStateError(
                f"Cannot {operation}: no line consumed since the last mutation."
            )
        index = self._last
        old = self._lines[index]
        self._lines[index:index + 1] = new_lines
        self._pos += len(new_lines) - 1
        # The last replacement, or the line before a removed one
        last = index + len(new_lines) - 1
        self._current = last if last >= 0 else None
        self._last = None
        return old
