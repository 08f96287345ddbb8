"""Line and column helpers shared by the resolver and the hint aggregator.

Columns are Unicode code points of the line text, rows are separated by ``\\n``
only, which is the row model tree-sitter uses.
"""

from __future__ import annotations

import bisect
from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from semantic_overlay.models import Span


def split_lines(text: str) -> list[str]:
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def line_width(line_lengths: Sequence[int], line: int) -> int:
    if 0 <= line < len(line_lengths):
        return line_lengths[line]
    return 0


def line_segments(span: Span, line_lengths: Sequence[int]) -> Iterator[tuple[int, int, int]]:
    """Yield ``(line, start_column, end_column)`` for every line the span touches.

    The first line runs from the start column to end of line, interior lines
    cover the whole line and the last line runs from column 0 to the end column.
    """
    start, end = span.start, span.end
    if start.line == end.line:
        yield start.line, start.column, end.column
        return
    for row in range(start.line, end.line + 1):
        start_col = start.column if row == start.line else 0
        end_col = end.column if row == end.line else line_width(line_lengths, row)
        yield row, start_col, end_col


class ClaimedRanges:
    """Disjoint half-open column ranges claimed so far, kept sorted per line."""

    def __init__(self) -> None:
        self._starts: dict[int, list[int]] = {}
        self._ends: dict[int, list[int]] = {}

    def overlaps(self, line: int, start: int, end: int) -> bool:
        starts = self._starts.get(line)
        if not starts:
            return False
        ends = self._ends[line]
        idx = bisect.bisect_right(starts, start)
        # Neighbour on the left may extend past our start.
        if idx > 0 and ends[idx - 1] > start:
            return True
        return idx < len(starts) and starts[idx] < end

    def claim(self, line: int, start: int, end: int) -> None:
        starts = self._starts.setdefault(line, [])
        ends = self._ends.setdefault(line, [])
        idx = bisect.bisect_right(starts, start)
        starts.insert(idx, start)
        ends.insert(idx, end)

    def __len__(self) -> int:
        return sum(len(starts) for starts in self._starts.values())
