"""Mapping between byte offsets and line/column positions."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable

_INDENT_BYTES = b" \t"


class LineIndex:
    """Maps byte offsets in a source to lines and columns."""

    def __init__(self, line_starts: list[int], lines: list[bytes]) -> None:
        self._line_starts = line_starts
        self._lines = lines

    @classmethod
    def from_source(cls, source: bytes) -> LineIndex:
        """Build an index of every line in ``source``."""
        source = bytes(source)
        line_starts = [0]
        line_starts.extend(i + 1 for i, byte in enumerate(source) if byte == 0x0A)
        ends = [start - 1 for start in line_starts[1:]] + [len(source)]
        lines = [source[start:end] for start, end in zip(line_starts, ends)]
        return cls(line_starts, lines)

    def line_index(self, offset: int) -> int:
        """Zero-based index of the line holding ``offset``."""
        return max(bisect_right(self._line_starts, offset) - 1, 0)

    def line_number(self, offset: int) -> int:
        """One-based number of the line holding ``offset``."""
        return bisect_right(self._line_starts, offset)

    def column_number(self, offset: int) -> int:
        """One-based column of ``offset`` within its line."""
        return offset - self._line_starts[self.line_index(offset)] + 1

    def line_column(self, offset: int) -> tuple[int, int]:
        """One-based (line, column) of ``offset``."""
        index = self.line_index(offset)
        return index + 1, offset - self._line_starts[index] + 1

    def line_range(self, offset: int) -> tuple[int, int | None]:
        """Start of the line holding ``offset`` and start of the next line, if any."""
        index = self.line_index(offset)
        next_start = self._line_starts[index + 1] if index + 1 < len(self._line_starts) else None
        return self._line_starts[index], next_start

    def are_on_same_line(self, pos1: int, pos2: int) -> bool:
        """Whether both offsets lie on the same line."""
        start, next_start = self.line_range(pos1)
        return start <= pos2 and (next_start is None or pos2 < next_start)

    def line(self, line_index: int) -> bytes | None:
        """Content of a line by zero-based index, without its newline."""
        if 0 <= line_index < len(self._lines):
            return self._lines[line_index]
        return None

    def line_at(self, offset: int) -> bytes:
        """Content of the line holding ``offset``."""
        return self._lines[self.line_index(offset)]

    def is_first_on_line(self, offset: int) -> bool:
        """Whether only spaces and tabs precede ``offset`` on its line."""
        index = self.line_index(offset)
        prefix = self._lines[index][: offset - self._line_starts[index]]
        return all(byte in _INDENT_BYTES for byte in prefix)

    def column_offset_between(self, pos1: int, pos2: int) -> int:
        """Column of ``pos2`` minus column of ``pos1``."""
        return self.column_number(pos2) - self.column_number(pos1)

    def batch_line_column(self, offsets: Iterable[tuple[int, int]]) -> list[tuple[int, int, int, int]]:
        """Resolve (start, end) pairs sorted by start into (line_start, line_end, column_start, column_end)."""
        results = []
        starts = self._line_starts
        count = len(starts)
        current = 0
        for start, end in offsets:
            while current + 1 < count and starts[current + 1] <= start:
                current += 1
            end_index = current
            while end_index + 1 < count and starts[end_index + 1] <= end:
                end_index += 1
            results.append(
                (
                    current + 1,
                    end_index + 1,
                    start - starts[current] + 1,
                    end - starts[end_index] + 1,
                )
            )
        return results

    def line_start(self, line_index: int) -> int | None:
        """Byte offset where a zero-based line starts."""
        if 0 <= line_index < len(self._line_starts):
            return self._line_starts[line_index]
        return None

    def line_start_offset(self, offset: int) -> int:
        """Byte offset of the start of the line holding ``offset``."""
        return self._line_starts[self.line_index(offset)]

    def line_end_offset(self, offset: int) -> int:
        """Byte offset of the end of the line holding ``offset``, before its newline."""
        index = self.line_index(offset)
        if index + 1 < len(self._line_starts):
            return max(self._line_starts[index + 1] - 1, 0)
        return self._line_starts[index] + len(self._lines[index])

    def line_count(self) -> int:
        """Number of lines, counting an empty final line."""
        return len(self._line_starts)

    def indentation(self, offset: int) -> int:
        """Number of leading spaces and tabs on the line holding ``offset``."""
        line = self._lines[self.line_index(offset)]
        return len(line) - len(line.lstrip(_INDENT_BYTES))

    def column(self, offset: int) -> int:
        """Zero-based column of ``offset`` within its line."""
        return offset - self._line_starts[self.line_index(offset)]