"""Layout/EmptyLines: two or more consecutive blank lines."""

from __future__ import annotations

from reukocyte.diagnostic import Diagnostic, Edit, Fix, Severity
from reukocyte.locator import LineIndex
from reukocyte.rule import LayoutRule, RuleId

RULE_ID = RuleId.layout(LayoutRule.EMPTY_LINES)
MESSAGE = "Extra blank line detected."

_BLANK_BYTES = b" \t\r"


def collect_edit_ranges(source: bytes) -> list[tuple[int, int, str]]:
    """Return ``(start, end, message)`` for each run of extra blank lines.

    One blank line of each run is kept; the range covers the rest. Blank
    lines at the very end of the source are left to Layout/TrailingEmptyLines.
    """
    source = bytes(source)
    ranges = []
    offset = 0
    consecutive_empty = 0
    empty_start = 0

    for line in source.split(b"\n"):
        if not line.strip(_BLANK_BYTES):
            if consecutive_empty == 0:
                empty_start = offset
            consecutive_empty += 1
        else:
            if consecutive_empty >= 2:
                newline = source.find(b"\n", empty_start)
                first_empty_end = newline + 1 if newline >= 0 else empty_start
                if first_empty_end < offset:
                    ranges.append((first_empty_end, offset, MESSAGE))
            consecutive_empty = 0
        offset += len(line) + 1

    return ranges


def check(source: bytes) -> list[Diagnostic]:
    """Report every run of two or more blank lines followed by content."""
    ranges = collect_edit_ranges(source)
    positions = LineIndex.from_source(source).batch_line_column([(start, end) for start, end, _ in ranges])
    return [
        Diagnostic(
            rule_id=RULE_ID,
            message=message,
            severity=Severity.CONVENTION,
            start=start,
            end=end,
            line_start=line_start,
            line_end=line_end,
            column_start=column_start,
            column_end=column_end,
            fix=Fix.safe([Edit.deletion(start, end)]),
        )
        for (start, end, message), (line_start, line_end, column_start, column_end) in zip(ranges, positions)
    ]