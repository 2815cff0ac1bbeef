"""Layout/IndentationStyle: tabs used for indentation."""

from __future__ import annotations

from reukocyte.diagnostic import Diagnostic, Edit, Fix, Severity
from reukocyte.locator import LineIndex
from reukocyte.rule import LayoutRule, RuleId

RULE_ID = RuleId.layout(LayoutRule.INDENTATION_STYLE)
MESSAGE = "Tab detected in indentation."

_SPACES_PER_TAB = 2


def _leading_tabs(line: bytes) -> tuple[int, int] | None:
    """Range of the tabs within the leading whitespace of ``line``, if any."""
    start = None
    end = 0
    for i, byte in enumerate(line):
        if byte == 0x09:
            if start is None:
                start = i
            end = i + 1
        elif byte != 0x20:
            break
    return None if start is None else (start, end)


def collect_edit_ranges(source: bytes) -> list[tuple[int, int, str]]:
    """Return ``(start, end, replacement)`` for the leading tabs of each line."""
    source = bytes(source)
    ranges = []
    if not source:
        return ranges
    pos = 0
    for line in source.split(b"\n"):
        found = _leading_tabs(line)
        if found is not None:
            tab_start, tab_end = found
            replacement = " " * ((tab_end - tab_start) * _SPACES_PER_TAB)
            ranges.append((pos + tab_start, pos + tab_end, replacement))
        pos += len(line) + 1
    return ranges


def check(source: bytes) -> list[Diagnostic]:
    """Report every line whose indentation contains tabs."""
    ranges = collect_edit_ranges(source)
    positions = LineIndex.from_source(source).batch_line_column([(start, end) for start, end, _ in ranges])
    return [
        Diagnostic(
            rule_id=RULE_ID,
            message=MESSAGE,
            severity=Severity.CONVENTION,
            start=start,
            end=end,
            line_start=line_start,
            line_end=line_end,
            column_start=column_start,
            column_end=column_end,
            fix=Fix.safe([Edit.replacement(start, end, replacement)]),
        )
        for (start, end, replacement), (line_start, line_end, column_start, column_end) in zip(ranges, positions)
    ]