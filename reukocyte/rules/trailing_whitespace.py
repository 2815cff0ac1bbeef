"""Layout/TrailingWhitespace: blanks at the end of a line."""

from __future__ import annotations

from reukocyte.diagnostic import Diagnostic, Edit, Fix, Severity
from reukocyte.locator import LineIndex
from reukocyte.rule import LayoutRule, RuleId

RULE_ID = RuleId.layout(LayoutRule.TRAILING_WHITESPACE)
MESSAGE = "Trailing whitespace detected."

_ASCII_BLANKS = b" \t"
_FULLWIDTH_SPACE = "\u3000".encode("utf-8")


def _trailing_whitespace_start(line: bytes) -> int | None:
    """Offset in ``line`` where its trailing blanks begin, or None if there are none."""
    pos = len(line)
    while pos > 0:
        if line[pos - 1] in _ASCII_BLANKS:
            pos -= 1
        elif line[:pos].endswith(_FULLWIDTH_SPACE):
            pos -= len(_FULLWIDTH_SPACE)
        else:
            break
    return pos if pos < len(line) else None


def collect_edit_ranges(source: bytes) -> list[tuple[int, int]]:
    """Byte ranges ``(start, end)`` of trailing blanks, one per offending line."""
    ranges = []
    offset = 0
    for line in bytes(source).split(b"\n"):
        trailing_start = _trailing_whitespace_start(line)
        if trailing_start is not None:
            ranges.append((offset + trailing_start, offset + len(line)))
        offset += len(line) + 1
    return ranges


def check(source: bytes) -> list[Diagnostic]:
    """Report every line of ``source`` that ends in blanks; CR is not a blank."""
    ranges = collect_edit_ranges(source)
    positions = LineIndex.from_source(source).batch_line_column(ranges)
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
            fix=Fix.safe([Edit.deletion(start, end)]),
        )
        for (start, end), (line_start, line_end, column_start, column_end) in zip(ranges, positions)
    ]