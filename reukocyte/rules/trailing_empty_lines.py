"""Layout/TrailingEmptyLines: blank lines and the final newline at the end of a file."""

from __future__ import annotations

from enum import Enum

from reukocyte.diagnostic import Diagnostic, Edit, Fix, Severity
from reukocyte.locator import LineIndex
from reukocyte.rule import LayoutRule, RuleId

RULE_ID = RuleId.layout(LayoutRule.TRAILING_EMPTY_LINES)

_TRAILING_BLANKS = b"\n \t\r"


class EnforcedStyle(Enum):
    """How a file must end."""

    FINAL_NEWLINE = "final_newline"
    FINAL_BLANK_LINE = "final_blank_line"

    @property
    def wanted_newlines(self) -> int:
        return 1 if self is EnforcedStyle.FINAL_NEWLINE else 2


def _trailing_whitespace_start(source: bytes) -> int:
    pos = len(source.rstrip(_TRAILING_BLANKS))
    # Keep the newline that ends the last line of content.
    if pos < len(source) and source[pos] == 0x0A:
        pos += 1
    return pos


def analyze(source: bytes, style: EnforcedStyle = EnforcedStyle.FINAL_NEWLINE) -> tuple[int, int, str, str] | None:
    """Return ``(start, end, replacement, message)`` when the file ending is wrong."""
    source = bytes(source)
    if not source:
        return None

    trailing_newlines = len(source) - len(source.rstrip(b"\n"))
    wanted_newlines = style.wanted_newlines
    replacement = "\n" * wanted_newlines

    if trailing_newlines == 0:
        return len(source), len(source), replacement, "Final newline missing."

    blank_lines = trailing_newlines - 1
    wanted_blank_lines = wanted_newlines - 1
    if blank_lines == wanted_blank_lines:
        return None

    if wanted_blank_lines == 0:
        if blank_lines == 1:
            message = "1 trailing blank line detected."
        else:
            message = f"{blank_lines} trailing blank lines detected."
    elif blank_lines == 0:
        message = "Trailing blank line missing."
    else:
        message = f"{blank_lines} trailing blank lines instead of {wanted_blank_lines} detected."

    return _trailing_whitespace_start(source), len(source), replacement, message


def check(source: bytes, style: EnforcedStyle = EnforcedStyle.FINAL_NEWLINE) -> list[Diagnostic]:
    """Report a wrong file ending in ``source``, at most once."""
    result = analyze(source, style)
    if result is None:
        return []
    start, end, replacement, message = result
    index = LineIndex.from_source(source)
    line_start, column_start = index.line_column(start)
    line_end, column_end = index.line_column(end)
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
            fix=Fix.safe([Edit.replacement(start, end, replacement)]),
        )
    ]