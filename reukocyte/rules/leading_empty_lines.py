"""Layout/LeadingEmptyLines: blank lines at the beginning of a file."""

from __future__ import annotations

from reukocyte.diagnostic import Diagnostic, Edit, Fix, Severity
from reukocyte.locator import LineIndex
from reukocyte.rule import LayoutRule, RuleId

RULE_ID = RuleId.layout(LayoutRule.LEADING_EMPTY_LINES)

_LEADING_WHITESPACE = b" \t\n\r"


def analyze(source: bytes) -> tuple[int, str] | None:
    """Return ``(end, message)`` when ``source`` starts with blank lines."""
    source = bytes(source)
    stripped = source.lstrip(_LEADING_WHITESPACE)
    if not stripped:
        return None

    prefix = source[: len(source) - len(stripped)]
    leading_newlines = prefix.count(b"\n")
    if leading_newlines == 0:
        return None

    end = prefix.rfind(b"\n") + 1
    if leading_newlines == 1:
        message = "Unnecessary blank line at the beginning of the source."
    else:
        message = f"Unnecessary blank lines at the beginning of the source ({leading_newlines} lines)."
    return end, message


def check(source: bytes) -> list[Diagnostic]:
    """Report leading blank lines in ``source``, at most once."""
    result = analyze(source)
    if result is None:
        return []
    end, message = result
    index = LineIndex.from_source(source)
    line_end, column_end = index.line_column(end)
    return [
        Diagnostic(
            rule_id=RULE_ID,
            message=message,
            severity=Severity.CONVENTION,
            start=0,
            end=end,
            line_start=1,
            line_end=line_end,
            column_start=1,
            column_end=column_end,
            fix=Fix.safe([Edit.deletion(0, end)]),
        )
    ]