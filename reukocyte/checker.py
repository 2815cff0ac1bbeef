"""Entry point that runs every line-based rule over a source file."""

from __future__ import annotations

from reukocyte.diagnostic import Diagnostic
from reukocyte.rules import (
    empty_lines,
    indentation_style,
    leading_empty_lines,
    trailing_empty_lines,
    trailing_whitespace,
)

_LINE_RULES = (
    trailing_whitespace.check,
    trailing_empty_lines.check,
    leading_empty_lines.check,
    empty_lines.check,
    indentation_style.check,
)


def check(source: bytes) -> list[Diagnostic]:
    """Check ``source`` with the default configuration, sorted by position."""
    source = bytes(source)
    diagnostics = [diagnostic for rule in _LINE_RULES for diagnostic in rule(source)]
    diagnostics.sort(key=lambda d: (d.line_start, d.column_start))
    return diagnostics