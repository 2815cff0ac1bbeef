"""Diagnostics, severities and fixes reported by the checker."""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from enum import Enum

from reukocyte.rule import RuleId


@functools.total_ordering
class _OrderedEnum(Enum):
    """Enum whose members compare by declaration order."""

    def _rank(self) -> int:
        return list(type(self)).index(self)

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._rank() < other._rank()

    def __hash__(self) -> int:
        return hash(self.value)


class Severity(_OrderedEnum):
    """Severity level of a diagnostic, from least to most severe."""

    INFO = "info"
    REFACTOR = "refactor"
    CONVENTION = "convention"
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"

    def __str__(self) -> str:
        return self.value

    def code(self) -> str:
        """Single-letter code used in compact output."""
        return self.value[0].upper()


class Applicability(_OrderedEnum):
    """How safely a fix can be applied."""

    SAFE = "safe"
    UNSAFE = "unsafe"
    DISPLAY_ONLY = "display_only"


@dataclass(frozen=True)
class Edit:
    """Replacement of the byte range ``[start, end)`` with ``content``."""

    start: int
    end: int
    content: str = ""

    @classmethod
    def replacement(cls, start: int, end: int, content: str) -> Edit:
        """Replace a range with new content."""
        return cls(start, end, content)

    @classmethod
    def deletion(cls, start: int, end: int) -> Edit:
        """Delete a range."""
        return cls(start, end, "")

    @classmethod
    def insertion(cls, position: int, content: str) -> Edit:
        """Insert content at a position."""
        return cls(position, position, content)


@dataclass
class Fix:
    """One or more edits that correct a diagnostic."""

    applicability: Applicability
    edits: list[Edit] = field(default_factory=list)

    @classmethod
    def safe(cls, edits) -> Fix:
        """A fix that is always safe to apply."""
        return cls(Applicability.SAFE, list(edits))

    @classmethod
    def unsafe(cls, edits) -> Fix:
        """A fix that may change behaviour."""
        return cls(Applicability.UNSAFE, list(edits))

    @classmethod
    def display_only(cls, edits) -> Fix:
        """A fix that is shown but never applied."""
        return cls(Applicability.DISPLAY_ONLY, list(edits))


@dataclass
class Diagnostic:
    """A code issue with resolved line and column positions."""

    rule_id: RuleId
    message: str
    severity: Severity
    start: int
    end: int
    line_start: int
    line_end: int
    column_start: int
    column_end: int
    fix: Fix | None = None

    def rule(self) -> str:
        """The rule name, such as ``Layout/TrailingWhitespace``."""
        return str(self.rule_id)

    def correctable(self) -> bool:
        """Whether the diagnostic carries a fix."""
        return self.fix is not None

    def length(self) -> int:
        """Length of the byte range, never negative."""
        return max(0, self.end - self.start)


@dataclass
class RawDiagnostic:
    """A diagnostic whose line and column are not yet resolved."""

    rule_id: RuleId
    message: str
    severity: Severity
    start: int
    end: int
    fix: Fix | None = None

    def resolve(self, line_start: int, line_end: int, column_start: int, column_end: int) -> Diagnostic:
        """Build the full diagnostic with the given positions."""
        return Diagnostic(
            rule_id=self.rule_id,
            message=self.message,
            severity=self.severity,
            start=self.start,
            end=self.end,
            line_start=line_start,
            line_end=line_end,
            column_start=column_start,
            column_end=column_end,
            fix=self.fix,
        )