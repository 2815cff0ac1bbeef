"""Rule identifiers and their categories."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from enum import Enum
from typing import Union


class Category(Enum):
    """Category of a rule."""

    LAYOUT = "Layout"
    LINT = "Lint"

    def __str__(self) -> str:
        return self.value


class LayoutRule(Enum):
    """Layout rules."""

    BEGIN_END_ALIGNMENT = "BeginEndAlignment"
    DEF_END_ALIGNMENT = "DefEndAlignment"
    EMPTY_LINES = "EmptyLines"
    END_ALIGNMENT = "EndAlignment"
    INDENTATION_CONSISTENCY = "IndentationConsistency"
    INDENTATION_STYLE = "IndentationStyle"
    INDENTATION_WIDTH = "IndentationWidth"
    LEADING_EMPTY_LINES = "LeadingEmptyLines"
    TRAILING_EMPTY_LINES = "TrailingEmptyLines"
    TRAILING_WHITESPACE = "TrailingWhitespace"


class LintRule(Enum):
    """Lint rules."""

    DEBUGGER = "Debugger"


_RULE_TYPES = {Category.LAYOUT: LayoutRule, Category.LINT: LintRule}


@functools.total_ordering
@dataclass(frozen=True)
class RuleId:
    """Unique identifier of a rule: its category and the rule within it."""

    category: Category
    rule: Union[LayoutRule, LintRule]

    def __post_init__(self) -> None:
        expected = _RULE_TYPES[self.category]
        if not isinstance(self.rule, expected):
            raise TypeError(f"{self.rule!r} is not a {self.category.value} rule")

    @classmethod
    def layout(cls, rule: LayoutRule) -> RuleId:
        """Identifier of a layout rule."""
        return cls(Category.LAYOUT, rule)

    @classmethod
    def lint(cls, rule: LintRule) -> RuleId:
        """Identifier of a lint rule."""
        return cls(Category.LINT, rule)

    @property
    def name(self) -> str:
        """Rule name without the category."""
        return self.rule.value

    def __str__(self) -> str:
        return f"{self.category.value}/{self.name}"

    def _key(self) -> tuple[int, int]:
        return (
            list(Category).index(self.category),
            list(type(self.rule)).index(self.rule),
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RuleId):
            return NotImplemented
        return self._key() < other._key()

    def conflicts_with(self) -> tuple[RuleId, ...]:
        """Rules whose autocorrection must not run in the same pass as this one."""
        return _CONFLICTS.get(self, ())

    def has_conflict_with(self, other: RuleId) -> bool:
        """Whether this rule declares a conflict with ``other``."""
        return other in self.conflicts_with()


# No rule currently declares an autocorrection conflict.
_CONFLICTS: dict[RuleId, tuple[RuleId, ...]] = {
    **{RuleId.layout(rule): () for rule in LayoutRule},
    **{RuleId.lint(rule): () for rule in LintRule},
}