"""Iterative autocorrection of diagnostics with loop detection."""

from __future__ import annotations

import hashlib
import sys
from collections.abc import Callable, Iterable

from reukocyte.checker import check
from reukocyte.diagnostic import Applicability, Diagnostic, Edit, Fix
from reukocyte.rule import RuleId

MAX_ITERATIONS = 200
"""Upper bound on correction passes before giving up."""


class InfiniteCorrectionLoop(Exception):
    """Autocorrection reached a source it had already produced, or ran too long."""

    def __init__(
        self,
        path: str | None,
        iteration: int,
        loop_start: int | None,
        offending_rules: list[str] | None = None,
    ) -> None:
        self.path = path
        self.iteration = iteration
        self.loop_start = loop_start
        self.offending_rules = list(offending_rules or [])
        super().__init__(str(self))

    def __str__(self) -> str:
        text = "Infinite loop detected"
        if self.path is not None:
            text += f" in {self.path}"
        if self.offending_rules:
            text += f" and caused by {' -> '.join(self.offending_rules)}"
        elif self.loop_start is not None:
            text += f": iteration {self.iteration} produced the same source as iteration {self.loop_start}"
        else:
            text += f": exceeded {MAX_ITERATIONS} iterations"
        return text


class _LoopDetector:
    """Remembers every source state to spot an A -> B -> A cycle."""

    def __init__(self, path: str | None) -> None:
        self._path = path
        self._seen: list[bytes] = []
        self._rules_by_iteration: list[set[RuleId]] = []

    @staticmethod
    def _checksum(source: bytes) -> bytes:
        return hashlib.blake2b(source, digest_size=8).digest()

    def check(self, source: bytes, iteration: int) -> None:
        checksum = self._checksum(source)
        if checksum in self._seen:
            loop_start = self._seen.index(checksum)
            raise InfiniteCorrectionLoop(
                self._path, iteration, loop_start, self._offending_rules(loop_start)
            )
        self._seen.append(checksum)

    def record_rules(self, rules: set[RuleId]) -> None:
        self._rules_by_iteration.append(rules)

    def check_max_iterations(self) -> None:
        if len(self._seen) >= MAX_ITERATIONS:
            raise InfiniteCorrectionLoop(self._path, MAX_ITERATIONS, None, [])

    def _offending_rules(self, loop_start: int) -> list[str]:
        names = (str(rule) for rules in self._rules_by_iteration[loop_start:] for rule in sorted(rules))
        return list(dict.fromkeys(names))


def _should_apply(fix: Fix, unsafe_fixes: bool) -> bool:
    if fix.applicability is Applicability.SAFE:
        return True
    if fix.applicability is Applicability.UNSAFE:
        return unsafe_fixes
    return False


def _overlaps(a: Edit, b: Edit) -> bool:
    if a.start == a.end and b.start == b.end:
        return a.start == b.start
    return a.start < b.end and b.start < a.end


class _Corrector:
    """Collects non-overlapping edits and applies them in one pass."""

    def __init__(self) -> None:
        self.edits: list[Edit] = []

    def merge(self, fix: Fix) -> bool:
        """Add every edit of ``fix`` unless one clobbers an edit already taken."""
        new_edits = list(fix.edits)
        for index, edit in enumerate(new_edits):
            if any(_overlaps(edit, other) for other in self.edits):
                return False
            if any(_overlaps(edit, other) for other in new_edits[index + 1 :]):
                return False
        self.edits.extend(new_edits)
        return True

    def apply(self, source: bytes) -> bytes:
        result = bytearray(source)
        for edit in sorted(self.edits, key=lambda e: (e.start, e.end), reverse=True):
            result[edit.start : edit.end] = edit.content.encode("utf-8")
        return bytes(result)


class _ConflictRegistry:
    """Rules applied in the current pass, for rule-level conflict checks."""

    def __init__(self) -> None:
        self._applied: set[RuleId] = set()

    def conflicts_with_applied(self, rule_id: RuleId) -> bool:
        return any(
            applied.has_conflict_with(rule_id) or rule_id.has_conflict_with(applied)
            for applied in self._applied
        )

    def mark_applied(self, rule_id: RuleId) -> None:
        self._applied.add(rule_id)


def _warn(error: InfiniteCorrectionLoop) -> None:
    print(f"Warning: {error}", file=sys.stderr)


def apply_fixes_filtered_with_loop_detection(
    path: str | None,
    source: bytes,
    diagnostics: Iterable[Diagnostic],
    unsafe_fixes: bool,
    filter: Callable[[Diagnostic], bool],
) -> tuple[bytes, int]:
    """Apply fixes until none remain, keeping only diagnostics accepted by ``filter``.

    Returns the corrected source and the number of edits applied; raises
    InfiniteCorrectionLoop when corrections cycle or never settle.
    """
    current = bytes(source)
    total_fixed = 0
    current_diagnostics = [d for d in diagnostics if filter(d)]
    detector = _LoopDetector(path)

    for iteration in range(MAX_ITERATIONS):
        detector.check(current, iteration)

        corrector = _Corrector()
        registry = _ConflictRegistry()
        applied_rules: set[RuleId] = set()

        for diagnostic in current_diagnostics:
            fix = diagnostic.fix
            if fix is None or not _should_apply(fix, unsafe_fixes):
                continue
            if registry.conflicts_with_applied(diagnostic.rule_id):
                continue
            if corrector.merge(fix):
                registry.mark_applied(diagnostic.rule_id)
                applied_rules.add(diagnostic.rule_id)

        detector.record_rules(applied_rules)

        if not corrector.edits:
            break

        total_fixed += len(corrector.edits)
        current = corrector.apply(current)

        current_diagnostics = [d for d in check(current) if filter(d)]
        if all(d.fix is None for d in current_diagnostics):
            break

    detector.check_max_iterations()
    return current, total_fixed


def apply_fixes_with_loop_detection(
    path: str | None, source: bytes, diagnostics: Iterable[Diagnostic], unsafe_fixes: bool
) -> tuple[bytes, int]:
    """Apply every fix; raise InfiniteCorrectionLoop when corrections cycle."""
    return apply_fixes_filtered_with_loop_detection(path, source, diagnostics, unsafe_fixes, lambda _: True)


def apply_fixes_filtered(
    path: str | None,
    source: bytes,
    diagnostics: Iterable[Diagnostic],
    unsafe_fixes: bool,
    filter: Callable[[Diagnostic], bool],
) -> tuple[bytes, int]:
    """Apply fixes accepted by ``filter``; on a loop, warn and keep the source unchanged."""
    try:
        return apply_fixes_filtered_with_loop_detection(path, source, diagnostics, unsafe_fixes, filter)
    except InfiniteCorrectionLoop as error:
        _warn(error)
        return bytes(source), 0


def apply_fixes(
    path: str | None, source: bytes, diagnostics: Iterable[Diagnostic], unsafe_fixes: bool
) -> tuple[bytes, int]:
    """Apply every fix; on a loop, warn and keep the source unchanged."""
    return apply_fixes_filtered(path, source, diagnostics, unsafe_fixes, lambda _: True)


def apply_fixes_with_remaining(
    path: str | None, source: bytes, diagnostics: Iterable[Diagnostic], unsafe_fixes: bool
) -> tuple[bytes, list[Diagnostic], int]:
    """Apply fixes and return the corrected source, what is still reported, and the edit count."""
    fixed, count = apply_fixes(path, source, diagnostics, unsafe_fixes)
    return fixed, check(fixed), count