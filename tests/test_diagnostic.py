import pytest

from reukocyte.diagnostic import (
    Applicability,
    Diagnostic,
    Edit,
    Fix,
    RawDiagnostic,
    Severity,
)
from reukocyte.rule import LayoutRule, LintRule, RuleId

WHITESPACE = RuleId.layout(LayoutRule.TRAILING_WHITESPACE)
DEBUGGER = RuleId.lint(LintRule.DEBUGGER)


def _diagnostic(start=3, end=9, fix=None, severity=Severity.CONVENTION):
    return Diagnostic(
        rule_id=WHITESPACE,
        message="Trailing whitespace detected.",
        severity=severity,
        start=start,
        end=end,
        line_start=1,
        line_end=1,
        column_start=4,
        column_end=10,
        fix=fix,
    )


@pytest.mark.parametrize(
    "severity, code, text",
    [
        (Severity.INFO, "I", "info"),
        (Severity.REFACTOR, "R", "refactor"),
        (Severity.CONVENTION, "C", "convention"),
        (Severity.WARNING, "W", "warning"),
        (Severity.ERROR, "E", "error"),
        (Severity.FATAL, "F", "fatal"),
    ],
)
def test_severity_code_and_text(severity, code, text):
    assert severity.code() == code
    assert str(severity) == text
    assert severity.value == text


def test_severity_ordering():
    shuffled = [
        _diagnostic(severity=Severity.FATAL),
        _diagnostic(severity=Severity.CONVENTION),
        _diagnostic(severity=Severity.INFO),
        _diagnostic(severity=Severity.ERROR),
        _diagnostic(severity=Severity.REFACTOR),
        _diagnostic(severity=Severity.WARNING),
    ]
    ordered = sorted(shuffled, key=lambda d: d.severity)
    assert "".join(d.severity.code() for d in ordered) == "IRCWEF"
    assert max(d.severity for d in shuffled).code() == "F"
    assert min(d.severity for d in shuffled).code() == "I"


def test_applicability_ordering():
    fixes = [Fix.display_only([]), Fix.safe([]), Fix.unsafe([])]
    ordered = sorted(fix.applicability for fix in fixes)
    assert ordered == [Applicability.SAFE, Applicability.UNSAFE, Applicability.DISPLAY_ONLY]


def test_edit_constructors():
    assert Edit.replacement(2, 5, "xy") == Edit(2, 5, "xy")
    deletion = Edit.deletion(4, 8)
    assert (deletion.start, deletion.end, deletion.content) == (4, 8, "")
    insertion = Edit.insertion(7, "  ")
    assert (insertion.start, insertion.end, insertion.content) == (7, 7, "  ")


@pytest.mark.parametrize(
    "factory, applicability",
    [
        (Fix.safe, Applicability.SAFE),
        (Fix.unsafe, Applicability.UNSAFE),
        (Fix.display_only, Applicability.DISPLAY_ONLY),
    ],
)
def test_fix_constructors(factory, applicability):
    edits = [Edit.deletion(0, 1), Edit.insertion(3, "a")]
    fix = factory(edits)
    assert fix.applicability is applicability
    assert fix.edits == edits


def test_diagnostic_rule_name():
    assert _diagnostic().rule() == "Layout/TrailingWhitespace"


def test_diagnostic_correctable():
    assert not _diagnostic().correctable()
    assert _diagnostic(fix=Fix.safe([Edit.deletion(3, 9)])).correctable()


def test_diagnostic_length():
    assert _diagnostic(start=3, end=9).length() == 9 - 3
    assert _diagnostic(start=9, end=3).length() == 0


def test_raw_diagnostic_resolve_keeps_fields():
    fix = Fix.safe([Edit.deletion(10, 12)])
    raw = RawDiagnostic(DEBUGGER, "Debugger statement `byebug` detected.", Severity.WARNING, 10, 12, fix)
    resolved = raw.resolve(2, 3, 5, 7)
    assert resolved == Diagnostic(
        rule_id=DEBUGGER,
        message="Debugger statement `byebug` detected.",
        severity=Severity.WARNING,
        start=10,
        end=12,
        line_start=2,
        line_end=3,
        column_start=5,
        column_end=7,
        fix=fix,
    )
    assert resolved.rule() == "Lint/Debugger"