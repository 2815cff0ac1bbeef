from reukocyte.diagnostic import Applicability
from reukocyte.rule import LayoutRule, RuleId
from reukocyte.rules.indentation_style import check, collect_edit_ranges


def test_no_tabs():
    assert check(b"def foo\n  bar\nend\n") == []


def test_single_tab_indent():
    diagnostics = check(b"def foo\n\tbar\nend\n")
    assert len(diagnostics) == 1
    assert diagnostics[0].rule_id == RuleId.layout(LayoutRule.INDENTATION_STYLE)
    assert diagnostics[0].message == "Tab detected in indentation."
    assert diagnostics[0].start == 8
    assert diagnostics[0].end == 9


def test_multiple_tabs():
    diagnostics = check(b"def foo\n\t\tbar\nend\n")
    assert len(diagnostics) == 1
    assert (diagnostics[0].start, diagnostics[0].end) == (8, 10)


def test_tab_with_fix():
    diagnostics = check(b"def foo\n\tbar\nend\n")
    fix = diagnostics[0].fix
    assert fix.applicability is Applicability.SAFE
    assert len(fix.edits) == 1
    assert fix.edits[0].content == "  "


def test_two_tabs_with_fix():
    diagnostics = check(b"def foo\n\t\tbar\nend\n")
    assert diagnostics[0].fix.edits[0].content == "    "


def test_mixed_space_then_tab():
    diagnostics = check(b"def foo\n  \tbar\nend\n")
    assert len(diagnostics) == 1
    assert (diagnostics[0].start, diagnostics[0].end) == (10, 11)


def test_tab_not_at_start_of_line():
    assert check(b"def foo\n  bar\tbaz\nend\n") == []


def test_multiple_lines_with_tabs():
    assert len(check(b"def foo\n\tbar\n\tbaz\nend\n")) == 2


def test_empty_file():
    assert check(b"") == []


def test_positions_resolved():
    diagnostic = check(b"def foo\n\tbar\nend\n")[0]
    assert (diagnostic.line_start, diagnostic.column_start) == (2, 1)
    assert (diagnostic.line_end, diagnostic.column_end) == (2, 2)


def test_collect_edit_ranges_values():
    assert collect_edit_ranges(b"\ta\n b\n\t\tc") == [(0, 1, "  "), (6, 8, "    ")]