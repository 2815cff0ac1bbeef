from reukocyte.diagnostic import Applicability, Edit
from reukocyte.rules.trailing_whitespace import check, collect_edit_ranges


def test_no_trailing_whitespace():
    assert check(b"def foo\n  bar\nend\n") == []


def test_trailing_spaces():
    diagnostics = check(b"def foo  \n  bar\nend\n")
    assert len(diagnostics) == 1
    assert diagnostics[0].line_start == 1
    assert diagnostics[0].column_start == 8


def test_trailing_tab():
    diagnostics = check(b"def foo\t\n  bar\nend\n")
    assert len(diagnostics) == 1
    assert diagnostics[0].line_start == 1


def test_multiple_lines_with_trailing():
    diagnostics = check(b"def foo  \n  bar  \nend\n")
    assert len(diagnostics) == 2
    assert diagnostics[0].line_start == 1
    assert diagnostics[1].line_start == 2


def test_empty_file():
    assert check(b"") == []


def test_whitespace_only_line():
    diagnostics = check(b"def foo\n   \nend\n")
    assert len(diagnostics) == 1
    assert diagnostics[0].line_start == 2


def test_fullwidth_space():
    diagnostics = check("x = 0\u3000\n".encode("utf-8"))
    assert len(diagnostics) == 1
    assert diagnostics[0].line_start == 1
    assert diagnostics[0].column_start == 6


def test_cr_not_trailing_whitespace():
    assert check(b"def foo\r\n  bar\nend\n") == []


def test_collect_edit_ranges_offsets():
    assert collect_edit_ranges(b"def foo  \n  bar  \nend\n") == [(7, 9), (15, 17)]


def test_fullwidth_space_range_covers_all_bytes():
    source = "x\u3000 \n".encode("utf-8")
    assert collect_edit_ranges(source) == [(1, 5)]


def test_diagnostic_carries_safe_deletion():
    diagnostic = check(b"a \n")[0]
    assert diagnostic.rule() == "Layout/TrailingWhitespace"
    assert diagnostic.message == "Trailing whitespace detected."
    assert diagnostic.fix.applicability is Applicability.SAFE
    assert diagnostic.fix.edits == [Edit(1, 2, "")]