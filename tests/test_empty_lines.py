from reukocyte.diagnostic import Applicability, Edit
from reukocyte.rules.empty_lines import check, collect_edit_ranges


def test_no_consecutive_empty_lines():
    assert check(b"def foo\nend\n\ndef bar\nend\n") == []


def test_two_consecutive_empty_lines():
    diagnostics = check(b"def foo\nend\n\n\ndef bar\nend\n")
    assert len(diagnostics) == 1
    assert "Extra blank line" in diagnostics[0].message
    assert diagnostics[0].rule() == "Layout/EmptyLines"


def test_three_consecutive_empty_lines():
    diagnostics = check(b"def foo\nend\n\n\n\ndef bar\nend\n")
    assert len(diagnostics) == 1
    assert (diagnostics[0].start, diagnostics[0].end) == (13, 15)


def test_multiple_occurrences():
    assert len(check(b"def foo\nend\n\n\ndef bar\nend\n\n\ndef baz\nend\n")) == 2


def test_empty_file():
    assert check(b"") == []


def test_single_empty_line_ok():
    assert check(b"class Foo\n\n  def bar\n  end\nend\n") == []


def test_range_keeps_one_blank_line():
    assert collect_edit_ranges(b"def foo\nend\n\n\ndef bar\nend\n") == [(13, 14, "Extra blank line detected.")]


def test_fix_deletes_extra_lines():
    diagnostic = check(b"def foo\nend\n\n\ndef bar\nend\n")[0]
    assert diagnostic.fix.applicability is Applicability.SAFE
    assert diagnostic.fix.edits == [Edit(13, 14, "")]


def test_positions_resolved():
    diagnostic = check(b"def foo\nend\n\n\ndef bar\nend\n")[0]
    assert (diagnostic.line_start, diagnostic.column_start) == (4, 1)
    assert (diagnostic.line_end, diagnostic.column_end) == (5, 1)


def test_whitespace_lines_count_as_blank():
    assert len(collect_edit_ranges(b"a\n  \n\t\r\nb\n")) == 1


def test_trailing_blank_lines_not_reported():
    assert collect_edit_ranges(b"a\n\n\n\n") == []