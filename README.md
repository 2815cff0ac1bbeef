# reukocyte

Layout checks for Ruby source code, with automatic correction. Offenses are
named in the `Category/RuleName` form used by Ruby style tools, for example
`Layout/TrailingWhitespace`.

## Installation

    pip install reukocyte

## Checking source

`reukocyte.checker.check` takes the source as bytes and returns a list of
`Diagnostic` objects, sorted by line and then column:

```python
from reukocyte.checker import check

for diagnostic in check(b"def foo  \n\tbar\nend"):
    print(diagnostic.line_start, diagnostic.column_start,
          diagnostic.rule(), diagnostic.message)
```

The rules run by `check`:

- `Layout/TrailingWhitespace` – spaces, tabs and full-width spaces (U+3000)
  at the end of a line; a carriage return does not count
- `Layout/TrailingEmptyLines` – a missing final newline, or blank lines at
  the end of the file
- `Layout/LeadingEmptyLines` – blank lines at the start of the file
- `Layout/EmptyLines` – two or more consecutive blank lines followed by more
  content
- `Layout/IndentationStyle` – tabs in a line's indentation (each tab is
  replaced by two spaces)

Each rule lives in its own module under `reukocyte.rules` and has its own
`check(source)` function. `reukocyte.rules.trailing_empty_lines.check` also
takes an `EnforcedStyle`: `FINAL_NEWLINE` (the default, used by
`reukocyte.checker.check`) or `FINAL_BLANK_LINE`.

### Diagnostics

A `Diagnostic` (in `reukocyte.diagnostic`) holds:

- `rule_id`, a `reukocyte.rule.RuleId`; `diagnostic.rule()` gives its name
  as a string
- `message` and `severity` (a `Severity`; every rule here reports
  `Severity.CONVENTION`, whose `code()` is `"C"`)
- byte offsets `start` and `end`, and 1-based `line_start`, `line_end`,
  `column_start`, `column_end`
- `fix`, a `Fix` made of `Edit`s, or `None`; `diagnostic.correctable()` says
  whether there is one

Every rule in this package supplies a safe fix.

## Correcting source

```python
from reukocyte.checker import check
from reukocyte.fix import apply_fixes, apply_fixes_with_remaining

source = b"def foo  \n  bar  \nend\n"
fixed, count = apply_fixes(None, source, check(source), False)
# fixed == b"def foo\n  bar\nend\n", count == 2

fixed, remaining, count = apply_fixes_with_remaining(
    "example.rb", source, check(source), False
)
```

Correction runs in rounds: in each round the fixes whose edits do not overlap
are applied together, the result is checked again, and this repeats until no
fix is left. Fixes marked `Applicability.UNSAFE` are applied only when
`unsafe_fixes` is true; `Applicability.DISPLAY_ONLY` fixes are never applied.

`apply_fixes_filtered` and `apply_fixes_filtered_with_loop_detection` take a
predicate on diagnostics, so that only some rules are corrected:

```python
from reukocyte.fix import apply_fixes_filtered
from reukocyte.rules import trailing_whitespace

fixed, count = apply_fixes_filtered(
    None, source, check(source), False,
    lambda d: d.rule_id == trailing_whitespace.RULE_ID,
)
```

If a round produces a source already seen, or 200 rounds pass,
`apply_fixes_with_loop_detection` raises `InfiniteCorrectionLoop`, naming
the file and the rules involved. `apply_fixes` and `apply_fixes_filtered`
instead print a warning to standard error and return the original source
with a count of 0.

## Helpers

- `reukocyte.locator.LineIndex` maps byte offsets to lines and columns
  (`LineIndex.from_source(source).line_column(offset)`), and answers questions
  such as `indentation(offset)` and `are_on_same_line(a, b)`.
- `reukocyte.semantic.SemanticModel` and `Nodes` record nodes pushed during a
  tree traversal together with their parents, for ancestor lookups. Any
  object with `start_offset` and `end_offset` attributes can be stored.
- `reukocyte.blank.is_blank` tells whether a character is a space, a tab or a
  full-width space.

## What this package does not do

- It does not parse Ruby. Only the line-based rules listed above run. Rule
  ids exist in `reukocyte.rule` for `Lint/Debugger` and for the alignment and
  indentation-width layout rules, but nothing in this package reports them.
- It has no configuration: rules cannot be switched off, given other
  severities or limited to certain files.
- It has no command-line tool; it is used from Python.