"""Character classification for blank characters."""

_BLANKS = frozenset(" \t\u3000")


def is_blank(c: str) -> bool:
    """Whether ``c`` is a space, a tab or a fullwidth space; CR is not blank."""
    return c in _BLANKS