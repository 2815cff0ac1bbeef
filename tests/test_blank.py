import pytest

from reukocyte.blank import is_blank


@pytest.mark.parametrize("char", [" ", "\t", "\u3000"])
def test_blank_characters(char):
    assert is_blank(char) is True


@pytest.mark.parametrize("char", ["\r", "a", "\n", "0", "\u00a0"])
def test_non_blank_characters(char):
    assert is_blank(char) is False


def test_filters_blank_characters_from_text():
    text = "x\t= 0\u3000\r"
    assert [c for c in text if is_blank(c)] == ["\t", " ", "\u3000"]