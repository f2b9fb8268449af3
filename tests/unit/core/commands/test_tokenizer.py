"""
Tests for splitting raw terminal input into tokens.
"""

import re

import pytest
from terminal_commands.core.commands.tokenizer import (
    SPLIT_PATTERN,
    CommandTokenizer,
    tokenize,
)


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("go to moon", ["go", "to", "moon"]),
        ('say "hello world" now', ["say", "hello world", "now"]),
        ("  padded   input  ", ["padded", "input"]),
        ('"only quoted"', ["only quoted"]),
        ('echo "a b" c', ["echo", "a b", "c"]),
        ('say "hi', ["say", "hi"]),
        ("single", ["single"]),
    ],
)
def test_tokenize_splits_on_spaces_and_quotes(line: str, expected: list[str]) -> None:
    assert tokenize(line) == expected


@pytest.mark.parametrize("line", ["", "   ", None])
def test_tokenize_blank_input_yields_no_tokens(line: str | None) -> None:
    assert tokenize(line) == []


def test_unterminated_quote_is_kept_without_the_quote() -> None:
    """An opening quote with no partner is not a quoted run."""
    assert tokenize('say "hello world') == ["say", "hello", "world"]


def test_empty_quotes_produce_an_empty_token() -> None:
    # '""' does not match the quoted branch (needs one character) and is stripped
    assert tokenize('echo ""') == ["echo", ""]


def test_tabs_are_not_separators() -> None:
    assert tokenize("a\tb c") == ["a\tb", "c"]


def test_custom_pattern_is_used() -> None:
    tokenizer = CommandTokenizer(re.compile(r"[^,]+"))

    assert tokenizer.tokenize("a,b,c") == ["a", "b", "c"]


def test_default_pattern_is_shared() -> None:
    assert CommandTokenizer().pattern is SPLIT_PATTERN
