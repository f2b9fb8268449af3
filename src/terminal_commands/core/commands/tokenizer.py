"""
Splits raw terminal input into tokens.
"""

from __future__ import annotations

import re

# A quoted run is one token; otherwise tokens are runs of non-space characters.
# An unterminated quote falls through to the second branch and is kept literally.
SPLIT_PATTERN = re.compile(r'"(.+?)"|([^ ]+)', re.IGNORECASE)

_STRIP_CHARS = '" '


class CommandTokenizer:
    """Tokenizes a line of terminal input."""

    def __init__(self, pattern: re.Pattern[str] = SPLIT_PATTERN) -> None:
        self.pattern = pattern

    def tokenize(self, line: str | None) -> list[str]:
        """Split ``line`` into tokens with surrounding quotes removed.

        Args:
            line: Raw input; surrounding whitespace is ignored

        Returns:
            The tokens in input order; empty for blank input
        """
        if not line:
            return []
        return [match.group(0).strip(_STRIP_CHARS) for match in self.pattern.finditer(line.strip())]


_default_tokenizer = CommandTokenizer()


def tokenize(line: str | None) -> list[str]:
    return _default_tokenizer.tokenize(line)
