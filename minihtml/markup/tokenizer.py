"""
Tag tokenizer.

Finds every tag token in a text snapshot, recording exact offsets. Tag
names are matched case-insensitively and whitespace is tolerated inside
the delimiters (``< html >``, ``</ HTML >``). Anything that does not look
like a tag is left to the caller as text.
"""

import re
from dataclasses import dataclass
from enum import Enum


class TokenKind(str, Enum):
    OPEN = "open"
    CLOSE = "close"
    SELF_CLOSING = "self_closing"


# Group 1: "/" for closing tags
# Group 2: tag name
# Group 3: attributes and trailing whitespace (never spans another "<")
# Group 4: "/" directly before ">" for self-closing tags
TAG_PATTERN = re.compile(r"<\s*(/)?\s*([a-zA-Z][a-zA-Z0-9]*)([^<>]*?)(/)?>")


@dataclass(frozen=True)
class Token:
    """A tag occurrence with its source span."""

    kind: TokenKind
    name: str
    raw: str
    start: int
    end: int

    @property
    def is_open(self) -> bool:
        return self.kind == TokenKind.OPEN

    @property
    def is_close(self) -> bool:
        return self.kind == TokenKind.CLOSE

    @property
    def is_self_closing(self) -> bool:
        return self.kind == TokenKind.SELF_CLOSING

    def within(self, start: int, end: int) -> bool:
        """True if this token lies entirely inside [start, end)."""
        return self.start >= start and self.end <= end


def tokenize(text: str) -> list[Token]:
    """
    Extract all tag tokens from text, in source order.

    Returns:
        list[Token]: Tokens with lowercase names and absolute offsets
    """
    tokens: list[Token] = []
    for match in TAG_PATTERN.finditer(text):
        if match.group(1):
            kind = TokenKind.CLOSE
        elif match.group(4):
            kind = TokenKind.SELF_CLOSING
        else:
            kind = TokenKind.OPEN
        tokens.append(Token(
            kind=kind,
            name=match.group(2).lower(),
            raw=match.group(0),
            start=match.start(),
            end=match.end(),
        ))
    return tokens
