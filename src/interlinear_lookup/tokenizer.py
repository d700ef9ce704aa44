"""Whitespace tokenization of verse text with character spans."""

import re
from dataclasses import dataclass
from typing import Optional


TOKEN_RE = re.compile(r"\S+")
APOSTROPHES = {"'", "’"}


@dataclass(frozen=True)
class Token:
    text: str
    start: int  # inclusive
    end: int  # exclusive


def tokenize(text: str) -> list[Token]:
    """Split text into whitespace-delimited tokens with their [start, end) spans."""
    return [Token(m.group(0), m.start(), m.end()) for m in TOKEN_RE.finditer(text or "")]


def token_index_at(text: str, offset: int) -> Optional[int]:
    """Return the index of the token containing offset.

    An offset in whitespace (or before the first token) resolves to the next
    token; an offset at or past the end of the text, or in trailing
    whitespace, resolves to the last token. Returns None if there are no tokens.
    """
    tokens = tokenize(text)
    if not tokens:
        return None
    if offset >= len(text):
        return len(tokens) - 1

    for index, token in enumerate(tokens):
        if offset < token.end:
            return index

    return len(tokens) - 1


def is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch in APOSTROPHES


def word_bounds_at(text: str, offset: int) -> Optional[tuple[int, int]]:
    """Expand left and right from offset across word characters.

    Returns the [start, end) span of the enclosing word, or None when offset
    sits on punctuation or whitespace with no word character to its left.
    """
    if not text or offset < 0 or offset >= len(text):
        return None

    start = offset
    while start > 0 and is_word_char(text[start - 1]):
        start -= 1

    end = offset
    while end < len(text) and is_word_char(text[end]):
        end += 1

    if start >= end:
        return None
    return start, end
