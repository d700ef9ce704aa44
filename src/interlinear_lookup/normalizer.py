"""Comparison keys for English surface words and translated text."""

import re
import unicodedata
from typing import Optional

from .tokenizer import APOSTROPHES


VERSE_PREFIX_RE = re.compile(r"^\d+\s*")


def _is_trimmable(ch: str) -> bool:
    if ch in APOSTROPHES:
        return False
    if ch.isspace():
        return True
    return unicodedata.category(ch)[0] in ("P", "S")


def _trim(value: str) -> str:
    start, end = 0, len(value)
    while start < end and _is_trimmable(value[start]):
        start += 1
    while end > start and _is_trimmable(value[end - 1]):
        end -= 1
    return value[start:end]


def clean_surface(value: Optional[str]) -> str:
    """Strip a leading verse number and surrounding punctuation, keeping case.

    Apostrophes survive at either end ("Gods'"). The steps repeat until nothing
    changes, so "(1) In" and "1 2 In" both settle on "In".
    """
    current = value or ""
    while True:
        cleaned = _trim(VERSE_PREFIX_RE.sub("", current.strip()))
        if cleaned == current:
            return cleaned
        current = cleaned


def normalize(value: Optional[str]) -> str:
    """Case- and punctuation-insensitive comparison key."""
    return clean_surface((value or "").lower())


def alternatives(value: Optional[str]) -> list[str]:
    """Normalized slash-separated renderings, e.g. "the/this/who"."""
    if not value or "/" not in value:
        return []
    return [alt for alt in (normalize(part) for part in value.split("/")) if alt]
