"""Resolve a text selection in a verse to an interlinear Word.

Translation word order often differs from the original language order, and
the seed data was authored with inconsistent offsets, so resolution runs an
ordered list of increasingly lenient strategies and returns the first hit:

1. match_by_index           - token position of the selection == word_index
2. match_by_normalized_text - normalized translated text equals the surface word
3. match_by_substring       - one normalized form contains the other
4. match_by_position        - stored [start, end] offsets overlap the selection

A miss is a normal outcome (plain text with no interlinear data), so nothing
here raises for bad input.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .models import SelectionRange, Verse, Word
from .normalizer import alternatives, clean_surface, normalize
from .tokenizer import token_index_at, word_bounds_at

logger = logging.getLogger(__name__)

Strategy = Callable[[Verse, SelectionRange], Optional[Word]]


@dataclass(frozen=True)
class Resolution:
    word: Word
    strategy: str  # name of the strategy that produced the match


# =============================================================================
# Surface word extraction
# =============================================================================

def in_bounds(verse: Verse, selection: SelectionRange) -> bool:
    return 0 <= selection.location < len(verse.text) and selection.length >= 0


def extract_surface_word(text: str, selection: SelectionRange) -> Optional[str]:
    """Return the English word the selection refers to.

    A drag selection yields its own substring, cleaned of a verse number and
    surrounding punctuation (possibly ""). A tap expands to the enclosing word
    and yields None when there is none.
    """
    if not 0 <= selection.location < len(text):
        return None

    if selection.length > 0:
        end = min(selection.end, len(text))
        return clean_surface(text[selection.location:end])

    bounds = word_bounds_at(text, selection.location)
    if bounds is None:
        return None
    start, end = bounds
    return clean_surface(text[start:end])


def _surface_key(verse: Verse, selection: SelectionRange) -> str:
    return normalize(extract_surface_word(verse.text, selection))


def _related(a: str, b: str) -> bool:
    if not a or not b:
        return False
    return a in b or b in a


# =============================================================================
# Strategies
# =============================================================================

def match_by_index(verse: Verse, selection: SelectionRange) -> Optional[Word]:
    """Word whose word_index equals the token index of the selection start.

    The candidate must still resemble the surface word, otherwise a tap on an
    unaligned "the" would pick up whatever word shares its position.
    """
    index = token_index_at(verse.text, selection.location)
    if index is None:
        return None

    surface = _surface_key(verse, selection)
    for word in verse.sorted_words():
        if word.word_index != index:
            continue
        if _related(normalize(word.translated_text), surface):
            return word
    return None


def match_by_normalized_text(verse: Verse, selection: SelectionRange) -> Optional[Word]:
    surface = _surface_key(verse, selection)
    if not surface:
        return None

    words = verse.sorted_words()
    for word in words:
        if normalize(word.translated_text) == surface:
            return word

    # "the/this/who" style renderings
    for word in words:
        if surface in alternatives(word.translated_text):
            return word
    return None


def match_by_substring(verse: Verse, selection: SelectionRange) -> Optional[Word]:
    surface = _surface_key(verse, selection)
    if not surface:
        return None

    for word in verse.sorted_words():
        if _related(normalize(word.translated_text), surface):
            return word
    return None


def match_by_position(verse: Verse, selection: SelectionRange) -> Optional[Word]:
    """First word whose stored offsets overlap the selection (inclusive).

    Words whose offsets are negative, reversed or run past the end of the
    text never match. The selection itself is clamped to the text.
    """
    text_length = len(verse.text)
    start = selection.location
    end = min(selection.end, text_length)

    for word in verse.sorted_words():
        if not word.has_valid_offsets(text_length):
            continue
        if word.start_position <= end and word.end_position >= start:
            return word
    return None


STRATEGIES: list[tuple[str, Strategy]] = [
    ("index", match_by_index),
    ("normalized", match_by_normalized_text),
    ("substring", match_by_substring),
    ("position", match_by_position),
]


# =============================================================================
# Public API
# =============================================================================

def resolve(verse: Verse, selection: SelectionRange) -> Optional[Resolution]:
    """Run the strategy chain and report which strategy matched."""
    if not in_bounds(verse, selection):
        logger.debug("Selection %s outside %s", selection, verse.reference)
        return None

    if not verse.words:
        logger.debug("No interlinear words for %s", verse.reference)
        return None

    surface = extract_surface_word(verse.text, selection)
    if surface is None:
        logger.debug("No word at %d in %s", selection.location, verse.reference)
        return None

    for name, strategy in STRATEGIES:
        word = strategy(verse, selection)
        if word is not None:
            return Resolution(word=word, strategy=name)

    logger.debug(
        "Could not find interlinear word for %r at %d in %s",
        surface, selection.location, verse.reference,
    )
    return None


def find_word(verse: Verse, selection: SelectionRange) -> Optional[Word]:
    """Return the Word best matching the selection, or None."""
    resolution = resolve(verse, selection)
    return resolution.word if resolution else None
