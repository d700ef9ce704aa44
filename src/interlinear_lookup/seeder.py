"""Load interlinear seed files into a VerseStore.

Seed files hold one book each:

    {"book": "John",
     "verses": [{"chapter": 1, "verse": 1,
                 "text": "In the beginning ...",   (optional)
                 "words": [{"originalText": ..., "wordIndex": 0, ...}]}]}

Seeding is idempotent: a verse that already owns words is left alone, so the
same files can be seeded again without any "already seeded" flag.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .models import Word
from .store import VerseStore

logger = logging.getLogger(__name__)


class SeedError(Exception):
    """A seed file could not be read or decoded."""


@dataclass
class SeedReport:
    words_inserted: int = 0
    verses_skipped: int = 0  # already had words
    verses_not_found: int = 0  # not in the store and no text to create them

    def add(self, other: "SeedReport"):
        self.words_inserted += other.words_inserted
        self.verses_skipped += other.verses_skipped
        self.verses_not_found += other.verses_not_found


def book_name_from_filename(path: Union[str, Path]) -> str:
    """"1_john.json" -> "1 John"."""
    stem = Path(path).stem
    return " ".join(part.capitalize() for part in stem.replace("_", " ").split())


def load_seed_file(path: Union[str, Path]) -> dict:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise SeedError(f"Could not read {path}: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("verses"), list):
        raise SeedError(f"{path} has no 'verses' list")
    return data


@dataclass
class SeedVerse:
    """One decoded verse entry of a seed file."""

    chapter: int
    number: int
    text: Optional[str]
    version: str
    words: list[Word]

    @classmethod
    def from_dict(cls, verse_data: dict) -> "SeedVerse":
        words = verse_data.get("words", []) if isinstance(verse_data, dict) else None
        if not isinstance(words, list) or not all(isinstance(w, dict) for w in words):
            raise TypeError(f"malformed verse entry: {verse_data!r:.60}")
        return cls(
            chapter=int(verse_data["chapter"]),
            number=int(verse_data["verse"]),
            text=verse_data.get("text") or None,
            version=verse_data.get("version", "KJV"),
            words=[Word.from_seed_dict(w) for w in words],
        )


def seed_verse(store: VerseStore, book: str, entry: SeedVerse, report: SeedReport):
    verse = store.get_verse(book, entry.chapter, entry.number)
    if verse is None and entry.text:
        verse = store.add_verse(book, entry.chapter, entry.number, entry.text, entry.version)
    if verse is None:
        report.verses_not_found += 1
        if report.verses_not_found <= 5:
            logger.warning("%s %d:%d not found in store", book, entry.chapter, entry.number)
        return

    if verse.words:
        report.verses_skipped += 1
        return

    verse.words.extend(entry.words)
    report.words_inserted += len(entry.words)


def seed_book(store: VerseStore, data: dict, book_name: Optional[str] = None) -> SeedReport:
    """Attach the words in one decoded seed document to the store's verses.

    Every verse entry is decoded before the store is touched, so a malformed
    entry raises with nothing from the document attached.
    """
    book = book_name or data.get("book", "")
    entries = [SeedVerse.from_dict(verse_data) for verse_data in data.get("verses", [])]

    report = SeedReport()
    for entry in entries:
        seed_verse(store, book, entry, report)

    if report.verses_not_found > 5:
        logger.warning("... and %d more verses not found", report.verses_not_found - 5)
    logger.info(
        "Seeded %s: %d words inserted (%d verses already had data, %d not found)",
        book, report.words_inserted, report.verses_skipped, report.verses_not_found,
    )
    return report


def seed_file(store: VerseStore, path: Union[str, Path]) -> SeedReport:
    data = load_seed_file(path)
    return seed_book(store, data, book_name_from_filename(path))


def seed_directory(store: VerseStore, directory: Union[str, Path]) -> SeedReport:
    """Seed every *.json file in a directory, skipping files that fail."""
    paths = sorted(Path(directory).glob("*.json"))
    if not paths:
        logger.warning("No interlinear JSON files found in %s", directory)

    total = SeedReport()
    for path in paths:
        try:
            total.add(seed_file(store, path))
        except (SeedError, KeyError, TypeError, ValueError) as e:
            logger.error("Error processing %s: %s", path.name, e)

    logger.info("Interlinear seeding complete, %d words inserted", total.words_inserted)
    return total


def clear_words(store: VerseStore, book: Optional[str] = None) -> int:
    """Delete the words of every verse (or one book's verses) so they can be re-seeded."""
    removed = 0
    for verse in store.verses(book):
        removed += len(verse.words)
        verse.words.clear()
    return removed
