"""Lexicon entries built from the interlinear words in a store."""

import uuid
from dataclasses import dataclass, field
from typing import Optional

from .models import Word
from .morphology import parse_morphology
from .store import VerseStore


BOOK_ABBREVIATIONS = {
    "Gen": "Genesis", "Exo": "Exodus", "Lev": "Leviticus", "Num": "Numbers",
    "Deu": "Deuteronomy", "Jos": "Joshua", "Jdg": "Judges", "Rut": "Ruth",
    "1Sa": "1 Samuel", "2Sa": "2 Samuel", "1Ki": "1 Kings", "2Ki": "2 Kings",
    "1Ch": "1 Chronicles", "2Ch": "2 Chronicles", "Ezr": "Ezra", "Neh": "Nehemiah",
    "Est": "Esther", "Job": "Job", "Psa": "Psalms", "Pro": "Proverbs",
    "Ecc": "Ecclesiastes", "Sol": "Song of Solomon", "Isa": "Isaiah", "Jer": "Jeremiah",
    "Lam": "Lamentations", "Eze": "Ezekiel", "Dan": "Daniel", "Hos": "Hosea",
    "Joe": "Joel", "Amo": "Amos", "Oba": "Obadiah", "Jon": "Jonah",
    "Mic": "Micah", "Nah": "Nahum", "Hab": "Habakkuk", "Zep": "Zephaniah",
    "Hag": "Haggai", "Zec": "Zechariah", "Mal": "Malachi",
    "Mat": "Matthew", "Mar": "Mark", "Luk": "Luke", "Jhn": "John", "Act": "Acts",
    "Rom": "Romans", "1Co": "1 Corinthians", "2Co": "2 Corinthians", "Gal": "Galatians",
    "Eph": "Ephesians", "Php": "Philippians", "Col": "Colossians",
    "1Th": "1 Thessalonians", "2Th": "2 Thessalonians", "1Ti": "1 Timothy",
    "2Ti": "2 Timothy", "Tit": "Titus", "Phm": "Philemon", "Heb": "Hebrews",
    "Jas": "James", "1Pe": "1 Peter", "2Pe": "2 Peter", "1Jn": "1 John",
    "2Jn": "2 John", "3Jn": "3 John", "Jud": "Jude", "Rev": "Revelation",
}

GLOSS_SOURCE = "Interlinear gloss"


def abbreviate_book_name(name: str) -> str:
    for abbrev, full in BOOK_ABBREVIATIONS.items():
        if full == name:
            return abbrev
    return name[:3]


@dataclass(frozen=True)
class VerseReference:
    book: str  # abbreviated, e.g. "Jhn"
    chapter: int
    verse: int

    @property
    def display(self) -> str:
        return f"{self.book} {self.chapter}:{self.verse}"

    @property
    def full_book_name(self) -> str:
        return BOOK_ABBREVIATIONS.get(self.book, self.book)


@dataclass
class SubDefinition:
    letter: str  # "a", "b", ...
    meaning: str
    verse_references: list[VerseReference] = field(default_factory=list)


@dataclass
class Definition:
    number: int
    meaning: str
    verse_references: list[VerseReference] = field(default_factory=list)
    sub_definitions: list[SubDefinition] = field(default_factory=list)


@dataclass
class LexiconEntry:
    strongs_number: str
    original_text: str
    transliteration: str
    part_of_speech_label: str  # e.g. "ἀρχή, noun"
    definitions: list[Definition]
    total_occurrences: int
    source: str
    id: str = field(default_factory=lambda: uuid.uuid4().hex)


class Lexicon:
    """Looks up occurrences and entries by Strong's number."""

    def __init__(self, store: VerseStore):
        self.store = store

    def count_occurrences(self, strongs_number: str) -> int:
        return sum(1 for _, word in self.store.words() if word.strongs_number == strongs_number)

    def verse_references(self, strongs_number: str, limit: int = 20) -> list[VerseReference]:
        references = []
        for verse, word in self.store.words():
            if word.strongs_number != strongs_number:
                continue
            if not verse.book or verse.chapter is None:
                continue
            references.append(VerseReference(
                book=abbreviate_book_name(verse.book),
                chapter=verse.chapter,
                verse=verse.number,
            ))
            if len(references) >= limit:
                break
        return references

    def entry_for(self, word: Word) -> Optional[LexiconEntry]:
        """Build an entry from the word's own data; None without a Strong's number."""
        if not word.strongs_number:
            return None

        pos = "n."
        if word.morphology:
            parsed = parse_morphology(word.morphology)
            if parsed.part_of_speech != "Unknown":
                pos = parsed.part_of_speech.lower()

        references = self.verse_references(word.strongs_number, limit=10)
        return LexiconEntry(
            strongs_number=word.strongs_number,
            original_text=word.original_text,
            transliteration=word.transliteration,
            part_of_speech_label=f"{word.original_text}, {pos}",
            definitions=[Definition(number=1, meaning=word.gloss, verse_references=references[:5])],
            total_occurrences=self.count_occurrences(word.strongs_number),
            source=GLOSS_SOURCE,
        )
