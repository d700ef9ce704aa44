"""In-memory verse graph: book -> chapter -> verse -> words."""

import re
from typing import Iterator, Optional

from .models import Verse, Word


REFERENCE_RE = re.compile(r"^\s*(.+?)\s+(\d+):(\d+)\s*$")


def parse_reference(reference: str) -> Optional[tuple[str, int, int]]:
    """Split "1 John 2:3" into ("1 John", 2, 3). Returns None if malformed."""
    match = REFERENCE_RE.match(reference or "")
    if not match:
        return None
    book, chapter, verse = match.groups()
    return book, int(chapter), int(verse)


def book_key(book: str) -> str:
    """Case- and separator-insensitive key: "1_john", "1 John" -> "1 john"."""
    return " ".join(book.replace("_", " ").split()).lower()


class VerseStore:
    """Holds verses by book, chapter and number."""

    def __init__(self):
        self._books: dict[str, str] = {}  # key -> display name
        self._verses: dict[str, dict[int, dict[int, Verse]]] = {}

    def add_verse(
        self,
        book: str,
        chapter: int,
        number: int,
        text: str,
        version: str = "KJV",
    ) -> Verse:
        """Add (or replace) a verse and return it."""
        key = book_key(book)
        self._books.setdefault(key, book)
        verse = Verse(
            number=number,
            text=text,
            version=version,
            book=self._books[key],
            chapter=chapter,
        )
        self._verses.setdefault(key, {}).setdefault(chapter, {})[number] = verse
        return verse

    def get_verse(self, book: str, chapter: int, number: int) -> Optional[Verse]:
        return self._verses.get(book_key(book), {}).get(chapter, {}).get(number)

    def get_or_create_verse(
        self,
        book: str,
        chapter: int,
        number: int,
        text: str,
        version: str = "KJV",
    ) -> Verse:
        verse = self.get_verse(book, chapter, number)
        if verse is None:
            verse = self.add_verse(book, chapter, number, text, version)
        return verse

    def lookup(self, reference: str) -> Optional[Verse]:
        """Find a verse by a "Book C:V" reference."""
        parsed = parse_reference(reference)
        if parsed is None:
            return None
        return self.get_verse(*parsed)

    def books(self) -> list[str]:
        return list(self._books.values())

    def chapter(self, book: str, chapter: int) -> list[Verse]:
        verses = self._verses.get(book_key(book), {}).get(chapter, {})
        return [verses[n] for n in sorted(verses)]

    def verses(self, book: Optional[str] = None) -> Iterator[Verse]:
        keys = [book_key(book)] if book else list(self._verses)
        for key in keys:
            chapters = self._verses.get(key, {})
            for chapter in sorted(chapters):
                for number in sorted(chapters[chapter]):
                    yield chapters[chapter][number]

    def words(self, book: Optional[str] = None) -> Iterator[tuple[Verse, Word]]:
        for verse in self.verses(book):
            for word in verse.sorted_words():
                yield verse, word

    def __len__(self) -> int:
        return sum(1 for _ in self.verses())
