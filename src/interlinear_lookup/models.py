"""Data models for verses and their interlinear words."""

import json
import uuid
from dataclasses import dataclass, field, asdict
from typing import Optional


LANGUAGE_CODES = {
    "grk": "grk",
    "greek": "grk",
    "g": "grk",
    "heb": "heb",
    "hebrew": "heb",
    "h": "heb",
    "arc": "arc",
    "aramaic": "arc",
}


def normalize_language(tag: Optional[str], strongs_number: Optional[str] = None) -> str:
    """Map a language tag to one of 'grk', 'heb' or 'arc'.

    Unknown tags fall back to the Strong's prefix (H = Hebrew, anything else Greek).
    """
    code = LANGUAGE_CODES.get((tag or "").strip().lower())
    if code:
        return code
    if strongs_number and strongs_number.strip().upper().startswith("H"):
        return "heb"
    return "grk"


@dataclass
class Word:
    """An original language word aligned to part of a verse's English text."""

    original_text: str  # Greek, Hebrew or Aramaic token
    transliteration: str  # Romanized form
    gloss: str  # Short definition
    word_index: int  # 0-based position in original-language order
    start_position: int  # Character offset into the verse text
    end_position: int
    translated_text: str  # The English word(s) this word renders as
    language: str = "grk"  # "grk", "heb" or "arc"
    strongs_number: Optional[str] = None  # e.g. "G746"
    morphology: Optional[str] = None  # e.g. "Noun - Dative Feminine Singular"

    @property
    def formatted_info(self) -> str:
        info = f"{self.original_text} ({self.transliteration})"
        if self.strongs_number:
            info += f" - {self.strongs_number}"
        info += f"\n{self.gloss}"
        if self.morphology:
            info += f"\n{self.morphology}"
        return info

    def has_valid_offsets(self, text_length: Optional[int] = None) -> bool:
        """True when the stored offsets are non-negative, not reversed and,
        given the verse text length, inside the text."""
        if not 0 <= self.start_position <= self.end_position:
            return False
        return text_length is None or self.end_position <= text_length

    @classmethod
    def from_seed_dict(cls, data: dict) -> "Word":
        """Build a Word from one entry of a seed file's ``words`` list."""
        strongs = data.get("strongsNumber") or None
        return cls(
            original_text=data["originalText"],
            transliteration=data.get("transliteration", ""),
            gloss=data.get("gloss", ""),
            word_index=int(data["wordIndex"]),
            start_position=int(data.get("startPosition", 0)),
            end_position=int(data.get("endPosition", 0)),
            translated_text=data.get("translatedText", ""),
            language=normalize_language(data.get("language"), strongs),
            strongs_number=strongs,
            morphology=data.get("morphology") or None,
        )

    def to_seed_dict(self) -> dict:
        return {
            "originalText": self.original_text,
            "transliteration": self.transliteration,
            "strongsNumber": self.strongs_number or "",
            "gloss": self.gloss,
            "morphology": self.morphology or "",
            "wordIndex": self.word_index,
            "startPosition": self.start_position,
            "endPosition": self.end_position,
            "translatedText": self.translated_text,
            "language": self.language,
        }

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class Verse:
    """A verse's rendered text plus the interlinear words aligned to it.

    Word offsets are relative to ``text`` exactly as stored; editing the text
    leaves them stale.
    """

    number: int
    text: str
    version: str = "KJV"
    book: Optional[str] = None
    chapter: Optional[int] = None
    words: list[Word] = field(default_factory=list)
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    @property
    def reference(self) -> str:
        if not self.book or self.chapter is None:
            return f"Verse {self.number}"
        return f"{self.book} {self.chapter}:{self.number}"

    @property
    def formatted_text(self) -> str:
        return f"{self.number} {self.text}"

    def sorted_words(self) -> list[Word]:
        """Words ordered by word_index rather than insertion order."""
        return sorted(self.words, key=lambda w: w.word_index)

    def to_dict(self) -> dict:
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


@dataclass(frozen=True)
class SelectionRange:
    """A character range in a verse's text. Zero length means a tap."""

    location: int
    length: int = 0

    @property
    def end(self) -> int:
        return self.location + self.length

    @property
    def is_tap(self) -> bool:
        return self.length == 0
