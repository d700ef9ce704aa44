import json

import pytest

from interlinear_lookup.models import Verse, Word


GENESIS_1_1 = "In the beginning God created the heaven and the earth."
JOHN_1_1 = "In the beginning was the Word, and the Word was with God, and the Word was God."

# Seed rows as authored for John 1:1; several offsets don't bound their text.
JOHN_1_1_WORDS = [
    ("ἀρχῇ", "archē", "G746", "beginning, origin", "Noun - Dative Feminine Singular", 0, 7, 16, "beginning"),
    ("ἦν", "ēn", "G1510", "was, to be", "Verb - Imperfect Active Indicative - 3rd Person Singular", 1, 17, 20, "was"),
    ("λόγος", "logos", "G3056", "word, speech, divine utterance", "Noun - Nominative Masculine Singular", 2, 25, 29, "Word"),
    ("καί", "kai", "G2532", "and, even, also", "Conjunction", 3, 35, 38, "and"),
    ("ἦν", "ēn", "G1510", "was, to be", "Verb - Imperfect Active Indicative - 3rd Person Singular", 4, 43, 47, "was"),
    ("πρός", "pros", "G4314", "toward, with, at", "Preposition", 5, 53, 57, "with"),
    ("θεόν", "theon", "G2316", "God, deity", "Noun - Accusative Masculine Singular", 6, 62, 65, "God"),
    ("θεός", "theos", "G2316", "God, deity", "Noun - Nominative Masculine Singular", 7, 80, 84, "God"),
]


def make_word(word_index, translated_text, start=0, end=0, original_text="λόγος", **kwargs) -> Word:
    return Word(
        original_text=original_text,
        transliteration=kwargs.pop("transliteration", ""),
        gloss=kwargs.pop("gloss", ""),
        word_index=word_index,
        start_position=start,
        end_position=end,
        translated_text=translated_text,
        **kwargs,
    )


def seed_rows_to_dicts(rows) -> list[dict]:
    return [
        {
            "originalText": original,
            "transliteration": translit,
            "strongsNumber": strongs,
            "gloss": gloss,
            "morphology": morph,
            "wordIndex": index,
            "startPosition": start,
            "endPosition": end,
            "translatedText": translated,
            "language": "grk",
        }
        for original, translit, strongs, gloss, morph, index, start, end, translated in rows
    ]


@pytest.fixture
def genesis_verse() -> Verse:
    return Verse(
        number=1,
        text=GENESIS_1_1,
        book="Genesis",
        chapter=1,
        words=[make_word(1, "beginning", 7, 16, original_text="רֵאשִׁית")],
    )


@pytest.fixture
def john_verse() -> Verse:
    verse = Verse(number=1, text=JOHN_1_1, book="John", chapter=1)
    verse.words = [Word.from_seed_dict(d) for d in seed_rows_to_dicts(JOHN_1_1_WORDS)]
    return verse


@pytest.fixture
def seed_dir(tmp_path):
    """A directory holding john.json with text for John 1:1 and 1:2."""
    book = {
        "book": "John",
        "verses": [
            {
                "chapter": 1,
                "verse": 1,
                "text": JOHN_1_1,
                "words": seed_rows_to_dicts(JOHN_1_1_WORDS),
            },
            {
                "chapter": 1,
                "verse": 2,
                "text": "The same was in the beginning with God.",
                "words": seed_rows_to_dicts([
                    ("οὗτος", "houtos", "G3778", "this, he", "Demonstrative Pronoun - Nominative Masculine Singular", 0, 0, 4, "same"),
                    ("θεόν", "theon", "G2316", "God, deity", "Noun - Accusative Masculine Singular", 4, 40, 43, "God"),
                ]),
            },
        ],
    }
    (tmp_path / "john.json").write_text(json.dumps(book, ensure_ascii=False), encoding="utf-8")
    return tmp_path
