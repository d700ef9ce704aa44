from conftest import make_word

from interlinear_lookup.lexicon import Lexicon, VerseReference, abbreviate_book_name
from interlinear_lookup.seeder import seed_directory
from interlinear_lookup.store import VerseStore


def seeded_lexicon(seed_dir) -> Lexicon:
    store = VerseStore()
    seed_directory(store, seed_dir)
    return Lexicon(store)


def test_count_occurrences(seed_dir):
    lexicon = seeded_lexicon(seed_dir)

    assert lexicon.count_occurrences("G2316") == 3
    assert lexicon.count_occurrences("G746") == 1
    assert lexicon.count_occurrences("G9999") == 0


def test_verse_references(seed_dir):
    lexicon = seeded_lexicon(seed_dir)

    refs = lexicon.verse_references("G2316")

    assert [r.display for r in refs] == ["Jhn 1:1", "Jhn 1:1", "Jhn 1:2"]
    assert refs[0].full_book_name == "John"
    assert len(lexicon.verse_references("G2316", limit=1)) == 1


def test_entry_for_word(seed_dir):
    lexicon = seeded_lexicon(seed_dir)
    word = lexicon.store.lookup("John 1:2").words[1]

    entry = lexicon.entry_for(word)

    assert entry.strongs_number == "G2316"
    assert entry.part_of_speech_label == "θεόν, noun"
    assert entry.total_occurrences == 3
    assert entry.definitions[0].meaning == "God, deity"
    assert len(entry.definitions[0].verse_references) == 3


def test_entry_needs_strongs_number(seed_dir):
    lexicon = seeded_lexicon(seed_dir)

    assert lexicon.entry_for(make_word(0, "and")) is None


def test_entry_without_morphology_uses_generic_label(seed_dir):
    lexicon = seeded_lexicon(seed_dir)
    word = make_word(0, "amen", original_text="ἀμήν", strongs_number="G281")

    entry = lexicon.entry_for(word)

    assert entry.part_of_speech_label == "ἀμήν, n."
    assert entry.total_occurrences == 0


def test_abbreviations():
    assert abbreviate_book_name("1 John") == "1Jn"
    assert abbreviate_book_name("Unknown Book") == "Unk"
    assert VerseReference("Mat", 11, 10).display == "Mat 11:10"
    assert VerseReference("Xyz", 1, 1).full_book_name == "Xyz"
