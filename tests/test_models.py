import json

from conftest import make_word

from interlinear_lookup.models import SelectionRange, Verse, normalize_language


def test_normalize_language():
    assert normalize_language("Greek") == "grk"
    assert normalize_language("hebrew") == "heb"
    assert normalize_language("Aramaic", "H2") == "arc"
    assert normalize_language("", "H430") == "heb"
    assert normalize_language(None) == "grk"


def test_formatted_info(john_verse):
    info = john_verse.sorted_words()[0].formatted_info

    assert info.splitlines() == [
        "ἀρχῇ (archē) - G746",
        "beginning, origin",
        "Noun - Dative Feminine Singular",
    ]


def test_has_valid_offsets():
    assert make_word(0, "In", 0, 2).has_valid_offsets()
    assert not make_word(0, "In", 5, 2).has_valid_offsets()
    assert not make_word(0, "In", -1, 2).has_valid_offsets()
    assert make_word(0, "earth", 48, 54).has_valid_offsets(54)
    assert not make_word(0, "earth", 50, 60).has_valid_offsets(54)


def test_sorted_words_ignore_insertion_order():
    verse = Verse(number=3, text="All things were made by him")
    verse.words = [make_word(2, "made"), make_word(0, "All"), make_word(1, "things")]

    assert [w.translated_text for w in verse.sorted_words()] == ["All", "things", "made"]
    assert verse.reference == "Verse 3"


def test_verse_to_json(genesis_verse):
    data = json.loads(genesis_verse.to_json())

    assert data["book"] == "Genesis"
    assert data["words"][0]["original_text"] == "רֵאשִׁית"
    assert genesis_verse.reference == "Genesis 1:1"
    assert genesis_verse.formatted_text.startswith("1 In the beginning")


def test_selection_range():
    assert SelectionRange(4).is_tap
    assert SelectionRange(4, 3).end == 7
    assert not SelectionRange(4, 3).is_tap
