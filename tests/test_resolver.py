from conftest import GENESIS_1_1, JOHN_1_1, make_word

from interlinear_lookup.models import SelectionRange, Verse
from interlinear_lookup.resolver import (
    extract_surface_word,
    find_word,
    match_by_position,
    resolve,
)
from interlinear_lookup.tokenizer import tokenize


def test_drag_selection_matches_normalized_text(genesis_verse):
    resolution = resolve(genesis_verse, SelectionRange(7, 9))

    assert resolution is not None
    assert resolution.word.translated_text == "beginning"
    assert resolution.strategy == "normalized"


def test_tap_expands_to_enclosing_word(genesis_verse):
    resolution = resolve(genesis_verse, SelectionRange(10, 0))

    assert resolution is not None
    assert resolution.word is genesis_verse.words[0]
    assert resolution.strategy == "normalized"


def test_unaligned_word_is_no_match(genesis_verse):
    # first "the" sits at token 1, which is also the seeded word's index
    assert find_word(genesis_verse, SelectionRange(3, 3)) is None
    assert find_word(genesis_verse, SelectionRange(3, 0)) is None
    # second "the"
    assert find_word(genesis_verse, SelectionRange(29, 3)) is None


def test_stale_offsets_fall_back_to_position():
    verse = Verse(number=1, text=JOHN_1_1, book="John", chapter=1)
    verse.words = [make_word(5, "with", 53, 56)]

    resolution = resolve(verse, SelectionRange(53, 3))

    assert resolution is not None
    assert resolution.strategy == "position"
    assert resolution.word is verse.words[0]


def test_position_fallback_when_selection_runs_past_text():
    verse = Verse(number=1, text=GENESIS_1_1, words=[make_word(9, "firmament", 48, 53)])

    resolution = resolve(verse, SelectionRange(50, 10))

    assert resolution is not None
    assert resolution.strategy == "position"


def test_offsets_past_the_text_never_match_by_position():
    verse = Verse(number=1, text=GENESIS_1_1, words=[make_word(7, "firmament", 50, 60)])

    assert match_by_position(verse, SelectionRange(51, 2)) is None
    assert resolve(verse, SelectionRange(51, 2)) is None


def test_index_match_wins_over_later_strategies():
    first = make_word(0, "beginning", original_text="ἀρχή")
    indexed = make_word(2, "beginning", original_text="ἀρχῇ")
    verse = Verse(number=1, text=JOHN_1_1, words=[first, indexed])

    resolution = resolve(verse, SelectionRange(8, 0))

    assert resolution.strategy == "index"
    assert resolution.word is indexed


def test_normalized_match_wins_over_substring_and_position():
    fuzzy = make_word(0, "Godhead", 53, 57)
    exact = make_word(9, "God", 0, 2)
    verse = Verse(number=1, text=JOHN_1_1, words=[fuzzy, exact])

    resolution = resolve(verse, SelectionRange(54, 0))

    assert resolution.strategy == "normalized"
    assert resolution.word is exact


def test_substring_match_wins_over_position():
    overlapping = make_word(0, "heaven", 53, 57)
    partial = make_word(3, "Gods", 0, 2)
    verse = Verse(number=1, text=JOHN_1_1, words=[overlapping, partial])

    resolution = resolve(verse, SelectionRange(54, 0))

    assert resolution.strategy == "substring"
    assert resolution.word is partial


def test_slash_alternatives_count_as_exact():
    verse = Verse(number=1, text=JOHN_1_1, words=[make_word(9, "the/this/who")])

    resolution = resolve(verse, SelectionRange(3, 0))

    assert resolution.strategy == "normalized"


def test_lowest_word_index_wins_regardless_of_storage_order(john_verse):
    # "God" appears twice; storage order is reversed here
    john_verse.words.reverse()

    word = find_word(john_verse, SelectionRange(75, 3))

    assert word.word_index == 6
    assert word.original_text == "θεόν"


def test_every_character_of_an_aligned_token_resolves_by_index():
    verse = Verse(number=1, text=JOHN_1_1)
    tokens = tokenize(JOHN_1_1)
    verse.words = [make_word(i, t.text, t.start, t.end) for i, t in enumerate(tokens)]

    for i, token in enumerate(tokens):
        for offset in range(token.start, token.end):
            resolution = resolve(verse, SelectionRange(offset, 0))
            assert resolution.strategy == "index"
            assert resolution.word.word_index == i
        dragged = resolve(verse, SelectionRange(token.start, token.end - token.start))
        assert dragged.word.word_index == i


def test_resolution_is_deterministic(john_verse):
    selection = SelectionRange(25, 4)
    first = find_word(john_verse, selection)

    for _ in range(5):
        assert find_word(john_verse, selection) is first


def test_out_of_range_selection_is_no_match(john_verse):
    assert find_word(john_verse, SelectionRange(-1, 0)) is None
    assert find_word(john_verse, SelectionRange(len(JOHN_1_1), 0)) is None
    assert find_word(john_verse, SelectionRange(500, 3)) is None


def test_verse_without_words_is_no_match():
    verse = Verse(number=1, text=GENESIS_1_1)

    assert find_word(verse, SelectionRange(7, 9)) is None


def test_tap_on_punctuation_is_no_match_but_drag_uses_offsets():
    verse = Verse(number=1, text="In the beginning -- God", words=[make_word(3, "so", 17, 19)])

    assert find_word(verse, SelectionRange(18, 0)) is None
    resolution = resolve(verse, SelectionRange(17, 2))
    assert resolution.strategy == "position"


def test_malformed_offsets_never_match_by_position():
    reversed_word = make_word(0, "light", 20, 10)
    negative = make_word(1, "dark", -5, -1)
    verse = Verse(number=1, text=GENESIS_1_1, words=[reversed_word, negative])

    assert match_by_position(verse, SelectionRange(12, 3)) is None
    assert find_word(verse, SelectionRange(17, 3)) is None


def test_extract_surface_word():
    text = "1In the beginning, God"

    assert extract_surface_word(text, SelectionRange(0, 0)) == "In"
    assert extract_surface_word(text, SelectionRange(8, 10)) == "beginning"
    assert extract_surface_word(text, SelectionRange(17, 1)) == ""
    assert extract_surface_word(text, SelectionRange(18, 0)) is None
    assert extract_surface_word(text, SelectionRange(99, 0)) is None
