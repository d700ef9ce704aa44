"""Build interlinear seed data from BibleHub verse pages."""

import re
from dataclasses import dataclass
from typing import Optional

import requests
from bs4 import BeautifulSoup, NavigableString, Tag

from .models import Word, normalize_language


# =============================================================================
# Constants
# =============================================================================

# BibleHub version heading -> abbreviation
TARGET_VERSIONS = {
    "King James Bible": "KJV",
    "New King James Version": "NKJV",
    "English Standard Version": "ESV",
    "New International Version": "NIV",
    "New Living Translation": "NLT",
}

REQUEST_TIMEOUT = 30

# Lexicon heading text -> language code (also the CSS class of the word spans)
LEXICON_LANGUAGES = {"Hebrew": "heb", "Greek": "grk"}

# Sibling classes that end one version's verse text
STOP_CLASSES = {"versiontext", "p"}

STRONGS_HREF_RE = re.compile(r"strongs_(\d+)")

NT_BOOKS = [
    "matthew", "mark", "luke", "john", "acts",
    "romans", "1_corinthians", "2_corinthians", "galatians",
    "ephesians", "philippians", "colossians",
    "1_thessalonians", "2_thessalonians",
    "1_timothy", "2_timothy", "titus", "philemon",
    "hebrews", "james", "1_peter", "2_peter",
    "1_john", "2_john", "3_john", "jude", "revelation"
]

BIBLE_BOOKS = [
    "genesis", "exodus", "leviticus", "numbers", "deuteronomy",
    "joshua", "judges", "ruth", "1_samuel", "2_samuel",
    "1_kings", "2_kings", "1_chronicles", "2_chronicles",
    "ezra", "nehemiah", "esther", "job", "psalms", "proverbs",
    "ecclesiastes", "songs", "isaiah", "jeremiah", "lamentations",
    "ezekiel", "daniel", "hosea", "joel", "amos", "obadiah",
    "jonah", "micah", "nahum", "habakkuk", "zephaniah",
    "haggai", "zechariah", "malachi",
] + NT_BOOKS


@dataclass
class OriginalWord:
    """One row of a BibleHub lexicon table."""

    english_word: str  # The English word/phrase this word translates to
    word: str  # Hebrew or Greek word
    transliteration: str
    strongs_number: str  # e.g. "G746"
    part_of_speech: str  # e.g. "Noun - Nominative Masculine Singular"
    definition: str
    language: str  # "heb" or "grk"


# =============================================================================
# Extraction Functions
# =============================================================================

def _version_of(span: Tag) -> Optional[str]:
    """Abbreviation for a versiontext heading, or None for untracked versions."""
    link = span.find("a")
    if not link:
        return None
    heading = link.get_text(strip=True)
    return next((abbrev for name, abbrev in TARGET_VERSIONS.items() if name in heading), None)


def _text_after(span: Tag) -> str:
    # Plain strings and <i> (words supplied by the translators) up to the next heading
    parts = []
    for node in span.next_siblings:
        if isinstance(node, NavigableString):
            parts.append(str(node))
        elif node.name == "div" or (node.name == "span" and STOP_CLASSES & set(node.get("class", []))):
            break
        elif node.name == "i":
            parts.append(node.get_text())
    return " ".join(" ".join(parts).split())


def extract_translation(soup: BeautifulSoup, version: str = "KJV") -> Optional[str]:
    """Extract one version's verse text from the parallel translations section."""
    par_div = soup.find("div", id="par")
    if not par_div:
        return None

    for span in par_div.find_all("span", class_="versiontext"):
        if _version_of(span) == version:
            return _text_after(span) or None
    return None


def _find_lexicon(soup: BeautifulSoup) -> tuple[Optional[Tag], Optional[str]]:
    """The element holding the lexicon rows and its language code."""
    for heading in soup.find_all("div", class_="vheading"):
        text = heading.get_text()
        for name, code in LEXICON_LANGUAGES.items():
            if name in text:
                return heading.parent, code
    return None, None


def _following_text(word_span: Tag, css_class: str) -> str:
    span = word_span.find_next("span", class_=css_class)
    return span.get_text(strip=True) if span else ""


def _strongs_number(word_span: Tag, language: str) -> str:
    str_span = word_span.find_next("span", class_="str")
    link = str_span.find("a") if str_span else None
    match = STRONGS_HREF_RE.search(link.get("href", "")) if link else None
    if not match:
        return ""
    prefix = "H" if language == "heb" else "G"
    return f"{prefix}{match.group(1)}"


def extract_original_words(soup: BeautifulSoup) -> list[OriginalWord]:
    """Extract the Hebrew or Greek lexicon table, in original-language order.

    Rows without an original-language word are dropped.
    """
    lexicon, language = _find_lexicon(soup)
    if lexicon is None:
        return []

    original_words = []
    for word_span in lexicon.find_all("span", class_="word"):
        # The original-language span carries the language code as its class
        word = _following_text(word_span, language)
        if not word:
            continue
        original_words.append(OriginalWord(
            english_word=word_span.get_text(strip=True),
            word=word,
            transliteration=_following_text(word_span, "translit").strip("()"),
            strongs_number=_strongs_number(word_span, language),
            part_of_speech=_following_text(word_span, "parse"),
            definition=_following_text(word_span, "str2"),
            language=language,
        ))
    return original_words


# =============================================================================
# Alignment
# =============================================================================

def _phrase_pattern(english_word: str) -> Optional[re.Pattern]:
    words = re.sub(r"[\[\]()]", " ", english_word).split()
    if not words:
        return None
    body = r"\s+".join(re.escape(w) for w in words)
    return re.compile(rf"(?<![\w']){body}(?![\w'])", re.IGNORECASE)


def align_words(text: str, original_words: list[OriginalWord]) -> list[Word]:
    """Turn lexicon rows into Words with offsets into text.

    Each English rendering is searched for after the previous match, then from
    the start of the verse. A rendering that cannot be found gets an empty
    range at the current position.
    """
    words = []
    cursor = 0

    for index, original in enumerate(original_words):
        start = end = cursor
        translated = original.english_word
        pattern = _phrase_pattern(translated)
        if pattern:
            match = pattern.search(text, cursor) or pattern.search(text)
            if match:
                start, end = match.span()
                translated = match.group(0)
                cursor = end

        words.append(Word(
            original_text=original.word,
            transliteration=original.transliteration,
            gloss=original.definition,
            word_index=index,
            start_position=start,
            end_position=end,
            translated_text=translated,
            language=normalize_language(original.language, original.strongs_number),
            strongs_number=original.strongs_number or None,
            morphology=original.part_of_speech or None,
        ))

    return words


# =============================================================================
# Public API
# =============================================================================

def verse_url(book: str, chapter: int, verse: int) -> str:
    return f"https://biblehub.com/{book}/{chapter}-{verse}.htm"


def parse_verse_page(html: str, chapter: int, verse: int, version: str = "KJV") -> Optional[dict]:
    """Build a seed verse entry from a verse page; None if it has no text."""
    soup = BeautifulSoup(html, "html.parser")
    text = extract_translation(soup, version)
    if not text:
        return None

    words = align_words(text, extract_original_words(soup))
    return {
        "chapter": chapter,
        "verse": verse,
        "text": text,
        "version": version,
        "words": [w.to_seed_dict() for w in words],
    }


def scrape_verse(book: str, chapter: int, verse: int, version: str = "KJV") -> Optional[dict]:
    """
    Scrape a single verse from BibleHub as a seed verse entry.

    Args:
        book: Book slug (e.g., 'john', '1_peter')
        chapter: Chapter number
        verse: Verse number
        version: Translation whose text the word offsets refer to

    Returns:
        The seed entry, or None if the verse doesn't exist (404) or the request failed
    """
    try:
        response = requests.get(verse_url(book, chapter, verse), timeout=REQUEST_TIMEOUT)
        if response.status_code == 404:
            return None
        response.raise_for_status()
    except requests.RequestException:
        return None

    return parse_verse_page(response.text, chapter, verse, version)
