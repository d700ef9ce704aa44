"""Turn morphology tags into readable grammatical explanations.

Two tag conventions appear in the interlinear data:

    Readable:  "Noun - Dative Feminine Singular"
               "Verb - Imperfect Active Indicative - 3rd Person Singular"
               "Verb - Hiphil - Imperfect - 3rd masculine singular"
    Compact:   "N-DSF", "V-AAI-3S", "V-PAP-NSM", "V-2AAI-3S", "C"

Compact codes are positional. The leading letter is the part of speech:
    N noun, V verb, A adjective, P pronoun, D article, C conjunction, R preposition
Nominal groups are case/number/gender ("DSF"). Verb groups are
tense/voice/mood ("AAI"), then person/number ("3S") or, for participles,
case/number/gender ("NSM").

Anything that cannot be read becomes an "Unknown" result echoing the input.
"""

import re
from dataclasses import dataclass, field
from typing import Optional


COMPACT_RE = re.compile(r"^[A-Z0-9]+(?:-[A-Z0-9]+)*$")
PERSON_RE = re.compile(r"\b(1st|2nd|3rd)\b")


@dataclass(frozen=True)
class GrammaticalDetail:
    term: str  # "Case", "Tense", ...
    value: str  # "Dative", "Aorist", ...
    explanation: str


@dataclass
class ParsedMorphology:
    part_of_speech: str
    description: str  # one-line summary
    details: list[GrammaticalDetail] = field(default_factory=list)
    category: str = "unknown"  # icon/category tag for grouping
    color: str = "gray"

    def detail(self, term: str) -> Optional[str]:
        """Value of the first detail with this term, if any."""
        for d in self.details:
            if d.term == term:
                return d.value
        return None


# =============================================================================
# Vocabulary
# =============================================================================

# (value, explanation) keyed by compact letter
CASES = {
    "N": ("Nominative", "Subject of the sentence or predicate nominative"),
    "G": ("Genitive", "Possession or description (of, from)"),
    "D": ("Dative", "Indirect object (to, for, by)"),
    "A": ("Accusative", "Direct object of the verb"),
    "V": ("Vocative", "Direct address (O Lord, etc.)"),
}

GENDERS = {
    "M": ("Masculine", "Grammatical masculine gender"),
    "F": ("Feminine", "Grammatical feminine gender"),
    "N": ("Neuter", "Grammatical neuter gender"),
}

NUMBERS = {
    "S": ("Singular", "One item"),
    "P": ("Plural", "Multiple items"),
}

VERB_NUMBERS = {
    "S": ("Singular", "One person"),
    "P": ("Plural", "Multiple people"),
}

TENSES = {
    "P": ("Present", "Action happening now or ongoing"),
    "I": ("Imperfect", "Ongoing action in the past"),
    "F": ("Future", "Action that will happen"),
    "A": ("Aorist", "Simple past action, viewed as a whole"),
    "X": ("Perfect", "Completed action with present results"),
    "Y": ("Pluperfect", "Completed before another past action"),
}

VOICES = {
    "A": ("Active", "Subject performs the action"),
    "M": ("Middle", "Subject acts for own benefit"),
    "P": ("Passive", "Subject receives the action"),
    "E": ("Middle or Passive", "Middle or passive sense"),
    "D": ("Middle", "Middle deponent: middle form, active meaning"),
    "O": ("Passive", "Passive deponent: passive form, active meaning"),
    "N": ("Middle or Passive", "Middle or passive deponent"),
}

MOODS = {
    "I": ("Indicative", "Statement of fact"),
    "M": ("Imperative", "Command or request"),
    "S": ("Subjunctive", "Possibility or potential"),
    "O": ("Optative", "Wish or remote possibility"),
    "N": ("Infinitive", "Verbal noun (to do)"),
    "P": ("Participle", "Verbal adjective (-ing)"),
}

PERSONS = {
    "1": ("1st", "I, we"),
    "2": ("2nd", "You"),
    "3": ("3rd", "He, she, it, they"),
}

# Hebrew verb stems (binyanim)
STEMS = {
    "hithpael": "Reflexive or reciprocal action",
    "hithpolel": "Reflexive of the polel",
    "niphal": "Simple passive or reflexive",
    "hophal": "Causative passive",
    "hiphil": "Causative active",
    "polel": "Intensive of hollow verbs",
    "pual": "Intensive passive",
    "piel": "Intensive or factitive active",
    "qal": "Simple active",
}

STATES = {
    "construct": ("Construct", "Bound to the following word (of)"),
    "absolute": ("Absolute", "Free-standing form"),
}

# Readable keywords in match order; first hit per term wins.
READABLE_CASES = ["nominative", "genitive", "dative", "accusative", "vocative"]
READABLE_GENDERS = ["masculine", "feminine", "neuter"]
READABLE_NUMBERS = ["singular", "plural"]
READABLE_TENSES = ["present", "aorist", "imperfect", "pluperfect", "perfect", "future"]
READABLE_VOICES = ["active", "passive", "middle"]
READABLE_MOODS = ["indicative", "imperative", "subjunctive", "optative", "infinitive", "participle"]


def _by_value(table: dict) -> dict:
    by_name = {}
    for value, explanation in table.values():
        by_name.setdefault(value.lower(), (value, explanation))
    return by_name


CASES_BY_NAME = _by_value(CASES)
GENDERS_BY_NAME = _by_value(GENDERS)
NUMBERS_BY_NAME = _by_value(NUMBERS)
VERB_NUMBERS_BY_NAME = _by_value(VERB_NUMBERS)
TENSES_BY_NAME = _by_value(TENSES)
VOICES_BY_NAME = _by_value(VOICES)
MOODS_BY_NAME = _by_value(MOODS)
PERSONS_BY_NAME = {value: (value, explanation) for value, explanation in PERSONS.values()}


# Part of speech -> (label, category, color, fallback description)
PARTS_OF_SPEECH = {
    "noun": ("Noun", "noun", "green", "A noun"),
    "verb": ("Verb", "verb", "blue", "A verb"),
    "adjective": ("Adjective", "adjective", "orange", "An adjective (describing word)"),
    "pronoun": (
        "Pronoun", "pronoun", "purple",
        "A word that substitutes for a noun (he, she, it, they, etc.)",
    ),
    "article": ("Article", "article", "gray", "The definite article (the)"),
    "preposition": (
        "Preposition", "preposition", "cyan",
        "A word expressing spatial or temporal relations (in, on, by, with)",
    ),
    "conjunction": ("Conjunction", "conjunction", "indigo", "A connecting word (and, but, or, for)"),
}

# Matched as whole words, so "Personal Pronoun" is not a noun and "Adverb" is not a verb.
READABLE_POS_ORDER = ["pronoun", "noun", "verb", "adjective", "article", "preposition", "conjunction"]

COMPACT_POS = {
    "N": "noun",
    "V": "verb",
    "A": "adjective",
    "P": "pronoun",
    "D": "article",
    "C": "conjunction",
    "R": "preposition",
}

NOMINALS = {"noun", "adjective"}


# =============================================================================
# Descriptions
# =============================================================================

def _first(details: list[GrammaticalDetail], term: str) -> Optional[GrammaticalDetail]:
    return next((d for d in details if d.term == term), None)


def _nominal_description(label: str, fallback: str, details: list[GrammaticalDetail]) -> str:
    parts = []
    gender = _first(details, "Gender")
    if gender:
        parts.append(gender.value.lower())
    number = _first(details, "Number")
    if number:
        parts.append(number.value.lower())
    case = _first(details, "Case")
    if case:
        parts.append(f"in the {case.value.lower()} case")

    if not parts:
        return fallback
    return f"{label}: " + ", ".join(parts)


def _verb_description(details: list[GrammaticalDetail]) -> str:
    parts = []
    for term in ("Tense", "Voice", "Mood"):
        d = _first(details, term)
        if d:
            parts.append(d.value)

    person = _first(details, "Person")
    number = _first(details, "Number")
    if person and number:
        parts.append(f"{person.value} person {number.value.lower()}")

    if not parts:
        return "A verb"
    return "Verb: " + ", ".join(parts)


def _build(pos: str, details: list[GrammaticalDetail]) -> ParsedMorphology:
    label, category, color, fallback = PARTS_OF_SPEECH[pos]
    if pos == "verb":
        description = _verb_description(details)
    elif pos in NOMINALS:
        description = _nominal_description(label, fallback, details)
    else:
        description = fallback
        details = []
    return ParsedMorphology(
        part_of_speech=label,
        description=description,
        details=details,
        category=category,
        color=color,
    )


def unknown(raw: Optional[str]) -> ParsedMorphology:
    return ParsedMorphology(
        part_of_speech="Unknown",
        description=raw or "",
        details=[],
        category="unknown",
        color="gray",
    )


# =============================================================================
# Readable form
# =============================================================================

def _match_term(text: str, keywords: list[str], table: dict, term: str) -> Optional[GrammaticalDetail]:
    for keyword in keywords:
        if re.search(rf"\b{keyword}\b", text):
            value, explanation = table[keyword]
            return GrammaticalDetail(term, value, explanation)
    return None


def _readable_nominal_details(text: str) -> list[GrammaticalDetail]:
    details = []
    for keywords, table, term in (
        (READABLE_CASES, CASES_BY_NAME, "Case"),
        (READABLE_GENDERS, GENDERS_BY_NAME, "Gender"),
        (READABLE_NUMBERS, NUMBERS_BY_NAME, "Number"),
        (list(STATES), STATES, "State"),
    ):
        detail = _match_term(text, keywords, table, term)
        if detail:
            details.append(detail)
    return details


def _readable_verb_details(text: str) -> list[GrammaticalDetail]:
    details = []
    for stem, explanation in STEMS.items():
        if re.search(rf"\b{stem}\b", text):
            details.append(GrammaticalDetail("Stem", stem.capitalize(), explanation))
            break

    for keywords, table, term in (
        (READABLE_TENSES, TENSES_BY_NAME, "Tense"),
        (READABLE_VOICES, VOICES_BY_NAME, "Voice"),
        (READABLE_MOODS, MOODS_BY_NAME, "Mood"),
    ):
        detail = _match_term(text, keywords, table, term)
        if detail:
            details.append(detail)

    m = PERSON_RE.search(text)
    if m:
        value, explanation = PERSONS_BY_NAME[m.group(1)]
        details.append(GrammaticalDetail("Person", value, explanation))

    detail = _match_term(text, READABLE_NUMBERS, VERB_NUMBERS_BY_NAME, "Number")
    if detail:
        details.append(detail)
    return details


def parse_readable(morphology: str) -> ParsedMorphology:
    """Parse "Noun - Dative Feminine Singular" style tags."""
    segments = [s.strip() for s in morphology.split("-")]
    head = segments[0].lower()
    rest = " ".join(segments[1:]).lower()

    pos = next((p for p in READABLE_POS_ORDER if re.search(rf"\b{p}\b", head)), None)
    if pos is None:
        return unknown(morphology)

    if pos == "verb":
        details = _readable_verb_details(rest)
    elif pos in NOMINALS:
        details = _readable_nominal_details(rest)
    else:
        details = []
    return _build(pos, details)


# =============================================================================
# Compact form
# =============================================================================

def _decode(code: str, table: dict, term: str) -> Optional[GrammaticalDetail]:
    entry = table.get(code)
    if entry is None:
        return None
    value, explanation = entry
    return GrammaticalDetail(term, value, explanation)


def _case_number_gender(group: str) -> list[GrammaticalDetail]:
    if len(group) < 3:
        return []
    decoded = [
        _decode(group[0], CASES, "Case"),
        _decode(group[1], NUMBERS, "Number"),
        _decode(group[2], GENDERS, "Gender"),
    ]
    return [d for d in decoded if d]


def _verb_details(groups: list[str]) -> list[GrammaticalDetail]:
    details = []
    mood = None
    if groups:
        # "2AAI" marks a second aorist; the digit carries no decoded meaning
        tvm = groups[0].lstrip("0123456789")
        if len(tvm) >= 3:
            mood = _decode(tvm[2], MOODS, "Mood")
            decoded = [
                _decode(tvm[0], TENSES, "Tense"),
                _decode(tvm[1], VOICES, "Voice"),
                mood,
            ]
            details.extend(d for d in decoded if d)

    if len(groups) > 1:
        group = groups[1]
        if mood is not None and mood.value == "Participle" and len(group) >= 3:
            details.extend(_case_number_gender(group))
        elif len(group) >= 2:
            decoded = [
                _decode(group[0], PERSONS, "Person"),
                _decode(group[1], VERB_NUMBERS, "Number"),
            ]
            details.extend(d for d in decoded if d)
    return details


def parse_compact(morphology: str) -> ParsedMorphology:
    """Parse positional codes such as "V-AAI-3S" or "N-DSF"."""
    parts = morphology.strip().split("-")
    pos = COMPACT_POS.get(parts[0][:1])
    if pos is None:
        return unknown(morphology)

    groups = parts[1:]
    if pos == "verb":
        details = _verb_details(groups)
    elif pos in NOMINALS and groups:
        details = _case_number_gender(groups[0])
    else:
        details = []
    return _build(pos, details)


# =============================================================================
# Public API
# =============================================================================

def parse_morphology(morphology: Optional[str]) -> ParsedMorphology:
    """Parse a morphology tag in either convention. Never raises."""
    if not morphology or not morphology.strip():
        return unknown(morphology)

    if COMPACT_RE.match(morphology.strip()):
        return parse_compact(morphology)
    return parse_readable(morphology)
