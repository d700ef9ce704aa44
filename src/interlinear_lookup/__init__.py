"""
Interlinear Lookup - resolves a text selection in a verse to its original-language word.
"""

from .models import Word, Verse, SelectionRange
from .resolver import find_word, resolve, Resolution, STRATEGIES
from .morphology import parse_morphology, ParsedMorphology, GrammaticalDetail
from .normalizer import normalize
from .tokenizer import tokenize, token_index_at
from .store import VerseStore
from .seeder import seed_book, seed_directory, SeedReport
from .lexicon import Lexicon, LexiconEntry
from .debounce import SelectionDebouncer

__all__ = [
    "Word",
    "Verse",
    "SelectionRange",
    "find_word",
    "resolve",
    "Resolution",
    "STRATEGIES",
    "parse_morphology",
    "ParsedMorphology",
    "GrammaticalDetail",
    "normalize",
    "tokenize",
    "token_index_at",
    "VerseStore",
    "seed_book",
    "seed_directory",
    "SeedReport",
    "Lexicon",
    "LexiconEntry",
    "SelectionDebouncer",
]

__version__ = "0.1.0"
