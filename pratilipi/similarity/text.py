"""
Text similarity primitives.

Pure functions over free text. Callers lower-case before calling
edit_similarity; jaccard_similarity lower-cases on its own.
"""

import re
from typing import Set

from rapidfuzz.distance import Levenshtein

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]")

# Tokens this short are mostly articles and prepositions
MIN_TOKEN_LENGTH = 4


def edit_similarity(a: str, b: str) -> float:
    """Normalized Levenshtein similarity, 1 - distance / max(len(a), len(b))."""
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - Levenshtein.distance(a, b) / longest


def tokenize(text: str) -> Set[str]:
    """Whitespace tokens of at least MIN_TOKEN_LENGTH characters, lower-cased."""
    return {token for token in text.lower().split() if len(token) >= MIN_TOKEN_LENGTH}


def jaccard_similarity(a: str, b: str) -> float:
    """Token-set overlap, |A & B| / |A | B|. Zero when either side has no tokens."""
    tokens_a = tokenize(a)
    tokens_b = tokenize(b)
    if not tokens_a or not tokens_b:
        return 0.0
    return len(tokens_a & tokens_b) / len(tokens_a | tokens_b)


def shared_terms(a: str, b: str) -> Set[str]:
    return tokenize(a) & tokenize(b)


def normalize_name(name: str) -> str:
    """Lower-case and strip everything that is not a letter or digit."""
    return _NON_ALPHANUMERIC.sub("", name.lower())
