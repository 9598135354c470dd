"""
Word transformations: the different ways chosen words can be cased.

Every function takes a list of words and returns a new list of the same
length and order. Case mapping is ASCII-only, so non-ASCII characters pass
through untouched; indexing is by character, never by byte.
"""

from __future__ import annotations

import random
import string
from typing import List

from .types import WordTransformation

_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _upper(word: str) -> str:
    return word.translate(_TO_UPPER)


def _lower(word: str) -> str:
    return word.translate(_TO_LOWER)


def _capitalize_first_char(word: str) -> str:
    # foo -> Foo
    return _upper(word[:1]) + word[1:]


def _capitalize_last_char(word: str) -> str:
    # foo -> foO
    return word[:-1] + _upper(word[-1:])


def _capitalize_not_first_char(word: str) -> str:
    # foo -> fOO
    if len(word) <= 1:
        return word
    return word[0] + _upper(word[1:])


def none(words: List[str]) -> List[str]:
    return list(words)


def lower(words: List[str]) -> List[str]:
    """correct horse battery staple"""
    return [_lower(word) for word in words]


def upper(words: List[str]) -> List[str]:
    """CORRECT HORSE BATTERY STAPLE"""
    return [_upper(word) for word in words]


def capitalize_first(words: List[str]) -> List[str]:
    """Correct Horse Battery Staple"""
    return [_capitalize_first_char(word) for word in words]


def capitalize_last(words: List[str]) -> List[str]:
    """correcT horsE batterY staplE"""
    return [_capitalize_last_char(word) for word in words]


def capitalize_not_first(words: List[str]) -> List[str]:
    """cORRECT hORSE bATTERY sTAPLE"""
    return [_capitalize_not_first_char(word) for word in words]


def alternating_lower_upper(words: List[str]) -> List[str]:
    """correct HORSE battery STAPLE"""
    return [_lower(w) if i % 2 == 0 else _upper(w) for i, w in enumerate(words)]


def alternating_upper_lower(words: List[str]) -> List[str]:
    """CORRECT horse BATTERY staple"""
    return [_upper(w) if i % 2 == 0 else _lower(w) for i, w in enumerate(words)]


def random_upper_lower(rng: random.Random, words: List[str]) -> List[str]:
    """
    correct HORSE battery staple

    Draws exactly one coin flip per word, in order, so seeded output is
    reproducible.
    """
    result: List[str] = []
    for word in words:
        if rng.random() < 0.5:
            result.append(_upper(word))
        else:
            result.append(_lower(word))
    return result


_TRANSFORMERS = {
    WordTransformation.NONE: none,
    WordTransformation.LOWER: lower,
    WordTransformation.UPPER: upper,
    WordTransformation.CAPITALIZE_FIRST: capitalize_first,
    WordTransformation.CAPITALIZE_LAST: capitalize_last,
    WordTransformation.CAPITALIZE_NOT_FIRST: capitalize_not_first,
    WordTransformation.ALTERNATING_LOWER_UPPER: alternating_lower_upper,
    WordTransformation.ALTERNATING_UPPER_LOWER: alternating_upper_lower,
}


def transform(
    kind: WordTransformation, words: List[str], rng: random.Random
) -> List[str]:
    """
    Apply the transformation `kind` to `words`.

    Only RANDOM_UPPER_LOWER consumes randomness from `rng`.
    """
    if kind is WordTransformation.RANDOM_UPPER_LOWER:
        return random_upper_lower(rng, words)
    return _TRANSFORMERS[kind](words)
