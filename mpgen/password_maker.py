"""
Password assembly engine.

A PasswordMaker holds a Config, a random source and a word list. Each
password is built in the same fixed order so a seeded random source always
reproduces the same output:

1. filter the word list by length
2. choose words (with replacement)
3. transform their case
4. draw the leading / trailing digit groups
5. draw one separator
6. join the non-empty parts
7. draw one padding character and pad
"""

from __future__ import annotations

import logging
import random
from typing import List, Mapping, Optional, Sequence, Tuple, Union

from .config import DEFAULT_CONFIG, DIGIT_ALPHABET, Config, ConfigOptions, build_config
from .rng import make_rng
from .types import PaddingType
from .word_transformer import transform
from .wordlist import load_default_wordlist

logger = logging.getLogger(__name__)


class PasswordMaker:
    """
    Stateful generator. The config may be swapped between calls by
    assigning to `config`; the random source persists until reseed().

    Never raises for any Config, including hand-built ones with empty
    character sets: missing pieces are simply left out.
    """

    def __init__(
        self,
        config: Config | None = None,
        rng: random.Random | None = None,
        wordlist: Sequence[str] | None = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self.rng = rng if rng is not None else make_rng(self.config.rng)
        self.wordlist: List[str] = (
            list(wordlist) if wordlist is not None else load_default_wordlist()
        )

    def reseed(self, seed: int) -> None:
        """
        Replace the random source with a fresh seeded one.
        """
        self.rng = random.Random(seed)

    # --- steps ---

    def _filter_wordlist(self) -> List[int]:
        """
        Indices of words whose length lies within the configured bounds.
        """
        min_len = self.config.word_min_length
        max_len = self.config.word_max_length
        indices = [
            i for i, word in enumerate(self.wordlist) if min_len <= len(word) <= max_len
        ]
        logger.debug(
            "%d of %d words between %d and %d characters",
            len(indices),
            len(self.wordlist),
            min_len,
            max_len,
        )
        if not indices and self.config.word_count > 0:
            logger.warning(
                "No words between %d and %d characters; passwords will contain no words.",
                min_len,
                max_len,
            )
        return indices

    def _choose_words(self, indices: Sequence[int]) -> List[str]:
        if not indices:
            return []
        return [
            self.wordlist[self.rng.choice(indices)]
            for _ in range(self.config.word_count)
        ]

    def _choose_n(self, n: int, collection: Sequence[str]) -> Optional[str]:
        if n == 0 or not collection:
            return None
        return "".join(self.rng.choice(collection) for _ in range(n))

    def _create_pseudo_words(self) -> Tuple[Optional[str], Optional[str]]:
        before = self._choose_n(self.config.digits_before, DIGIT_ALPHABET)
        after = self._choose_n(self.config.digits_after, DIGIT_ALPHABET)
        return before, after

    def _choose_separator(self) -> str:
        separators = self.config.separator_characters
        if not separators:
            return ""
        return self.rng.choice(separators)

    def _create_padding(self, password: str) -> Tuple[str, str]:
        """
        Return (before, after) padding for the joined `password`.

        One character is drawn and reused on both sides.
        """
        characters = self.config.padding_characters
        if not characters:
            return "", ""
        character = self.rng.choice(characters)

        length = self.config.padding_length
        padding_type = self.config.padding_type
        if padding_type is PaddingType.FIXED:
            before_len, after_len = length, length
        elif padding_type is PaddingType.ADAPTIVE:
            before_len, after_len = 0, max(0, length - len(password))
        else:
            before_len, after_len = 0, 0
        return character * before_len, character * after_len

    def _assemble(self, indices: Sequence[int]) -> str:
        words = self._choose_words(indices)
        words = transform(self.config.word_transformation, words, self.rng)
        front_digits, back_digits = self._create_pseudo_words()
        separator = self._choose_separator()

        parts = [front_digits, *words, back_digits]
        unpadded = separator.join(part for part in parts if part)

        before, after = self._create_padding(unpadded)
        return f"{before}{unpadded}{after}"

    # --- public API ---

    def create_password(self) -> str:
        return self._assemble(self._filter_wordlist())

    def create_passwords(self) -> List[str]:
        """
        Make `config.count` passwords.
        """
        indices = self._filter_wordlist()
        return [self._assemble(indices) for _ in range(self.config.count)]


def generate_passwords(
    options: Union[ConfigOptions, Mapping[str, Optional[str]], None] = None,
    *,
    seed: Optional[int] = None,
    wordlist: Sequence[str] | None = None,
) -> List[str]:
    """
    High-level function:
    - Validate raw options into a Config.
    - Pick the random source (seeded if `seed` is given).
    - Generate config.count passwords.

    Raises ValidationError before anything is generated.
    """
    if options is not None and not isinstance(options, ConfigOptions):
        options = ConfigOptions.from_mapping(options)
    config = build_config(options)
    maker = PasswordMaker(config, make_rng(config.rng, seed), wordlist)
    return maker.create_passwords()
