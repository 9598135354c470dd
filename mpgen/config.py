"""
Configuration for the memorable passphrase generator.

Raw options arrive as optional strings (from the CLI, the GUI, or a plain
mapping). build_config() validates them in one pass and returns an
immutable Config, or raises a ValidationError for the first bad field.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, fields
from typing import Mapping, Optional, Tuple

from .types import (
    EmptyString,
    InvalidNumber,
    PaddingType,
    RngType,
    WordTransformation,
)

logger = logging.getLogger(__name__)

# 0-9, used for the leading/trailing pseudo-words
DIGIT_ALPHABET = "0123456789"

# Default choices for both padding and separator characters.
SYMBOL_ALPHABET = "!@$%^&*-_+=:|~?/.;"

DEFAULT_COUNT = 1
DEFAULT_WORD_COUNT = 4
DEFAULT_WORD_MIN_LENGTH = 3
DEFAULT_WORD_MAX_LENGTH = 11
DEFAULT_DIGITS_BEFORE = 2
DEFAULT_DIGITS_AFTER = 2
DEFAULT_PADDING_LENGTH_FIXED = 2
DEFAULT_PADDING_LENGTH_ADAPTIVE = 42

# Inclusive bounds for every numeric option.
COUNT_RANGE = (1, 255)
WORD_COUNT_RANGE = (0, 32)
WORD_LENGTH_RANGE = (1, 255)
DIGITS_RANGE = (0, 255)
PADDING_LENGTH_RANGE = (0, 255)

_NUMBER_RE = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class Config:
    count: int
    word_count: int
    word_min_length: int
    word_max_length: int
    word_transformation: WordTransformation
    digits_before: int
    digits_after: int
    padding_type: PaddingType
    padding_length: int
    # Unique characters, sorted.
    padding_characters: Tuple[str, ...]
    separator_characters: Tuple[str, ...]
    rng: RngType = RngType.OS_RNG


@dataclass
class ConfigOptions:
    """
    Unvalidated options. None means "not given, use the default".
    """

    count: Optional[str] = None
    word_count: Optional[str] = None
    word_min_length: Optional[str] = None
    word_max_length: Optional[str] = None
    word_transformation: Optional[str] = None
    digits_before: Optional[str] = None
    digits_after: Optional[str] = None
    padding_type: Optional[str] = None
    padding_length: Optional[str] = None
    padding_characters: Optional[str] = None
    separator_characters: Optional[str] = None
    rng: Optional[str] = None

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Optional[str]]) -> "ConfigOptions":
        """
        Build options from a name -> raw string mapping.

        Keys may be kebab-case CLI names ("word-count", "separators") or
        field names ("word_count"). Unknown keys raise KeyError.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in mapping.items():
            name = _OPTION_ALIASES.get(key, key.replace("-", "_"))
            if name not in known:
                raise KeyError(f"unknown option {key!r}")
            kwargs[name] = value
        return cls(**kwargs)


_OPTION_ALIASES = {
    "padding-character": "padding_characters",
    "padding_character": "padding_characters",
    "separator": "separator_characters",
    "separators": "separator_characters",
    "separator-character": "separator_characters",
    "separator_character": "separator_characters",
}


# ---------- field validators ----------


def _validate_number(
    raw: Optional[str], minimum: int, maximum: int, default: int
) -> int:
    if raw is None:
        return default
    if not _NUMBER_RE.fullmatch(raw):
        raise InvalidNumber(raw, minimum, maximum)
    # int() refuses very long digit strings; anything this long is out of range
    digits = raw.lstrip("0") or "0"
    if len(digits) > len(str(maximum)):
        raise InvalidNumber(raw, minimum, maximum)
    value = int(digits)
    if not minimum <= value <= maximum:
        raise InvalidNumber(raw, minimum, maximum)
    return value


def _validate_enum(raw: Optional[str], kind):
    if raw is None:
        return kind.default()
    return kind.from_name(raw)


def _unique_chars(raw: Optional[str], field: str) -> Tuple[str, ...]:
    if raw is None:
        return tuple(sorted(set(SYMBOL_ALPHABET)))
    if raw == "":
        raise EmptyString(field)
    return tuple(sorted(set(raw)))


def default_padding_length(padding_type: PaddingType) -> int:
    if padding_type is PaddingType.FIXED:
        return DEFAULT_PADDING_LENGTH_FIXED
    if padding_type is PaddingType.ADAPTIVE:
        return DEFAULT_PADDING_LENGTH_ADAPTIVE
    return 0


def build_config(options: ConfigOptions | None = None) -> Config:
    """
    Validate raw options and return an immutable Config.

    Fields are resolved in order, so the first invalid one raises:

    - numbers must be plain decimal digits within the field's range;
    - enum names are matched case-insensitively;
    - character sets may not be empty and are deduplicated + sorted.

    word_max_length is checked against the resolved word_min_length, and
    the padding_length default follows the resolved padding_type.
    """
    opts = options or ConfigOptions()

    count = _validate_number(opts.count, *COUNT_RANGE, DEFAULT_COUNT)
    word_count = _validate_number(opts.word_count, *WORD_COUNT_RANGE, DEFAULT_WORD_COUNT)
    word_min_length = _validate_number(
        opts.word_min_length, *WORD_LENGTH_RANGE, DEFAULT_WORD_MIN_LENGTH
    )
    word_max_length = _validate_number(
        opts.word_max_length,
        word_min_length,
        WORD_LENGTH_RANGE[1],
        max(DEFAULT_WORD_MAX_LENGTH, word_min_length),
    )
    word_transformation = _validate_enum(opts.word_transformation, WordTransformation)
    digits_before = _validate_number(opts.digits_before, *DIGITS_RANGE, DEFAULT_DIGITS_BEFORE)
    digits_after = _validate_number(opts.digits_after, *DIGITS_RANGE, DEFAULT_DIGITS_AFTER)
    padding_type = _validate_enum(opts.padding_type, PaddingType)
    padding_length = _validate_number(
        opts.padding_length,
        *PADDING_LENGTH_RANGE,
        default_padding_length(padding_type),
    )
    padding_characters = _unique_chars(opts.padding_characters, "padding-characters")
    separator_characters = _unique_chars(opts.separator_characters, "separators")
    rng = _validate_enum(opts.rng, RngType)

    config = Config(
        count=count,
        word_count=word_count,
        word_min_length=word_min_length,
        word_max_length=word_max_length,
        word_transformation=word_transformation,
        digits_before=digits_before,
        digits_after=digits_after,
        padding_type=padding_type,
        padding_length=padding_length,
        padding_characters=padding_characters,
        separator_characters=separator_characters,
        rng=rng,
    )
    logger.debug("Resolved config: %s", config)
    return config


class ConfigBuilder:
    """
    Chainable front end for build_config():

        ConfigBuilder().count("3").word_count("5").build()
    """

    def __init__(self) -> None:
        self.options = ConfigOptions()

    def _set(self, name: str, value: Optional[str]) -> "ConfigBuilder":
        setattr(self.options, name, value)
        return self

    def count(self, value: Optional[str]) -> "ConfigBuilder":
        return self._set("count", value)

    def word_count(self, value: Optional[str]) -> "ConfigBuilder":
        return self._set("word_count", value)

    def word_min_length(self, value: Optional[str]) -> "ConfigBuilder":
        return self._set("word_min_length", value)

    def word_max_length(self, value: Optional[str]) -> "ConfigBuilder":
        return self._set("word_max_length", value)

    def word_transformation(self, value: Optional[str]) -> "ConfigBuilder":
        return self._set("word_transformation", value)

    def digits_before(self, value: Optional[str]) -> "ConfigBuilder":
        return self._set("digits_before", value)

    def digits_after(self, value: Optional[str]) -> "ConfigBuilder":
        return self._set("digits_after", value)

    def padding_type(self, value: Optional[str]) -> "ConfigBuilder":
        return self._set("padding_type", value)

    def padding_length(self, value: Optional[str]) -> "ConfigBuilder":
        return self._set("padding_length", value)

    def padding_characters(self, value: Optional[str]) -> "ConfigBuilder":
        return self._set("padding_characters", value)

    def separator_characters(self, value: Optional[str]) -> "ConfigBuilder":
        return self._set("separator_characters", value)

    def rng(self, value: Optional[str]) -> "ConfigBuilder":
        return self._set("rng", value)

    def build(self) -> Config:
        return build_config(self.options)


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = build_config()
