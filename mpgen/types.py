"""
Shared enums and errors for the passphrase generator.

Every user-selectable option kind is a small closed enum whose values are
the canonical kebab-case names used on the command line and in the GUI:

- WordTransformation: how the chosen words are cased.
- PaddingType: how padding characters are applied.
- RngType: which random source backs the generator.
"""

from __future__ import annotations

import enum
import re
from typing import List, Tuple


# ---------- errors ----------


class ValidationError(ValueError):
    """
    Raised when raw user input cannot be turned into a valid Config.

    str(exc) is the message shown to the user.
    """


class InvalidNumber(ValidationError):
    def __init__(self, value: str, minimum: int, maximum: int) -> None:
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"`{value}` must be a whole number between {minimum} and {maximum}"
        )


class InvalidEnum(ValidationError):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class EmptyString(ValidationError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"`{field}` must not be an empty string")


# ---------- enum registry ----------


def _kind_label(cls: type) -> str:
    # WordTransformation -> "word transformation"
    return re.sub(r"(?<!^)(?=[A-Z])", " ", cls.__name__).lower()


class StrEnum(enum.Enum):
    """
    Base for enums whose values are canonical kebab-case names.

    Subclasses list their members in display order and override default().
    """

    @classmethod
    def default(cls):
        raise NotImplementedError

    @classmethod
    def choices(cls) -> List[Tuple[str, "StrEnum"]]:
        """
        (canonical name, member) pairs in declaration order.
        """
        return [(member.value, member) for member in cls]

    @classmethod
    def names(cls) -> List[str]:
        return [member.value for member in cls]

    @classmethod
    def from_name(cls, raw: str):
        """
        Case-insensitive lookup of a canonical name.

        Raises InvalidEnum listing every valid choice when nothing matches.
        """
        wanted = raw.lower()
        for name, member in cls.choices():
            if name == wanted:
                return member
        valid = ", ".join(cls.names())
        raise InvalidEnum(
            f"`{raw}` is not a valid {_kind_label(cls)}. Possible choices: {valid}"
        )

    @property
    def canonical(self) -> str:
        return self.value

    @property
    def description(self) -> str:
        return _DESCRIPTIONS.get(self, "")

    def __str__(self) -> str:
        return self.value


@enum.unique
class WordTransformation(StrEnum):
    NONE = "none"
    LOWER = "lower"
    UPPER = "upper"
    CAPITALIZE_FIRST = "capitalize-first"
    CAPITALIZE_LAST = "capitalize-last"
    CAPITALIZE_NOT_FIRST = "capitalize-not-first"
    ALTERNATING_LOWER_UPPER = "alternating-lower-upper"
    ALTERNATING_UPPER_LOWER = "alternating-upper-lower"
    RANDOM_UPPER_LOWER = "random-upper-lower"

    @classmethod
    def default(cls) -> "WordTransformation":
        return cls.ALTERNATING_LOWER_UPPER


@enum.unique
class PaddingType(StrEnum):
    NONE = "none"
    FIXED = "fixed"
    ADAPTIVE = "adaptive"

    @classmethod
    def default(cls) -> "PaddingType":
        return cls.FIXED


@enum.unique
class RngType(StrEnum):
    OS_RNG = "os-rng"
    CSPRNG = "csprng"
    QUANTUM = "quantum"

    @classmethod
    def default(cls) -> "RngType":
        return cls.OS_RNG


_DESCRIPTIONS = {
    WordTransformation.NONE: "",
    WordTransformation.LOWER: "correct horse battery staple",
    WordTransformation.UPPER: "CORRECT HORSE BATTERY STAPLE",
    WordTransformation.CAPITALIZE_FIRST: "Correct Horse Battery Staple",
    WordTransformation.CAPITALIZE_LAST: "correcT horsE batterY staplE",
    WordTransformation.CAPITALIZE_NOT_FIRST: "cORRECT hORSE bATTERY sTAPLE",
    WordTransformation.ALTERNATING_LOWER_UPPER: "correct HORSE battery STAPLE",
    WordTransformation.ALTERNATING_UPPER_LOWER: "CORRECT horse BATTERY staple",
    WordTransformation.RANDOM_UPPER_LOWER: "correct HORSE battery staple",
    PaddingType.NONE: "",
    PaddingType.FIXED: "add padding-length padding-characters to front and back",
    PaddingType.ADAPTIVE: (
        "if unpadded password is less than padding-length, "
        "append padding-characters to meet length"
    ),
    RngType.OS_RNG: "the system's native secure RNG",
    RngType.CSPRNG: "a reasonably secure userspace RNG",
    RngType.QUANTUM: "a userspace RNG seeded from a simulated quantum circuit",
}
