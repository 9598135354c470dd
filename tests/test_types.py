import pytest

from mpgen.types import (
    EmptyString,
    InvalidEnum,
    InvalidNumber,
    PaddingType,
    RngType,
    ValidationError,
    WordTransformation,
)

ALL_KINDS = [WordTransformation, PaddingType, RngType]


def test_rng_type_names_in_declaration_order():
    assert RngType.choices()[0] == ("os-rng", RngType.OS_RNG)
    assert RngType.choices()[1] == ("csprng", RngType.CSPRNG)


def test_defaults():
    assert WordTransformation.default() is WordTransformation.ALTERNATING_LOWER_UPPER
    assert PaddingType.default() is PaddingType.FIXED
    assert RngType.default() is RngType.OS_RNG


def test_word_transformation_names():
    assert WordTransformation.names() == [
        "none",
        "lower",
        "upper",
        "capitalize-first",
        "capitalize-last",
        "capitalize-not-first",
        "alternating-lower-upper",
        "alternating-upper-lower",
        "random-upper-lower",
    ]


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_canonical_names_round_trip(kind):
    for name, member in kind.choices():
        assert kind.from_name(name) is member
        assert member.canonical == name
        assert str(member) == name


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_canonical_names_are_unique(kind):
    names = kind.names()
    assert len(names) == len(set(names))


def test_lookup_is_case_insensitive():
    assert PaddingType.from_name("ADAPTIVE") is PaddingType.ADAPTIVE
    assert WordTransformation.from_name("Capitalize-First") is WordTransformation.CAPITALIZE_FIRST
    assert RngType.from_name("OS-RNG") is RngType.OS_RNG


def test_lookup_failure_lists_choices():
    with pytest.raises(InvalidEnum) as excinfo:
        RngType.from_name("not-a-member")
    message = str(excinfo.value)
    assert "`not-a-member` is not a valid rng type" in message
    assert message.endswith("Possible choices: os-rng, csprng, quantum")


def test_errors_are_validation_errors():
    assert isinstance(InvalidNumber("x", 0, 1), ValidationError)
    assert isinstance(InvalidEnum("bad"), ValidationError)
    assert isinstance(EmptyString("separators"), ValidationError)


def test_invalid_number_message_states_range_and_value():
    err = InvalidNumber("300", 1, 255)
    assert (err.value, err.minimum, err.maximum) == ("300", 1, 255)
    assert str(err) == "`300` must be a whole number between 1 and 255"


def test_descriptions_are_available_for_help_text():
    assert WordTransformation.UPPER.description == "CORRECT HORSE BATTERY STAPLE"
    assert PaddingType.NONE.description == ""
    assert RngType.OS_RNG.description
