import dataclasses
import random
import re

import pytest

from conftest import WORDS, ScriptedRandom, config_from
from mpgen.config import DEFAULT_CONFIG, SYMBOL_ALPHABET
from mpgen.password_maker import PasswordMaker, generate_passwords
from mpgen.types import PaddingType, ValidationError


def test_golden_password_with_scripted_draws(wordlist):
    # words: modern, world, deep, labor; digits 42 / 07;
    # separator index 6 of the sorted symbols is "-"; padding index 0 is "!"
    rng = ScriptedRandom(picks=[0, 3, 6, 1, 4, 2, 0, 7, 6, 0])
    maker = PasswordMaker(DEFAULT_CONFIG, rng, wordlist)
    assert maker.create_password() == "!!42-modern-WORLD-deep-LABOR-07!!"
    assert rng.choice_calls == 10


def test_golden_password_with_seed_one(wordlist):
    maker = PasswordMaker(DEFAULT_CONFIG, random.Random(1), wordlist)
    assert maker.create_password() == "&&77-hello-LABOR-water-LABOR-76&&"


def test_seeded_makers_are_deterministic(wordlist):
    config = config_from(count=10, word_transformation="random-upper-lower")
    first = PasswordMaker(config, random.Random(1), wordlist).create_passwords()
    second = PasswordMaker(config, random.Random(1), wordlist).create_passwords()
    assert first == second


def test_default_password_shape(make_maker):
    password = make_maker(seed=1).create_password()
    symbols = re.escape(SYMBOL_ALPHABET)
    pattern = (
        rf"([{symbols}])\1"
        rf"[0-9]{{2}}([{symbols}])[a-z]+\2[A-Z]+\2[a-z]+\2[A-Z]+\2[0-9]{{2}}"
        rf"\1\1"
    )
    assert re.fullmatch(pattern, password), password


@pytest.mark.parametrize("count", [1, 2, 17, 255])
def test_count_passwords_are_made(make_maker, count):
    assert len(make_maker(count=count).create_passwords()) == count


def test_words_are_chosen_with_replacement(wordlist):
    config = config_from(
        word_count=4, digits_before=0, digits_after=0, padding_type="none",
        separator_characters="-", word_transformation="none",
    )
    rng = ScriptedRandom(picks=[2, 2, 2, 2, 0, 0])
    maker = PasswordMaker(config, rng, wordlist)
    assert maker.create_password() == "hello-hello-hello-hello"


def test_words_respect_length_bounds(make_maker):
    maker = make_maker(
        count=50, word_min_length=4, word_max_length=4, digits_before=0,
        digits_after=0, padding_type="none", separator_characters="-",
        word_transformation="lower",
    )
    for password in maker.create_passwords():
        for word in password.split("-"):
            assert word in ("fire", "deep")


def test_filter_wordlist_indices(make_maker):
    maker = make_maker(word_min_length=4, word_max_length=4)
    assert maker._filter_wordlist() == [5, 6]


def test_no_candidate_words_gives_no_words(make_maker, caplog):
    maker = make_maker(word_min_length=20, separator_characters="-", padding_type="none")
    with caplog.at_level("WARNING"):
        password = maker.create_password()
    assert re.fullmatch(r"[0-9]{2}-[0-9]{2}", password)
    assert "No words between 20 and 20 characters" in caplog.text


def test_zero_words_has_no_lone_separator(make_maker):
    maker = make_maker(count=20, word_count=0, separator_characters="-", padding_type="none")
    for password in maker.create_passwords():
        assert re.fullmatch(r"[0-9]{2}-[0-9]{2}", password)


def test_zero_words_and_zero_digits_is_only_padding(make_maker):
    maker = make_maker(word_count=0, digits_before=0, digits_after=0, padding_characters="#")
    assert maker.create_password() == "####"


def test_no_digits_no_separator_artifacts(make_maker):
    maker = make_maker(
        count=20, digits_before=0, digits_after=0, separator_characters="-",
        padding_type="none",
    )
    for password in maker.create_passwords():
        assert not password.startswith("-")
        assert not password.endswith("-")
        assert "--" not in password
        assert len(password.split("-")) == 4


def test_fixed_padding_uses_one_character_on_both_sides(make_maker):
    maker = make_maker(count=50, padding_type="fixed", padding_length=3)
    for password in maker.create_passwords():
        character = password[0]
        assert character in SYMBOL_ALPHABET
        assert password[:3] == character * 3
        assert password[-3:] == character * 3


def test_adaptive_padding_pads_to_length(make_maker):
    maker = make_maker(
        count=50, padding_type="adaptive", padding_length=40, padding_characters="#",
    )
    for password in maker.create_passwords():
        assert len(password) == 40
        assert not password.startswith("#")


def test_adaptive_padding_never_shortens(make_maker):
    maker = make_maker(
        seed=5, count=20, padding_type="adaptive", padding_length=5,
        padding_characters="#",
    )
    for password in maker.create_passwords():
        assert len(password) >= 5
        assert "#" not in password


def test_no_padding(make_maker):
    maker = make_maker(count=20, padding_type="none", padding_length=9, padding_characters="#")
    for password in maker.create_passwords():
        assert "#" not in password


def test_empty_sets_set_after_validation_degrade_gracefully(wordlist):
    config = dataclasses.replace(
        config_from(word_count=2, digits_before=1, digits_after=0),
        separator_characters=(),
        padding_characters=(),
    )
    maker = PasswordMaker(config, random.Random(4), wordlist)
    password = maker.create_password()
    assert re.fullmatch(r"[0-9][a-z]+[A-Z]+", password)


def test_config_can_be_swapped_between_calls(make_maker):
    maker = make_maker(word_count=1, digits_before=0, digits_after=0, padding_type="none")
    assert maker.create_password() in WORDS
    maker.config = config_from(
        word_count=0, digits_before=3, digits_after=0, padding_type="none",
    )
    assert re.fullmatch(r"[0-9]{3}", maker.create_password())


def test_rng_persists_until_reseeded(make_maker):
    maker = make_maker(seed=9)
    first = maker.create_password()
    second = maker.create_password()
    maker.reseed(9)
    assert maker.create_password() == first
    assert maker.create_password() == second


def test_default_wordlist_is_used_when_none_given():
    maker = PasswordMaker(DEFAULT_CONFIG, random.Random(2))
    assert len(maker.wordlist) > 100


def test_generate_passwords_with_mapping(wordlist):
    passwords = generate_passwords(
        {"count": "3", "word-count": "2", "padding-type": "none", "separators": "."},
        seed=11,
        wordlist=wordlist,
    )
    assert len(passwords) == 3
    again = generate_passwords(
        {"count": "3", "word-count": "2", "padding-type": "none", "separators": "."},
        seed=11,
        wordlist=wordlist,
    )
    assert passwords == again


def test_generate_passwords_rejects_invalid_options():
    with pytest.raises(ValidationError):
        generate_passwords({"count": "0"})


def test_padding_type_none_has_zero_default_length(make_maker):
    maker = make_maker(padding_type="none")
    assert maker.config.padding_type is PaddingType.NONE
    assert maker.config.padding_length == 0
