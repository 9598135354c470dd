import pytest

from mpgen.wordlist import WordlistError, load_default_wordlist, load_wordlist, parse_wordlist


def test_parse_plain_lines_keeps_order_and_duplicates():
    assert parse_wordlist(["pie\n", "ice\n", "pie\n"]) == ["pie", "ice", "pie"]


def test_parse_diceware_lines():
    lines = ["11111\tabacus", "11112 abdomen", "# comment", "", "   "]
    assert parse_wordlist(lines) == ["abacus", "abdomen"]


def test_load_wordlist(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("11111\tmodern\n11112\tlabor\n", encoding="utf-8")
    assert load_wordlist(path) == ["modern", "labor"]


def test_load_wordlist_missing_file(tmp_path):
    with pytest.raises(WordlistError, match="Could not read word list"):
        load_wordlist(tmp_path / "missing.txt")


def test_load_wordlist_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("# nothing here\n\n", encoding="utf-8")
    with pytest.raises(WordlistError, match="No words loaded"):
        load_wordlist(path)


def test_default_wordlist_is_lowercase_ascii():
    words = load_default_wordlist()
    assert len(words) > 500
    for word in words:
        assert word.isascii() and word.isalpha() and word.islower()


def test_default_wordlist_returns_a_copy():
    words = load_default_wordlist()
    words.clear()
    assert load_default_wordlist()
