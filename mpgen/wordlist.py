"""
Word list loading.

The bundled list ships inside the package (mpgen/data/wordlist.txt). User
lists may be plain (one word per line) or diceware-style, where each line is
"<dice roll> <word>" and the word is the last field.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Iterable, List, Union

logger = logging.getLogger(__name__)

DEFAULT_WORDLIST_RESOURCE = "wordlist.txt"


class WordlistError(ValueError):
    """
    Raised when a word list cannot be read or contains no words.
    """


def parse_wordlist(lines: Iterable[str]) -> List[str]:
    """
    Extract words from text lines, keeping their order and duplicates.

    Blank lines and lines starting with '#' are skipped.
    """
    words: List[str] = []
    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        words.append(stripped.split()[-1])
    return words


def load_wordlist(path: Union[str, Path]) -> List[str]:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise WordlistError(f"Could not read word list {path}: {exc}") from exc

    words = parse_wordlist(text.splitlines())
    if not words:
        raise WordlistError(f"No words loaded from word list: {path}")
    logger.debug("Loaded %d words from %s", len(words), path)
    return words


@lru_cache(maxsize=1)
def _default_words() -> tuple:
    resource = resources.files("mpgen") / "data" / DEFAULT_WORDLIST_RESOURCE
    text = resource.read_text(encoding="utf-8")
    return tuple(parse_wordlist(text.splitlines()))


def load_default_wordlist() -> List[str]:
    """
    The bundled word list, as a fresh list the caller may modify.
    """
    return list(_default_words())
