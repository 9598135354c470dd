import random

import pytest

from mpgen.config import ConfigOptions, build_config
from mpgen.password_maker import PasswordMaker

WORDS = ["modern", "labor", "hello", "world", "water", "fire", "deep", "ice", "pie"]


class ScriptedRandom:
    """
    Stand-in random source with predetermined draws.

    choice() returns seq[pick % len(seq)] for the next scripted pick and
    random() returns the next scripted float.
    """

    def __init__(self, picks=(), floats=()):
        self._picks = iter(picks)
        self._floats = iter(floats)
        self.choice_calls = 0

    def choice(self, seq):
        self.choice_calls += 1
        return seq[next(self._picks) % len(seq)]

    def random(self):
        return next(self._floats)


def config_from(**options):
    """build_config() from keyword options; values are stringified like CLI input."""
    return build_config(ConfigOptions(**{k: str(v) for k, v in options.items()}))


@pytest.fixture
def wordlist():
    return list(WORDS)


@pytest.fixture
def make_maker(wordlist):
    def _make(seed=1, **options):
        return PasswordMaker(config_from(**options), random.Random(seed), wordlist)

    return _make
