"""
Random sources for the generator.

The engine only needs a random.Random-compatible object; this module picks
one for a given RngType, or a reproducible one when a seed is given.
"""

from __future__ import annotations

import logging
import os
import random
from typing import Any, Optional

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms

from .types import RngType, ValidationError

logger = logging.getLogger(__name__)

_BPF = 53  # bits in a float mantissa
_FLOAT_BYTES = 7


class ChaChaRandom(random.Random):
    """
    random.Random driven by a ChaCha20 keystream keyed from os.urandom.

    Like random.SystemRandom, the seed argument is ignored: seed() always
    rekeys from the operating system, and the state cannot be saved or
    restored.
    """

    def seed(self, a=None, version=2):
        key = os.urandom(32)
        nonce = os.urandom(16)
        self._keystream = Cipher(algorithms.ChaCha20(key, nonce), mode=None).encryptor()
        self.gauss_next = None

    def randbytes(self, n):
        return self._keystream.update(bytes(n))

    def getrandbits(self, k):
        if k < 0:
            raise ValueError("number of bits must be non-negative")
        if k == 0:
            return 0
        numbytes = (k + 7) // 8
        value = int.from_bytes(self.randbytes(numbytes), "big")
        return value >> (numbytes * 8 - k)

    def random(self):
        value = int.from_bytes(self.randbytes(_FLOAT_BYTES), "big")
        return (value >> (_FLOAT_BYTES * 8 - _BPF)) * 2.0 ** -_BPF

    def _notimplemented(self, *args, **kwds):
        raise NotImplementedError("ChaChaRandom state cannot be saved or restored")

    getstate = setstate = _notimplemented


def parse_seed(value: Any) -> Optional[int]:
    """
    None or blank -> None (no seed). Anything else must be a whole number.
    """
    if value is None:
        return None
    raw = str(value).strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"`{raw}` is not a valid seed, seed must be a whole number") from None


def make_rng(kind: RngType | None = None, seed: Optional[int] = None) -> random.Random:
    """
    Build the random source for `kind`.

    A seed always wins: the result is a plain random.Random(seed) so the
    same seed and config give the same passwords on every run.
    """
    if seed is not None:
        logger.debug("Using seeded userspace RNG")
        return random.Random(seed)

    kind = kind or RngType.default()
    logger.debug("Using %s RNG", kind)
    if kind is RngType.OS_RNG:
        return random.SystemRandom()
    if kind is RngType.CSPRNG:
        return ChaChaRandom()

    # Imported here so the qiskit stack is only loaded when asked for.
    from .quantum_engine import quantum_seed

    return random.Random(quantum_seed())
