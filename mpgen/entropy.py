"""
Entropy amplifier:
Turns raw measurement bits into a fixed-size integer seed by mixing them
with a cryptographic hash.
"""

from __future__ import annotations

import hashlib
from typing import List


def bits_to_bytes(bits: List[int]) -> bytes:
    """
    Pack a list of bits [0,1,1,0,...] into bytes (8 bits per byte, MSB first).
    If bits length is not a multiple of 8, pad with zeros at the end.
    """
    if not bits:
        return b""

    pad_len = (8 - (len(bits) % 8)) % 8
    bits_padded = bits + [0] * pad_len

    byte_values = []
    for i in range(0, len(bits_padded), 8):
        byte = 0
        for bit in bits_padded[i : i + 8]:
            byte = (byte << 1) | bit
        byte_values.append(byte)

    return bytes(byte_values)


def xor_bits(left: List[int], right: List[int]) -> List[int]:
    """
    Bitwise XOR of two equal-length bitstreams.
    """
    if len(left) != len(right):
        raise ValueError(
            f"Cannot combine bitstreams of different lengths ({len(left)} != {len(right)})."
        )
    return [a ^ b for a, b in zip(left, right)]


def amplify_entropy(bits: List[int], rounds: int = 1) -> bytes:
    """
    Hash the packed bits with SHA-256 `rounds` times.

    At least one round is always applied so the result is a 32-byte digest.
    """
    data = bits_to_bytes(bits)
    for _ in range(max(1, rounds)):
        data = hashlib.sha256(data).digest()
    return data


def bits_to_seed(bits: List[int], rounds: int = 1) -> int:
    """
    Amplify `bits` and read the digest as a big-endian integer seed.
    """
    return int.from_bytes(amplify_entropy(bits, rounds), "big")
