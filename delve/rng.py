"""A small seedable xorshift generator used for map and monster generation."""

from __future__ import annotations

import time

_MASK64 = (1 << 64) - 1
_I32_MIN = -(1 << 31)


def _rotl(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (64 - shift))) & _MASK64


def _sip_round(v0: int, v1: int, v2: int, v3: int) -> tuple[int, int, int, int]:
    v0 = (v0 + v1) & _MASK64
    v1 = _rotl(v1, 13) ^ v0
    v0 = _rotl(v0, 32)
    v2 = (v2 + v3) & _MASK64
    v3 = _rotl(v3, 16) ^ v2
    v0 = (v0 + v3) & _MASK64
    v3 = _rotl(v3, 21) ^ v0
    v2 = (v2 + v1) & _MASK64
    v1 = _rotl(v1, 17) ^ v2
    v2 = _rotl(v2, 32)
    return v0, v1, v2, v3


def _siphash13(data: bytes, k0: int = 0, k1: int = 0) -> int:
    v0 = k0 ^ 0x736F6D6570736575
    v1 = k1 ^ 0x646F72616E646F6D
    v2 = k0 ^ 0x6C7967656E657261
    v3 = k1 ^ 0x7465646279746573

    whole = len(data) - len(data) % 8
    for start in range(0, whole, 8):
        word = int.from_bytes(data[start:start + 8], "little")
        v3 ^= word
        v0, v1, v2, v3 = _sip_round(v0, v1, v2, v3)
        v0 ^= word

    last = int.from_bytes(data[whole:], "little") | ((len(data) & 0xFF) << 56)
    v3 ^= last
    v0, v1, v2, v3 = _sip_round(v0, v1, v2, v3)
    v0 ^= last

    v2 ^= 0xFF
    for _ in range(3):
        v0, v1, v2, v3 = _sip_round(v0, v1, v2, v3)
    return v0 ^ v1 ^ v2 ^ v3


def hash_string(text: str) -> int:
    """Hash a string to an unsigned 64-bit value, stable across runs."""
    return _siphash13(text.encode("utf-8") + b"\xff")


def _as_i32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def _truncated_rem(a: int, m: int) -> int:
    rem = abs(a) % abs(m)
    return -rem if a < 0 else rem


class Rng:
    """Xorshift64 generator that remembers the seed it started from."""

    __slots__ = ("_seed", "_state")

    def __init__(self, seed: int) -> None:
        self._seed = seed & _MASK64
        self._state = self._seed

    @classmethod
    def random_seed(cls) -> Rng:
        """Seed from the current time in milliseconds."""
        millis = time.time_ns() // 1_000_000
        if millis < 0:
            return cls(hash_string("Time went backward"))
        return cls(millis)

    @classmethod
    def from_string(cls, text: str) -> Rng:
        """Seed from the hash of a string."""
        return cls(hash_string(text))

    @property
    def seed(self) -> int:
        """The seed this generator was created with."""
        return self._seed

    def _next_state(self) -> int:
        state = self._state
        state ^= (state << 13) & _MASK64
        state ^= state >> 7
        state ^= (state << 17) & _MASK64
        self._state = state
        return state

    def random_range(self, start: int, stop: int) -> int:
        """Draw the next value from ``[start, stop)``."""
        return self.random_range_from_seed(self._next_state(), start, stop)

    def seed_from_xy(self, current_seed: int, x: int, y: int) -> int:
        """Derive a 64-bit seed for a grid cell from a base seed."""
        ux = x & _MASK64
        uy = y & _MASK64
        return (ux * ux * uy + 2 * uy * uy * ux + current_seed) & _MASK64

    def random_range_from_seed(self, seed: int, start: int, stop: int) -> int:
        """Map ``seed`` into ``[start, stop)`` using its low 32 bits."""
        modulo = stop - start
        if modulo == 0:
            raise ValueError(f"empty range {start}..{stop}")
        value = _as_i32(seed)
        if value != _I32_MIN:
            value = abs(value)
        return _truncated_rem(value, modulo) + start