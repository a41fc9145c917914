"""
Uniform 64-bit pseudorandom bit generators: SplitMix64 and xoshiro256**.

Both generators reproduce the published reference algorithms bit for bit.
They are NOT cryptographically secure, and a single instance must not be
shared between threads: give every worker its own seeded instance.
"""

from __future__ import annotations

from typing import Tuple

U64_MASK = 0xFFFFFFFFFFFFFFFF


def rotate_left(x: int, k: int) -> int:
    """64-bit circular left rotation, defined for 0 < k < 64."""
    return ((x << k) | (x >> (64 - k))) & U64_MASK


class SplitMix64:
    """
    Fixed-increment variant of Java 8's SplittableRandom generator.

    64 bits of state, passes BigCrush. Every seed is valid, including 0.
    Also used to expand a 64-bit seed into the state of larger generators.
    """

    __slots__ = ("state",)

    MIN = 0
    MAX = U64_MASK

    def __init__(self, seed: int):
        self.state = seed & U64_MASK

    def next_u64(self) -> int:
        self.state = (self.state + 0x9E3779B97F4A7C15) & U64_MASK
        z = self.state
        z = (z ^ (z >> 30)) * 0xBF58476D1CE4E5B9 & U64_MASK
        z = (z ^ (z >> 27)) * 0x94D049BB133111EB & U64_MASK
        return z ^ (z >> 31)

    __call__ = next_u64

    @staticmethod
    def min() -> int:
        return SplitMix64.MIN

    @staticmethod
    def max() -> int:
        return SplitMix64.MAX

    def copy(self) -> SplitMix64:
        other = SplitMix64.__new__(SplitMix64)
        other.state = self.state
        return other

    __copy__ = copy

    def __deepcopy__(self, memo) -> SplitMix64:
        return self.copy()

    def __repr__(self) -> str:
        return f"SplitMix64(state=0x{self.state:016x})"


class Xoshiro256StarStar:
    """
    xoshiro256** 1.0, the all-purpose 256-bit state generator.

    The state is filled from four successive SplitMix64 outputs of the seed.
    An all-zero state would yield zeros forever; seed expansion makes that
    practically unreachable and it is not checked at runtime.
    """

    __slots__ = ("_s",)

    MIN = 0
    MAX = U64_MASK

    def __init__(self, seed: int):
        seq = SplitMix64(seed)
        self._s = [seq.next_u64(), seq.next_u64(), seq.next_u64(), seq.next_u64()]

    @property
    def state(self) -> Tuple[int, int, int, int]:
        s = self._s
        return (s[0], s[1], s[2], s[3])

    def next_u64(self) -> int:
        s = self._s
        result = rotate_left(s[1] * 5 & U64_MASK, 7) * 9 & U64_MASK
        t = (s[1] << 17) & U64_MASK

        s[2] ^= s[0]
        s[3] ^= s[1]
        s[1] ^= s[2]
        s[0] ^= s[3]
        s[2] ^= t
        s[3] = rotate_left(s[3], 45)

        return result

    __call__ = next_u64

    @staticmethod
    def min() -> int:
        return Xoshiro256StarStar.MIN

    @staticmethod
    def max() -> int:
        return Xoshiro256StarStar.MAX

    def copy(self) -> Xoshiro256StarStar:
        other = Xoshiro256StarStar.__new__(Xoshiro256StarStar)
        other._s = list(self._s)
        return other

    __copy__ = copy

    def __deepcopy__(self, memo) -> Xoshiro256StarStar:
        return self.copy()

    def __repr__(self) -> str:
        words = ", ".join(f"0x{w:016x}" for w in self._s)
        return f"Xoshiro256StarStar(state=({words}))"
