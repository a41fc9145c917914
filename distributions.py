"""
Map raw 64-bit generator output onto bounded integer and real ranges.

Works with any object exposing next_u64() returning a uniform value in
[0, 2**64).
"""

from __future__ import annotations

import math
from typing import Protocol


class BitGenerator(Protocol):
    def next_u64(self) -> int: ...


_INV_2_53 = 1.0 / (1 << 53)


def canonical(rng: BitGenerator) -> float:
    """Float in [0, 1) built from the top 53 bits of one output."""
    return (rng.next_u64() >> 11) * _INV_2_53


def uniform_real(rng: BitGenerator, low: float, high: float) -> float:
    """Float in the half-open range [low, high)."""
    if not (math.isfinite(low) and math.isfinite(high)):
        raise ValueError(f"bounds must be finite, got [{low}, {high})")
    if not low < high:
        raise ValueError(f"empty range [{low}, {high})")

    u = canonical(rng)
    span = high - low
    if math.isfinite(span):
        x = low + span * u
    else:
        # span overflows (e.g. [-1e308, 1e308]); work on halved bounds
        half_low = low * 0.5
        x = 2.0 * (half_low + (high * 0.5 - half_low) * u)
    # rounding can land exactly on high
    if x >= high:
        x = math.nextafter(high, low)
    return x


def _random_bits(rng: BitGenerator, nbits: int) -> int:
    value = 0
    filled = 0
    while filled < nbits:
        value = (value << 64) | rng.next_u64()
        filled += 64
    return value >> (filled - nbits)


def uniform_int(rng: BitGenerator, low: int, high: int) -> int:
    """Integer in the closed range [low, high], exactly uniform."""
    if low > high:
        raise ValueError(f"empty range [{low}, {high}]")

    span = high - low
    if span == 0:
        return low

    # draw span.bit_length() bits, reject values above span
    nbits = span.bit_length()
    while True:
        r = _random_bits(rng, nbits)
        if r <= span:
            return low + r
