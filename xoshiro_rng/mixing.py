"""64-bit mixing primitives shared by seeding and the core transition."""

from typing import Tuple

MASK64 = (1 << 64) - 1

# SplitMix64 increment: odd, derived from the golden ratio.
GOLDEN_GAMMA = 0x9E3779B97F4A7C15


def rotl(x: int, k: int) -> int:
    """64-bit circular left rotation, valid for 0 < k < 64."""
    return ((x << k) & MASK64) | (x >> (64 - k))


def splitmix64(x: int) -> Tuple[int, int]:
    """One SplitMix64 step: returns the advanced accumulator and its output."""
    x = (x + GOLDEN_GAMMA) & MASK64
    z = x
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK64
    return x, z ^ (z >> 31)
