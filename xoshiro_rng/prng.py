# xoshiro256** PRNG seeded through SplitMix64, for deterministic sims.
# Reference: Blackman & Vigna, https://prng.di.unimi.it/xoshiro256starstar.c (CC0)
"""Core generator operations over a caller-owned four-word state.

Every function takes the state list as its first argument and mutates it in
place; nothing is kept at module level, so distinct lists may be driven from
different threads without coordination.

The state must originate from :func:`init` (or a jump of such a state). An
all-zero list is a fixed point and yields zeros forever; this is a caller
precondition and is not checked here.
"""

import logging
from dataclasses import dataclass, field
from typing import Sequence

from .mixing import MASK64, rotl, splitmix64
from .state import STATE_SIZE, State, copy_state, is_degenerate, new_state

logger = logging.getLogger(__name__)

JUMP = (0x180EC6D33CFD0ABA, 0xD5A61266F0C9392C, 0xA9582618E03FC9AA, 0x39ABDC4529B1661C)
LONG_JUMP = (0x76E15D3EFEFDCBBF, 0xC5004E441C522FB3, 0x77710069854EE241, 0x39109BB02ACBE635)

# 2**64 as a double, spelled so the constant itself never overflows a u64.
_TWO_POW_64 = 0x8000000000000000 * 2.0
# Largest double strictly below 1.0.
_BELOW_ONE = 1.0 - 2.0 ** -53


def init(state: State, seed: int) -> None:
    """Fill ``state`` from a 64-bit seed using SplitMix64."""
    acc = seed & MASK64
    for i in range(STATE_SIZE):
        acc, state[i] = splitmix64(acc)


def next_u64(state: State) -> int:
    """Advance one step and return the raw 64-bit output."""
    s0, s1, s2, s3 = state
    result = (rotl((s1 * 5) & MASK64, 7) * 9) & MASK64

    t = (s1 << 17) & MASK64

    s2 ^= s0
    s3 ^= s1
    s1 ^= s2
    s0 ^= s3

    s2 ^= t

    state[0] = s0
    state[1] = s1
    state[2] = s2
    state[3] = rotl(s3, 45)
    return result


def next_double(state: State) -> float:
    """Uniform double in [0.0, 1.0)."""
    value = float(next_u64(state)) / _TWO_POW_64
    # raw values within 2**10 of 2**64 round up to exactly 1.0
    return min(value, _BELOW_ONE)


def next_int(state: State, from_: int, to: int) -> int:
    """Integer offset from ``from_`` by ``raw % abs(to - from_)``.

    The range is half-open and always anchored at ``from_``: ``(0, 10)``
    gives 0..9 while ``(10, 0)`` gives 10..19. A degenerate range returns
    ``from_`` without consuming a draw.

    The reduction is a plain modulo, so widths that do not divide 2**64 are
    very slightly biased towards small offsets. This trades exactness for a
    single draw per call.
    """
    if from_ == to:
        return from_
    d = abs(to - from_)
    return from_ + next_u64(state) % d


def _apply_jump(state: State, table: Sequence[int]) -> None:
    s0 = s1 = s2 = s3 = 0
    for word in table:
        for b in range(64):
            if word & (1 << b):
                s0 ^= state[0]
                s1 ^= state[1]
                s2 ^= state[2]
                s3 ^= state[3]
            next_u64(state)

    state[0] = s0
    state[1] = s1
    state[2] = s2
    state[3] = s3


def jump(state: State) -> None:
    """Advance ``state`` by 2**128 steps.

    Successive jumps from one seed give up to 2**128 non-overlapping
    subsequences for parallel computations.
    """
    logger.debug("jump 2**128")
    _apply_jump(state, JUMP)


def long_jump(state: State) -> None:
    """Advance ``state`` by 2**192 steps.

    Gives 2**64 starting points, from each of which :func:`jump` carves
    2**64 further non-overlapping subsequences.
    """
    logger.debug("long jump 2**192")
    _apply_jump(state, LONG_JUMP)


@dataclass
class Xoshiro256:
    """Seeded generator owning a single state list."""

    seed: int = 0
    state: State = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.state = new_state()
        init(self.state, self.seed)

    @classmethod
    def from_state(cls, words: Sequence[int], seed: int = 0) -> "Xoshiro256":
        """Wrap an existing state, e.g. one restored from a saved run."""
        if len(words) != STATE_SIZE:
            raise ValueError(f"State must hold {STATE_SIZE} words, got {len(words)}.")
        masked = [int(word) & MASK64 for word in words]
        if is_degenerate(masked):
            raise ValueError("State must not be all zero.")
        rng = cls(seed)
        rng.state = masked
        return rng

    def next_u64(self) -> int:
        return next_u64(self.state)

    def random(self) -> float:
        return next_double(self.state)

    def randint(self, from_: int, to: int) -> int:
        # half-open, anchored at from_ (see next_int)
        return next_int(self.state, from_, to)

    def jump(self) -> None:
        jump(self.state)

    def long_jump(self) -> None:
        long_jump(self.state)

    def spawn(self) -> "Xoshiro256":
        """Hand out the current position and jump past it."""
        child = Xoshiro256.from_state(copy_state(self.state), seed=self.seed)
        self.jump()
        return child
