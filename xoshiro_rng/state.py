"""Generator state: four unsigned 64-bit words in a caller-owned list."""

from typing import List, Sequence

STATE_SIZE = 4

State = List[int]


def new_state() -> State:
    """Zeroed storage ready to be filled by ``init``."""
    return [0] * STATE_SIZE


def copy_state(state: Sequence[int]) -> State:
    return list(state[:STATE_SIZE])


def is_degenerate(state: Sequence[int]) -> bool:
    """The all-zero vector is a fixed point of the transition."""
    return not any(state)
