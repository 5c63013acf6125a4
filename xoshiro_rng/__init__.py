"""Public package surface for the xoshiro256** generator."""

from .prng import Xoshiro256, init, jump, long_jump, next_double, next_int, next_u64
from .state import STATE_SIZE, copy_state, new_state
from .streams import StreamConfig, run_draws, spawn_states

__all__ = [
    "STATE_SIZE",
    "StreamConfig",
    "Xoshiro256",
    "copy_state",
    "init",
    "jump",
    "long_jump",
    "new_state",
    "next_double",
    "next_int",
    "next_u64",
    "run_draws",
    "spawn_states",
]
