"""Reproducible draw runs over non-overlapping parallel streams."""

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, List

from .prng import init, jump, long_jump, next_double, next_int, next_u64
from .state import State, copy_state, new_state

logger = logging.getLogger(__name__)


@dataclass
class StreamConfig:
    """Configuration for a deterministic draw run."""

    seed: int = 0xDEADBEEF
    streams: int = 1
    draws: int = 5
    long_jump: bool = False
    int_from: int = 0
    int_to: int = 1000
    warmup: int = 0  # raw draws discarded per stream before recording


def spawn_states(seed: int, count: int, long: bool = False) -> List[State]:
    """Derive ``count`` states, each one jump ahead of the previous."""
    if count < 1:
        raise ValueError(f"Stream count must be positive, received {count}.")

    advance = long_jump if long else jump
    state = new_state()
    init(state, seed)

    states = [copy_state(state)]
    for index in range(1, count):
        advance(state)
        states.append(copy_state(state))
        logger.debug("derived stream %d via %s", index, advance.__name__)
    return states


def run_draws(cfg: StreamConfig) -> Dict[str, Any]:
    """Execute the draw run, fully driven by the seed."""
    if cfg.draws < 0 or cfg.warmup < 0:
        raise ValueError("Draw and warmup counts cannot be negative.")

    report: List[Dict[str, Any]] = []
    for index, state in enumerate(spawn_states(cfg.seed, cfg.streams, cfg.long_jump)):
        start = copy_state(state)
        for _ in range(cfg.warmup):
            next_u64(state)

        rows = []
        for _ in range(cfg.draws):
            rows.append(
                {
                    "raw": next_u64(state),
                    "int": next_int(state, cfg.int_from, cfg.int_to),
                    "double": next_double(state),
                }
            )
        report.append({"index": index, "state": start, "draws": rows})

    logger.debug("ran %d stream(s) x %d draw(s)", cfg.streams, cfg.draws)
    return {"config": asdict(cfg), "streams": report}
