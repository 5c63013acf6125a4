"""Command line harness for reproducible xoshiro256** draw runs."""

import argparse
import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "draw_logs" / "latest_run.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from xoshiro_rng import StreamConfig, run_draws
from xoshiro_rng.logging import setup_logger


def _parse_seed(value: str) -> int:
    """Accept decimal or 0x-prefixed hex seeds."""

    try:
        return int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"Seed must be an integer (decimal or 0x-prefixed hex), received '{value}'."
        ) from exc


def _parse_count(value: str) -> int:
    try:
        count = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected an integer, received '{value}'.") from exc
    if count < 0:
        raise argparse.ArgumentTypeError("Counts cannot be negative.")
    return count


def _parse_positive(value: str) -> int:
    count = _parse_count(value)
    if count == 0:
        raise argparse.ArgumentTypeError("Stream count must be at least 1.")
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run deterministic xoshiro256** draws")
    parser.add_argument(
        "--seed",
        type=_parse_seed,
        default=0xDEADBEEF,
        help="Generator seed (accepts decimal or 0x-prefixed hex)",
    )
    parser.add_argument(
        "--streams",
        type=_parse_positive,
        default=1,
        help="Number of non-overlapping streams derived from the seed",
    )
    parser.add_argument("--draws", type=_parse_count, default=5, help="Rows recorded per stream")
    parser.add_argument(
        "--warmup",
        type=_parse_count,
        default=0,
        help="Raw draws discarded per stream before recording",
    )
    parser.add_argument(
        "--long-jump",
        dest="long_jump",
        action="store_true",
        help="Separate streams by 2**192 steps instead of 2**128",
    )
    parser.add_argument("--from", dest="int_from", type=int, default=0, help="Bounded int anchor")
    parser.add_argument("--to", dest="int_to", type=int, default=1000, help="Bounded int limit")
    parser.add_argument("--verbose", action="store_true", help="Log stream derivation to stderr")
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "draw_logs/latest_run.json under the repository root."
        ),
    )
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    logger = setup_logger(name="xoshiro_rng", level="debug" if args.verbose else "warning")

    cfg = StreamConfig(
        seed=args.seed,
        streams=args.streams,
        draws=args.draws,
        long_jump=args.long_jump,
        int_from=args.int_from,
        int_to=args.int_to,
        warmup=args.warmup,
    )
    result = run_draws(cfg)

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2))
        logger.info("wrote report to %s", log_path)

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
