import argparse
from dataclasses import dataclass
from typing import Optional

from .session import DEFAULT_OPPONENT_DELAY_MS


@dataclass(frozen=True)
class GameConfig:
    """
    knobs for one run of the app
    """
    opponent_delay_ms: int = DEFAULT_OPPONENT_DELAY_MS   # pause before the opponent answers
    seed: Optional[int] = None                            # fixes corner/side picks when set
    verbose: bool = False


def _non_negative_int(text):
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}")
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="tictactoe-solo",
                                description="Play Tic-Tac-Toe against a scripted opponent.")
    p.add_argument("--delay", type=_non_negative_int, default=DEFAULT_OPPONENT_DELAY_MS,
                   help="Milliseconds the opponent 'thinks' before moving (default: %(default)s)")
    p.add_argument("--seed", type=int, default=None,
                   help="Seed for the opponent's random corner/side choice")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    return p


def parse_args(argv=None) -> GameConfig:
    ns = build_parser().parse_args(argv)
    return GameConfig(opponent_delay_ms=ns.delay, seed=ns.seed, verbose=ns.verbose)
