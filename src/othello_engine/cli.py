"""
Command-line interface for playing Othello.
"""

import argparse
import logging
import sys

from othello_engine.api import play, self_play
from othello_engine.core.types import Difficulty, Mode, parse_side
from othello_engine.utils.config import Config


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play 8x8 Othello against a friend or the computer"
    )
    parser.add_argument(
        "--mode", "-m",
        choices=[m.value for m in Mode],
        default=Mode.VS_AI.value,
        help="local = two players on one board, ai = play the computer (default: ai)",
    )
    parser.add_argument(
        "--difficulty", "-d",
        choices=[d.value for d in Difficulty],
        default=Difficulty.NORMAL.value,
        help="Computer strength (default: normal)",
    )
    parser.add_argument(
        "--ai-side",
        choices=["black", "white"],
        default="white",
        help="Colour the computer plays (default: white; black moves first)",
    )
    parser.add_argument(
        "--hints",
        action="store_true",
        help="Start with legal-move hints shown",
    )
    parser.add_argument(
        "--self-play",
        action="store_true",
        help="Computer plays both sides at --difficulty (or --black/--white)",
    )
    parser.add_argument(
        "--black",
        choices=[d.value for d in Difficulty],
        default=None,
        help="Self-play difficulty for Black (default: --difficulty)",
    )
    parser.add_argument(
        "--white",
        choices=[d.value for d in Difficulty],
        default=None,
        help="Self-play difficulty for White (default: --difficulty)",
    )
    parser.add_argument(
        "--normal-depth",
        type=int,
        default=None,
        help="Search depth in plies for normal difficulty (default: 3)",
    )
    parser.add_argument(
        "--hard-depth",
        type=int,
        default=None,
        help="Search depth in plies for hard difficulty (default: 5)",
    )
    parser.add_argument(
        "--ai-delay",
        type=float,
        default=0.0,
        help="Seconds to pause before each computer move (default: 0)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Plain ASCII board",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging verbosity (default: WARNING)",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    """Translate parsed arguments into a Config, validating depth overrides."""
    return Config(
        mode=args.mode,
        difficulty=args.difficulty,
        ai_side=parse_side(args.ai_side),
        normal_depth=args.normal_depth,
        hard_depth=args.hard_depth,
        show_hints=args.hints,
        ai_delay=args.ai_delay,
    )


def main(argv=None) -> None:
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(args)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(2)

    color = not args.no_color

    if args.self_play:
        self_play(
            black=args.black or args.difficulty,
            white=args.white or args.difficulty,
            depths=config.depths,
            output=print,
            color=color,
        )
        return

    play(config, color=color)


if __name__ == "__main__":
    main()
