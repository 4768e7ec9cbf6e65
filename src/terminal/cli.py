"""
Command-line interface for terminal Minesweeper.

Usage:
    minesweeper [--easy | --medium | --hard] [--color | --nocolor]
    minesweeper [-w WIDTH] [-h HEIGHT] [-m MINES]

Controls:
    arrow keys  move the cursor
    f           flag / unflag the selected cell
    c, space    reveal the selected cell
    q           quit
"""
import argparse
import sys
from typing import List, Optional

from sweeper import Difficulty, GameConfig, SweeperError, resolve_config
from .app import play


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    # -h selects the height, so help lives on -? and --help
    parser = argparse.ArgumentParser(
        description="Play Minesweeper in the terminal",
        add_help=False,
        epilog=(
            "Difficulty levels: easy 9x9 with 10 mines, "
            "medium 16x16 with 40 mines, hard 30x16 with 99 mines. "
            "-w, -h or -m start a custom game instead."
        ),
    )
    parser.add_argument(
        "-?", "--help", action="help", help="Show this help message and exit"
    )

    levels = parser.add_mutually_exclusive_group()
    levels.add_argument(
        "--easy", "--beginner",
        dest="difficulty", action="store_const", const=Difficulty.EASY,
        help="9x9 board with 10 mines (default)",
    )
    levels.add_argument(
        "--medium", "--intermediate",
        dest="difficulty", action="store_const", const=Difficulty.MEDIUM,
        help="16x16 board with 40 mines",
    )
    levels.add_argument(
        "--hard", "--advanced", "--expert",
        dest="difficulty", action="store_const", const=Difficulty.HARD,
        help="30x16 board with 99 mines",
    )

    parser.add_argument("-w", "--width", type=int, help="Board width (9-39)")
    parser.add_argument("-h", "--height", type=int, help="Board height (9-20)")
    parser.add_argument(
        "-m", "--mines", type=int, help="Number of mines (1 to half the cells)"
    )

    parser.add_argument(
        "--color", dest="color", action="store_true", default=True,
        help="Use colors if the terminal supports them (default)",
    )
    parser.add_argument(
        "--nocolor", dest="color", action="store_false",
        help="Disable colors",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> GameConfig:
    """Resolve parsed arguments into a clamped GameConfig."""
    return resolve_config(
        difficulty=args.difficulty,
        width=args.width,
        height=args.height,
        mine_count=args.mines,
        color_enabled=args.color,
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments and run the game."""
    args = build_parser().parse_args(argv)
    config = config_from_args(args)

    try:
        stats = play(config)
    except SweeperError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    print(
        f"Board: {config.width}x{config.height} with {config.mine_count} mines"
    )
    print(
        f"Games finished: {stats.games_played} "
        f"(won {stats.wins}, lost {stats.losses})"
    )
