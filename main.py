"""
Matchstick Solver - Entry Point

Solves a matchstick equation from the command line and prints every
solution as seven-segment ASCII art together with the moves.

Example:
    python main.py "5+7=2"
    python main.py "5+3=5" --moves 2 --no-flip
    python main.py "1=1+2" --prepend --image solution.png
"""

import sys
import logging
import argparse
from typing import Any, Dict, List, Optional

from matchstick import matchstick_formatter, solve_with_result
from matchstick.settings import load_settings, save_settings
from matchstick.solver import (
    LookupFileError,
    SolveResult,
    get_strategy_info,
    get_strategy_names,
)
from matchstick.render import save_solution_image


logger = logging.getLogger(__name__)


def configure_logging(debug: bool, log_file: Optional[str] = None) -> None:
    """Configure logging - output to console and optionally to a file."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    strategies = "\n".join(
        f"  {info['name']}: {info['description']}" for info in get_strategy_info()
    )
    parser = argparse.ArgumentParser(
        description="Matchstick Solver - Find true equations by moving matchsticks",
        epilog=f"strategies:\n{strategies}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "equation",
        help='Puzzle equation, e.g. "5+7=2" (use x or * for multiplication)'
    )
    parser.add_argument(
        "--moves", "-m",
        type=int,
        default=None,
        help="Maximum number of matchsticks to move (default: 1)"
    )
    parser.add_argument(
        "--no-flip",
        dest="allow_flip",
        action="store_false",
        default=None,
        help="Do not read the board upside down"
    )
    parser.add_argument(
        "--prepend",
        dest="allow_prepend",
        action="store_true",
        default=None,
        help="Allow building a new character in front of the equation"
    )
    parser.add_argument(
        "--append",
        dest="allow_append",
        action="store_true",
        default=None,
        help="Allow building a new character after the equation"
    )
    parser.add_argument(
        "--flip-between-moves",
        action="store_true",
        default=None,
        help="Allow turning the board over between two moves"
    )
    parser.add_argument(
        "--strategy", "-s",
        choices=get_strategy_names(),
        default=None,
        help="Solving strategy (default: exhaustive)"
    )
    parser.add_argument(
        "--lookup",
        dest="lookup_path",
        default=None,
        help="Lookup file for the lookup strategy (default: lookup.json)"
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker processes for the parallel strategy (default: CPU count)"
    )
    parser.add_argument(
        "--timeout",
        dest="timeout_sec",
        type=float,
        default=None,
        help="Stop searching after this many seconds"
    )
    parser.add_argument(
        "--image",
        default=None,
        help="Save a PNG of the first solution to this path"
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write the log to this file"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        default=None,
        help="Enable debug logging"
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Store the effective options in config.json"
    )
    return parser.parse_args(argv)


def effective_settings(args: argparse.Namespace, settings: Dict[str, Any]) -> Dict[str, Any]:
    """Saved settings with every flag given on the command line applied."""
    result = dict(settings)
    overrides = {
        "max_moves": args.moves,
        "allow_flip": args.allow_flip,
        "allow_prepend": args.allow_prepend,
        "allow_append": args.allow_append,
        "flip_between_moves": args.flip_between_moves,
        "strategy_name": args.strategy,
        "lookup_path": args.lookup_path,
        "workers": args.workers,
        "timeout_sec": args.timeout_sec,
        "debug_enabled": args.debug,
    }
    # CLI flag overrides saved setting
    result.update({key: value for key, value in overrides.items() if value is not None})
    return result


def strategy_kwargs(settings: Dict[str, Any]) -> Dict[str, Any]:
    """Constructor arguments for the selected strategy."""
    name = settings["strategy_name"]
    if name == "parallel":
        return {"workers": settings.get("workers")}
    if name == "lookup":
        return {"path": settings.get("lookup_path")}
    return {}


def print_result(result: SolveResult) -> None:
    """Print the puzzle and every solution."""
    print(matchstick_formatter(result.equation))
    print()

    if result.already_solved:
        print(f"{result.equation} is already true.")
        return
    if not result.has_solutions:
        print("No solutions found.")

    for index, solution in enumerate(result.solutions, start=1):
        suffix = " (flipped)" if solution.flipped else ""
        print(f"Solution {index}: {solution.equation}{suffix}")
        print(matchstick_formatter(solution.equation))
        for move in solution.moves:
            print(f"  - {move.describe()}")
        print()

    if result.was_cancelled:
        print("Search stopped early; the list may be incomplete.")

    metrics = result.metrics
    print(
        f"[{metrics.strategy_name}] {result.solution_count} solution(s) in "
        f"{metrics.computation_time_ms:.1f}ms, {metrics.states_explored} states"
        f"{' (cached)' if metrics.cache_hit else ''}"
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Solve the puzzle given on the command line."""
    args = parse_args(argv)
    settings = effective_settings(args, load_settings())
    configure_logging(settings["debug_enabled"], args.log_file)

    if args.save:
        save_settings(settings)

    try:
        result = solve_with_result(
            args.equation,
            max_moves=settings["max_moves"],
            allow_flip=settings["allow_flip"],
            allow_prepend=settings["allow_prepend"],
            allow_append=settings["allow_append"],
            strategy=settings["strategy_name"],
            flip_between_moves=settings["flip_between_moves"],
            timeout_sec=settings["timeout_sec"],
            **strategy_kwargs(settings),
        )
    except (ValueError, LookupFileError) as e:
        logger.error(f"Cannot solve {args.equation!r}: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 2

    print_result(result)

    if args.image and result.has_solutions:
        path = save_solution_image(args.equation, result.get_solution(0), args.image)
        print(f"Image saved to {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
