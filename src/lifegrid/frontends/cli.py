"""Command-line interface for Conway's Game of Life."""

import argparse
import logging
import sys
import time
from typing import List, Optional, Tuple

from ..core.config import EngineConfig
from ..core.engine import find_period
from ..core.grid import format_grid
from ..core.session import LifeSession


class CLIGameOfLife:
    """Command-line interface for running Game of Life simulations."""

    def run_simulation(
        self,
        width: int,
        height: int,
        population_rate: float,
        generations: int,
        seed: Optional[int] = None,
        state: Optional[str] = None,
        verbose: bool = False,
        show_grid: bool = False,
    ) -> Tuple[LifeSession, dict]:
        """Run a Game of Life simulation.

        Args:
            width: Grid width
            height: Grid height
            population_rate: Initial random population rate (0.0-1.0)
            generations: Number of generations to run
            seed: Optional random seed for the initial grid
            state: Optional encoded settings token to start from
            verbose: Print progress updates
            show_grid: Show initial and final grid states

        Returns:
            Tuple of (session, statistics)
        """
        config = EngineConfig(width=width, height=height, alive_probability=population_rate, seed=seed)

        if state:
            session = LifeSession.from_state(state, config)
            if verbose:
                print(f"Loaded {session.config.width}x{session.config.height} grid from state")
        else:
            if verbose:
                print(f"Generating random {width}x{height} grid (rate: {population_rate:.2%})")
            session = LifeSession(config)

        initial_population = session.population
        if verbose:
            print(f"Initial population: {initial_population} cells")

        if show_grid:
            print("\nInitial grid:")
            print(format_grid(session.grid))

        start_time = time.time()
        session.run(generations)
        duration = time.time() - start_time

        if show_grid:
            print(f"\nFinal grid (turn {session.turn}):")
            print(format_grid(session.grid))

        stats = session.get_statistics()
        stats["initial_population"] = initial_population
        stats["duration_seconds"] = duration
        stats["generations_per_second"] = generations / duration if duration > 0 else 0
        return session, stats


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Run Conway's Game of Life on a bounded grid from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run a random 30x15 grid for 100 generations
  lifegrid-cli --generations 100

  # Reproducible 40x20 grid with 25% population, shown before and after
  lifegrid-cli -W 40 -H 20 -p 0.25 --seed 7 --show-grid

  # Print a state token after running, then resume from it
  lifegrid-cli -n 50 --encode
  lifegrid-cli --state '{"width":3,"height":3,"gridString":"000111000"}' -n 1 -g
        """,
    )

    # Grid configuration
    parser.add_argument("-W", "--width", type=int, default=30, help="Grid width (default: 30)")

    parser.add_argument("-H", "--height", type=int, default=15, help="Grid height (default: 15)")

    parser.add_argument(
        "-p",
        "--population",
        type=float,
        default=0.1,
        help="Initial random population rate 0.0-1.0 (default: 0.1)",
    )

    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        help="Random seed for a reproducible initial grid",
    )

    parser.add_argument(
        "--state",
        type=str,
        help="Start from an encoded state token instead of a random grid",
    )

    # Simulation configuration
    parser.add_argument(
        "-n",
        "--generations",
        type=int,
        default=100,
        help="Generations to simulate (default: 100)",
    )

    parser.add_argument(
        "--period",
        action="store_true",
        help="Report the cycle length the final grid settles into",
    )

    # Output configuration
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print detailed progress information",
    )

    parser.add_argument(
        "-g",
        "--show-grid",
        action="store_true",
        help="Display initial and final grid states",
    )

    parser.add_argument(
        "-e",
        "--encode",
        action="store_true",
        help="Print the final grid as a state token",
    )

    return parser


def print_results(stats: dict, verbose: bool) -> None:
    """Print simulation results.

    Args:
        stats: Statistics dictionary
        verbose: Whether to show detailed statistics
    """
    print(f"\nSimulation completed after {stats['turn']} generations")

    if verbose:
        print("\nDetailed Statistics:")
        print(f"  Grid size: {stats['grid_size'][0]}x{stats['grid_size'][1]}")
        print(f"  Initial population: {stats['initial_population']}")
        print(f"  Final population: {stats['population']}")
        print(f"  Population density: {stats['population_density']:.2%}")
        print(f"  Duration: {stats['duration_seconds']:.3f} seconds")
        print(f"  Speed: {stats['generations_per_second']:.0f} generations/second")
    else:
        print(
            "Population: {} -> {}, "
            "Duration: {:.3f}s".format(stats["initial_population"], stats["population"], stats["duration_seconds"])
        )

    if stats["is_extinct"]:
        print("All cells died")


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.width <= 0:
        errors.append("Width must be positive")

    if args.height <= 0:
        errors.append("Height must be positive")

    if not 0.0 <= args.population <= 1.0:
        errors.append("Population rate must be between 0.0 and 1.0")

    if args.generations < 0:
        errors.append("Generations must be non-negative")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not validate_args(args):
        return 1

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        cli = CLIGameOfLife()
        session, stats = cli.run_simulation(
            width=args.width,
            height=args.height,
            population_rate=args.population,
            generations=args.generations,
            seed=args.seed,
            state=args.state,
            verbose=args.verbose,
            show_grid=args.show_grid,
        )

        print_results(stats, args.verbose)

        if args.period:
            period = find_period(session.grid)
            if period is None:
                print("Period: no cycle found")
            else:
                print(f"Period: {period}")

        if args.encode:
            print(session.save_state())

        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
