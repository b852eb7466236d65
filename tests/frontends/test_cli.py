"""Tests for the CLI frontend."""

import argparse
import json
from unittest.mock import patch
from io import StringIO

from lifegrid.frontends.cli import (
    CLIGameOfLife,
    create_parser,
    main,
    print_results,
    validate_args,
)

BLINKER_STATE = '{"width":3,"height":3,"gridString":"000111000"}'


class TestCLIGameOfLife:
    """Test cases for the CLI Game of Life."""

    def test_run_simulation_random(self):
        """Test running simulation with a random grid."""
        cli = CLIGameOfLife()

        session, stats = cli.run_simulation(
            width=10,
            height=8,
            population_rate=0.2,
            generations=5,
            seed=1,
        )

        assert session.turn == 5
        assert session.grid.shape == (8, 10)
        assert stats["turn"] == 5
        assert "initial_population" in stats
        assert "duration_seconds" in stats
        assert "generations_per_second" in stats

    def test_run_simulation_from_state(self):
        """Test running simulation from a state token."""
        cli = CLIGameOfLife()

        session, stats = cli.run_simulation(
            width=50,
            height=50,
            population_rate=0.1,
            generations=1,
            state=BLINKER_STATE,
        )

        assert session.grid.shape == (3, 3)
        assert session.grid[:, 1].all()
        assert stats["initial_population"] == 3
        assert stats["population"] == 3

    @patch("sys.stdout", new_callable=StringIO)
    def test_run_simulation_show_grid(self, mock_stdout):
        """Test initial and final grids are printed."""
        cli = CLIGameOfLife()
        cli.run_simulation(
            width=3,
            height=3,
            population_rate=0.0,
            generations=1,
            state=BLINKER_STATE,
            verbose=True,
            show_grid=True,
        )

        output = mock_stdout.getvalue()
        assert "Initial grid:" in output
        assert "...\n***\n..." in output
        assert ".*.\n.*.\n.*." in output
        assert "Initial population: 3 cells" in output


class TestParser:
    """Test cases for argument parsing and validation."""

    def test_defaults(self):
        """Test default argument values."""
        args = create_parser().parse_args([])
        assert args.width == 30
        assert args.height == 15
        assert args.population == 0.1
        assert args.generations == 100
        assert args.seed is None
        assert args.state is None
        assert not args.encode

    def test_short_options(self):
        """Test short option names."""
        args = create_parser().parse_args(["-W", "40", "-H", "20", "-p", "0.3", "-s", "9", "-n", "7", "-g", "-e"])
        assert (args.width, args.height) == (40, 20)
        assert args.population == 0.3
        assert args.seed == 9
        assert args.generations == 7
        assert args.show_grid
        assert args.encode

    def test_validate_args_valid(self):
        """Test valid arguments pass validation."""
        args = argparse.Namespace(width=10, height=10, population=0.5, generations=0)
        assert validate_args(args) is True

    @patch("sys.stdout", new_callable=StringIO)
    def test_validate_args_invalid(self, mock_stdout):
        """Test invalid arguments are reported."""
        args = argparse.Namespace(width=0, height=-5, population=1.5, generations=-1)
        assert validate_args(args) is False

        output = mock_stdout.getvalue()
        assert "Width must be positive" in output
        assert "Height must be positive" in output
        assert "Population rate must be between 0.0 and 1.0" in output
        assert "Generations must be non-negative" in output


class TestOutput:
    """Test cases for result printing."""

    @patch("sys.stdout", new_callable=StringIO)
    def test_print_results_compact(self, mock_stdout):
        """Test compact result output."""
        stats = {
            "turn": 12,
            "initial_population": 10,
            "population": 0,
            "population_density": 0.0,
            "grid_size": (5, 5),
            "duration_seconds": 0.01,
            "generations_per_second": 1200,
            "is_extinct": True,
        }
        print_results(stats, verbose=False)

        output = mock_stdout.getvalue()
        assert "Simulation completed after 12 generations" in output
        assert "Population: 10 -> 0" in output
        assert "All cells died" in output

    @patch("sys.stdout", new_callable=StringIO)
    def test_print_results_verbose(self, mock_stdout):
        """Test detailed result output."""
        stats = {
            "turn": 3,
            "initial_population": 4,
            "population": 4,
            "population_density": 0.25,
            "grid_size": (4, 4),
            "duration_seconds": 0.002,
            "generations_per_second": 1500,
            "is_extinct": False,
        }
        print_results(stats, verbose=True)

        output = mock_stdout.getvalue()
        assert "Grid size: 4x4" in output
        assert "Population density: 25.00%" in output
        assert "All cells died" not in output


class TestMain:
    """Test cases for the main entry point."""

    @patch("sys.stdout", new_callable=StringIO)
    def test_main_success(self, mock_stdout):
        """Test a normal run returns 0."""
        assert main(["-W", "6", "-H", "6", "-s", "3", "-n", "4"]) == 0
        assert "Simulation completed after 4 generations" in mock_stdout.getvalue()

    @patch("sys.stdout", new_callable=StringIO)
    def test_main_encode(self, mock_stdout):
        """Test the final state token is printed."""
        assert main(["--state", BLINKER_STATE, "-n", "1", "--encode"]) == 0

        last_line = mock_stdout.getvalue().strip().splitlines()[-1]
        assert json.loads(last_line) == {"width": 3, "height": 3, "gridString": "010010010"}

    @patch("sys.stdout", new_callable=StringIO)
    def test_main_period(self, mock_stdout):
        """Test the period report."""
        assert main(["--state", BLINKER_STATE, "-n", "0", "--period"]) == 0
        assert "Period: 2" in mock_stdout.getvalue()

    @patch("sys.stdout", new_callable=StringIO)
    def test_main_invalid_args(self, mock_stdout):
        """Test invalid arguments return 1."""
        assert main(["--width", "0"]) == 1
        assert "Width must be positive" in mock_stdout.getvalue()

    @patch("sys.stdout", new_callable=StringIO)
    def test_main_bad_state(self, mock_stdout):
        """Test an undecodable state token returns 1."""
        assert main(["--state", "not-a-token"]) == 1
        assert "Error:" in mock_stdout.getvalue()
