"""Headless Game of Life session holding the current grid and its history."""

import logging
from typing import Deque, Dict, List, Optional
from collections import deque
from dataclasses import replace
import numpy as np

from .codec import decode_grid, decode_settings, encode_settings, settings_for
from .config import EngineConfig
from .engine import count_living, depopulate_grid, generate_grid, population_density, take_turn
from .grid import Grid, as_grid, grid_shape, is_out_of_bounds

logger = logging.getLogger(__name__)


class LifeSession:
    """Drives the engine for a front end.

    The session owns the mutable state (current grid, turn counter and
    generation history); each generation is produced by the pure engine and
    stored as a new array, so earlier generations are never altered.
    """

    def __init__(self, config: Optional[EngineConfig] = None, grid: Optional[Grid] = None) -> None:
        """Initialize a session.

        Args:
            config: Session configuration (defaults used if omitted); the
                session works on its own copy
            grid: Initial grid; a random grid is generated if omitted
        """
        self.config = replace(config) if config is not None else EngineConfig()
        self.config.validate()
        self._rng = self.config.make_rng()

        if grid is None:
            grid = generate_grid(
                self.config.width, self.config.height, self.config.alive_probability, self._rng
            )
        else:
            grid = as_grid(grid).copy()
            self.config.width, self.config.height = grid_shape(grid)
        self._start(grid)

    def _start(self, grid: Grid) -> None:
        self._grid = grid
        self._turn = 0
        self._history: Deque[Grid] = deque([grid], maxlen=self.config.history_limit)
        self._population_history: Deque[int] = deque(
            [count_living(grid)], maxlen=self.config.history_limit
        )

    @property
    def grid(self) -> Grid:
        """Current generation."""
        return self._grid

    @property
    def turn(self) -> int:
        """Number of generations advanced since the last reset."""
        return self._turn

    @property
    def history(self) -> List[Grid]:
        """Retained generations, oldest first, ending with the current one."""
        return list(self._history)

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return count_living(self._grid)

    @property
    def population_history(self) -> list:
        """History of population counts."""
        return list(self._population_history)

    @property
    def is_initial_state(self) -> bool:
        """Whether no generation has been advanced since the last reset."""
        return len(self._history) == 1 and self._turn == 0

    def step(self) -> Grid:
        """Advance the session by one generation.

        Returns:
            The new current grid
        """
        self._grid = take_turn(self._grid)
        self._history.append(self._grid)
        self._turn += 1
        self._population_history.append(count_living(self._grid))
        return self._grid

    def run(self, generations: int) -> Grid:
        """Advance the session by several generations.

        Raises:
            ValueError: If generations is negative
        """
        if generations < 0:
            raise ValueError(f"Generations must be non-negative, got {generations}")
        for _ in range(generations):
            self.step()
        return self._grid

    def step_back(self) -> bool:
        """Return to the previous retained generation.

        Returns:
            False if there is no earlier generation to return to
        """
        if len(self._history) < 2:
            return False

        self._history.pop()
        self._grid = self._history[-1]
        self._turn -= 1
        self._population_history.pop()
        return True

    def reinitialize(self, width: Optional[int] = None, height: Optional[int] = None) -> Grid:
        """Start over with a new random grid.

        Args:
            width: New width, clamped to the supported range
            height: New height, clamped to the supported range

        Returns:
            The new current grid
        """
        self.config = replace(
            self.config,
            width=self.config.width if width is None else width,
            height=self.config.height if height is None else height,
        ).clamped()

        grid = generate_grid(
            self.config.width, self.config.height, self.config.alive_probability, self._rng
        )
        logger.debug("Reinitialized session with %dx%d grid", self.config.width, self.config.height)
        self._start(grid)
        return grid

    def clear(self) -> Grid:
        """Reset to an all-dead grid of the current size."""
        self._start(depopulate_grid(self._grid))
        return self._grid

    def toggle_cell(self, row: int, col: int) -> bool:
        """Toggle a cell of the current grid.

        The current grid is copied first so retained generations stay intact.

        Returns:
            New state of the cell

        Raises:
            IndexError: If the coordinates are out of bounds
        """
        if is_out_of_bounds(row, col, self._grid):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds")

        grid = self._grid.copy()
        grid[row, col] = not grid[row, col]
        self._grid = grid
        self._history[-1] = grid
        self._population_history[-1] = count_living(grid)
        return bool(grid[row, col])

    def save_state(self) -> str:
        """Encode the current grid as a settings token."""
        return encode_settings(settings_for(self._grid))

    @classmethod
    def from_state(cls, text: str, config: Optional[EngineConfig] = None) -> "LifeSession":
        """Create a session from a settings token.

        Raises:
            GridDecodeError: If the token cannot be decoded
        """
        settings = decode_settings(text)
        grid = decode_grid(settings)
        return cls(config, grid)

    def get_statistics(self) -> Dict:
        """Get session statistics.

        Returns:
            Dictionary with turn, population and grid size information
        """
        return {
            "turn": self._turn,
            "population": self.population,
            "population_history": self.population_history,
            "population_density": population_density(self._grid),
            "grid_size": grid_shape(self._grid),
            "history_length": len(self._history),
            "is_extinct": not bool(np.any(self._grid)),
        }
