"""Conway's Game of Life engine.

Every function here is a pure transformation: input grids are never
modified and a new array is returned.

Rules:
- Any cell with exactly 3 living neighbors is alive next generation
- A cell with exactly 2 living neighbors keeps its current state
- All other cells are dead next generation
"""

import logging
from typing import List, Optional, Union
import numpy as np
import torch
import torch.nn.functional as F

from .grid import Grid, as_grid

logger = logging.getLogger(__name__)

DEFAULT_ALIVE_PROBABILITY = 0.1

_NEIGHBOR_KERNEL = (
    torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
)

RandomSource = Union[np.random.Generator, int, None]


def _resolve_rng(rng: RandomSource) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def generate_grid(
    width: int,
    height: int,
    probability: float = DEFAULT_ALIVE_PROBABILITY,
    rng: RandomSource = None,
) -> Grid:
    """Generate a randomly populated grid.

    Args:
        width: Number of columns
        height: Number of rows
        probability: Chance each cell will be alive (0.0 to 1.0)
        rng: numpy Generator or integer seed; None draws from fresh OS entropy

    Returns:
        Boolean array of shape (height, width)

    Raises:
        ValueError: If a dimension is negative or probability is outside [0, 1]
    """
    if width < 0 or height < 0:
        raise ValueError(f"Grid dimensions must be non-negative, got {width}x{height}")
    if not 0.0 <= probability <= 1.0:
        raise ValueError(f"Probability must be between 0.0 and 1.0, got {probability}")

    generator = _resolve_rng(rng)
    grid = generator.random((height, width)) < probability
    logger.debug("Generated %dx%d grid with %d living cells", width, height, int(grid.sum()))
    return grid


def count_neighbors(grid: Grid) -> np.ndarray:
    """Count living neighbors for all cells using PyTorch convolution.

    Off-grid cells are zero padding, so they count as dead. Pins torch to a
    single intra-op thread for the process.

    Returns:
        Integer array with the same shape as the grid
    """
    cells = as_grid(grid)
    height, width = cells.shape
    if height == 0 or width == 0:
        return np.zeros(cells.shape, dtype=np.int8)

    # Single-threaded, as grids are small and calls are synchronous
    torch.set_num_threads(1)
    torch_input = torch.from_numpy(cells.astype(np.float32)).reshape(1, 1, height, width)
    neighbors = F.conv2d(torch_input, _NEIGHBOR_KERNEL, padding=1)
    return neighbors[0, 0].numpy().astype(np.int8)


def take_turn(grid: Grid) -> Grid:
    """Advance a grid by one generation.

    Args:
        grid: Current generation (array or nested rows)

    Returns:
        Next generation as a new boolean array of the same shape
    """
    cells = as_grid(grid)
    neighbors = count_neighbors(cells)
    return (neighbors == 3) | (cells & (neighbors == 2))


def run_turns(grid: Grid, turns: int) -> List[Grid]:
    """Compute successive generations.

    Args:
        grid: Starting generation
        turns: Number of generations to compute

    Returns:
        List of the generations after the starting one, oldest first
    """
    if turns < 0:
        raise ValueError(f"Turns must be non-negative, got {turns}")

    generations = []
    current = as_grid(grid)
    for _ in range(turns):
        current = take_turn(current)
        generations.append(current)
    return generations


def depopulate_grid(grid: Grid) -> Grid:
    """Get an all-dead grid with the same dimensions."""
    return np.zeros(as_grid(grid).shape, dtype=bool)


def count_living(grid: Grid) -> int:
    """Get the number of living cells."""
    return int(np.count_nonzero(as_grid(grid)))


def population_density(grid: Grid) -> float:
    """Get the fraction of cells that are alive (0.0 for an empty grid)."""
    cells = as_grid(grid)
    if cells.size == 0:
        return 0.0
    return count_living(cells) / cells.size


def find_period(grid: Grid, max_generations: int = 1000) -> Optional[int]:
    """Find the period of the cycle a grid settles into.

    Args:
        grid: Starting generation
        max_generations: Maximum generations to simulate

    Returns:
        Cycle length (1 for still lifes and extinction), or None if no
        repeated state is seen within max_generations
    """
    current = as_grid(grid)
    seen = {current.tobytes(): 0}
    for generation in range(1, max_generations + 1):
        current = take_turn(current)
        key = current.tobytes()
        if key in seen:
            return generation - seen[key]
        seen[key] = generation
    return None
