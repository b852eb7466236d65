"""Grid model for the Game of Life engine.

A grid is a two-dimensional boolean numpy array of shape (height, width),
addressed as ``grid[row, col]``. Cells outside the array are permanently
dead; the grid does not wrap.
"""

from typing import Any, List, Tuple
import numpy as np

from .errors import MalformedGridError

Grid = np.ndarray
Coordinate = Tuple[int, int]

# Moore neighborhood offsets as (row, col), self excluded
NEIGHBOR_OFFSETS: Tuple[Coordinate, ...] = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if not (dr == 0 and dc == 0)
)


def as_grid(data: Any) -> Grid:
    """Convert nested rows or an array into a boolean grid.

    Args:
        data: 2D numpy array or a sequence of equally long rows

    Returns:
        Boolean array of shape (height, width). A boolean array is returned
        as it is, not copied; callers that mutate the result must copy it.

    Raises:
        MalformedGridError: If the data is not rectangular and two-dimensional
    """
    if isinstance(data, np.ndarray):
        if data.ndim != 2:
            raise MalformedGridError(f"Grid must be two-dimensional, got {data.ndim} dimension(s)")
        return data.astype(bool, copy=False)

    try:
        rows = list(data)
    except TypeError:
        raise MalformedGridError(f"Grid must be a sequence of rows, got {type(data).__name__}") from None

    if not rows:
        return np.zeros((0, 0), dtype=bool)

    widths = set()
    for index, row in enumerate(rows):
        if isinstance(row, (str, bytes)) or not hasattr(row, "__len__"):
            raise MalformedGridError(f"Row {index} is not a sequence of cells")
        widths.add(len(row))

    if len(widths) != 1:
        raise MalformedGridError(f"Grid rows have unequal lengths: {sorted(widths)}")

    arr = np.array(rows)
    if arr.ndim != 2:
        raise MalformedGridError(f"Grid cells must be scalars, got array of shape {arr.shape}")

    return arr.astype(bool)


def empty_grid(width: int, height: int) -> Grid:
    """Create an all-dead grid.

    Raises:
        ValueError: If either dimension is negative
    """
    if width < 0 or height < 0:
        raise ValueError(f"Grid dimensions must be non-negative, got {width}x{height}")
    return np.zeros((height, width), dtype=bool)


def grid_shape(grid: Grid) -> Tuple[int, int]:
    """Get grid dimensions as (width, height)."""
    height, width = as_grid(grid).shape
    return (width, height)


def is_out_of_bounds(row: int, col: int, grid: Grid) -> bool:
    """Check whether a coordinate falls outside the grid."""
    height, width = as_grid(grid).shape
    return row < 0 or col < 0 or row >= height or col >= width


def is_living(row: int, col: int, grid: Grid) -> bool:
    """Get the state of a cell, treating off-grid coordinates as dead."""
    cells = as_grid(grid)
    if is_out_of_bounds(row, col, cells):
        return False
    return bool(cells[row, col])


def neighbor_coordinates(row: int, col: int) -> List[Coordinate]:
    """Get the 8 Moore-neighborhood coordinates of a cell.

    Coordinates are not clipped to any grid.
    """
    return [(row + dr, col + dc) for dr, dc in NEIGHBOR_OFFSETS]


def count_living_neighbors(row: int, col: int, grid: Grid) -> int:
    """Count living neighbors of a single cell.

    Args:
        row: Row coordinate
        col: Column coordinate
        grid: Grid to inspect

    Returns:
        Number of living neighbors (0-8)
    """
    cells = as_grid(grid)
    return sum(1 for r, c in neighbor_coordinates(row, col) if is_living(r, c, cells))


def format_grid(grid: Grid, alive: str = "*", dead: str = ".") -> str:
    """Render a grid as text, one line per row."""
    return "\n".join("".join(alive if cell else dead for cell in row) for row in grid)
