"""Conway's Game of Life engine with compact grid serialization."""

__version__ = "0.1.0"

from .core.engine import generate_grid, take_turn, depopulate_grid, count_living
from .core.codec import GridSettings, encode_grid, decode_grid
from .core.session import LifeSession

__all__ = [
    "generate_grid",
    "take_turn",
    "depopulate_grid",
    "count_living",
    "GridSettings",
    "encode_grid",
    "decode_grid",
    "LifeSession",
]
