"""Core grid model and Game of Life engine."""

from .errors import LifeGridError, MalformedGridError, GridDecodeError
from .grid import Grid, as_grid, is_out_of_bounds, is_living
from .engine import generate_grid, take_turn, depopulate_grid, count_living, DEFAULT_ALIVE_PROBABILITY
from .codec import GridSettings, encode_grid, decode_grid, encode_settings, decode_settings
from .config import EngineConfig
from .session import LifeSession

__all__ = [
    "LifeGridError",
    "MalformedGridError",
    "GridDecodeError",
    "Grid",
    "as_grid",
    "is_out_of_bounds",
    "is_living",
    "generate_grid",
    "take_turn",
    "depopulate_grid",
    "count_living",
    "DEFAULT_ALIVE_PROBABILITY",
    "GridSettings",
    "encode_grid",
    "decode_grid",
    "encode_settings",
    "decode_settings",
    "EngineConfig",
    "LifeSession",
]
