"""Compact string serialization of grids.

A grid is encoded row-major as '1' (alive) and '0' (dead) characters with
no separators. The width is needed to decode, so the string travels in a
GridSettings triple, which can itself be packed into a single JSON token.
"""

from typing import Any, Dict, Mapping, Union
from dataclasses import dataclass, asdict
import json
import numpy as np

from .errors import GridDecodeError
from .grid import Grid, as_grid, grid_shape


@dataclass(frozen=True)
class GridSettings:
    """Persisted form of a grid."""

    width: int
    height: int
    grid_string: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the persisted key layout."""
        data = asdict(self)
        data["gridString"] = data.pop("grid_string")
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GridSettings":
        """Create settings from a mapping with width, height and gridString keys.

        Raises:
            GridDecodeError: If a key is missing or has the wrong type
        """
        try:
            width = data["width"]
            height = data["height"]
            grid_string = data["gridString"]
        except KeyError as e:
            raise GridDecodeError(f"Settings missing key {e}") from None
        except TypeError:
            raise GridDecodeError(f"Settings must be a mapping, got {type(data).__name__}") from None

        for key, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise GridDecodeError(f"Settings {key} must be an integer, got {value!r}")
        if not isinstance(grid_string, str):
            raise GridDecodeError(f"Settings gridString must be a string, got {type(grid_string).__name__}")

        return cls(width=width, height=height, grid_string=grid_string)


SettingsLike = Union[GridSettings, Mapping[str, Any]]


def encode_grid(grid: Grid) -> str:
    """Encode a grid as a row-major string of '0' and '1'."""
    cells = as_grid(grid)
    return "".join("1" if cell else "0" for cell in cells.ravel())


def decode_grid(settings: SettingsLike) -> Grid:
    """Decode a grid from its settings.

    Args:
        settings: GridSettings or a mapping with width, height and gridString

    Returns:
        Boolean array of shape (height, width)

    Raises:
        GridDecodeError: If width is not positive, the string is empty or its
            length is not a multiple of width, or the height does not match the string
    """
    if not isinstance(settings, GridSettings):
        settings = GridSettings.from_dict(settings)

    width = settings.width
    grid_string = settings.grid_string

    if width <= 0:
        raise GridDecodeError(f"Width must be positive, got {width}")
    if not grid_string:
        raise GridDecodeError("Grid string is empty")
    if len(grid_string) % width != 0:
        raise GridDecodeError(
            f"Grid string length {len(grid_string)} is not a multiple of width {width}"
        )

    height = len(grid_string) // width
    if height != settings.height:
        raise GridDecodeError(
            f"Height mismatch: declared {settings.height}, string holds {height} rows of width {width}"
        )

    rows = [grid_string[start:start + width] for start in range(0, len(grid_string), width)]
    return np.array([[char == "1" for char in row] for row in rows], dtype=bool).reshape(height, width)


def settings_for(grid: Grid) -> GridSettings:
    """Build the persisted settings for a grid."""
    cells = as_grid(grid)
    width, height = grid_shape(cells)
    return GridSettings(width=width, height=height, grid_string=encode_grid(cells))


def encode_settings(settings: GridSettings) -> str:
    """Pack settings into a compact JSON token."""
    return json.dumps(settings.to_dict(), separators=(",", ":"))


def decode_settings(text: str) -> GridSettings:
    """Unpack settings from a JSON token.

    Raises:
        GridDecodeError: If the token is not valid settings JSON
    """
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as e:
        raise GridDecodeError(f"Invalid settings token: {e}") from None
    if not isinstance(data, dict):
        raise GridDecodeError(f"Settings token must hold an object, got {type(data).__name__}")
    return GridSettings.from_dict(data)
