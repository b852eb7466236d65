"""Configuration for grid generation and sessions."""

from typing import Optional
from dataclasses import dataclass, replace
import numpy as np

from .engine import DEFAULT_ALIVE_PROBABILITY

DEFAULT_WIDTH = 30
DEFAULT_HEIGHT = 15
MIN_WIDTH = 3
MIN_HEIGHT = 3
MAX_WIDTH = 200
MAX_HEIGHT = 100


def clamp_dimension(value: int, minimum: int, maximum: int) -> int:
    """Clamp a grid dimension into [minimum, maximum]."""
    return max(minimum, min(maximum, value))


@dataclass
class EngineConfig:
    """Configuration for a Game of Life session."""
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    alive_probability: float = DEFAULT_ALIVE_PROBABILITY
    seed: Optional[int] = None
    history_limit: Optional[int] = None

    def validate(self) -> None:
        """Check the configuration values.

        Raises:
            ValueError: If any value is out of range
        """
        errors = []
        if self.width <= 0:
            errors.append("width must be positive")
        if self.height <= 0:
            errors.append("height must be positive")
        if not 0.0 <= self.alive_probability <= 1.0:
            errors.append("alive_probability must be between 0.0 and 1.0")
        if self.history_limit is not None and self.history_limit < 1:
            errors.append("history_limit must be at least 1")

        if errors:
            raise ValueError(f"Invalid configuration: {'; '.join(errors)}")

    def clamped(self) -> "EngineConfig":
        """Return a copy with dimensions clamped to the supported range."""
        return replace(
            self,
            width=clamp_dimension(self.width, MIN_WIDTH, MAX_WIDTH),
            height=clamp_dimension(self.height, MIN_HEIGHT, MAX_HEIGHT),
        )

    def make_rng(self) -> np.random.Generator:
        """Create the random generator for this configuration."""
        return np.random.default_rng(self.seed)
