"""Tests for engine configuration."""

import numpy as np
import pytest

from lifegrid.core.config import (
    MAX_HEIGHT,
    MAX_WIDTH,
    MIN_HEIGHT,
    MIN_WIDTH,
    EngineConfig,
    clamp_dimension,
)


class TestEngineConfig:
    """Test cases for EngineConfig."""

    def test_defaults(self):
        """Test default configuration values."""
        config = EngineConfig()
        assert config.width == 30
        assert config.height == 15
        assert config.alive_probability == 0.1
        assert config.seed is None
        assert config.history_limit is None
        config.validate()

    def test_validate_errors(self):
        """Test invalid values are reported together."""
        config = EngineConfig(width=0, height=-1, alive_probability=2.0, history_limit=0)
        with pytest.raises(ValueError) as exc_info:
            config.validate()

        message = str(exc_info.value)
        assert "width" in message
        assert "height" in message
        assert "alive_probability" in message
        assert "history_limit" in message

    def test_clamp_dimension(self):
        """Test dimension clamping."""
        assert clamp_dimension(1, 3, 10) == 3
        assert clamp_dimension(5, 3, 10) == 5
        assert clamp_dimension(50, 3, 10) == 10

    def test_clamped(self):
        """Test clamped copies respect the supported range."""
        small = EngineConfig(width=0, height=1).clamped()
        assert (small.width, small.height) == (MIN_WIDTH, MIN_HEIGHT)

        large = EngineConfig(width=1000, height=1000).clamped()
        assert (large.width, large.height) == (MAX_WIDTH, MAX_HEIGHT)

        original = EngineConfig(width=1000)
        original.clamped()
        assert original.width == 1000

    def test_make_rng_seeded(self):
        """Test seeded configurations give reproducible generators."""
        first = EngineConfig(seed=3).make_rng().random(5)
        second = EngineConfig(seed=3).make_rng().random(5)
        assert np.array_equal(first, second)
