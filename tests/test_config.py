"""Unit tests for render settings."""

import os

import pytest

from whitted.config import DEFAULT_MAX_DEPTH, EPSILON, RenderSettings


class TestRenderSettings:
    """Tests for RenderSettings."""

    def test_defaults(self):
        """Test the default depth, worker count and backend."""
        s = RenderSettings()
        assert s.max_depth == DEFAULT_MAX_DEPTH == 5
        assert s.workers is None
        assert s.backend == "process"

    def test_resolved_workers(self):
        """Test that None resolves to the CPU count."""
        assert RenderSettings().resolved_workers() == (os.cpu_count() or 1)
        assert RenderSettings(workers=3).resolved_workers() == 3

    def test_depth_zero_allowed(self):
        """Test that depth 0 disables recursion without error."""
        assert RenderSettings(max_depth=0).max_depth == 0

    @pytest.mark.parametrize(
        "kwargs",
        [{"max_depth": -1}, {"workers": 0}, {"workers": -2}, {"backend": "gpu"}],
    )
    def test_invalid(self, kwargs):
        """Test that invalid settings raise ValueError."""
        with pytest.raises(ValueError):
            RenderSettings(**kwargs)

    def test_epsilon(self):
        """Test the surface offset constant."""
        assert EPSILON == 1e-10
