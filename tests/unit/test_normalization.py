"""
Unit tests for per-window min-max normalization.
"""

import numpy as np
import pytest

from fedanalogues.computation.normalization import FLAT_WINDOW_VALUE, has_missing, normalize_window


class TestNormalizeWindow:
    """Test min-max scaling of a single window."""

    def test_basic_scaling(self):
        result = normalize_window(np.array([2.0, 4.0, 3.0]))
        np.testing.assert_allclose(result, [0.0, 1.0, 0.5])

    def test_output_in_unit_interval(self):
        """Values always land in [0, 1]."""
        rng = np.random.default_rng(42)
        for _ in range(20):
            values = rng.normal(loc=rng.uniform(-100, 100), scale=rng.uniform(0.1, 50), size=24)
            result = normalize_window(values)
            assert result.min() >= 0.0
            assert result.max() <= 1.0
            assert result.min() == pytest.approx(0.0)
            assert result.max() == pytest.approx(1.0)

    def test_constant_window_maps_to_half(self):
        """A flat window is all 0.5 rather than a division by zero."""
        result = normalize_window(np.array([3.7, 3.7, 3.7, 3.7]))
        np.testing.assert_array_equal(result, np.full(4, FLAT_WINDOW_VALUE))

    def test_negative_values(self):
        result = normalize_window(np.array([-0.5, 0.5, 1.5]))
        np.testing.assert_allclose(result, [0.0, 0.5, 1.0])

    def test_single_value(self):
        np.testing.assert_array_equal(normalize_window(np.array([9.0])), [0.5])

    def test_empty_window(self):
        assert len(normalize_window(np.empty(0, dtype=np.float64))) == 0

    def test_windows_scaled_independently(self):
        """Two windows of different level and amplitude but equal shape normalize identically."""
        low = normalize_window(np.array([1.0, 1.5, 1.2]))
        high = normalize_window(np.array([10.0, 20.0, 14.0]))
        np.testing.assert_allclose(low, high)


class TestHasMissing:
    def test_detects_nan(self):
        assert has_missing(np.array([1.0, np.nan, 2.0]))

    def test_clean_window(self):
        assert not has_missing(np.array([1.0, 2.0]))
