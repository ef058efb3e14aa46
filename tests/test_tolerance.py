"""Test the tolerance comparator used by the physics checks."""

import math
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from utils.tolerance import ToleranceExceeded, approx_equal


class TestApproxEqual:
    def test_within_relative_tolerance(self):
        assert approx_equal(1000.5, 1000.0, 1e-3) is None

    def test_near_boundary_passes(self):
        # tol = 1000 * 1e-3 = 1.0
        approx_equal(1000.99, 1000.0, 1e-3)

    def test_outside_tolerance_raises(self):
        with pytest.raises(ToleranceExceeded):
            approx_equal(1002.0, 1000.0, 1e-3)

    def test_default_relative_tolerance(self):
        approx_equal(100.05, 100.0)
        with pytest.raises(ToleranceExceeded):
            approx_equal(100.2, 100.0)

    def test_tolerance_floors_for_small_expected(self):
        """For |expected| < 1 the tolerance never shrinks below rel_tol."""
        approx_equal(0.0009, 0.0, 1e-3)
        approx_equal(0.0105, 0.01, 1e-3)
        approx_equal(-0.5009, -0.5, 1e-3)
        with pytest.raises(ToleranceExceeded) as exc_info:
            approx_equal(0.002, 0.0, 1e-3)
        assert exc_info.value.tol == pytest.approx(1e-3)

    def test_negative_expected_uses_magnitude(self):
        approx_equal(-2000.0, -2001.0, 1e-3)
        with pytest.raises(ToleranceExceeded):
            approx_equal(-2000.0, -2005.0, 1e-3)

    def test_nan_never_passes(self):
        with pytest.raises(ToleranceExceeded):
            approx_equal(math.nan, 1.0, 1.0)


class TestToleranceExceeded:
    def test_error_carries_details(self):
        with pytest.raises(ToleranceExceeded) as exc_info:
            approx_equal(110.0, 100.0, 1e-3, "ice: kg")

        err = exc_info.value
        assert err.label == "ice: kg"
        assert err.expected == 100.0
        assert err.actual == 110.0
        assert err.diff == pytest.approx(10.0)
        assert err.tol == pytest.approx(0.1)

    def test_message_format(self):
        with pytest.raises(ToleranceExceeded) as exc_info:
            approx_equal(3.0, 1.0, 0.5, "maint: duty cycle %")

        assert str(exc_info.value) == "maint: duty cycle %: expected 1.0, got 3.0 (diff=2.0, tol=0.5)"

    def test_message_without_label(self):
        with pytest.raises(ToleranceExceeded) as exc_info:
            approx_equal(3.0, 1.0, 0.5)

        assert str(exc_info.value).startswith("expected 1.0, got 3.0")

    def test_is_an_assertion_error(self):
        with pytest.raises(AssertionError):
            approx_equal(5.0, 1.0, 1e-3, "x")
