"""
Tolerance comparison used by the physics regression checks.
"""

from __future__ import annotations


class ToleranceExceeded(AssertionError):
    """A computed value deviated from its reference beyond the allowed tolerance."""

    def __init__(self, label: str, expected: float, actual: float, diff: float, tol: float) -> None:
        self.label = label
        self.expected = expected
        self.actual = actual
        self.diff = diff
        self.tol = tol
        prefix = f"{label}: " if label else ""
        super().__init__(f"{prefix}expected {expected}, got {actual} (diff={diff}, tol={tol})")


def approx_equal(actual: float, expected: float, rel_tol: float = 1e-3, label: str = "") -> None:
    """Raise ToleranceExceeded unless actual is within tolerance of expected.

    The tolerance is ``max(1, |expected|) * rel_tol``, so for reference values
    smaller than one it floors at ``rel_tol`` in absolute terms.
    """
    diff = abs(actual - expected)
    tol = max(1.0, abs(expected)) * rel_tol
    # Written as "not <=" so a NaN difference fails.
    if not diff <= tol:
        raise ToleranceExceeded(label, expected, actual, diff, tol)
