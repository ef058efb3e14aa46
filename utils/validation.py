"""
Shared validation helpers for Cold Plunge MCP tools.

Keep these light-weight and reusable to avoid duplicated checks
across tools.
"""

from __future__ import annotations

import math


class ValidationError(ValueError):
    pass


def require_finite(value: float, name: str) -> None:
    if value is None or not math.isfinite(value):
        raise ValidationError(f"{name} must be a finite number; got {value}")


def require_positive(value: float, name: str) -> None:
    require_finite(value, name)
    if value <= 0:
        raise ValidationError(f"{name} must be > 0; got {value}")


def require_non_negative(value: float, name: str) -> None:
    require_finite(value, name)
    if value < 0:
        raise ValidationError(f"{name} must be >= 0; got {value}")


def require_fraction(value: float, name: str) -> None:
    require_finite(value, name)
    if not (0.0 < value <= 1.0):
        raise ValidationError(f"{name} must be in (0, 1]; got {value}")
