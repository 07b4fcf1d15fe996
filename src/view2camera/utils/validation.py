"""Input validation utilities."""

from __future__ import annotations
import math
import numbers
import numpy as np


class InvalidArgument(ValueError):
    """A view-volume bound is not a finite number."""


def is_finite_number(value) -> bool:
    """True for finite real numbers (booleans excluded)."""
    if isinstance(value, (bool, np.bool_)):
        return False
    if not isinstance(value, numbers.Real):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # int too large for a float
        return False


def validate_bounds(**bounds) -> None:
    """
    Validate view-volume bounds.
    
    Args:
        **bounds: Named scalar bounds, e.g. l=-1.0, r=1.0
    
    Raises:
        InvalidArgument: If any bound is not a finite number
    """
    bad = [name for name, value in bounds.items() if not is_finite_number(value)]
    if bad:
        detail = ", ".join(f"{name}={bounds[name]!r}" for name in bad)
        raise InvalidArgument(
            f"{', '.join(bounds)} must be finite numbers, got {detail}"
        )
