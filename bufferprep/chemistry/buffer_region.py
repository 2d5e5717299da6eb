"""Select the pH window in which a conjugate pair buffers effectively.

Buffer Region Definition:
    The operational criterion |pH - pKa| <= 1 corresponds to:
        0.1 <= [A-]/[HA] <= 10

    Inside this window both forms are present in significant amounts. Outside
    it one form dominates, the solution has little capacity against added acid
    or base, and the recipe is still computable but chemically poor.
"""

from __future__ import annotations

import math

import numpy as np

BUFFER_HALF_WIDTH = 1.0
# Rounding slack for pH values quoted exactly at pKa +/- 1.
EDGE_TOLERANCE = 1e-9


def select_buffer_region(pH: np.ndarray, pKa: float) -> np.ndarray:
    """Return a boolean mask for the effective buffer region.

    Args:
        pH (numpy.ndarray): pH values (pH units).
        pKa (float): pKa of the pair used to center the window.

    Returns:
        numpy.ndarray: Boolean mask selecting points satisfying
        ``|pH - pKa| <= 1``; shape matches ``pH``.

    Raises:
        ValueError: If ``pKa`` is non-finite.
    """
    pH_arr = np.asarray(pH, dtype=float)
    if not np.isfinite(pKa):
        raise ValueError("pKa must be finite to select buffer region.")
    return np.abs(pH_arr - float(pKa)) <= BUFFER_HALF_WIDTH + EDGE_TOLERANCE


def in_buffer_region(pH: float, pKa: float) -> bool:
    """Scalar form of :func:`select_buffer_region`; ``False`` for non-finite input."""
    if not (math.isfinite(pH) and math.isfinite(pKa)):
        return False
    return bool(select_buffer_region(pH, pKa))


def buffer_region_bounds(pKa: float) -> tuple[float, float]:
    """Return the ``(low, high)`` pH limits of the buffer region."""
    return float(pKa) - BUFFER_HALF_WIDTH, float(pKa) + BUFFER_HALF_WIDTH
