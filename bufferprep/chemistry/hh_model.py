"""Henderson-Hasselbalch partition of a total buffer amount.

Theoretical Framework:
    For a conjugate pair HA / A-:

        pH = pKa + log10([A-]/[HA])

    so the ratio needed to reach a target pH is ``r = 10 ** (pH - pKa)``. With
    a fixed total amount ``n = c * V`` the split is

        n(A-) = r * n / (1 + r)
        n(HA) = n - n(A-)

    At ``pH == pKa`` the ratio is exactly 1 and both forms are present in equal
    amounts.

The model ignores activity coefficients and secondary dissociations; the
pKa values are the 25 deg C literature constants in
``bufferprep.chemistry.families``.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

TRIS_PKA_25C = 8.06
TRIS_DPKA_DT = -0.03
REFERENCE_TEMPERATURE_C = 25.0


def henderson_hasselbalch_ratio(target_ph: float, pka: float) -> float:
    """Return the [conjugate base]/[weak acid] ratio for a target pH."""
    return 10.0 ** (target_ph - pka)


def partition_moles(
    target_ph: float, pka: float, total_moles: float
) -> Tuple[float, float]:
    """Split a total amount of buffer between its conjugate base and weak acid.

    Args:
        target_ph (float): Desired pH.
        pka (float): Acid dissociation constant of the pair (pKa units).
        total_moles (float): Total buffer amount in mol, ``concentration *
            volume``.

    Returns:
        tuple[float, float]: ``(moles_conjugate_base, moles_weak_acid)``.
        The two always sum to ``total_moles``.

    Note:
        No range checks are applied; a negative or non-finite ``total_moles``
        propagates into both terms.
    """
    ratio = henderson_hasselbalch_ratio(target_ph, pka)
    moles_base = ratio * total_moles / (1 + ratio)
    moles_acid = total_moles - moles_base
    return moles_base, moles_acid


def conjugate_base_fraction(ph, pka: float):
    """Mole fraction of the conjugate base, ``r / (1 + r)``.

    Args:
        ph (float or numpy.ndarray): pH value(s).
        pka (float): pKa of the pair.

    Returns:
        float or numpy.ndarray: Fraction in [0, 1], shaped like ``ph``.
    """
    ph_arr = np.asarray(ph, dtype=float)
    fraction = 1.0 / (1.0 + np.power(10.0, pka - ph_arr))
    if fraction.ndim == 0:
        return float(fraction)
    return fraction


def shifted_pka(pka_25c: float, dpka_dt: float, temperature: float) -> float:
    """Linear temperature correction of a pKa quoted at 25 deg C."""
    return pka_25c + dpka_dt * (temperature - REFERENCE_TEMPERATURE_C)


def tris_pka(temperature: float) -> float:
    """Temperature-corrected Tris pKa, dropping 0.03 units per deg C above 25."""
    return shifted_pka(TRIS_PKA_25C, TRIS_DPKA_DT, temperature)
