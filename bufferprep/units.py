"""Centralized unit conversion utilities."""

from __future__ import annotations

ML_PER_L: float = 1000.0


def ml_to_l(volume_ml: float) -> float:
    """Convert a volume from mL to L."""
    return float(volume_ml) / ML_PER_L


def moles_to_grams(moles: float, molar_mass: float) -> float:
    """Convert an amount of substance to the mass to weigh out.

    Args:
        moles (float): Amount of substance in mol.
        molar_mass (float): Molar mass in g mol^-1 of the form actually
            weighed (hydrate included).

    Returns:
        float: Mass in g.
    """
    return moles * molar_mass


def moles_to_stock_ml(moles: float, stock_molarity: float) -> float:
    """Convert an amount of substance to the volume of liquid stock to dispense.

    Args:
        moles (float): Amount of substance in mol.
        stock_molarity (float): Concentration of the supplied reagent in
            mol L^-1 (17.4 for glacial acetic acid).

    Returns:
        float: Stock volume in mL.
    """
    return moles / stock_molarity * ML_PER_L
