"""Constants for the five supported buffer systems.

Each family is a conjugate acid/base pair with a literature pKa at 25 deg C
and the molar masses of the reagent forms normally found on the shelf. Only
Tris carries a temperature coefficient (-0.03 pKa units per deg C).

The ``useful_range`` values are the commonly quoted working ranges of each
system and are informational; validation uses the pKa +/- 1 buffer region
from ``bufferprep.chemistry.buffer_region``.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from bufferprep.chemistry.hh_model import (
    REFERENCE_TEMPERATURE_C,
    TRIS_DPKA_DT,
    TRIS_PKA_25C,
    shifted_pka,
)
from bufferprep.schema import BufferType
from bufferprep.units import moles_to_grams, moles_to_stock_ml

GLACIAL_ACETIC_ACID_M = 17.4

_STANDARD_NOTES = (
    "Dissolve the components in distilled water and adjust to the final volume."
)


@dataclass(frozen=True)
class Reagent:
    """A reagent as dispensed at the bench.

    Attributes:
        name: Display name including formula and hydration state.
        molar_mass: g mol^-1 of the dispensed form.
        stock_molarity: mol L^-1 of a liquid stock. When set the reagent is
            measured by volume (mL) instead of weighed (g).
    """

    name: str
    molar_mass: float
    stock_molarity: Optional[float] = None

    @property
    def unit(self) -> str:
        return "g" if self.stock_molarity is None else "mL"

    def quantity(self, moles: float) -> float:
        """Amount to dispense for ``moles`` of this reagent, in :attr:`unit`."""
        if self.stock_molarity is None:
            return moles_to_grams(moles, self.molar_mass)
        return moles_to_stock_ml(moles, self.stock_molarity)


@dataclass(frozen=True)
class BufferFamily:
    buffer_type: BufferType
    label: str
    pka_25c: float
    conjugate_base: Reagent
    weak_acid: Reagent
    notes: str
    useful_range: Tuple[float, float]
    dpka_dt: float = 0.0
    acid_first: bool = False

    def pka(self, temperature: float = REFERENCE_TEMPERATURE_C) -> float:
        """pKa at ``temperature`` deg C; constant for temperature-independent pairs."""
        if self.dpka_dt == 0.0:
            return self.pka_25c
        return shifted_pka(self.pka_25c, self.dpka_dt, temperature)


PHOSPHATE = BufferFamily(
    buffer_type=BufferType.PHOSPHATE,
    label="Phosphate buffer",
    pka_25c=7.20,
    conjugate_base=Reagent("Na2HPO4 (sodium phosphate dibasic)", 141.96),
    weak_acid=Reagent("NaH2PO4 (sodium phosphate monobasic)", 119.98),
    notes=_STANDARD_NOTES,
    useful_range=(6.0, 8.0),
)

TRIS = BufferFamily(
    buffer_type=BufferType.TRIS,
    label="Tris buffer",
    pka_25c=TRIS_PKA_25C,
    dpka_dt=TRIS_DPKA_DT,
    conjugate_base=Reagent("Tris base", 121.14),
    weak_acid=Reagent("Tris-HCl", 157.6),
    notes=_STANDARD_NOTES + " Alternatively, use Tris base and adjust the pH with HCl.",
    useful_range=(7.0, 9.0),
)

CITRATE = BufferFamily(
    buffer_type=BufferType.CITRATE,
    label="Citrate buffer",
    pka_25c=4.76,
    conjugate_base=Reagent("Sodium citrate (dihydrate)", 258.07),
    weak_acid=Reagent("Citric acid (anhydrous)", 192.12),
    notes=_STANDARD_NOTES,
    useful_range=(3.0, 6.2),
)

ACETATE = BufferFamily(
    buffer_type=BufferType.ACETATE,
    label="Acetate buffer",
    pka_25c=4.76,
    conjugate_base=Reagent("Sodium acetate (anhydrous)", 82.03),
    weak_acid=Reagent(
        "Glacial acetic acid", 60.05, stock_molarity=GLACIAL_ACETIC_ACID_M
    ),
    notes=(
        "Dissolve the sodium acetate in water, add the acetic acid and adjust "
        "to the final volume."
    ),
    useful_range=(3.6, 5.6),
    acid_first=True,
)

CARBONATE = BufferFamily(
    buffer_type=BufferType.CARBONATE,
    label="Carbonate buffer",
    pka_25c=10.33,
    conjugate_base=Reagent("Sodium carbonate (Na2CO3)", 105.99),
    weak_acid=Reagent("Sodium bicarbonate (NaHCO3)", 84.01),
    notes=_STANDARD_NOTES,
    useful_range=(9.2, 10.8),
)

BUFFER_FAMILIES: Mapping[BufferType, BufferFamily] = MappingProxyType(
    {
        family.buffer_type: family
        for family in (PHOSPHATE, TRIS, CITRATE, ACETATE, CARBONATE)
    }
)


def get_family(buffer_type) -> BufferFamily:
    """Look up a family by enum member or tag.

    Raises:
        KeyError: If ``buffer_type`` is not one of the five supported tags.
    """
    member = BufferType.parse(buffer_type)
    if member is None:
        raise KeyError(f"Unknown buffer type {buffer_type!r}")
    return BUFFER_FAMILIES[member]
