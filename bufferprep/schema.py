"""Define the request, result and error values exchanged with the engine.

Every value here is immutable and created fresh per calculation. A call to
``bufferprep.engine.compute`` returns either a :class:`BufferResult` or a
:class:`BufferFormulaError`; both expose ``ok`` so callers can branch without
``isinstance`` checks.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple, Union


class BufferType(str, Enum):
    """The five supported buffer systems, keyed by their form tag."""

    PHOSPHATE = "phosphate"
    TRIS = "tris"
    CITRATE = "citrate"
    ACETATE = "acetate"
    CARBONATE = "carbonate"

    @classmethod
    def parse(cls, value) -> Optional["BufferType"]:
        """Return the matching member, or ``None`` for an unrecognized tag."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


CONJUGATE_BASE = "conjugate_base"
WEAK_ACID = "weak_acid"


@dataclass(frozen=True)
class BufferRequest:
    """Inputs for one buffer calculation.

    Attributes:
        buffer_type: Buffer family tag (``BufferType`` or its string value).
        target_ph: Desired pH, expected within [0, 14].
        volume: Final solution volume in L.
        concentration: Total buffer concentration in mol L^-1.
        temperature: Solution temperature in deg C. Only the Tris formula
            reads it.
    """

    buffer_type: Union[BufferType, str]
    target_ph: float
    volume: float
    concentration: float
    temperature: float = 25.0


@dataclass(frozen=True)
class BufferComponent:
    """One reagent line of a preparation recipe.

    Attributes:
        name: Reagent identity including formula and hydration state.
        amount: Quantity formatted with exactly four decimal places.
        unit: ``"g"`` for weighed solids, ``"mL"`` for liquid stock.
        moles: Unrounded amount of substance in mol.
        role: ``"conjugate_base"`` or ``"weak_acid"``.
    """

    name: str
    amount: str
    unit: str
    moles: float = float("nan")
    role: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "amount": self.amount, "unit": self.unit}


@dataclass(frozen=True)
class BufferResult:
    """Successful calculation: two reagent lines plus preparation guidance."""

    buffer_type: BufferType
    target_ph: float
    pka: float
    components: Tuple[BufferComponent, BufferComponent]
    final_volume: float
    notes: str
    volume_unit: str = "L"
    warnings: Tuple[str, ...] = ()

    ok = True

    def component(self, role: str) -> BufferComponent:
        """Return the component playing ``role`` regardless of list order."""
        for comp in self.components:
            if comp.role == role:
                return comp
        raise KeyError(f"No component with role {role!r}")

    def to_dict(self) -> Dict[str, object]:
        return {
            "components": [comp.to_dict() for comp in self.components],
            "finalVolume": self.final_volume,
            "volumeUnit": self.volume_unit,
            "notes": self.notes,
        }


@dataclass(frozen=True)
class BufferFormulaError:
    """Failed calculation, returned in place of a :class:`BufferResult`."""

    error: str
    parameter: Optional[str] = None

    ok = False

    def to_dict(self) -> Dict[str, str]:
        return {"error": self.error}


BufferOutcome = Union[BufferResult, BufferFormulaError]


@dataclass(frozen=True)
class ResultColumns:
    """Standard column labels for tabulated results.

    Attributes:
        buffer_type: Buffer family tag.
        target_ph: Requested pH.
        pka: pKa used for the split (temperature-adjusted for Tris).
        volume: Final volume in L.
        base_name, base_amount, base_unit: Conjugate-base reagent line.
        acid_name, acid_amount, acid_unit: Weak-acid reagent line.
        warnings: Semicolon-joined buffer-region warnings.
        error: Error message for rejected requests.
    """

    buffer_type: str = "Buffer Type"
    target_ph: str = "Target pH"
    pka: str = "pKa"
    volume: str = "Final Volume (L)"
    base_name: str = "Conjugate Base"
    base_amount: str = "Conjugate Base Amount"
    base_unit: str = "Conjugate Base Unit"
    acid_name: str = "Weak Acid"
    acid_amount: str = "Weak Acid Amount"
    acid_unit: str = "Weak Acid Unit"
    warnings: str = "Warnings"
    error: str = "Error"
