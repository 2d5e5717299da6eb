"""
Buffer calculation engine.

One formula per buffer family, all sharing the Henderson-Hasselbalch split:

    ratio        = 10 ** (pH - pKa)
    total_moles  = concentration * volume
    moles_base   = ratio * total_moles / (1 + ratio)
    moles_acid   = total_moles - moles_base

Each mole quantity is then converted to grams (solid reagents) or mL of stock
(glacial acetic acid) and formatted to four decimal places.

The formula functions perform no range checks, so degenerate inputs produce
negative or NaN amounts. ``compute`` is the validated entry point: it never
raises and returns a ``BufferFormulaError`` for rejected input.
"""

from __future__ import annotations

import dataclasses
import logging
import math
import numbers
import warnings
from typing import Callable, Dict, Iterable, List

from .chemistry.buffer_region import buffer_region_bounds, in_buffer_region
from .chemistry.families import (
    ACETATE,
    CARBONATE,
    CITRATE,
    PHOSPHATE,
    TRIS,
    BufferFamily,
)
from .chemistry.hh_model import partition_moles
from .reporting import format_amount
from .schema import (
    CONJUGATE_BASE,
    WEAK_ACID,
    BufferComponent,
    BufferFormulaError,
    BufferOutcome,
    BufferRequest,
    BufferResult,
    BufferType,
)

logger = logging.getLogger(__name__)

INVALID_BUFFER_TYPE = "Invalid buffer type"
PH_SCALE = (0.0, 14.0)

Formula = Callable[[float, float, float, float], BufferResult]


def _prepare(
    family: BufferFamily,
    target_ph: float,
    volume: float,
    concentration: float,
    temperature: float,
) -> BufferResult:
    pka = family.pka(temperature)
    moles_base, moles_acid = partition_moles(target_ph, pka, concentration * volume)

    base = BufferComponent(
        name=family.conjugate_base.name,
        amount=format_amount(family.conjugate_base.quantity(moles_base)),
        unit=family.conjugate_base.unit,
        moles=moles_base,
        role=CONJUGATE_BASE,
    )
    acid = BufferComponent(
        name=family.weak_acid.name,
        amount=format_amount(family.weak_acid.quantity(moles_acid)),
        unit=family.weak_acid.unit,
        moles=moles_acid,
        role=WEAK_ACID,
    )
    components = (acid, base) if family.acid_first else (base, acid)

    return BufferResult(
        buffer_type=family.buffer_type,
        target_ph=target_ph,
        pka=pka,
        components=components,
        final_volume=volume,
        notes=family.notes,
    )


def calculate_phosphate_buffer(target_ph, volume, concentration, temperature=25.0):
    """Na2HPO4 / NaH2PO4 pair, pKa 7.20."""
    return _prepare(PHOSPHATE, target_ph, volume, concentration, temperature)


def calculate_tris_buffer(target_ph, volume, concentration, temperature=25.0):
    """Tris base / Tris-HCl pair.

    The pKa is 8.06 at 25 deg C and falls by 0.03 per degree above that; a
    lower pKa shifts the split toward the conjugate base.
    """
    return _prepare(TRIS, target_ph, volume, concentration, temperature)


def calculate_citrate_buffer(target_ph, volume, concentration, temperature=25.0):
    """Sodium citrate dihydrate / anhydrous citric acid, pKa 4.76."""
    return _prepare(CITRATE, target_ph, volume, concentration, temperature)


def calculate_acetate_buffer(target_ph, volume, concentration, temperature=25.0):
    """Glacial acetic acid (mL of 17.4 M stock) / anhydrous sodium acetate.

    Listed acid first, unlike the other families.
    """
    return _prepare(ACETATE, target_ph, volume, concentration, temperature)


def calculate_carbonate_buffer(target_ph, volume, concentration, temperature=25.0):
    """Na2CO3 / NaHCO3 pair, pKa 10.33."""
    return _prepare(CARBONATE, target_ph, volume, concentration, temperature)


FORMULAS: Dict[BufferType, Formula] = {
    BufferType.PHOSPHATE: calculate_phosphate_buffer,
    BufferType.TRIS: calculate_tris_buffer,
    BufferType.CITRATE: calculate_citrate_buffer,
    BufferType.ACETATE: calculate_acetate_buffer,
    BufferType.CARBONATE: calculate_carbonate_buffer,
}

_unmapped = set(BufferType) - set(FORMULAS)
if _unmapped:
    raise RuntimeError(f"No formula registered for {sorted(m.value for m in _unmapped)}")


def _validate_inputs(
    target_ph: float, volume: float, concentration: float, temperature: float
) -> BufferFormulaError | None:
    values = {
        "target_ph": target_ph,
        "volume": volume,
        "concentration": concentration,
        "temperature": temperature,
    }
    for name, value in values.items():
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            return BufferFormulaError(f"{name} must be numeric, got {value!r}", name)
        if not math.isfinite(float(value)):
            return BufferFormulaError(f"{name} must be finite, got {value}", name)

    if volume <= 0:
        return BufferFormulaError(f"volume must be positive, got {volume}", "volume")
    if concentration <= 0:
        return BufferFormulaError(
            f"concentration must be positive, got {concentration}", "concentration"
        )
    low, high = PH_SCALE
    if not low <= target_ph <= high:
        return BufferFormulaError(
            f"target_ph must lie within [{low:g}, {high:g}], got {target_ph}",
            "target_ph",
        )
    return None


def _buffer_region_warning(result: BufferResult) -> str | None:
    if in_buffer_region(result.target_ph, result.pka):
        return None
    low, high = buffer_region_bounds(result.pka)
    return (
        f"Target pH {result.target_ph:g} is outside the {result.buffer_type.value} "
        f"buffer region (pKa {result.pka:.2f}, effective pH {low:.2f}-{high:.2f}); "
        f"the solution will have little buffering capacity."
    )


def compute(
    buffer_type,
    target_ph: float,
    volume: float,
    concentration: float,
    temperature: float = 25.0,
    validate: bool = True,
) -> BufferOutcome:
    """Return the reagent amounts needed to prepare a buffer.

    Args:
        buffer_type (BufferType or str): One of ``phosphate``, ``tris``,
            ``citrate``, ``acetate`` or ``carbonate``.
        target_ph (float): Desired pH.
        volume (float): Final volume in L.
        concentration (float): Total buffer concentration in mol L^-1.
        temperature (float, optional): deg C, read only by the Tris formula.
            Defaults to ``25.0``.
        validate (bool, optional): Reject non-finite input, non-positive
            volume or concentration, and pH outside [0, 14], and flag pH
            outside pKa +/- 1. With ``False`` the raw formula result is
            returned unchecked. Defaults to ``True``.

    Returns:
        BufferResult or BufferFormulaError: Never raises; an unrecognized
        ``buffer_type`` yields ``BufferFormulaError("Invalid buffer type")``.

    Warns:
        UserWarning: If the target pH lies outside the family's buffer region.
    """
    member = BufferType.parse(buffer_type)
    if member is None:
        logger.debug("Rejected unknown buffer type %r", buffer_type)
        return BufferFormulaError(INVALID_BUFFER_TYPE, "buffer_type")

    if validate:
        error = _validate_inputs(target_ph, volume, concentration, temperature)
        if error is not None:
            logger.debug("Rejected %s request: %s", member.value, error.error)
            return error
        target_ph, volume, concentration, temperature = (
            float(v) for v in (target_ph, volume, concentration, temperature)
        )

    result = FORMULAS[member](target_ph, volume, concentration, temperature)
    logger.debug(
        "%s buffer at pH %s: pKa=%.3f components=%s",
        member.value,
        target_ph,
        result.pka,
        [(c.amount, c.unit) for c in result.components],
    )

    if validate:
        message = _buffer_region_warning(result)
        if message is not None:
            warnings.warn(message, UserWarning, stacklevel=2)
            result = dataclasses.replace(result, warnings=(message,))
    return result


def compute_request(request: BufferRequest, validate: bool = True) -> BufferOutcome:
    """Run :func:`compute` on a :class:`BufferRequest`."""
    return compute(
        request.buffer_type,
        request.target_ph,
        request.volume,
        request.concentration,
        request.temperature,
        validate=validate,
    )


def compute_many(
    requests: Iterable[BufferRequest], validate: bool = True
) -> List[BufferOutcome]:
    """Compute every request independently, preserving input order."""
    return [compute_request(req, validate=validate) for req in requests]
