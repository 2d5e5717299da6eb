"""Format calculation outcomes for display and tabular export.

This module is used after the engine has produced results; it never computes
amounts itself.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Iterable, List, Optional

import numpy as np
import pandas as pd

from .chemistry.families import BUFFER_FAMILIES
from .schema import (
    CONJUGATE_BASE,
    WEAK_ACID,
    BufferFormulaError,
    BufferResult,
    BufferType,
    ResultColumns,
)

AMOUNT_DECIMALS = 4
COLUMNS = ResultColumns()


def format_amount(value: float) -> str:
    """Format a reagent amount with exactly four decimal places.

    Args:
        value (float): Mass in g or volume in mL.

    Returns:
        str: Fixed-point string, e.g. ``0.5`` -> ``"0.5000"``. Non-finite
        values format as ``"nan"``, ``"inf"`` or ``"-inf"``.
    """
    return f"{float(value):.{AMOUNT_DECIMALS}f}"


def describe_result(outcome) -> str:
    """Render an outcome as the multi-line text shown to a user.

    Args:
        outcome (BufferResult or BufferFormulaError): Engine output.

    Returns:
        str: Either ``"Error: <message>"`` or a heading line followed by one
        bullet per reagent, the preparation notes, and any warnings.
    """
    if not outcome.ok:
        return f"Error: {outcome.error}"

    label = BUFFER_FAMILIES[outcome.buffer_type].label.lower()
    lines = [
        f"To prepare {outcome.final_volume:g} {outcome.volume_unit} of "
        f"{label} at pH {outcome.target_ph:g}:"
    ]
    for comp in outcome.components:
        lines.append(f"  - {comp.name}: {comp.amount} {comp.unit}")
    lines.append(outcome.notes)
    for message in outcome.warnings:
        lines.append(f"Warning: {message}")
    return "\n".join(lines)


def _result_row(outcome: BufferResult) -> dict:
    base = outcome.component(CONJUGATE_BASE)
    acid = outcome.component(WEAK_ACID)
    return {
        COLUMNS.buffer_type: outcome.buffer_type.value,
        COLUMNS.target_ph: outcome.target_ph,
        COLUMNS.pka: outcome.pka,
        COLUMNS.volume: outcome.final_volume,
        COLUMNS.base_name: base.name,
        COLUMNS.base_amount: base.amount,
        COLUMNS.base_unit: base.unit,
        COLUMNS.acid_name: acid.name,
        COLUMNS.acid_amount: acid.amount,
        COLUMNS.acid_unit: acid.unit,
        COLUMNS.warnings: "; ".join(outcome.warnings),
        COLUMNS.error: "",
    }


def _tag(buffer_type) -> str:
    return buffer_type.value if isinstance(buffer_type, BufferType) else str(buffer_type)


def _error_row(outcome: BufferFormulaError, request=None) -> dict:
    return {
        COLUMNS.buffer_type: _tag(getattr(request, "buffer_type", "")),
        COLUMNS.target_ph: getattr(request, "target_ph", np.nan),
        COLUMNS.pka: np.nan,
        COLUMNS.volume: getattr(request, "volume", np.nan),
        COLUMNS.base_name: "",
        COLUMNS.base_amount: "",
        COLUMNS.base_unit: "",
        COLUMNS.acid_name: "",
        COLUMNS.acid_amount: "",
        COLUMNS.acid_unit: "",
        COLUMNS.warnings: "",
        COLUMNS.error: outcome.error,
    }


def results_to_dataframe(
    outcomes: Iterable, requests: Optional[Iterable] = None
) -> pd.DataFrame:
    """Tabulate engine outcomes, one row per request.

    Reagent columns are keyed by role (conjugate base / weak acid), so acetate
    rows line up with the other families despite its acid-first ordering.
    Amount columns hold the four-decimal strings unchanged.

    Args:
        outcomes (Iterable): ``BufferResult`` / ``BufferFormulaError`` values.
        requests (Iterable, optional): The ``BufferRequest`` values that
            produced ``outcomes``, in the same order. Used to echo the inputs
            on error rows.

    Returns:
        pandas.DataFrame: Columns named by :class:`ResultColumns`.
    """
    outcomes = list(outcomes)
    requests = list(requests) if requests is not None else [None] * len(outcomes)
    if len(requests) != len(outcomes):
        raise ValueError(
            f"Got {len(outcomes)} outcomes but {len(requests)} requests."
        )

    rows: List[dict] = []
    for outcome, request in zip(outcomes, requests):
        if outcome.ok:
            rows.append(_result_row(outcome))
        else:
            rows.append(_error_row(outcome, request))
    columns = list(asdict(COLUMNS).values())
    return pd.DataFrame.from_records(rows, columns=columns)


def family_table() -> pd.DataFrame:
    """Reference table of the supported buffer systems at 25 deg C."""
    records = []
    for family in BUFFER_FAMILIES.values():
        low, high = family.useful_range
        records.append(
            {
                "Buffer Type": family.buffer_type.value,
                "Label": family.label,
                "pKa (25 C)": family.pka_25c,
                "Useful pH Low": low,
                "Useful pH High": high,
                "Conjugate Base": family.conjugate_base.name,
                "Weak Acid": family.weak_acid.name,
            }
        )
    return pd.DataFrame.from_records(records)
