"""
A Python package for preparing chemical buffer solutions.

Given a target pH, volume, total concentration and temperature, computes the
masses (or stock volumes) of the two components of a phosphate, Tris, citrate,
acetate or carbonate buffer using the Henderson-Hasselbalch equation.

Modules:
    - engine: Per-family formulas and the validated ``compute`` entry point.
    - chemistry: Henderson-Hasselbalch partition, buffer region, family constants.
    - reporting: Amount formatting, text summaries and result tables.
    - data_processing: Loads batch requests from CSV files.
    - plotting: Composition plots of conjugate-base fraction against pH.
"""

__version__ = "1.0.0"

from .engine import (
    FORMULAS,
    calculate_acetate_buffer,
    calculate_carbonate_buffer,
    calculate_citrate_buffer,
    calculate_phosphate_buffer,
    calculate_tris_buffer,
    compute,
    compute_many,
    compute_request,
)
from .reporting import describe_result, family_table, format_amount, results_to_dataframe
from .schema import (
    BufferComponent,
    BufferFormulaError,
    BufferOutcome,
    BufferRequest,
    BufferResult,
    BufferType,
)

__all__ = [
    # Engine
    "compute",
    "compute_request",
    "compute_many",
    "FORMULAS",
    "calculate_phosphate_buffer",
    "calculate_tris_buffer",
    "calculate_citrate_buffer",
    "calculate_acetate_buffer",
    "calculate_carbonate_buffer",
    # Values
    "BufferType",
    "BufferRequest",
    "BufferComponent",
    "BufferResult",
    "BufferFormulaError",
    "BufferOutcome",
    # Reporting
    "format_amount",
    "describe_result",
    "results_to_dataframe",
    "family_table",
]
