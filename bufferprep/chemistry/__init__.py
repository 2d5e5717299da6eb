"""
Chemistry models for buffer preparation.

Modules:
    hh_model:
        Henderson-Hasselbalch partition of a total buffer amount into its
        conjugate base and weak acid, plus the Tris temperature correction.

    buffer_region:
        Buffer region selection enforcing |pH - pKa| <= 1, used to flag
        chemically poor target pH values.

    families:
        pKa rules, reagent molar masses and preparation notes for the five
        supported buffer systems.

Design Principle:
    This subpackage has no dependencies on plotting or pandas. It provides
    pure chemistry models that can be independently tested.
"""

from .buffer_region import in_buffer_region, select_buffer_region
from .families import BUFFER_FAMILIES, BufferFamily, Reagent, get_family
from .hh_model import conjugate_base_fraction, partition_moles, tris_pka

__all__ = [
    "BUFFER_FAMILIES",
    "BufferFamily",
    "Reagent",
    "conjugate_base_fraction",
    "get_family",
    "in_buffer_region",
    "partition_moles",
    "select_buffer_region",
    "tris_pka",
]
