"""Composition plots for buffer families.

All plotting functions take a buffer tag and conditions, evaluate the
Henderson-Hasselbalch fractions on a pH grid, and write a PNG. No reagent
amounts are computed here.
"""

from __future__ import annotations

import os
import re
from typing import Optional

import matplotlib.pyplot as plt
import numpy as np

from .chemistry.buffer_region import buffer_region_bounds
from .chemistry.families import BUFFER_FAMILIES, get_family
from .chemistry.hh_model import conjugate_base_fraction

FIGURE_DPI = 300
FIGSIZE_SINGLE = (7.0, 4.2)
PH_GRID = np.linspace(0.0, 14.0, 561)

FAMILY_COLORS = {
    "phosphate": "#1f77b4",
    "tris": "#1b9e77",
    "citrate": "#ff7f0e",
    "acetate": "#9467bd",
    "carbonate": "#d62728",
}

_STYLE_STATE = {"initialized": False}


def setup_plot_style() -> None:
    """Apply the project plotting style once per process."""
    if _STYLE_STATE["initialized"]:
        return
    plt.rcParams.update(
        {
            "font.family": "STIXGeneral",
            "mathtext.fontset": "stix",
            "font.size": 12.0,
            "axes.labelsize": 12.0,
            "axes.titlesize": 14.0,
            "legend.fontsize": 11.0,
            "axes.spines.top": False,
            "axes.spines.right": False,
            "legend.frameon": False,
            "lines.linewidth": 2.0,
            "savefig.dpi": FIGURE_DPI,
            "savefig.bbox": "tight",
            "savefig.pad_inches": 0.12,
        }
    )
    _STYLE_STATE["initialized"] = True


def sanitize_filename(name: str) -> str:
    """Normalize a filename component into a stable, filesystem-safe token."""
    text = re.sub(r"\s+", "_", str(name).strip())
    text = re.sub(r"[^A-Za-z0-9._-]+", "_", text)
    text = re.sub(r"_+", "_", text).strip("._")
    return text or "figure"


def plot_buffer_composition(
    buffer_type,
    temperature: float = 25.0,
    target_ph: Optional[float] = None,
    output_dir: str = "output",
) -> str:
    """Plot conjugate-base and weak-acid mole fractions against pH.

    Args:
        buffer_type (BufferType or str): Buffer family tag.
        temperature (float, optional): deg C, shifts the Tris curve. Defaults
            to ``25.0``.
        target_ph (float, optional): If given, mark this pH and the fractions
            the recipe will contain.
        output_dir (str, optional): Directory for the PNG. Defaults to
            ``"output"``.

    Returns:
        str: Path of the saved PNG.

    Raises:
        ValueError: If ``buffer_type`` is not a supported family.

    Note:
        The shaded band is the pKa +/- 1 buffer region; the dotted lines mark
        the family's commonly quoted working range.
    """
    try:
        family = get_family(buffer_type)
    except KeyError as exc:
        raise ValueError(f"Cannot plot unknown buffer type {buffer_type!r}") from exc

    setup_plot_style()
    os.makedirs(output_dir, exist_ok=True)

    pka = family.pka(temperature)
    base_frac = conjugate_base_fraction(PH_GRID, pka)
    low, high = buffer_region_bounds(pka)

    fig, ax = plt.subplots(figsize=FIGSIZE_SINGLE)
    ax.plot(PH_GRID, base_frac, color="black", label=family.conjugate_base.name)
    ax.plot(
        PH_GRID, 1.0 - base_frac, color="black", linestyle="--",
        label=family.weak_acid.name,
    )
    ax.axvspan(low, high, color="0.85", alpha=0.6, lw=0, label="pKa $\\pm$ 1")
    for edge in family.useful_range:
        ax.axvline(edge, color="0.4", linestyle=":", linewidth=1.2)
    ax.axvline(pka, color="0.2", linewidth=1.0)
    ax.annotate(
        f"pKa = {pka:.2f}", xy=(pka, 0.5), xytext=(6, 0),
        textcoords="offset points", va="center", fontsize=10,
    )

    if target_ph is not None:
        frac = conjugate_base_fraction(target_ph, pka)
        ax.plot([target_ph, target_ph], [frac, 1.0 - frac], "o", color="black")
        ax.axvline(target_ph, color="black", linestyle="-.", linewidth=1.0,
                   label=f"target pH {target_ph:g}")

    ax.set_xlim(0.0, 14.0)
    ax.set_ylim(-0.02, 1.02)
    ax.set_xlabel("pH")
    ax.set_ylabel("Mole fraction")
    ax.set_title(f"{family.label} at {temperature:g} $^\\circ$C")
    ax.legend(loc="center left", bbox_to_anchor=(1.01, 0.5))

    stem = sanitize_filename(f"composition_{family.buffer_type.value}_{temperature:g}C")
    out_path = os.path.join(output_dir, f"{stem}.png")
    fig.savefig(out_path, dpi=FIGURE_DPI)
    plt.close(fig)
    return out_path


def plot_family_overview(temperature: float = 25.0, output_dir: str = "output") -> str:
    """Overlay the conjugate-base fraction of every family on one axis."""
    setup_plot_style()
    os.makedirs(output_dir, exist_ok=True)

    fig, ax = plt.subplots(figsize=FIGSIZE_SINGLE)
    for family in BUFFER_FAMILIES.values():
        tag = family.buffer_type.value
        pka = family.pka(temperature)
        ax.plot(
            PH_GRID,
            conjugate_base_fraction(PH_GRID, pka),
            color=FAMILY_COLORS.get(tag, "#4A4A4A"),
            label=f"{family.label} (pKa {pka:.2f})",
        )

    ax.set_xlim(0.0, 14.0)
    ax.set_ylim(-0.02, 1.02)
    ax.set_xlabel("pH")
    ax.set_ylabel("Conjugate base mole fraction")
    ax.legend(loc="center left", bbox_to_anchor=(1.01, 0.5))

    stem = sanitize_filename(f"family_overview_{temperature:g}C")
    out_path = os.path.join(output_dir, f"{stem}.png")
    fig.savefig(out_path, dpi=FIGURE_DPI)
    plt.close(fig)
    return out_path
