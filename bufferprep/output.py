"""Write calculation results to reproducible CSV files.

This module is the output boundary between in-memory results and files a user
keeps next to their lab notebook.
"""

from __future__ import annotations

import logging
import os

import pandas as pd

from .reporting import family_table

logger = logging.getLogger(__name__)

RESULTS_FILENAME = "buffer_recipes.csv"
FAMILIES_FILENAME = "buffer_families.csv"


def save_results_to_csv(
    results_df: pd.DataFrame, output_dir: str = "output", filename: str = RESULTS_FILENAME
) -> str:
    """Save tabulated recipes to CSV.

    Args:
        results_df (pandas.DataFrame): Output from
            ``bufferprep.reporting.results_to_dataframe``.
        output_dir (str): Directory where the CSV is written; created if
            needed.
        filename (str): File name inside ``output_dir``.

    Returns:
        str: Path of the written file.

    Raises:
        ValueError: If ``results_df`` has no rows.
    """
    if results_df.empty:
        raise ValueError("No results to save.")

    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, filename)
    results_df.to_csv(path, index=False)
    logger.info("Saved %d buffer recipes to %s", len(results_df), path)
    return path


def save_family_table(output_dir: str = "output") -> str:
    """Write the buffer family reference table next to the recipes."""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, FAMILIES_FILENAME)
    family_table().to_csv(path, index=False)
    logger.info("Saved buffer family reference table to %s", path)
    return path
