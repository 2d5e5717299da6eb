"""
Handles CSV parsing of batch buffer requests.
"""

# Expected layout: one request per row with columns buffer_type, target_ph,
# volume_l, concentration_m and an optional temperature_c (defaults to 25).
# Buffer type tags are passed through untouched so the engine reports
# unknown tags per row instead of failing the whole batch.

import logging

import pandas as pd

from .config import DEFAULT_TEMPERATURE_C
from .schema import BufferRequest

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("buffer_type", "target_ph", "volume_l", "concentration_m")
TEMPERATURE_COLUMN = "temperature_c"


def load_request_table(filepath):
    """
    Load a batch request table from a CSV file.

    Args:
        filepath (str): Path to the CSV file.

    Returns:
        pd.DataFrame: Loaded DataFrame with normalised column names.
    """
    df = pd.read_csv(filepath)
    df.columns = [str(col).strip().lower() for col in df.columns]
    return df


def requests_from_dataframe(df):
    """Convert a request table into :class:`BufferRequest` values.

    Numeric columns are coerced with ``pd.to_numeric``; blank temperatures fall
    back to the configured default. Out-of-range values are kept as-is, since
    range checks belong to the engine.

    Args:
        df: DataFrame with the columns listed in ``REQUIRED_COLUMNS``.

    Returns:
        list[BufferRequest]: One request per row, in file order.

    Raises:
        KeyError: If a required column is missing.
        ValueError: If a row has a blank buffer type or a non-numeric value
            in a required numeric column.
    """
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise KeyError(f"Request table missing required columns: {missing}")

    working = df.copy()
    for col in REQUIRED_COLUMNS[1:]:
        working[col] = pd.to_numeric(working[col], errors="coerce")
    if TEMPERATURE_COLUMN in working.columns:
        working[TEMPERATURE_COLUMN] = pd.to_numeric(
            working[TEMPERATURE_COLUMN], errors="coerce"
        ).fillna(DEFAULT_TEMPERATURE_C)
    else:
        working[TEMPERATURE_COLUMN] = DEFAULT_TEMPERATURE_C

    requests = []
    for idx, row in working.iterrows():
        # Row numbers are reported 1-based, counting the header as row 1.
        line = int(idx) + 2
        bad = [col for col in REQUIRED_COLUMNS[1:] if pd.isna(row[col])]
        if bad:
            raise ValueError(f"Row {line}: non-numeric or missing value in {bad}")
        if pd.isna(row["buffer_type"]) or not str(row["buffer_type"]).strip():
            raise ValueError(f"Row {line}: buffer_type is blank")

        requests.append(
            BufferRequest(
                buffer_type=str(row["buffer_type"]).strip(),
                target_ph=float(row["target_ph"]),
                volume=float(row["volume_l"]),
                concentration=float(row["concentration_m"]),
                temperature=float(row[TEMPERATURE_COLUMN]),
            )
        )

    logger.debug("Parsed %d buffer requests", len(requests))
    return requests


def load_requests(filepath):
    """Load and parse a batch request CSV in one step."""
    return requests_from_dataframe(load_request_table(filepath))
