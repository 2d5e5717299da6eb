"""Tests for CSV export of recipes and the family reference table."""

import os
import warnings

import pandas as pd
import pytest

from bufferprep.engine import compute_many
from bufferprep.output import save_family_table, save_results_to_csv
from bufferprep.reporting import COLUMNS, results_to_dataframe
from bufferprep.schema import BufferRequest


def test_save_results_to_csv(tmp_path):
    requests = [
        BufferRequest("phosphate", 7.2, 1.0, 0.1),
        BufferRequest("citrate", 9.5, 1.0, 0.1),
        BufferRequest("borate", 9.2, 1.0, 0.1),
    ]
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", UserWarning)
        outcomes = compute_many(requests)

    out_dir = tmp_path / "nested"
    path = save_results_to_csv(results_to_dataframe(outcomes, requests), str(out_dir))

    assert path == os.path.join(str(out_dir), "buffer_recipes.csv")
    saved = pd.read_csv(path, dtype=str, keep_default_na=False)
    assert len(saved) == 3
    assert saved.loc[0, COLUMNS.base_amount] == "7.0980"
    assert "outside the citrate buffer region" in saved.loc[1, COLUMNS.warnings]
    assert saved.loc[2, COLUMNS.error] == "Invalid buffer type"
    assert saved.loc[2, COLUMNS.buffer_type] == "borate"


def test_save_results_rejects_empty_frame(tmp_path):
    with pytest.raises(ValueError, match="No results to save"):
        save_results_to_csv(results_to_dataframe([]), str(tmp_path))


def test_save_family_table(tmp_path):
    path = save_family_table(str(tmp_path))
    saved = pd.read_csv(path)
    assert sorted(saved["Buffer Type"]) == [
        "acetate", "carbonate", "citrate", "phosphate", "tris",
    ]
