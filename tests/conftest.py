"""Pytest configuration for repository-relative imports and headless plotting."""

import os
import sys

import matplotlib
import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

matplotlib.use("Agg")


@pytest.fixture
def one_litre_decimolar():
    """Volume and concentration of the worked examples: 1.0 L at 0.1 M."""
    return {"volume": 1.0, "concentration": 0.1}
