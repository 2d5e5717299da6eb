"""Default inputs and output locations, overridable through the environment."""

from __future__ import annotations

import os


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


DEFAULT_BUFFER_TYPE = os.environ.get("BUFFERPREP_BUFFER_TYPE", "phosphate")
DEFAULT_TARGET_PH = _env_float("BUFFERPREP_TARGET_PH", 7.0)
DEFAULT_VOLUME_L = _env_float("BUFFERPREP_VOLUME_L", 1.0)
DEFAULT_CONCENTRATION_M = _env_float("BUFFERPREP_CONCENTRATION_M", 0.1)
DEFAULT_TEMPERATURE_C = _env_float("BUFFERPREP_TEMPERATURE_C", 25.0)

OUTPUT_DIR = os.environ.get("BUFFERPREP_OUTPUT_DIR", "output")
LOG_LEVEL = os.environ.get("BUFFERPREP_LOG_LEVEL", "INFO").upper()
