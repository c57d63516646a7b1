"""
Input validation utilities for the skillcurve pipeline.
"""
from __future__ import annotations
from typing import Set
import numpy as np
import pandas as pd
from skillcurve.exceptions import InsufficientClassesError, LengthMismatchError


def validate_scores_labels(scores: np.ndarray, labels: np.ndarray) -> None:
    """Validate a parallel pair of probability scores and 0/1 labels."""
    if len(scores) != len(labels):
        raise LengthMismatchError(
            f"scores and labels must have the same length, got {len(scores)} and {len(labels)}"
        )
    if len(scores) == 0:
        raise ValueError("at least one observation is required")
    if not np.all(np.isfinite(scores)):
        raise ValueError("scores must be finite")
    if np.any((scores < 0) | (scores > 1)):
        raise ValueError("scores must be in [0, 1]")
    if not np.isin(labels, (0, 1)).all():
        raise ValueError("labels must be 0 or 1")
    validate_two_classes(labels)


def validate_two_classes(labels: np.ndarray) -> None:
    """Both label classes must be present, otherwise the rate denominators are zero."""
    n_pos = int(np.count_nonzero(labels))
    if n_pos == 0 or n_pos == len(labels):
        only = 1 if n_pos else 0
        raise InsufficientClassesError(
            f"labels contain a single class ({only}); both 0 and 1 are required"
        )


def validate_draws(draws: np.ndarray, n_labels: int) -> None:
    """Validate a (n_draws, n_obs) matrix of fitted linear predictors."""
    if draws.ndim != 2:
        raise ValueError(f"draws must be a 1-D or 2-D array, got {draws.ndim} dimensions")
    if draws.shape[0] == 0:
        raise ValueError("draws must contain at least one draw")
    if draws.shape[1] != n_labels:
        raise LengthMismatchError(
            f"draws have {draws.shape[1]} observations but labels have {n_labels}"
        )
    if not np.all(np.isfinite(draws)):
        raise ValueError("draws must be finite")


def validate_dataframe_columns(df: pd.DataFrame, required_cols: Set[str]) -> None:
    """Validate that dataframe contains required columns."""
    missing = required_cols - set(df.columns)
    if missing:
        raise ValueError(f"DataFrame missing required columns: {missing}")


def validate_generate_params(n: int, draws: int, seed: int) -> None:
    """Validate parameters for synthetic draw generation."""
    if n <= 1:
        raise ValueError(f"n must be at least 2, got {n}")
    if n > 1_000_000:
        raise ValueError(f"n exceeds reasonable bounds: {n}")
    if draws <= 0:
        raise ValueError(f"draws must be positive, got {draws}")
    if seed < 0:
        raise ValueError(f"seed must be non-negative, got {seed}")


def validate_summary_config(cfg) -> None:
    """Validate summary configuration."""
    if not isinstance(cfg.plots, bool):
        raise ValueError(f"plots must be a boolean, got {cfg.plots!r}")
    for name in ("epsilon", "histogram_binwidth"):
        value = getattr(cfg, name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"{name} must be a number, got {value!r}")
    if not (0 < cfg.epsilon < 1e-3):
        raise ValueError(f"epsilon must be in (0, 1e-3), got {cfg.epsilon}")
    if not (0 < cfg.histogram_binwidth <= 1):
        raise ValueError(f"histogram_binwidth must be in (0, 1], got {cfg.histogram_binwidth}")
