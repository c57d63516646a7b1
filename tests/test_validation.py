import pytest
import numpy as np
import pandas as pd
from skillcurve.evaluation.summary import SummaryConfig
from skillcurve.exceptions import InsufficientClassesError, LengthMismatchError
from skillcurve.validation import (
    validate_scores_labels, validate_two_classes, validate_draws,
    validate_dataframe_columns, validate_generate_params, validate_summary_config
)


def test_validate_scores_labels_valid():
    validate_scores_labels(np.array([0.0, 0.5, 1.0]), np.array([0, 1, 1]))


def test_validate_scores_labels_length_mismatch():
    with pytest.raises(LengthMismatchError, match="same length"):
        validate_scores_labels(np.array([0.1, 0.2]), np.array([0, 1, 1]))


def test_validate_scores_labels_empty():
    with pytest.raises(ValueError, match="at least one observation"):
        validate_scores_labels(np.array([]), np.array([]))


def test_validate_scores_labels_out_of_range():
    with pytest.raises(ValueError, match="must be in"):
        validate_scores_labels(np.array([0.1, 1.5]), np.array([0, 1]))
    with pytest.raises(ValueError, match="must be in"):
        validate_scores_labels(np.array([-0.1, 0.5]), np.array([0, 1]))


def test_validate_scores_labels_non_finite():
    with pytest.raises(ValueError, match="finite"):
        validate_scores_labels(np.array([0.1, np.nan]), np.array([0, 1]))


def test_validate_scores_labels_non_binary():
    with pytest.raises(ValueError, match="labels must be 0 or 1"):
        validate_scores_labels(np.array([0.1, 0.2, 0.3]), np.array([0, 1, 2]))


def test_validate_two_classes():
    validate_two_classes(np.array([0, 1]))
    with pytest.raises(InsufficientClassesError, match="single class \\(1\\)"):
        validate_two_classes(np.array([1, 1]))
    with pytest.raises(InsufficientClassesError, match="single class \\(0\\)"):
        validate_two_classes(np.array([0]))


def test_insufficient_classes_is_value_error():
    assert issubclass(InsufficientClassesError, ValueError)
    assert issubclass(LengthMismatchError, ValueError)


def test_validate_draws():
    validate_draws(np.zeros((3, 4)), 4)
    with pytest.raises(ValueError, match="1-D or 2-D"):
        validate_draws(np.zeros((2, 2, 2)), 2)
    with pytest.raises(ValueError, match="at least one draw"):
        validate_draws(np.zeros((0, 4)), 4)
    with pytest.raises(LengthMismatchError):
        validate_draws(np.zeros((3, 4)), 5)


def test_validate_dataframe_columns_valid():
    df = pd.DataFrame({"observed": [0, 1], "draw_0": [0.1, 0.2]})
    validate_dataframe_columns(df, {"observed"})


def test_validate_dataframe_columns_missing():
    df = pd.DataFrame({"draw_0": [0.1, 0.2]})
    with pytest.raises(ValueError, match="missing required columns"):
        validate_dataframe_columns(df, {"observed"})


def test_validate_generate_params_valid():
    validate_generate_params(100, 10, 42)


def test_validate_generate_params_too_few():
    with pytest.raises(ValueError, match="n must be at least 2"):
        validate_generate_params(1, 10, 42)


def test_validate_generate_params_too_large():
    with pytest.raises(ValueError, match="exceeds reasonable bounds"):
        validate_generate_params(2_000_000, 10, 42)


def test_validate_generate_params_invalid_draws():
    with pytest.raises(ValueError, match="draws must be positive"):
        validate_generate_params(100, 0, 42)


def test_validate_generate_params_negative_seed():
    with pytest.raises(ValueError, match="seed must be non-negative"):
        validate_generate_params(100, 10, -1)


def test_validate_summary_config_valid():
    validate_summary_config(SummaryConfig())
    validate_summary_config(SummaryConfig(plots=False, epsilon=1e-12, histogram_binwidth=0.1))


def test_validate_summary_config_invalid_plots():
    with pytest.raises(ValueError, match="plots must be a boolean"):
        validate_summary_config(SummaryConfig(plots="yes"))


def test_validate_summary_config_invalid_epsilon():
    with pytest.raises(ValueError, match="epsilon must be in"):
        validate_summary_config(SummaryConfig(epsilon=-1e-9))
    with pytest.raises(ValueError, match="epsilon must be in"):
        validate_summary_config(SummaryConfig(epsilon=0.5))


def test_validate_summary_config_invalid_binwidth():
    with pytest.raises(ValueError, match="histogram_binwidth must be in"):
        validate_summary_config(SummaryConfig(histogram_binwidth=0))


def test_validate_summary_config_non_numeric():
    with pytest.raises(ValueError, match="epsilon must be a number"):
        validate_summary_config(SummaryConfig(epsilon="1e-9"))
    with pytest.raises(ValueError, match="histogram_binwidth must be a number"):
        validate_summary_config(SummaryConfig(histogram_binwidth=None))
