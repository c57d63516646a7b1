import warnings
import numpy as np
import pytest
from skillcurve.data.synthetic_generator import generate_draws, draws_to_frame, frame_to_draws
from skillcurve.evaluation.summary import summarize
from skillcurve.exceptions import DegenerateRateWarning
from skillcurve.ml.model import SimpleFit


def test_generate_draws_shapes():
    draws, labels = generate_draws(200, n_draws=30, seed=123)
    assert draws.shape == (30, 200)
    assert labels.shape == (200,)
    assert set(np.unique(labels)) == {0, 1}


def test_generate_draws_reproducible():
    a = generate_draws(50, n_draws=5, seed=7)
    b = generate_draws(50, n_draws=5, seed=7)
    np.testing.assert_array_equal(a[0], b[0])
    np.testing.assert_array_equal(a[1], b[1])


def test_generate_draws_always_two_classes():
    _, labels = generate_draws(2, n_draws=1, separation=0.0, seed=0)
    assert sorted(labels.tolist()) == [0, 1]


def test_generate_draws_invalid_params():
    with pytest.raises(ValueError, match="n_obs must be at least 2"):
        generate_draws(1)
    with pytest.raises(ValueError, match="n_draws must be positive"):
        generate_draws(10, n_draws=0)


def test_separation_controls_auc():
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", DegenerateRateWarning)
        strong = summarize(SimpleFit(*generate_draws(2000, n_draws=20, separation=2.0, seed=1)), plots=False)
        none = summarize(SimpleFit(*generate_draws(4000, n_draws=20, separation=0.0, seed=1)), plots=False)
    assert strong.auc > 0.75
    assert abs(none.auc - 0.5) < 0.05


def test_frame_conversion():
    draws, labels = generate_draws(20, n_draws=3, seed=2)
    df = draws_to_frame(draws, labels)
    assert list(df.columns) == ["observed", "draw_0", "draw_1", "draw_2"]
    back_draws, back_labels = frame_to_draws(df)
    np.testing.assert_allclose(back_draws, draws)
    np.testing.assert_array_equal(back_labels, labels)


def test_frame_to_draws_requires_draw_columns():
    df = draws_to_frame(*generate_draws(5, n_draws=1, seed=0)).drop(columns=["draw_0"])
    with pytest.raises(ValueError, match="no draw_"):
        frame_to_draws(df)
