import numpy as np
import pytest
from scipy.stats import norm
from skillcurve.exceptions import LengthMismatchError
from skillcurve.ml.model import SimpleFit, RandomEffectsFit, fitted_probabilities


def test_fitted_probabilities_mean_of_draw_probabilities():
    draws = np.array([[0.0, 3.0], [2.0, -3.0]])
    probs = fitted_probabilities(draws)
    np.testing.assert_allclose(probs, [(0.5 + norm.cdf(2.0)) / 2, 0.5])
    # Not the probability of the mean predictor
    assert probs[0] != pytest.approx(norm.cdf(1.0))


def test_fitted_probabilities_single_draw():
    probs = fitted_probabilities(np.array([-1.0, 0.0, 1.0]))
    np.testing.assert_allclose(probs, norm.cdf([-1.0, 0.0, 1.0]))


def test_simple_fit_scores_and_labels():
    draws = np.random.RandomState(0).normal(size=(10, 6))
    scores, labels = SimpleFit(draws, [1, 0, 1, 0, 1, 0]).scores_and_labels()
    assert scores.shape == (6,)
    assert np.all((scores >= 0) & (scores <= 1))
    assert labels.tolist() == [1, 0, 1, 0, 1, 0]


def test_simple_fit_length_mismatch():
    with pytest.raises(LengthMismatchError, match="observations"):
        SimpleFit(np.zeros((3, 5)), [1, 0]).scores_and_labels()


def test_simple_fit_rejects_non_finite_draws():
    draws = np.array([[0.0, np.nan]])
    with pytest.raises(ValueError, match="finite"):
        SimpleFit(draws, [1, 0]).scores_and_labels()


def test_random_effects_fit_uses_fixed_effects_only():
    draws = np.random.RandomState(1).normal(size=(5, 4))
    labels = [0, 1, 0, 1]
    simple = SimpleFit(draws, labels).scores_and_labels()
    mixed = RandomEffectsFit(draws, labels).scores_and_labels()
    np.testing.assert_array_equal(simple[0], mixed[0])
    np.testing.assert_array_equal(simple[1], mixed[1])


def test_random_effects_fit_cannot_incorporate_effects():
    fit = RandomEffectsFit(np.zeros((2, 2)), [0, 1], effects_ignored=False)
    with pytest.raises(ValueError, match="random effects"):
        fit.scores_and_labels()
