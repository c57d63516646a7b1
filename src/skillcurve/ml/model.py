"""
Adapters from fitted probit-model output to scores and labels.

A fitted model is described by its posterior draws of the linear predictor on the
training set and the observed 0/1 outcomes. Each adapter exposes a single method,
``scores_and_labels()``, and the evaluation core never looks past it.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Tuple
import logging
import numpy as np
from scipy.stats import norm

from skillcurve.validation import validate_draws

logger = logging.getLogger(__name__)


class ModelAdapter(Protocol):
    def scores_and_labels(self) -> Tuple[np.ndarray, np.ndarray]:
        ...


def fitted_probabilities(draws: np.ndarray) -> np.ndarray:
    """
    Average the per-draw probit probabilities for each observation.

    Parameters
    ----------
    draws : np.ndarray
        Linear predictor draws of shape (n_draws, n_obs). A 1-D array is
        treated as a single draw.

    Returns
    -------
    np.ndarray
        Probability per observation: ``mean_d Phi(draws[d, i])``. This is the
        mean of per-draw probabilities, not the probability of the mean predictor.
    """
    draws = np.atleast_2d(np.asarray(draws, dtype=float))
    return norm.cdf(draws).mean(axis=0)


def _as_draws_and_labels(draws, labels) -> Tuple[np.ndarray, np.ndarray]:
    labels = np.asarray(labels).ravel()
    draws = np.atleast_2d(np.asarray(draws, dtype=float))
    validate_draws(draws, len(labels))
    return draws, labels


@dataclass(frozen=True)
class SimpleFit:
    """A single-fit probit model: draws of the linear predictor plus outcomes."""
    draws: np.ndarray
    labels: np.ndarray
    call: Optional[str] = None
    predictors: List[str] = field(default_factory=list)

    def scores_and_labels(self) -> Tuple[np.ndarray, np.ndarray]:
        draws, labels = _as_draws_and_labels(self.draws, self.labels)
        return fitted_probabilities(draws), labels


@dataclass(frozen=True)
class RandomEffectsFit:
    """
    A probit model fitted with random intercepts.

    Only the fixed-effect draws are evaluated; the random-effects contribution is
    never folded into the scores. ``effects_ignored`` records that limitation and
    must stay True.
    """
    draws: np.ndarray
    labels: np.ndarray
    effects_ignored: bool = True
    call: Optional[str] = None
    predictors: List[str] = field(default_factory=list)

    def scores_and_labels(self) -> Tuple[np.ndarray, np.ndarray]:
        if not self.effects_ignored:
            raise ValueError("random effects cannot be incorporated into the evaluated scores")
        logger.info("Evaluating fixed-effect fits only; random effects are not incorporated")
        draws, labels = _as_draws_and_labels(self.draws, self.labels)
        return fitted_probabilities(draws), labels
