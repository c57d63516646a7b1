"""
Synthetic probit-model output for testing and demonstrating the summary.

Generates what a fitted Bayesian probit model would hand over:
- A matrix of posterior draws of the linear predictor per training observation
- The observed binary outcomes those draws were fitted to
"""
import numpy as np
import pandas as pd
from typing import Optional, Tuple

# Spread of the posterior draws around each observation's true latent predictor
DRAW_NOISE = 0.35

# Latent predictor intercept (controls prevalence)
INTERCEPT = 0.0


def generate_draws(
    n_obs: int,
    n_draws: int = 100,
    separation: float = 1.0,
    seed: Optional[int] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Generate posterior linear-predictor draws and observed outcomes.

    Outcomes follow a probit model ``y = 1[eta + e > 0]`` with a latent
    predictor ``eta = INTERCEPT + separation * x``. Draws scatter around
    ``eta`` with standard deviation ``DRAW_NOISE``, mimicking posterior
    uncertainty of a fitted model.

    Parameters
    ----------
    n_obs : int
        Number of training observations. Must be at least 2.
    n_draws : int, optional
        Number of posterior draws (default: 100).
    separation : float, optional
        Strength of the signal. 0 gives scores independent of outcomes
        (default: 1.0).
    seed : int, optional
        Random seed for reproducibility.

    Returns
    -------
    Tuple[np.ndarray, np.ndarray]
        ``draws`` of shape (n_draws, n_obs) and 0/1 ``labels`` of length n_obs.
        Both classes are always present.

    Examples
    --------
    >>> draws, y = generate_draws(500, n_draws=50, separation=1.5, seed=42)
    >>> draws.shape
    (50, 500)
    """
    if n_obs < 2:
        raise ValueError(f"n_obs must be at least 2, got {n_obs}")
    if n_draws <= 0:
        raise ValueError(f"n_draws must be positive, got {n_draws}")

    rng = np.random.RandomState(seed)

    x = rng.normal(0, 1, size=n_obs)
    eta = INTERCEPT + separation * x
    labels = (eta + rng.normal(0, 1, size=n_obs) > 0).astype(int)

    # Guarantee both classes so the sample can always be summarized
    if labels.min() == labels.max():
        order = np.argsort(eta, kind="mergesort")
        labels[order[0]] = 0
        labels[order[-1]] = 1

    draws = eta[np.newaxis, :] + rng.normal(0, DRAW_NOISE, size=(n_draws, n_obs))
    return draws, labels


def draws_to_frame(draws: np.ndarray, labels: np.ndarray) -> pd.DataFrame:
    """One row per observation: ``observed`` followed by ``draw_0 .. draw_k``."""
    df = pd.DataFrame(draws.T, columns=[f"draw_{i}" for i in range(draws.shape[0])])
    df.insert(0, "observed", labels)
    return df


def frame_to_draws(df: pd.DataFrame) -> Tuple[np.ndarray, np.ndarray]:
    draw_cols = [c for c in df.columns if c.startswith("draw_")]
    if not draw_cols:
        raise ValueError("DataFrame has no draw_* columns")
    return df[draw_cols].to_numpy(dtype=float).T, df["observed"].to_numpy()


def save_csv(df: pd.DataFrame, path: str) -> None:
    df.to_csv(path, index=False)
