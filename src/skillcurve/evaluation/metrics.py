"""
Threshold-sweep metrics: ROC curve, AUC, true skill statistic and SEDI.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Tuple
import logging
import warnings
import numpy as np
import pandas as pd
from sklearn.metrics import auc as trapezoid_auc

from skillcurve.exceptions import DegenerateRateWarning
from skillcurve.validation import validate_scores_labels

logger = logging.getLogger(__name__)

# Substitute for exactly-zero rates before taking logarithms
SEDI_EPSILON = 1e-9

# Metric values closer than this to the maximum count as tied
TIE_TOLERANCE = 1e-12


@dataclass(frozen=True)
class ObservationSet:
    """
    Fitted probability scores paired with observed 0/1 labels.

    Arrays are copied and made read-only on construction, so the set cannot
    change while a summary is being computed.
    """
    scores: np.ndarray
    labels: np.ndarray

    def __post_init__(self):
        scores = np.array(self.scores, dtype=float).ravel()
        labels = np.array(self.labels).ravel()
        validate_scores_labels(scores, labels)
        labels = labels.astype(int)
        scores.setflags(write=False)
        labels.setflags(write=False)
        object.__setattr__(self, "scores", scores)
        object.__setattr__(self, "labels", labels)

    def __len__(self) -> int:
        return len(self.scores)

    @property
    def n_positive(self) -> int:
        return int(self.labels.sum())

    @property
    def n_negative(self) -> int:
        return len(self) - self.n_positive


@dataclass(frozen=True)
class ROCPoint:
    threshold: float
    tpr: float
    fpr: float
    tnr: float
    fnr: float


@dataclass(frozen=True)
class ROCCurve:
    """Confusion-matrix rates per threshold, ordered from the highest threshold down."""
    thresholds: np.ndarray
    tpr: np.ndarray
    fpr: np.ndarray
    tnr: np.ndarray
    fnr: np.ndarray

    def __len__(self) -> int:
        return len(self.thresholds)

    def points(self) -> Iterator[ROCPoint]:
        for t, tp, fp, tn, fn in zip(self.thresholds, self.tpr, self.fpr, self.tnr, self.fnr):
            yield ROCPoint(float(t), float(tp), float(fp), float(tn), float(fn))

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({
            "threshold": self.thresholds,
            "tpr": self.tpr,
            "fpr": self.fpr,
            "tnr": self.tnr,
            "fnr": self.fnr,
        })


@dataclass(frozen=True)
class OptimalThreshold:
    threshold: float
    metric_value: float
    type_i_error_rate: float
    type_ii_error_rate: float


def build_roc_curve(observations: ObservationSet) -> ROCCurve:
    """
    Sweep every distinct score as a decision threshold.

    An observation is predicted positive when ``score >= threshold``. The curve
    starts at ``+inf`` (nothing predicted positive, tpr = fpr = 0) and ends at the
    lowest score (everything predicted positive, tpr = fpr = 1).

    Parameters
    ----------
    observations : ObservationSet
        Scores and labels; both label classes are guaranteed present.

    Returns
    -------
    ROCCurve
        One point per distinct score plus the ``+inf`` boundary point, with
        strictly decreasing thresholds.
    """
    order = np.argsort(-observations.scores, kind="mergesort")
    scores = observations.scores[order]
    labels = observations.labels[order]

    tps = np.cumsum(labels)
    fps = np.cumsum(1 - labels)
    # Last position of each run of equal scores, so ties enter the curve together
    last = np.r_[np.flatnonzero(np.diff(scores)), len(scores) - 1]

    thresholds = np.r_[np.inf, scores[last]]
    tpr = np.r_[0, tps[last]] / observations.n_positive
    fpr = np.r_[0, fps[last]] / observations.n_negative

    logger.debug(f"ROC sweep: {len(scores)} observations, {len(last)} distinct thresholds")
    return ROCCurve(thresholds=thresholds, tpr=tpr, fpr=fpr, tnr=1.0 - fpr, fnr=1.0 - tpr)


def compute_auc(curve: ROCCurve) -> float:
    """Trapezoidal area under the ROC curve, traversed by increasing fpr."""
    return float(trapezoid_auc(curve.fpr, curve.tpr))


def tss_series(curve: ROCCurve) -> pd.DataFrame:
    return pd.DataFrame({
        "threshold": curve.thresholds,
        "tss": curve.tpr + curve.tnr - 1.0,
    })


def clamp_rates(
    tpr: np.ndarray,
    fpr: np.ndarray,
    tnr: np.ndarray,
    fnr: np.ndarray,
    epsilon: float = SEDI_EPSILON,
) -> Tuple[Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray], np.ndarray]:
    """
    Replace exactly-zero rates with ``epsilon`` so their logarithms are finite.

    Returns the four clamped arrays (inputs are left untouched) and a boolean
    mask marking the positions where at least one rate was substituted.
    """
    rates = tuple(np.asarray(r, dtype=float) for r in (tpr, fpr, tnr, fnr))
    zero = np.zeros(rates[0].shape, dtype=bool)
    clamped = []
    for r in rates:
        is_zero = r == 0
        zero |= is_zero
        clamped.append(np.where(is_zero, epsilon, r))
    return tuple(clamped), zero


def sedi_series(curve: ROCCurve, epsilon: float = SEDI_EPSILON) -> pd.DataFrame:
    """
    Symmetric Extremal Dependence Index per threshold (Ferro & Stephenson 2011).

    Zero rates are clamped with :func:`clamp_rates`; a
    :class:`DegenerateRateWarning` is issued when that happens.
    """
    (tpr, fpr, tnr, fnr), substituted = clamp_rates(
        curve.tpr, curve.fpr, curve.tnr, curve.fnr, epsilon=epsilon
    )
    if substituted.any():
        affected = curve.thresholds[substituted]
        logger.debug(f"SEDI clamp applied at thresholds {affected.tolist()}")
        warnings.warn(
            f"zero rates replaced by {epsilon:g} at {int(substituted.sum())} of "
            f"{len(curve)} thresholds",
            DegenerateRateWarning,
            stacklevel=2,
        )

    log_fpr, log_tpr, log_tnr, log_fnr = np.log(fpr), np.log(tpr), np.log(tnr), np.log(fnr)
    sedi = (log_fpr - log_tpr - log_tnr + log_fnr) / (log_fpr + log_tpr + log_tnr + log_fnr)
    return pd.DataFrame({"threshold": curve.thresholds, "sedi": sedi})


def select_optimal_threshold(series: pd.DataFrame, metric: str, curve: ROCCurve) -> OptimalThreshold:
    """
    Pick the threshold that maximizes ``metric``.

    When several thresholds tie at the maximum the smallest one is chosen.
    Error rates are read from the unclamped curve at the chosen threshold.
    """
    values = series[metric].to_numpy()
    thresholds = series["threshold"].to_numpy()
    best = values.max()
    tied = np.flatnonzero(values >= best - TIE_TOLERANCE)
    idx = tied[np.argmin(thresholds[tied])]
    return OptimalThreshold(
        threshold=float(thresholds[idx]),
        metric_value=float(values[idx]),
        type_i_error_rate=float(1.0 - curve.tnr[idx]),
        type_ii_error_rate=float(1.0 - curve.tpr[idx]),
    )


def optimize_tss(curve: ROCCurve) -> OptimalThreshold:
    return select_optimal_threshold(tss_series(curve), "tss", curve)


def optimize_sedi(curve: ROCCurve, epsilon: float = SEDI_EPSILON) -> OptimalThreshold:
    return select_optimal_threshold(sedi_series(curve, epsilon=epsilon), "sedi", curve)
