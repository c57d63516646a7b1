"""
Goodness-of-fit summary: AUC, TSS- and SEDI-optimal thresholds, diagnostics.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional
import logging
import numpy as np
import pandas as pd

from skillcurve.evaluation.metrics import (
    SEDI_EPSILON, ObservationSet, OptimalThreshold, ROCCurve,
    build_roc_curve, compute_auc, optimize_sedi, optimize_tss, tss_series,
)
from skillcurve.ml.model import ModelAdapter
from skillcurve.validation import validate_summary_config

logger = logging.getLogger(__name__)

HISTOGRAM_BINWIDTH = 0.05


@dataclass
class SummaryConfig:
    plots: bool = True
    epsilon: float = SEDI_EPSILON
    histogram_binwidth: float = HISTOGRAM_BINWIDTH


@dataclass(frozen=True)
class Diagnostics:
    """Datasets consumed by the plotting collaborator."""
    roc: pd.DataFrame             # fpr, tpr
    histogram: pd.DataFrame       # bin_left, bin_right, count
    tss: pd.DataFrame             # threshold, tss
    tss_threshold: float
    classification: pd.DataFrame  # fitted, classified, observed


@dataclass(frozen=True)
class SummaryReport:
    auc: float
    tss: OptimalThreshold
    sedi: OptimalThreshold
    n_observations: int
    n_positive: int
    n_negative: int
    curve: Optional[ROCCurve] = None
    diagnostics: Optional[Diagnostics] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "auc": self.auc,
            "n_observations": self.n_observations,
            "n_positive": self.n_positive,
            "n_negative": self.n_negative,
            "tss": {
                "threshold": self.tss.threshold,
                "value": self.tss.metric_value,
                "type_i_error_rate": self.tss.type_i_error_rate,
                "type_ii_error_rate": self.tss.type_ii_error_rate,
            },
            "sedi": {
                "threshold": self.sedi.threshold,
                "value": self.sedi.metric_value,
            },
        }


def score_histogram(scores: np.ndarray, binwidth: float = HISTOGRAM_BINWIDTH) -> pd.DataFrame:
    n_bins = int(np.ceil(1.0 / binwidth - 1e-9))
    edges = np.arange(n_bins + 1) * binwidth
    # Scores of exactly 1.0 must land in the last bin
    edges[-1] = max(edges[-1], 1.0)
    counts, edges = np.histogram(scores, bins=edges)
    return pd.DataFrame({"bin_left": edges[:-1], "bin_right": edges[1:], "count": counts})


def classify(observations: ObservationSet, threshold: float) -> pd.DataFrame:
    """Join each fitted score with its thresholded class and observed label."""
    return pd.DataFrame({
        "fitted": observations.scores,
        "classified": (observations.scores >= threshold).astype(int),
        "observed": observations.labels,
    })


def assemble_report(
    observations: ObservationSet,
    curve: ROCCurve,
    auc: float,
    tss: OptimalThreshold,
    sedi: OptimalThreshold,
    plots: bool = True,
    histogram_binwidth: float = HISTOGRAM_BINWIDTH,
) -> SummaryReport:
    diagnostics = None
    if plots:
        diagnostics = Diagnostics(
            roc=pd.DataFrame({"fpr": curve.fpr, "tpr": curve.tpr}),
            histogram=score_histogram(observations.scores, histogram_binwidth),
            tss=tss_series(curve),
            tss_threshold=tss.threshold,
            classification=classify(observations, tss.threshold),
        )
    return SummaryReport(
        auc=auc,
        tss=tss,
        sedi=sedi,
        n_observations=len(observations),
        n_positive=observations.n_positive,
        n_negative=observations.n_negative,
        curve=curve if plots else None,
        diagnostics=diagnostics,
    )


def summarize_observations(
    observations: ObservationSet,
    plots: Optional[bool] = None,
    cfg: Optional[SummaryConfig] = None,
) -> SummaryReport:
    cfg = cfg or SummaryConfig()
    validate_summary_config(cfg)
    if plots is None:
        plots = cfg.plots

    curve = build_roc_curve(observations)
    auc = compute_auc(curve)
    tss = optimize_tss(curve)
    sedi = optimize_sedi(curve, epsilon=cfg.epsilon)

    logger.info(
        f"AUC={auc:.4f}, TSS cutoff={tss.threshold:.4f} (TSS={tss.metric_value:.4f}), "
        f"SEDI cutoff={sedi.threshold:.4f} (SEDI={sedi.metric_value:.4f})"
    )
    return assemble_report(
        observations, curve, auc, tss, sedi,
        plots=plots, histogram_binwidth=cfg.histogram_binwidth,
    )


def summarize(model: ModelAdapter, plots: Optional[bool] = None, cfg: Optional[SummaryConfig] = None) -> SummaryReport:
    """
    Summarize a fitted binary model's goodness of fit.

    Parameters
    ----------
    model : ModelAdapter
        Any object with ``scores_and_labels()``, e.g. SimpleFit or RandomEffectsFit.
    plots : bool, optional
        Build the diagnostic datasets for plotting. If None, ``cfg.plots``
        decides (default: True when no config is given).
    cfg : SummaryConfig, optional
        Diagnostics switch, SEDI epsilon and histogram bin width; defaults are
        used if omitted.

    Returns
    -------
    SummaryReport
        AUC, TSS- and SEDI-optimal thresholds and, when ``plots`` is True,
        the ROC curve and diagnostic datasets.

    Raises
    ------
    InsufficientClassesError
        If the observed outcomes contain a single class.
    LengthMismatchError
        If the fitted values and outcomes differ in length.

    Examples
    --------
    >>> from skillcurve.data.synthetic_generator import generate_draws
    >>> from skillcurve.ml.model import SimpleFit
    >>> draws, y = generate_draws(200, seed=0)
    >>> report = summarize(SimpleFit(draws, y), plots=False)
    >>> print(f"AUC = {report.auc:.4f}")
    """
    scores, labels = model.scores_and_labels()
    return summarize_observations(ObservationSet(scores, labels), plots=plots, cfg=cfg)


def format_summary(report: SummaryReport, model: Optional[Any] = None) -> str:
    """Render the console summary, including the model call and predictors if known."""
    lines = []
    call = getattr(model, "call", None)
    predictors = getattr(model, "predictors", None)
    if call:
        lines += [f"Call:  {call}", ""]
    if predictors:
        lines += ["Predictor list:", " " + " ".join(predictors), ""]
    lines += [
        "Area under the receiver-operator curve",
        f"AUC = {report.auc:.4f}",
        "",
        "Recommended threshold (maximizes true skill statistic)",
        f"Cutoff = {report.tss.threshold:.4f}",
        f"TSS = {report.tss.metric_value:.4f}",
        f"SEDI Cutoff = {report.sedi.threshold:.4f}",
        f"SEDI = {report.sedi.metric_value:.4f}",
        f"Resulting type I error rate: {report.tss.type_i_error_rate:.4f}",
        f"Resulting type II error rate: {report.tss.type_ii_error_rate:.4f}",
    ]
    return "\n".join(lines)
