"""
ROC-based goodness-of-fit evaluation for binary probabilistic classifiers.
"""

from skillcurve.evaluation.metrics import (
    ObservationSet,
    ROCCurve,
    ROCPoint,
    OptimalThreshold,
    build_roc_curve,
    compute_auc,
    tss_series,
    sedi_series,
    clamp_rates,
    optimize_tss,
    optimize_sedi,
)
from skillcurve.evaluation.summary import (
    SummaryConfig,
    SummaryReport,
    Diagnostics,
    assemble_report,
    summarize,
    summarize_observations,
    format_summary,
)

__all__ = [
    "ObservationSet",
    "ROCCurve",
    "ROCPoint",
    "OptimalThreshold",
    "build_roc_curve",
    "compute_auc",
    "tss_series",
    "sedi_series",
    "clamp_rates",
    "optimize_tss",
    "optimize_sedi",
    "SummaryConfig",
    "SummaryReport",
    "Diagnostics",
    "assemble_report",
    "summarize",
    "summarize_observations",
    "format_summary",
]
