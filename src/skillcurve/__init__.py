"""
skillcurve - goodness-of-fit diagnostics for binary probabilistic classifiers

Receiver-operator curve, AUC, and decision thresholds chosen by the true skill
statistic (TSS) and the symmetric extremal dependence index (SEDI).
"""

__version__ = "0.1.0"

# Expose key classes and functions at package level
from skillcurve.data.synthetic_generator import generate_draws
from skillcurve.evaluation import (
    ObservationSet,
    ROCCurve,
    OptimalThreshold,
    build_roc_curve,
    compute_auc,
    optimize_tss,
    optimize_sedi,
    SummaryConfig,
    SummaryReport,
    summarize,
    format_summary,
)
from skillcurve.exceptions import (
    InsufficientClassesError,
    LengthMismatchError,
    DegenerateRateWarning,
)
from skillcurve.ml.model import SimpleFit, RandomEffectsFit, fitted_probabilities

__all__ = [
    "__version__",
    "generate_draws",
    "ObservationSet",
    "ROCCurve",
    "OptimalThreshold",
    "build_roc_curve",
    "compute_auc",
    "optimize_tss",
    "optimize_sedi",
    "SummaryConfig",
    "SummaryReport",
    "summarize",
    "format_summary",
    "InsufficientClassesError",
    "LengthMismatchError",
    "DegenerateRateWarning",
    "SimpleFit",
    "RandomEffectsFit",
    "fitted_probabilities",
]
