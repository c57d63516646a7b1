"""
Diagnostic plots for a goodness-of-fit summary.
"""
from typing import Optional
import matplotlib.pyplot as plt
import numpy as np
from pathlib import Path

from skillcurve.evaluation.summary import Diagnostics

# Vertical spread of points in the classified-values dotplot
JITTER_HEIGHT = 0.2


def plot_diagnostics(
    diagnostics: Diagnostics,
    output_path: Optional[str] = None,
    figsize: tuple = (12, 9),
    seed: Optional[int] = 0,
) -> None:
    """
    Draw the four diagnostic panels in a 2x2 grid:
    - Receiver-operator curve with the chance diagonal
    - Histogram of fitted values
    - Threshold-performance curve (TSS per cutoff) with the optimal cutoff marked
    - Fitted values split by observed class, coloured by thresholded class

    Parameters
    ----------
    diagnostics : Diagnostics
        The ``diagnostics`` of a SummaryReport built with ``plots=True``.
    output_path : Optional[str]
        File path to save plot (e.g., "plots/summary.png").
        If None, displays plot interactively.
    figsize : tuple, optional
        Figure size in inches (width, height) (default: (12, 9))
    seed : Optional[int]
        Seed for the dotplot jitter (default: 0).

    Examples
    --------
    >>> report = summarize(SimpleFit(draws, y))
    >>> plot_diagnostics(report.diagnostics, output_path="summary.png")
    """
    fig = plt.figure(figsize=figsize)
    gs = fig.add_gridspec(2, 2, hspace=0.35, wspace=0.3)
    threshold = diagnostics.tss_threshold

    # 1. Receiver-operator curve
    ax1 = fig.add_subplot(gs[0, 0])
    ax1.plot(diagnostics.roc["fpr"], diagnostics.roc["tpr"], color='black', linewidth=1.5)
    ax1.plot([0, 1], [0, 1], color='red', linewidth=1)
    ax1.set_xlabel('False positive rate', fontsize=11)
    ax1.set_ylabel('True positive rate', fontsize=11)
    ax1.set_title('Receiver-operator curve', fontsize=12, fontweight='bold')

    # 2. Fitted values
    ax2 = fig.add_subplot(gs[0, 1])
    hist = diagnostics.histogram
    ax2.bar(hist["bin_left"], hist["count"], width=hist["bin_right"] - hist["bin_left"],
            align='edge', color='#808080', edgecolor='black', linewidth=0.5)
    ax2.set_xlabel('Predicted probability', fontsize=11)
    ax2.set_ylabel('Number of training data points', fontsize=11)
    ax2.set_title('Fitted values', fontsize=12, fontweight='bold')

    # 3. Threshold-performance curve; the +inf boundary cutoff has no x position
    ax3 = fig.add_subplot(gs[1, 0])
    tss = diagnostics.tss[np.isfinite(diagnostics.tss["threshold"])]
    ax3.plot(tss["threshold"], tss["tss"], color='black', linewidth=1.5)
    ax3.axvline(x=threshold, color='red', linewidth=1)
    ax3.set_xlabel('Threshold', fontsize=11)
    ax3.set_ylabel('True skill statistic', fontsize=11)
    ax3.set_title('Threshold-performance curve', fontsize=12, fontweight='bold')

    # 4. Classified fitted values
    ax4 = fig.add_subplot(gs[1, 1])
    cls = diagnostics.classification
    rng = np.random.default_rng(seed)
    jitter = rng.uniform(-JITTER_HEIGHT, JITTER_HEIGHT, size=len(cls))
    colors = np.where(cls["classified"] == 1, '#1f77b4', '#ff7f0e')
    ax4.scatter(cls["fitted"], cls["observed"] + jitter, c=colors, s=6)
    ax4.axvline(x=threshold, color='black', linewidth=1)
    ax4.set_yticks([0, 1])
    ax4.set_xlabel('Predicted probability', fontsize=11)
    ax4.set_ylabel('True classification', fontsize=11)
    ax4.set_title('Classified fitted values', fontsize=12, fontweight='bold')

    for ax in (ax1, ax2, ax3, ax4):
        ax.spines['top'].set_visible(False)
        ax.spines['right'].set_visible(False)

    if output_path:
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(output_path, dpi=150, bbox_inches='tight')
        plt.close()
    else:
        plt.show()
