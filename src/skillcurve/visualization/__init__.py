"""
Visualization utilities for skillcurve goodness-of-fit summaries.
"""

from skillcurve.visualization.plots import plot_diagnostics

__all__ = ["plot_diagnostics"]
