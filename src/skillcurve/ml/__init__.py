"""
Adapters turning fitted probit-model output into scores and labels.
"""

from skillcurve.ml.model import ModelAdapter, SimpleFit, RandomEffectsFit, fitted_probabilities

__all__ = ["ModelAdapter", "SimpleFit", "RandomEffectsFit", "fitted_probabilities"]
