"""
Synthetic model-output generation and CSV conversion utilities.
"""

from skillcurve.data.synthetic_generator import generate_draws, draws_to_frame, frame_to_draws

__all__ = ["generate_draws", "draws_to_frame", "frame_to_draws"]
