"""
Focus score normalization

Maps beta band power onto a 0-100 focus score with one decimal.
"""

import math

from ..core.config import MIN_BETA, MAX_BETA


def calculate_focus_level(beta_power: float, min_beta: float = MIN_BETA,
                          max_beta: float = MAX_BETA) -> float:
    """
    Convert beta power to a focus score

    Args:
        beta_power: Beta band power
        min_beta: Power mapped to a score of 0
        max_beta: Power mapped to a score of 100

    Returns:
        float: Focus score in [0.0, 100.0], rounded to one decimal

    Raises:
        ValueError: If max_beta does not exceed min_beta
    """
    if max_beta <= min_beta:
        raise ValueError(f"max_beta ({max_beta}) must exceed min_beta ({min_beta})")

    clamped = max(min_beta, min(max_beta, beta_power))
    scaled = (clamped - min_beta) / (max_beta - min_beta) * 1000
    # Round half up
    return math.floor(scaled + 0.5) / 10


class FocusNormalizer:
    """Stateless beta power to focus score mapping with fixed bounds"""

    def __init__(self, min_beta: float = MIN_BETA, max_beta: float = MAX_BETA):
        if max_beta <= min_beta:
            raise ValueError(f"max_beta ({max_beta}) must exceed min_beta ({min_beta})")
        self.min_beta = min_beta
        self.max_beta = max_beta

    def normalize(self, beta_power: float) -> float:
        return calculate_focus_level(beta_power, self.min_beta, self.max_beta)
