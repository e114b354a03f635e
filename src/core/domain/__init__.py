"""
Domain models.

Immutable records for exponential change and ratio decay.
"""

from src.core.domain.exponential_change import ChangeField, ExponentialChange, Trend
from src.core.domain.growth_or_decay_ratios import GrowthOrDecayRatios, RatioField

__all__ = [
    # Exponential change
    "ExponentialChange",
    "ChangeField",
    "Trend",
    # Ratio decay
    "GrowthOrDecayRatios",
    "RatioField",
]
