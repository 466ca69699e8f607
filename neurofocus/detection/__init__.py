"""
Engagement state detection

This module implements the sustained low beta warning and the focus score
derived from beta band power.
"""

from .persistence import LowBetaPersistenceTracker
from .focus import FocusNormalizer, calculate_focus_level

__all__ = ['LowBetaPersistenceTracker', 'FocusNormalizer', 'calculate_focus_level']
