"""
Core data types and structures for NeuroFocus

This module contains the fundamental data classes, configuration constants
and exception types used throughout the system.
"""

from .data_types import (
    SpectralEstimate, BetaPowerReading, StageRecording,
    ProcessingSuccess, ProcessingError, ProcessingResult
)
from .errors import NeuroFocusError, ValidationError, ComputationError
from .config import *

__all__ = [
    'SpectralEstimate', 'BetaPowerReading', 'StageRecording',
    'ProcessingSuccess', 'ProcessingError', 'ProcessingResult',
    'NeuroFocusError', 'ValidationError', 'ComputationError'
]
