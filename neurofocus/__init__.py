"""
NeuroFocus - Beta band engagement metrics for wearable biosignal experiments

Turns single-channel sensor samples from a labelled experiment stage into a
power spectrum, beta band power, a sustained low engagement warning and a
0-100 focus score.

Python: 3.10+
"""

__version__ = "1.0.0"

# Main package imports for easy access
from .core.data_types import (
    SpectralEstimate, BetaPowerReading, StageRecording,
    ProcessingSuccess, ProcessingError, ProcessingResult
)
from .core.errors import NeuroFocusError, ValidationError, ComputationError
from .acquisition.sources import FakeSampleSource
from .acquisition.recordings import load_stage_recordings
from .processing.spectrum import SpectralEstimator, compute_psd
from .processing.features import FeatureExtractor, band_power
from .processing.pipeline import EngagementProcessor
from .detection.persistence import LowBetaPersistenceTracker
from .detection.focus import FocusNormalizer, calculate_focus_level
from .communication.result_sender import ResultSender

__all__ = [
    'SpectralEstimate', 'BetaPowerReading', 'StageRecording',
    'ProcessingSuccess', 'ProcessingError', 'ProcessingResult',
    'NeuroFocusError', 'ValidationError', 'ComputationError',
    'FakeSampleSource', 'load_stage_recordings',
    'SpectralEstimator', 'compute_psd',
    'FeatureExtractor', 'band_power', 'EngagementProcessor',
    'LowBetaPersistenceTracker', 'FocusNormalizer', 'calculate_focus_level',
    'ResultSender'
]
