"""
Signal processing components

This module contains spectral estimation, band power extraction and the
engagement processing pipeline.
"""

from .spectrum import SpectralEstimator, compute_psd
from .features import FeatureExtractor, band_power
from .pipeline import EngagementProcessor

__all__ = [
    'SpectralEstimator', 'compute_psd',
    'FeatureExtractor', 'band_power',
    'EngagementProcessor'
]
