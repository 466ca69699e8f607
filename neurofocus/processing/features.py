"""
Band power feature extraction

This module reduces a power spectrum to scalar band powers. The beta band
(12-30 Hz) drives both the low engagement warning and the focus score.
"""

import logging
from typing import Dict, Sequence, Tuple, Union
import numpy as np

from ..core.data_types import SpectralEstimate
from ..core.config import SAMPLING_RATE, FREQ_BANDS, BETA_BAND
from .spectrum import SpectralEstimator


def band_power(estimate: SpectralEstimate, low: float, high: float) -> float:
    """
    Average power of the bins inside [low, high]

    Args:
        estimate: Power spectrum to reduce
        low: Lower band edge in Hz (inclusive)
        high: Upper band edge in Hz (inclusive)

    Returns:
        float: Mean power in the band, or 0.0 if no bin falls inside it
    """
    freqs = np.asarray(estimate.frequencies)
    power = np.asarray(estimate.power)

    freq_mask = (freqs >= low) & (freqs <= high)

    if not np.any(freq_mask):
        logging.debug(f"No frequency bins in band {low}-{high} Hz")
        return 0.0

    return float(np.mean(power[freq_mask]))


class FeatureExtractor:
    """
    Extract band power features from single-channel sample sequences

    Combines the spectral estimator with band power extraction for a fixed
    sampling rate and a table of named frequency bands.
    """

    def __init__(self, fs: float = SAMPLING_RATE,
                 freq_bands: Dict[str, Tuple[float, float]] = FREQ_BANDS):
        self.fs = fs
        self.freq_bands = freq_bands
        self.estimator = SpectralEstimator(fs)

    def compute_psd(self, samples: Union[Sequence[float], np.ndarray]) -> SpectralEstimate:
        return self.estimator.estimate(samples)

    def extract_band_power(self, samples: Union[Sequence[float], np.ndarray],
                           band: Union[str, Tuple[float, float]]) -> float:
        """
        Extract power in a frequency band

        Args:
            samples: Single-channel amplitude readings (samples,)
            band: Band name from freq_bands, or a (low_freq, high_freq) tuple in Hz

        Returns:
            float: Average power in the frequency band
        """
        low, high = self.freq_bands[band] if isinstance(band, str) else band
        return band_power(self.compute_psd(samples), low, high)

    def extract_beta_power(self, samples: Union[Sequence[float], np.ndarray]) -> float:
        low, high = self.freq_bands.get("beta", BETA_BAND)
        return band_power(self.compute_psd(samples), low, high)

    def extract_features(self, samples: Union[Sequence[float], np.ndarray]) -> Dict[str, float]:
        """Power for every configured band, from a single spectrum"""
        estimate = self.compute_psd(samples)
        return {name: band_power(estimate, low, high)
                for name, (low, high) in self.freq_bands.items()}
