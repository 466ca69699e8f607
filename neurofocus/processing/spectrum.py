"""
Power spectrum estimation

This module computes a one-sided power spectrum from a single-channel sample
sequence. The estimate is a single-segment periodogram: the whole input is
zero-padded to the next power of two and transformed once, with no window
and no averaging across overlapping segments. Downstream thresholds
(LOW_BETA_THRESHOLD, MIN_BETA/MAX_BETA) are tuned to this estimate, so it
must not be swapped for a multi-segment Welch average.
"""

from typing import Sequence, Union
import numpy as np
from scipy import fft as sp_fft

from ..core.data_types import SpectralEstimate
from ..core.config import SAMPLING_RATE


def fft_size(n_samples: int) -> int:
    """Smallest power of two >= n_samples"""
    if n_samples < 1:
        raise ValueError("Cannot size an FFT for an empty sample sequence")
    return 1 << (n_samples - 1).bit_length()


def compute_psd(samples: Union[Sequence[float], np.ndarray], fs: float) -> SpectralEstimate:
    """
    Compute the one-sided power spectrum of a sample sequence

    Args:
        samples: Amplitude readings for a single channel (samples,)
        fs: Sampling frequency in Hz

    Returns:
        SpectralEstimate: N/2 frequency bins and their power, where N is the
        zero-padded FFT size
    """
    data = np.asarray(samples, dtype=float)
    if data.ndim != 1:
        raise ValueError(f"Expected a 1-D sample sequence, got shape {data.shape}")

    n_fft = fft_size(len(data))

    # rfft zero-pads the input up to n_fft
    spectrum = sp_fft.rfft(data, n=n_fft)[:n_fft // 2]

    # |X|^2 / N for every bin, DC included, no one-sided doubling
    power = (spectrum.real ** 2 + spectrum.imag ** 2) / n_fft
    frequencies = np.arange(n_fft // 2) * fs / n_fft

    return SpectralEstimate(frequencies=frequencies, power=power)


class SpectralEstimator:
    """
    Periodogram estimator bound to a sampling rate
    """

    def __init__(self, fs: float = SAMPLING_RATE):
        self.fs = fs

    def estimate(self, samples: Union[Sequence[float], np.ndarray]) -> SpectralEstimate:
        return compute_psd(samples, self.fs)
