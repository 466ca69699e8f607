"""
Synthetic sample sources

This module generates single-channel signals that stand in for the wearable
sensor when running the pipeline without hardware.
"""

import logging
from typing import Optional
import numpy as np

from ..core.config import SAMPLING_RATE


class FakeSampleSource:
    """
    Generate synthetic single-channel samples for testing

    The signal is white noise plus a 20 Hz beta rhythm whose amplitude swings
    slowly between an engaged and a disengaged level, so a long enough stream
    moves the focus score across its range and can trip the low beta warning.
    """

    def __init__(self, fs: float = SAMPLING_RATE, beta_freq: float = 20.0,
                 beta_amplitude: float = 0.25, beta_modulation: float = 0.2,
                 noise_std: float = 0.2, cycle_time: float = 60.0,
                 seed: Optional[int] = None):
        self.fs = fs
        self.beta_freq = beta_freq
        self.beta_amplitude = beta_amplitude
        self.beta_modulation = beta_modulation
        self.noise_std = noise_std
        self.cycle_time = cycle_time      # Seconds per engaged/disengaged cycle
        self.time = 0.0
        self.rng = np.random.default_rng(seed)

    def generate_window(self, duration_sec: float) -> np.ndarray:
        """
        Generate a synthetic sample window

        Args:
            duration_sec: Duration of data to generate

        Returns:
            np.ndarray: Synthetic samples (samples,)
        """
        n_samples = int(duration_sec * self.fs)
        t = self.time + np.arange(n_samples) / self.fs

        amplitude = self.beta_amplitude + self.beta_modulation * np.cos(
            2 * np.pi * self.time / self.cycle_time)
        phase = self.rng.uniform(0, 2 * np.pi)

        data = self.rng.standard_normal(n_samples) * self.noise_std
        data += amplitude * np.sin(2 * np.pi * self.beta_freq * t + phase)

        logging.debug(f"Generated {n_samples} samples at t={self.time:.1f}s "
                      f"(beta amplitude {amplitude:.3f})")
        self.time += duration_sec
        return data
