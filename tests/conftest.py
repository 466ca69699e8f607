import sys
from pathlib import Path

import numpy as np
import pytest

# Add the project root to sys.path so tests run from a plain checkout
sys.path.insert(0, str(Path(__file__).parent.parent))

from neurofocus.core.config import SAMPLING_RATE


class FakeClock:
    """Manually advanced clock for time-window tests"""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


def sine_wave(freq: float, n_samples: int, fs: float = SAMPLING_RATE, amplitude: float = 1.0) -> np.ndarray:
    t = np.arange(n_samples) / fs
    return amplitude * np.sin(2 * np.pi * freq * t)


@pytest.fixture
def beta_sine():
    """Two seconds of a 20 Hz sine at the default sampling rate"""
    return sine_wave(20.0, 2 * SAMPLING_RATE)
