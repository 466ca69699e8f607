"""
Core data types for NeuroFocus

This module defines the data structures passed between pipeline components:
spectral estimates, tracked beta readings, stage recordings and the
success/error variants of a processing result.
"""

from dataclasses import dataclass
from typing import Any, Dict, Union
import numpy as np


@dataclass
class SpectralEstimate:
    """One-sided power spectrum of a sample sequence"""
    frequencies: np.ndarray   # Shape: (N/2,), frequencies[i] = i * fs / N
    power: np.ndarray         # Shape: (N/2,), aligned with frequencies

    def __len__(self) -> int:
        return len(self.power)


@dataclass
class BetaPowerReading:
    """Single beta power value tracked for a subject"""
    subject_id: str
    timestamp: float          # Unix timestamp
    beta_power: float


@dataclass
class StageRecording:
    """Samples recorded during one labelled experiment stage"""
    stage_name: str
    stage_order: int          # 1-based, in recording order
    samples: np.ndarray       # Shape: (n_samples,)


@dataclass
class ProcessingSuccess:
    """
    Metrics derived from one sample sequence

    to_dict() returns the wire format consumed by display and storage layers.
    """
    subject_id: str
    raw_samples: np.ndarray
    frequencies: np.ndarray
    power: np.ndarray
    beta_power: float
    focus_level: float        # 0.0 - 100.0, one decimal
    low_beta_warning: bool
    processed_at: float       # Unix timestamp

    @property
    def is_error(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "subjectId": self.subject_id,
            "rawSamples": np.asarray(self.raw_samples, dtype=float).tolist(),
            "frequencies": np.asarray(self.frequencies, dtype=float).tolist(),
            "power": np.asarray(self.power, dtype=float).tolist(),
            "betaPower": float(self.beta_power),
            "focusLevel": float(self.focus_level),
            "lowBetaWarning": bool(self.low_beta_warning),
            "processedAt": float(self.processed_at),
        }


@dataclass
class ProcessingError:
    """Failed processing call, carrying a message fit for display"""
    error: str

    @property
    def is_error(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.error}


ProcessingResult = Union[ProcessingSuccess, ProcessingError]
