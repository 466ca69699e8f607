"""
Engagement processing pipeline

This module turns one stage's raw samples into a processing result: power
spectrum, beta band power, sustained low beta warning and focus score.
EngagementProcessor.process never raises; every failure comes back as a
ProcessingError the caller can display as-is.
"""

import logging
import time
from collections.abc import Sequence
from typing import Callable, List, Optional, Tuple
import numpy as np

from ..core.data_types import (
    ProcessingError, ProcessingResult, ProcessingSuccess, StageRecording
)
from ..core.errors import ComputationError, ValidationError
from ..core.config import SAMPLING_RATE, BETA_BAND, MIN_PROCESSING_SECONDS
from ..detection.focus import FocusNormalizer
from ..detection.persistence import LowBetaPersistenceTracker
from .features import band_power
from .spectrum import SpectralEstimator

INSUFFICIENT_DATA_MESSAGE = (
    f"Insufficient data for processing. "
    f"Need at least {MIN_PROCESSING_SECONDS} seconds of data."
)


class EngagementProcessor:
    """
    Run the engagement analytics pipeline for a subject

    The spectral estimator, band extraction and focus normalizer are pure;
    the persistence tracker keeps per-subject history across calls. Pass a
    tracker in to share history between processors or to isolate it in tests.
    """

    def __init__(self, fs: float = SAMPLING_RATE,
                 tracker: Optional[LowBetaPersistenceTracker] = None,
                 normalizer: Optional[FocusNormalizer] = None,
                 clock: Callable[[], float] = time.time):
        self.fs = fs
        self.min_samples = int(fs * MIN_PROCESSING_SECONDS)
        self.estimator = SpectralEstimator(fs)
        self.tracker = tracker if tracker is not None else LowBetaPersistenceTracker(clock=clock)
        self.normalizer = normalizer if normalizer is not None else FocusNormalizer()
        self.clock = clock

    def validate(self, samples) -> np.ndarray:
        """
        Check that samples can be processed

        Args:
            samples: Candidate sample sequence

        Returns:
            np.ndarray: Samples as a 1-D float array

        Raises:
            ValidationError: If samples are not a numeric sequence of sufficient length
        """
        is_sequence = (isinstance(samples, Sequence)
                       and not isinstance(samples, (str, bytes, bytearray)))
        if isinstance(samples, np.ndarray):
            is_sequence = samples.ndim == 1
        if not is_sequence:
            raise ValidationError(f"samples must be a sequence, got {type(samples).__name__}")

        if len(samples) < self.min_samples:
            raise ValidationError(INSUFFICIENT_DATA_MESSAGE)

        try:
            data = np.asarray(samples, dtype=float)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"samples must contain only numeric values: {e}") from e

        if data.ndim != 1:
            raise ValidationError(f"samples must be one-dimensional, got shape {data.shape}")

        # NaN would clamp to full focus and never count as a low reading
        if not np.all(np.isfinite(data)):
            raise ValidationError("samples must be finite numeric values")
        return data

    def _compute(self, subject_id: str, samples, data: np.ndarray) -> ProcessingSuccess:
        try:
            estimate = self.estimator.estimate(data)
            beta_power = band_power(estimate, *BETA_BAND)
            low_beta_warning = self.tracker.update(subject_id, beta_power)
            focus_level = self.normalizer.normalize(beta_power)
        except Exception as e:
            raise ComputationError(str(e)) from e

        return ProcessingSuccess(
            subject_id=subject_id,
            raw_samples=samples,
            frequencies=estimate.frequencies,
            power=estimate.power,
            beta_power=beta_power,
            focus_level=focus_level,
            low_beta_warning=low_beta_warning,
            processed_at=self.clock(),
        )

    def process(self, subject_id: str, samples) -> ProcessingResult:
        """
        Process one sample sequence for a subject

        Args:
            subject_id: Subject whose low beta history is updated
            samples: Single-channel amplitude readings, at least 2 seconds long

        Returns:
            ProcessingResult: ProcessingSuccess with all metrics, or ProcessingError
        """
        try:
            data = self.validate(samples)
            result = self._compute(subject_id, samples, data)
        except ValidationError as e:
            logging.warning(f"Rejected samples for {subject_id}: {e}")
            return ProcessingError(str(e))
        except Exception as e:
            logging.exception(f"Processing failed for {subject_id}")
            return ProcessingError(f"Error processing samples: {e}")

        logging.debug(f"{subject_id}: beta={result.beta_power:.4f} "
                      f"focus={result.focus_level} warning={result.low_beta_warning}")
        return result

    def process_recordings(self, subject_id: str,
                           recordings: List[StageRecording]) -> List[Tuple[StageRecording, ProcessingResult]]:
        """
        Process recorded stages in stage order

        Args:
            subject_id: Subject the recordings belong to
            recordings: Stage recordings from one experiment session

        Returns:
            List of (recording, result) pairs ordered by stage_order
        """
        results = []
        for recording in sorted(recordings, key=lambda r: r.stage_order):
            logging.info(f"Processing stage {recording.stage_order}: {recording.stage_name} "
                         f"({len(recording.samples)} samples)")
            results.append((recording, self.process(subject_id, recording.samples)))
        return results
