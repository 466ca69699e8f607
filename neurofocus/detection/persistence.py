"""
Sustained low engagement detection

This module tracks beta power readings per subject over a rolling time window
and raises a warning when most of the recent readings are below the low beta
threshold.
"""

import logging
import threading
import time
from contextlib import contextmanager
from typing import Callable, Dict, List, Optional

from ..core.data_types import BetaPowerReading
from ..core.config import (
    LOW_BETA_THRESHOLD, TRACKING_WINDOW_SECONDS,
    ALERT_THRESHOLD_PERCENT, MIN_TRACKED_READINGS
)


class LowBetaPersistenceTracker:
    """
    Detect sustained low beta power per subject

    Every update appends a reading to the subject's window, drops readings
    older than the tracking window, and reports whether the share of low
    readings has reached the alert threshold. Windows are created on first
    use and only shrink through pruning or clear().

    Updates for the same subject are serialized with a per-subject lock;
    updates for different subjects never wait on each other.
    """

    def __init__(self, low_threshold: float = LOW_BETA_THRESHOLD,
                 window_seconds: float = TRACKING_WINDOW_SECONDS,
                 alert_percent: float = ALERT_THRESHOLD_PERCENT,
                 min_readings: float = MIN_TRACKED_READINGS,
                 clock: Callable[[], float] = time.time):
        self.low_threshold = low_threshold
        self.window_seconds = window_seconds
        self.alert_percent = alert_percent
        self.min_readings = min_readings
        self.clock = clock

        self._windows: Dict[str, List[BetaPowerReading]] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def _lock_for(self, subject_id: str) -> threading.Lock:
        with self._registry_lock:
            lock = self._locks.get(subject_id)
            if lock is None:
                lock = self._locks[subject_id] = threading.Lock()
            return lock

    @contextmanager
    def _subject_lock(self, subject_id: str):
        """Hold the subject's current lock, retrying if clear() retired it"""
        while True:
            lock = self._lock_for(subject_id)
            with lock:
                if self._locks.get(subject_id) is lock:
                    yield
                    return

    def update(self, subject_id: str, beta_power: float) -> bool:
        """
        Record a beta power reading and evaluate the warning

        Args:
            subject_id: Subject the reading belongs to
            beta_power: Beta band power of the latest sample sequence

        Returns:
            bool: True if low beta has persisted across the tracking window
        """
        with self._subject_lock(subject_id):
            now = self.clock()
            window = self._windows.get(subject_id, [])
            window.append(BetaPowerReading(subject_id, now, beta_power))

            # Drop readings that fell out of the tracking window
            cutoff = now - self.window_seconds
            window = [r for r in window if r.timestamp >= cutoff]
            self._windows[subject_id] = window

            if len(window) < self.min_readings:
                logging.debug(f"{subject_id}: {len(window)} readings, "
                              f"need {self.min_readings} before warning")
                return False

            low_count = sum(1 for r in window if r.beta_power < self.low_threshold)
            percent_low = low_count / len(window) * 100

        warning = percent_low >= self.alert_percent
        if warning:
            logging.info(f"{subject_id}: low beta in {percent_low:.1f}% of "
                         f"{len(window)} readings")
        return warning

    def reading_count(self, subject_id: str) -> int:
        """Number of readings currently inside the subject's window"""
        with self._registry_lock:
            lock = self._locks.get(subject_id)
        if lock is None:
            return 0
        with lock:
            return len(self._windows.get(subject_id, []))

    def clear(self, subject_id: Optional[str] = None):
        """Forget tracked readings and locks for one subject, or for all subjects"""
        with self._registry_lock:
            subjects = list(self._locks) if subject_id is None else [subject_id]
            for subject in subjects:
                lock = self._locks.pop(subject, None)
                if lock is None:
                    continue
                # Wait for an in-flight update before dropping its window
                with lock:
                    self._windows.pop(subject, None)
        logging.info(f"Cleared low beta history for {len(subjects)} subject(s)")
