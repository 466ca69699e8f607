"""
Configuration constants for NeuroFocus

This module contains the fixed parameters of the engagement analytics pipeline.
Values are read once at import time; components take them as constructor
defaults and nothing modifies them at runtime.
"""

from typing import Dict, Tuple

# ============================================================================
# SIGNAL CONFIGURATION
# ============================================================================

SAMPLING_RATE = 512               # Wearable sensor sampling rate (Hz)
MIN_PROCESSING_SECONDS = 2        # Shortest stage chunk that can be processed
MIN_SAMPLES = SAMPLING_RATE * MIN_PROCESSING_SECONDS

# Frequency Bands (Hz)
BETA_BAND: Tuple[float, float] = (12, 30)

FREQ_BANDS: Dict[str, Tuple[float, float]] = {
    "theta": (4, 7),      # Theta rhythm
    "alpha": (8, 12),     # Alpha rhythm (relaxation)
    "beta": BETA_BAND,    # Beta rhythm (alert, task-engaged)
}

# ============================================================================
# LOW ENGAGEMENT TRACKING
# ============================================================================

LOW_BETA_THRESHOLD = 0.34         # Readings below this count as low engagement
TRACKING_WINDOW_SECONDS = 300     # Rolling history kept per subject (5 minutes)
ALERT_THRESHOLD_PERCENT = 80      # Share of low readings that raises the warning
ONE_MINUTE_SAMPLES = SAMPLING_RATE * 60

# Minimum number of readings before the warning may fire.
# NOTE: evaluates to 1 with the values above, so there is effectively no
# minimum history. Kept as derived rather than hand-tuned.
MIN_TRACKED_READINGS = (SAMPLING_RATE * 60) / ONE_MINUTE_SAMPLES

# ============================================================================
# FOCUS SCORE
# ============================================================================

MIN_BETA = 0.1                    # Beta power mapped to focus 0
MAX_BETA = 1.0                    # Beta power mapped to focus 100

# ============================================================================
# EXPERIMENT PROTOCOL
# ============================================================================

EXPERIMENT_STAGES = [
    "1_Baseline_Relaxed",
    "2_Cognitive_Warmup",
    "3_Focused_Task",
    "4_Post_Task_Rest",
]
DEFAULT_STAGE = "unlabelled"      # Stage name for recordings without a stage column

# ============================================================================
# OUTPUT / STREAMING
# ============================================================================

UDP_HOST = "127.0.0.1"            # Result consumer host
UDP_PORT = 5005                   # Result consumer port
STREAM_WINDOW_SEC = 2.0           # Chunk length processed per call in simulate mode
