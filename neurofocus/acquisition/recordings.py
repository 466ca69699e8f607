"""
Recorded stage data loading

This module loads samples recorded during an experiment session from CSV
files. A file holds one amplitude value per row and, optionally, the stage
each sample was captured in. Every run of consecutive rows with the same
stage label becomes one StageRecording, so a stage revisited later in the
session is a separate recording.
"""

import logging
import os
from typing import List, Optional
import numpy as np
import pandas as pd

from ..core.data_types import StageRecording
from ..core.config import DEFAULT_STAGE


def load_stage_recordings(
    path: str,
    value_col: Optional[str] = "value",
    stage_col: str = "stage"
) -> List[StageRecording]:
    """
    Load per-stage sample sequences from a CSV file

    Values that are not numeric (dropped packets, partial frames) are skipped,
    the same way the sensor link ignores unparseable notifications.

    Args:
        path: Path to CSV file
        value_col: Column holding the samples; if missing or None, the first
            numeric column is used
        stage_col: Column holding stage labels; if missing, all samples belong
            to a single unlabelled stage

    Returns:
        List of StageRecording, one per run of consecutive stage labels,
        stage_order starting at 1

    Raises:
        FileNotFoundError: If the CSV file doesn't exist
        ValueError: If the file can't be parsed or has no sample column
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"CSV file not found: {path}")

    logging.info(f"Loading recording from: {path}")

    try:
        df = pd.read_csv(path)
    except Exception as e:
        raise ValueError(f"Failed to read CSV file: {e}") from e

    if value_col is None or value_col not in df.columns:
        numeric_cols = [col for col in df.select_dtypes(include=[np.number]).columns
                        if col != stage_col]
        if not numeric_cols:
            raise ValueError(f"No sample column found in CSV. Available columns: {list(df.columns)}")
        value_col = numeric_cols[0]
        logging.info(f"Using column '{value_col}' for samples")

    values = pd.to_numeric(df[value_col], errors="coerce")
    if stage_col in df.columns:
        stages = df[stage_col].fillna(DEFAULT_STAGE).astype(str).str.strip()
    else:
        stages = pd.Series(DEFAULT_STAGE, index=df.index)

    # A new run starts wherever the label changes
    run_ids = (stages != stages.shift()).cumsum()

    valid = values.notna()
    skipped = int((~valid).sum())
    if skipped:
        logging.warning(f"Skipped {skipped} non-numeric sample(s)")

    values = values[valid]
    stages = stages[valid]
    run_ids = run_ids[valid]

    recordings = []
    for order, (_, run) in enumerate(values.groupby(run_ids, sort=True), start=1):
        stage_name = stages.loc[run.index[0]]
        samples = run.to_numpy(dtype=float)
        recordings.append(StageRecording(stage_name=stage_name, stage_order=order,
                                         samples=samples))
        logging.info(f"Stage {order}: {stage_name} - {len(samples)} samples")

    return recordings
