"""
Main CLI entry point for NeuroFocus

This module provides the command-line interface for processing recorded
experiment stages or a synthetic sample stream.
"""

import argparse
import json
import logging
import sys
import time
from typing import List, Optional

from ..core.config import (
    SAMPLING_RATE, UDP_HOST, UDP_PORT, STREAM_WINDOW_SEC, EXPERIMENT_STAGES
)
from ..core.data_types import ProcessingResult
from ..acquisition.sources import FakeSampleSource
from ..acquisition.recordings import load_stage_recordings
from ..processing.pipeline import EngagementProcessor
from ..communication.result_sender import ResultSender


def format_result(result: ProcessingResult, label: str) -> str:
    """One-line readout of a result"""
    if result.is_error:
        return f"{label} | Error: {result.error}"
    return (f"{label} | Beta: {result.beta_power:.4f} | Focus: {result.focus_level:5.1f} | "
            f"Low beta warning: {result.low_beta_warning}")


def emit_result(result: ProcessingResult, label: str, stage: str, as_json: bool,
                sender: Optional[ResultSender]) -> None:
    if as_json:
        record = result.to_dict()
        record["stage"] = stage
        print(json.dumps(record))
    else:
        print(format_result(result, label))

    if sender is not None:
        sender.send_result(result, stage)


def run_recording(user_id: str, csv_path: str, processor: EngagementProcessor,
                  as_json: bool, sender: Optional[ResultSender]) -> int:
    """
    Process every stage of a recorded session

    Returns:
        int: Exit code, 1 if any stage failed to process
    """
    recordings = load_stage_recordings(csv_path)
    if not recordings:
        logging.error(f"No samples found in {csv_path}")
        return 1

    failures = 0
    for recording, result in processor.process_recordings(user_id, recordings):
        label = f"Stage {recording.stage_order}: {recording.stage_name}"
        emit_result(result, label, recording.stage_name, as_json, sender)
        failures += result.is_error

    logging.info(f"Processed {len(recordings)} stage(s), {failures} failed")
    return 1 if failures else 0


def run_simulation(user_id: str, source: FakeSampleSource, processor: EngagementProcessor,
                   duration: float, stage: str, as_json: bool,
                   sender: Optional[ResultSender]) -> int:
    """
    Process a synthetic stream in fixed-length chunks

    The processor clock follows the synthetic stream time, so the tracking
    window spans simulated seconds rather than wall-clock seconds.
    """
    logging.info(f"Simulating {duration:.0f}s of samples in {STREAM_WINDOW_SEC}s chunks")

    n_chunks = int(duration // STREAM_WINDOW_SEC)
    for _ in range(n_chunks):
        samples = source.generate_window(STREAM_WINDOW_SEC)
        result = processor.process(user_id, samples)
        emit_result(result, f"t={source.time:6.1f}s", stage, as_json, sender)

    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser"""
    parser = argparse.ArgumentParser(
        description="NeuroFocus - Beta band engagement metrics for experiment stages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Process a recorded session (columns: value[,stage])
  python -m neurofocus --csv data/session.csv --user alice

  # Stream 5 minutes of synthetic samples
  python -m neurofocus --simulate --duration 300 --user test

  # Publish results to a local consumer as JSON over UDP
  python -m neurofocus --simulate --user test --send --udp-port 5005
        """
    )

    # Mode selection (mutually exclusive)
    mode_group = parser.add_mutually_exclusive_group(required=True)
    mode_group.add_argument("--csv",
                            help="Process a recorded CSV file")
    mode_group.add_argument("--simulate", action="store_true",
                            help="Process a synthetic sample stream")

    parser.add_argument("--user", required=True,
                        help="Subject ID used for low beta tracking")
    parser.add_argument("--fs", type=float, default=SAMPLING_RATE,
                        help=f"Sampling frequency (default: {SAMPLING_RATE})")

    # Simulation options
    parser.add_argument("--duration", type=float, default=60.0,
                        help="Simulated stream length in seconds (default: 60)")
    parser.add_argument("--stage", default=EXPERIMENT_STAGES[2],
                        help=f"Stage label for simulated samples (default: {EXPERIMENT_STAGES[2]})")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for synthetic samples")

    # Output options
    parser.add_argument("--json", action="store_true",
                        help="Print full result records as JSON lines")
    parser.add_argument("--send", action="store_true",
                        help="Send result summaries over UDP")
    parser.add_argument("--udp-host", default=UDP_HOST,
                        help=f"Result consumer UDP host (default: {UDP_HOST})")
    parser.add_argument("--udp-port", type=int, default=UDP_PORT,
                        help=f"Result consumer UDP port (default: {UDP_PORT})")

    # Logging
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable verbose logging")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Setup logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    sender = ResultSender(args.udp_host, args.udp_port) if args.send else None

    try:
        if args.csv:
            processor = EngagementProcessor(fs=args.fs)
            return run_recording(args.user, args.csv, processor, args.json, sender)

        source = FakeSampleSource(args.fs, seed=args.seed)
        start_time = time.time()
        processor = EngagementProcessor(fs=args.fs, clock=lambda: start_time + source.time)
        return run_simulation(args.user, source, processor, args.duration,
                              args.stage, args.json, sender)

    except KeyboardInterrupt:
        logging.info("Interrupted by user")
        return 0
    except (OSError, ValueError) as e:
        logging.error(f"Failed to process {args.csv or 'stream'}: {e}")
        return 1
    finally:
        if sender is not None:
            sender.close()


if __name__ == "__main__":
    sys.exit(main())
