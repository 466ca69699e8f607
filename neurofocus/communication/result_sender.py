"""
Result publishing

This module sends processing results to a downstream consumer (display,
storage service) as UDP JSON messages. Messages carry the summary metrics
only; raw samples and spectra stay local to keep datagrams small.
"""

import json
import logging
import socket
from typing import Any, Dict, Optional

from ..core.data_types import ProcessingResult
from ..core.config import UDP_HOST, UDP_PORT


def build_message(result: ProcessingResult, stage: Optional[str] = None) -> Dict[str, Any]:
    """
    Build the JSON message for a result

    Args:
        result: Processing result to summarize
        stage: Experiment stage the samples were captured in

    Returns:
        Dict: Summary message, or the error record for failed results
    """
    if result.is_error:
        message = result.to_dict()
    else:
        message = {
            "subjectId": result.subject_id,
            "betaPower": float(result.beta_power),
            "focusLevel": float(result.focus_level),
            "lowBetaWarning": bool(result.low_beta_warning),
            "processedAt": float(result.processed_at),
        }
    if stage is not None:
        message["stage"] = stage
    return message


class ResultSender:
    """
    Send processing results via UDP JSON messages
    """

    def __init__(self, host: str = UDP_HOST, port: int = UDP_PORT):
        self.host = host
        self.port = port
        self.socket = None
        self._setup_socket()

    def _setup_socket(self):
        """Setup UDP socket for communication"""
        try:
            self.socket = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
            logging.info(f"UDP sender initialized: {self.host}:{self.port}")
        except OSError as e:
            logging.error(f"Failed to setup UDP socket: {e}")

    def send_result(self, result: ProcessingResult, stage: Optional[str] = None) -> bool:
        """
        Send a processing result

        Args:
            result: Result to publish
            stage: Experiment stage label to attach

        Returns:
            bool: True if sent successfully
        """
        if self.socket is None:
            return False

        try:
            json_str = json.dumps(build_message(result, stage))
            self.socket.sendto(json_str.encode('utf-8'), (self.host, self.port))
            return True
        except OSError as e:
            logging.error(f"Failed to send UDP message: {e}")
            return False

    def close(self):
        """Close UDP socket"""
        if self.socket:
            self.socket.close()
            self.socket = None
