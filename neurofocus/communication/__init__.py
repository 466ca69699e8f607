"""
Communication interfaces

This module publishes processing results to downstream consumers over UDP.
"""

from .result_sender import ResultSender, build_message

__all__ = ['ResultSender', 'build_message']
