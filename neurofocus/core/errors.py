"""
Exception types for NeuroFocus

Both pipeline errors are recoverable. EngagementProcessor turns them into
ProcessingError results instead of letting them reach the caller.
"""


class NeuroFocusError(Exception):
    """Base class for errors raised by the analytics pipeline"""


class ValidationError(NeuroFocusError):
    """Input samples are not a sequence, not numeric, or too short"""


class ComputationError(NeuroFocusError):
    """Unexpected failure while estimating the spectrum or deriving metrics"""
