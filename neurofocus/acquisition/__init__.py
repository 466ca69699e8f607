"""
Sample acquisition

This module provides synthetic sample generation and loading of recorded
stage data from files.
"""

from .sources import FakeSampleSource
from .recordings import load_stage_recordings

__all__ = ['FakeSampleSource', 'load_stage_recordings']
