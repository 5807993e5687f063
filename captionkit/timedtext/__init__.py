"""
Timed-text parsing for CaptionKit.

Turns YouTube caption documents into ordered TranscriptItem sequences.
"""

from .parser import parse_timedtext

__all__ = [
    'parse_timedtext',
]
