"""
Transcript formatting for CaptionKit.

Renders parsed caption items as ``[MM:SS] text`` lines.
"""

import logging
from typing import Iterable, List

from .models import TranscriptItem
from .utils import decode_entities, format_timestamp

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 6


def format_transcript_line(item: TranscriptItem) -> str:
    return f"{format_timestamp(item.start)} {decode_entities(item.text)}"


def format_transcript(items: Iterable[TranscriptItem]) -> str:
    """
    Format transcript items as timestamped lines.
    
    One line per item, in input order, joined by a single newline. An empty
    input gives an empty string.
    
    Args:
        items: Parsed transcript items
        
    Returns:
        Transcript text
        
    Example:
        >>> format_transcript([TranscriptItem(start=65.4, text="A &amp; B")])
        '[01:05] A & B'
    """
    return "\n".join(format_transcript_line(item) for item in items)


def group_into_intervals(items: Iterable[TranscriptItem], interval: int = DEFAULT_INTERVAL) -> List[TranscriptItem]:
    """
    Merge items into fixed-length time windows.
    
    Each window [k*interval, (k+1)*interval) becomes one item starting at
    k*interval whose text joins the window's texts with a space. Empty
    windows are dropped.
    
    Args:
        items: Parsed transcript items
        interval: Window length in seconds (default: 6)
        
    Returns:
        Grouped items in chronological order
        
    Raises:
        ValueError: If interval is not positive
    """
    if interval <= 0:
        raise ValueError(f"interval must be positive, got {interval}")

    windows = {}
    for item in sorted(items, key=lambda i: i.start):
        key = int(item.start // interval)
        windows.setdefault(key, []).append(item.text)

    grouped = [
        TranscriptItem(start=float(key * interval), text=" ".join(texts), duration=float(interval))
        for key, texts in sorted(windows.items())
    ]
    logger.debug(f"Grouped transcript into {len(grouped)} windows of {interval}s")
    return grouped
