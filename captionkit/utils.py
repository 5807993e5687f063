"""
Shared utility functions for CaptionKit.

Provides timestamp rendering and the text clean-up helpers used by the
timed-text parser and the transcript formatter.
"""

import html
import math
import re

_TAG_PATTERN = re.compile(r'<[^>]*>')
_LINE_BREAK_PATTERN = re.compile(r'\s*[\r\n]+\s*')


def format_timestamp(seconds: float) -> str:
    """
    Render a start offset as [MM:SS].

    Seconds are floored, never rounded. Minutes keep counting past 59
    instead of rolling into hours.

    Args:
        seconds: Offset from video start in seconds

    Returns:
        Timestamp string such as "[01:05]"

    Example:
        >>> format_timestamp(65.0)
        '[01:05]'
        >>> format_timestamp(6000)
        '[100:00]'
    """
    total = int(math.floor(seconds))
    minutes, secs = divmod(total, 60)
    return f"[{minutes:02d}:{secs:02d}]"


def strip_markup(text: str) -> str:
    """
    Remove nested markup tags, keeping only their text content.

    Example:
        >>> strip_markup("Hello <i>world</i>")
        'Hello world'
    """
    return _TAG_PATTERN.sub('', text)


def collapse_line_breaks(text: str) -> str:
    """Join a multi-line caption payload into a single line."""
    return _LINE_BREAK_PATTERN.sub(' ', text).strip()


def decode_entities(text: str) -> str:
    """
    Decode HTML/XML character entities into literal characters.

    Example:
        >>> decode_entities("A &amp; B &lt;tag&gt;")
        'A & B <tag>'
    """
    return collapse_line_breaks(html.unescape(text))
