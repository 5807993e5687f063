"""
Timed-text document parsing for CaptionKit.

YouTube serves caption tracks as small XML documents. Two layouts are
handled:

- format 1 (``srv1``): ``<text start="1.23" dur="2.5">payload</text>``,
  offsets in seconds
- format 3 (``srv3``): ``<p t="1230" d="2500">payload</p>``, offsets in
  milliseconds, payload often split into ``<s>`` word spans

Payload markup is stripped here; character entities are left encoded and
decoded by the formatter.
"""

import logging
import math
import re
from typing import Dict, List, Optional

from ..exceptions import ParsingError
from ..models import TranscriptItem
from ..utils import strip_markup, collapse_line_breaks

logger = logging.getLogger(__name__)

STAGE = "fetch caption document"

# Pre-compiled regex patterns for performance
_SRV1_PATTERN = re.compile(r'<text\b([^>]*)(?<!/)>(.*?)</text\s*>', re.DOTALL)
_SRV3_PATTERN = re.compile(r'<p\b([^>]*)(?<!/)>(.*?)</p\s*>', re.DOTALL)
_ATTR_PATTERN = re.compile(r'([\w:-]+)\s*=\s*(?:"([^"]*)"|\'([^\']*)\')')


def _parse_attributes(raw: str) -> Dict[str, str]:
    attrs = {}
    for match in _ATTR_PATTERN.finditer(raw):
        value = match.group(2) if match.group(2) is not None else match.group(3)
        attrs[match.group(1)] = value
    return attrs


def _parse_offset(value: Optional[str], name: str, scale: float, required: bool) -> Optional[float]:
    """
    Convert a time attribute to seconds.

    Raises:
        ParsingError: If the attribute is missing (when required), not a
            number, negative, or not finite
    """
    if value is None:
        if required:
            raise ParsingError(f"caption element is missing its '{name}' attribute", stage=STAGE)
        return None
    try:
        seconds = float(value) / scale
    except ValueError as e:
        raise ParsingError(f"malformed '{name}' attribute: {value!r}", stage=STAGE) from e
    if not math.isfinite(seconds) or seconds < 0:
        raise ParsingError(f"malformed '{name}' attribute: {value!r}", stage=STAGE)
    return seconds


def _clean_payload(payload: str) -> str:
    return collapse_line_breaks(strip_markup(payload))


def _parse_elements(matches, start_attr: str, duration_attr: str, scale: float) -> List[TranscriptItem]:
    items = []
    for match in matches:
        attrs = _parse_attributes(match.group(1))
        start = _parse_offset(attrs.get(start_attr), start_attr, scale, required=True)
        duration = _parse_offset(attrs.get(duration_attr), duration_attr, scale, required=False)
        text = _clean_payload(match.group(2))
        if not text:
            continue
        items.append(TranscriptItem(start=start, text=text, duration=duration))
    return items


def parse_timedtext(content: str) -> List[TranscriptItem]:
    """
    Parse a timed-text caption document into ordered transcript items.

    Args:
        content: Caption document body as returned by the track URL

    Returns:
        List of TranscriptItem in document order

    Raises:
        ParsingError: If the body holds no timed elements or a time
            attribute is malformed

    Example:
        >>> xml = '<transcript><text start="1.5" dur="2">Hello <i>world</i></text></transcript>'
        >>> parse_timedtext(xml)
        [TranscriptItem(start=1.5, text='Hello world', duration=2.0)]
    """
    if not content or not content.strip():
        raise ParsingError("unexpected caption document format: empty body", stage=STAGE)

    srv1_matches = list(_SRV1_PATTERN.finditer(content))
    if srv1_matches:
        logger.debug(f"Detected format 1 timed text with {len(srv1_matches)} elements")
        items = _parse_elements(srv1_matches, "start", "dur", scale=1.0)
    else:
        srv3_matches = list(_SRV3_PATTERN.finditer(content))
        if not srv3_matches:
            raise ParsingError(
                "unexpected caption document format: no timed text elements found",
                stage=STAGE,
            )
        logger.debug(f"Detected format 3 timed text with {len(srv3_matches)} elements")
        items = _parse_elements(srv3_matches, "t", "d", scale=1000.0)

    if not items:
        raise ParsingError(
            "unexpected caption document format: timed text elements carry no text",
            stage=STAGE,
        )

    logger.info(f"Parsed {len(items)} caption lines")
    return items
