"""
Player-response parsing for CaptionKit.

The watch page embeds the player configuration as a JavaScript assignment,
``var ytInitialPlayerResponse = {...};``. The caption tracks live under
``captions.playerCaptionsTracklistRenderer.captionTracks``. Everything that
depends on that page layout is kept in this module.
"""

import json
import logging
import re
from typing import Any, Callable, Dict, List, Optional
from urllib.parse import urljoin

from ..exceptions import NoCaptionsAvailableError, ParsingError
from ..models import CaptionTrack

logger = logging.getLogger(__name__)

STAGE = "locate caption track"
YOUTUBE_BASE_URL = "https://www.youtube.com"

_PLAYER_RESPONSE_PATTERN = re.compile(r'ytInitialPlayerResponse\s*=\s*')
_decoder = json.JSONDecoder()

TrackSelector = Callable[[List[CaptionTrack]], CaptionTrack]


def select_first_track(tracks: List[CaptionTrack]) -> CaptionTrack:
    """Pick the first track in the order the page lists them."""
    if not tracks:
        raise NoCaptionsAvailableError("no captions available for this video")
    return tracks[0]


def extract_player_response(page_body: str) -> Dict[str, Any]:
    """
    Decode the ytInitialPlayerResponse object embedded in a watch page.

    Args:
        page_body: Watch page HTML

    Returns:
        Player response as a dictionary

    Raises:
        ParsingError: If the assignment is missing or its JSON is invalid
    """
    for match in _PLAYER_RESPONSE_PATTERN.finditer(page_body):
        start = match.end()
        if page_body[start:start + 1] != '{':
            # placeholder such as "ytInitialPlayerResponse = null"
            continue
        try:
            data, _ = _decoder.raw_decode(page_body, start)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to decode player response: {e}")
            raise ParsingError(f"cannot decode player data: {e}", stage=STAGE) from e
        if isinstance(data, dict):
            return data

    raise ParsingError("cannot find player data in watch page", stage=STAGE)


def _playability_reason(player_response: Dict[str, Any]) -> Optional[str]:
    status = player_response.get("playabilityStatus")
    if not isinstance(status, dict) or status.get("status") in (None, "OK"):
        return None
    return status.get("reason") or status.get("status")


def _to_track(raw: Any, index: int) -> CaptionTrack:
    if not isinstance(raw, dict):
        raise ParsingError(f"caption track #{index} is not an object", stage=STAGE)

    base_url = raw.get("baseUrl")
    if not isinstance(base_url, str) or not base_url:
        raise ParsingError(f"caption track #{index} has no baseUrl", stage=STAGE)

    name = raw.get("name")
    if isinstance(name, dict):
        # {"simpleText": "English"} or {"runs": [{"text": "English"}]}
        runs = name.get("runs")
        if not isinstance(runs, list):
            runs = []
        name = name.get("simpleText") or "".join(
            run.get("text", "") for run in runs if isinstance(run, dict)
        ) or None

    return CaptionTrack(
        base_url=urljoin(YOUTUBE_BASE_URL, base_url),
        language_code=raw.get("languageCode"),
        name=name,
        kind=raw.get("kind"),
    )


def extract_caption_tracks(page_body: str) -> List[CaptionTrack]:
    """
    Extract the caption tracks listed in a watch page.

    Args:
        page_body: Watch page HTML

    Returns:
        Non-empty list of CaptionTrack in page order

    Raises:
        ParsingError: If the player data cannot be located or decoded, or a
            track entry has an unexpected shape
        NoCaptionsAvailableError: If the player data lists no tracks
    """
    player_response = extract_player_response(page_body)

    captions = player_response.get("captions")
    renderer = captions.get("playerCaptionsTracklistRenderer") if isinstance(captions, dict) else None
    raw_tracks = (renderer.get("captionTracks") if isinstance(renderer, dict) else None) or []
    if not isinstance(raw_tracks, list):
        raise ParsingError("captionTracks is not a list", stage=STAGE)

    if not raw_tracks:
        reason = _playability_reason(player_response)
        message = "no captions available for this video"
        if reason:
            message = f"{message} ({reason})"
        raise NoCaptionsAvailableError(message)

    tracks = [_to_track(raw, i) for i, raw in enumerate(raw_tracks)]
    logger.info(f"Found {len(tracks)} caption tracks")
    return tracks
