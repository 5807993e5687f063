"""
yt-dlp based caption locator for CaptionKit.

Alternative to scraping the watch page: asks yt-dlp for the video metadata
and builds the caption track list from its ``subtitles`` and
``automatic_captions`` entries.
"""

import logging
from typing import Any, Dict, List, Optional

import yt_dlp
from yt_dlp.utils import DownloadError

from ..exceptions import NetworkError, NoCaptionsAvailableError
from ..models import CaptionTrack
from .client import LOCATE_STAGE, build_watch_url
from .player_response import TrackSelector, select_first_track

logger = logging.getLogger(__name__)

# XML timed-text formats understood by captionkit.timedtext, in preference order
TIMEDTEXT_FORMATS = ('srv1', 'srv3')


def _pick_format(formats: List[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    by_ext = {fmt.get('ext'): fmt for fmt in formats if fmt.get('url')}
    for ext in TIMEDTEXT_FORMATS:
        if ext in by_ext:
            return by_ext[ext]
    return None


def tracks_from_info(info: Dict[str, Any]) -> List[CaptionTrack]:
    """
    Build caption tracks from a yt-dlp info dict.
    
    Manual subtitles come first, then automatic captions, each in the order
    yt-dlp reports the languages.
    """
    tracks = []
    for source, kind in (('subtitles', None), ('automatic_captions', 'asr')):
        for lang, formats in (info.get(source) or {}).items():
            fmt = _pick_format(formats or [])
            if fmt is None:
                logger.debug(f"No timed-text format for {source} language '{lang}'")
                continue
            tracks.append(CaptionTrack(
                base_url=fmt['url'],
                language_code=lang,
                name=fmt.get('name'),
                kind=kind,
            ))
    return tracks


class YtDlpTrackLocator:
    """Caption locator backed by yt-dlp metadata extraction."""

    def __init__(
        self,
        cookies_path: Optional[str] = None,
        selector: TrackSelector = select_first_track,
    ):
        """
        Initialize the locator.
        
        Args:
            cookies_path: Optional path to a cookies file handed to yt-dlp
            selector: Strategy choosing one track from the available list
        """
        self.cookies_path = cookies_path
        self.selector = selector

    def _get_ydl_opts(self, **overrides) -> Dict:
        """
        Get default yt-dlp options with optional overrides.
        
        Args:
            **overrides: Options to override defaults
            
        Returns:
            Dictionary of yt-dlp options
        """
        opts = {
            'quiet': True,
            'no_warnings': True,
            'skip_download': True,
            'writesubtitles': True,
            'writeautomaticsub': True,
        }
        
        if self.cookies_path:
            opts['cookiefile'] = self.cookies_path
        
        opts.update(overrides)
        return opts

    def locate_caption_track(self, video_id: str) -> CaptionTrack:
        """
        Find the caption track to download for a video.
        
        Raises:
            NetworkError: If yt-dlp cannot extract the video metadata
            NoCaptionsAvailableError: If no timed-text track is listed
        """
        url = build_watch_url(video_id)
        logger.info(f"Extracting caption info with yt-dlp for {video_id}")

        try:
            with yt_dlp.YoutubeDL(self._get_ydl_opts()) as ydl:
                info = ydl.extract_info(url, download=False)
        except DownloadError as e:
            logger.error(f"yt-dlp extraction failed for {video_id}: {str(e)}")
            raise NetworkError(f"yt-dlp extraction failed: {str(e)}", stage=LOCATE_STAGE, url=url) from e

        tracks = tracks_from_info(info or {})
        if not tracks:
            raise NoCaptionsAvailableError("no captions available for this video")

        logger.info(f"Found {len(tracks)} caption tracks")
        return self.selector(tracks)
