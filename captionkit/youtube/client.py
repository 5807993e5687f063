"""
YouTube client for CaptionKit.

Resolves video IDs from user input, finds a caption track on the watch page
and downloads the timed-text document behind it using requests.
"""

import logging
import re
from typing import List, Optional
from urllib.parse import urlparse, parse_qs

import requests

from ..exceptions import InvalidIdentifierError, NetworkError
from ..models import CaptionTrack, TranscriptItem
from ..timedtext import parse_timedtext
from .player_response import TrackSelector, extract_caption_tracks, select_first_track

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
)

LOCATE_STAGE = "locate caption track"
FETCH_STAGE = "fetch caption document"

_VIDEO_ID_PATTERN = re.compile(r'[A-Za-z0-9_-]{10,11}')
_YOUTUBE_HOSTS = {
    'youtube.com',
    'www.youtube.com',
    'm.youtube.com',
    'music.youtube.com',
    'youtube-nocookie.com',
    'www.youtube-nocookie.com',
}
_SHORT_LINK_HOSTS = {'youtu.be', 'www.youtu.be'}
_PATH_PREFIXES = ('embed', 'shorts', 'live', 'v')


def is_video_id(value: str) -> bool:
    """Check if value has the shape of a bare YouTube video ID."""
    return bool(_VIDEO_ID_PATTERN.fullmatch(value))


def _parse_url(value: str):
    if '://' not in value:
        value = f"https://{value}"
    return urlparse(value)


def _candidate_from_url(value: str) -> Optional[str]:
    parsed = _parse_url(value)
    host = (parsed.hostname or '').lower()
    segments = [s for s in parsed.path.split('/') if s]

    if host in _SHORT_LINK_HOSTS:
        return segments[0] if segments else None

    if host not in _YOUTUBE_HOSTS:
        return None

    if segments == ['watch']:
        ids = parse_qs(parsed.query).get('v')
        return ids[0] if ids else None

    if len(segments) >= 2 and segments[0] in _PATH_PREFIXES:
        return segments[1]

    return None


def is_youtube_url(url: str) -> bool:
    """
    Check if the provided URL is a YouTube video URL.
    
    Example:
        >>> is_youtube_url("https://www.youtube.com/watch?v=dQw4w9WgXcQ")
        True
        >>> is_youtube_url("https://example.com/video")
        False
    """
    try:
        candidate = _candidate_from_url(url.strip())
    except ValueError:
        return False
    return candidate is not None and is_video_id(candidate)


def extract_youtube_id(value: str) -> str:
    """
    Normalize a video URL or bare ID into a video ID.
    
    Supports the watch URL, youtu.be short links and the embed, shorts,
    live and /v/ path forms.
    
    Args:
        value: YouTube URL or bare video ID
        
    Returns:
        YouTube video ID
        
    Raises:
        InvalidIdentifierError: If no valid video ID can be extracted
        
    Example:
        >>> extract_youtube_id("https://www.youtube.com/watch?v=dQw4w9WgXcQ")
        'dQw4w9WgXcQ'
        >>> extract_youtube_id("dQw4w9WgXcQ")
        'dQw4w9WgXcQ'
    """
    value = (value or '').strip()
    if is_video_id(value):
        return value

    try:
        candidate = _candidate_from_url(value)
    except ValueError:
        candidate = None

    if candidate is None or not is_video_id(candidate):
        raise InvalidIdentifierError(f"not a valid YouTube video URL or ID: {value!r}", value=value)

    return candidate


def build_watch_url(video_id: str) -> str:
    return f"https://www.youtube.com/watch?v={video_id}"


class YouTubeClient:
    """
    Client for locating and downloading YouTube caption tracks.
    
    Makes exactly one request per call, through a shared requests.Session.
    Track choice is delegated to a selector callable, first track by default.
    """
    
    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
        selector: TrackSelector = select_first_track,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        """
        Initialize YouTube client.
        
        Args:
            session: Optional pre-configured session (a new one is created otherwise)
            timeout: Request timeout in seconds (default: 30)
            selector: Strategy choosing one track from the available list
            user_agent: User-Agent header sent with every request
        """
        self.timeout = timeout
        self.selector = selector
        self.session = session if session is not None else self._build_session(user_agent)

    @staticmethod
    def _build_session(user_agent: str) -> requests.Session:
        session = requests.Session()
        session.headers.update({
            'User-Agent': user_agent,
            'Accept-Language': 'en-US,en;q=0.9',
        })
        # Skip the EU consent interstitial, which has no player data
        session.cookies.set('CONSENT', 'YES+1', domain='.youtube.com')
        return session

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "YouTubeClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _get(self, url: str, stage: str) -> str:
        """
        Perform a single GET and return the body text.
        
        Raises:
            NetworkError: On transport failure or non-success status
        """
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            logger.error(f"{stage}: HTTP {status} from {url[:100]}")
            raise NetworkError(
                f"server returned HTTP {status}", stage=stage, url=url, status_code=status
            ) from e
        except requests.RequestException as e:
            logger.error(f"{stage}: request to {url[:100]} failed: {str(e)}")
            raise NetworkError(f"failed to reach network: {str(e)}", stage=stage, url=url) from e
        return response.text

    def get_watch_page(self, video_id: str) -> str:
        """Download the watch page HTML for a video."""
        url = build_watch_url(video_id)
        logger.info(f"Fetching video page for {video_id}")
        return self._get(url, LOCATE_STAGE)

    def list_caption_tracks(self, video_id: str) -> List[CaptionTrack]:
        """
        List every caption track advertised on the watch page.
        
        Raises:
            NetworkError: If the watch page cannot be downloaded
            ParsingError: If the player data cannot be extracted
            NoCaptionsAvailableError: If the video has no caption tracks
        """
        page = self.get_watch_page(video_id)
        logger.info("Extracting caption data")
        return extract_caption_tracks(page)

    def locate_caption_track(self, video_id: str) -> CaptionTrack:
        """
        Find the caption track to download for a video.
        
        Args:
            video_id: YouTube video ID
            
        Returns:
            The track chosen by the selector
            
        Raises:
            NetworkError: If the watch page cannot be downloaded
            ParsingError: If the player data cannot be extracted
            NoCaptionsAvailableError: If the video has no caption tracks
        """
        track = self.selector(self.list_caption_tracks(video_id))
        logger.info(
            f"Selected caption track: language={track.language_code}, "
            f"generated={track.is_generated}"
        )
        return track

    def fetch_caption_document(self, track_url: str) -> str:
        """Download the raw timed-text document for a caption track."""
        logger.info("Downloading transcript")
        return self._get(track_url, FETCH_STAGE)

    def fetch_transcript(self, track_url: str) -> List[TranscriptItem]:
        """
        Download and parse a caption track.
        
        Args:
            track_url: Caption track URL (CaptionTrack.base_url)
            
        Returns:
            TranscriptItems in document order
            
        Raises:
            NetworkError: If the document cannot be downloaded
            ParsingError: If the document is not timed text
        """
        document = self.fetch_caption_document(track_url)
        logger.info("Parsing transcript data")
        return parse_timedtext(document)


# Convenience functions wrapping YouTubeClient
def locate_caption_track(video_id: str, timeout: float = DEFAULT_TIMEOUT) -> CaptionTrack:
    """Locate the first caption track of a video. Convenience function wrapping YouTubeClient."""
    with YouTubeClient(timeout=timeout) as client:
        return client.locate_caption_track(video_id)


def fetch_and_parse(track_url: str, timeout: float = DEFAULT_TIMEOUT) -> List[TranscriptItem]:
    """Download and parse a caption track. Convenience function wrapping YouTubeClient."""
    with YouTubeClient(timeout=timeout) as client:
        return client.fetch_transcript(track_url)
