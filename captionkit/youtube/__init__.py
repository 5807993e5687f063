"""
YouTube module for CaptionKit.

Provides video ID extraction, caption track discovery and caption download.
"""

from .client import (
    YouTubeClient,
    is_video_id,
    is_youtube_url,
    extract_youtube_id,
    build_watch_url,
    locate_caption_track,
    fetch_and_parse,
)

from .player_response import (
    TrackSelector,
    extract_player_response,
    extract_caption_tracks,
    select_first_track,
)

from .ytdlp_locator import YtDlpTrackLocator, tracks_from_info

__all__ = [
    'YouTubeClient',
    'YtDlpTrackLocator',
    'is_video_id',
    'is_youtube_url',
    'extract_youtube_id',
    'build_watch_url',
    'locate_caption_track',
    'fetch_and_parse',
    'TrackSelector',
    'extract_player_response',
    'extract_caption_tracks',
    'select_first_track',
    'tracks_from_info',
]
