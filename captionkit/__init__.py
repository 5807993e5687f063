"""
CaptionKit - YouTube caption transcripts

Fetches the caption track of a YouTube video and writes it out as a plain
text transcript with [MM:SS] timestamps.

Features:
- Resolve video IDs from watch URLs, youtu.be links, embed/shorts/live URLs
  or bare IDs
- Locate caption tracks from the watch page player data (or via yt-dlp)
- Parse format 1 and format 3 timed-text documents
- Format transcripts as "[MM:SS] text" lines, optionally grouped into
  fixed time windows

Example usage:
    >>> from captionkit import TranscriptConfig, TranscriptDownloader
    >>> 
    >>> downloader = TranscriptDownloader(output_dir="transcripts")
    >>> path = downloader.run(
    ...     TranscriptConfig(video_url="https://www.youtube.com/watch?v=VIDEO_ID")
    ... )
"""

import logging

__version__ = "0.1.0"
__author__ = "CaptionKit Contributors"
__license__ = "MIT"

# Add NullHandler to prevent "No handler found" warnings
# Users should configure logging in their application if they want to see logs
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Core utility functions
from .utils import (
    format_timestamp,
    decode_entities,
    strip_markup,
)

# Parsing and formatting
from .timedtext import parse_timedtext
from .formatter import format_transcript, format_transcript_line, group_into_intervals

# Main classes
from .downloader import TranscriptDownloader, download_transcript, resolve_video_id, write_transcript
from .config import load_config

# Data models
from .models import TranscriptItem, CaptionTrack, TranscriptDocument, TranscriptConfig

# Errors
from .exceptions import (
    CaptionKitError,
    InvalidConfigError,
    InvalidIdentifierError,
    NetworkError,
    NoCaptionsAvailableError,
    ParsingError,
    FileWriteError,
)

# YouTube utilities
from .youtube import (
    YouTubeClient,
    YtDlpTrackLocator,
    is_video_id,
    is_youtube_url,
    extract_youtube_id,
    build_watch_url,
    extract_caption_tracks,
    select_first_track,
    locate_caption_track,
    fetch_and_parse,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",
    
    # Core functions
    "format_timestamp",
    "decode_entities",
    "strip_markup",
    "parse_timedtext",
    "format_transcript",
    "format_transcript_line",
    "group_into_intervals",
    "resolve_video_id",
    "write_transcript",
    "load_config",
    
    # Main classes
    "TranscriptDownloader",
    "YouTubeClient",
    "YtDlpTrackLocator",
    "download_transcript",
    
    # Models
    "TranscriptItem",
    "CaptionTrack",
    "TranscriptDocument",
    "TranscriptConfig",
    
    # Errors
    "CaptionKitError",
    "InvalidConfigError",
    "InvalidIdentifierError",
    "NetworkError",
    "NoCaptionsAvailableError",
    "ParsingError",
    "FileWriteError",
    
    # YouTube utilities
    "is_video_id",
    "is_youtube_url",
    "extract_youtube_id",
    "build_watch_url",
    "extract_caption_tracks",
    "select_first_track",
    "locate_caption_track",
    "fetch_and_parse",
]
