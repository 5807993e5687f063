"""
Transcript downloader for CaptionKit.

Runs the whole pipeline for one video: resolve the video ID from the config,
locate a caption track, download and parse it, format the transcript and
write ``transcript_<video_id>.txt``. Every stage fails fast; nothing is
written unless all earlier stages succeeded.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from .exceptions import FileWriteError
from .formatter import format_transcript, group_into_intervals
from .models import TranscriptConfig, TranscriptDocument
from .youtube import YouTubeClient, extract_youtube_id
from .youtube.client import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


def resolve_video_id(config: TranscriptConfig) -> str:
    """
    Work out which video a config refers to.
    
    The URL wins when both fields are set; a disagreeing video_id is
    reported with a warning.
    
    Raises:
        InvalidConfigError: If the config names no video
        InvalidIdentifierError: If the chosen field is not a valid URL or ID
    """
    config.validate()
    video_url = (config.video_url or "").strip()
    given_id = (config.video_id or "").strip()

    if video_url:
        video_id = extract_youtube_id(video_url)
        if given_id and given_id != video_id:
            logger.warning(
                f"video_url resolves to {video_id} but video_id is {given_id}; using {video_id}"
            )
        return video_id

    return extract_youtube_id(given_id)


def write_transcript(content: str, path: Union[str, Path]) -> Path:
    """
    Write transcript text to disk, replacing any existing file.
    
    Raises:
        FileWriteError: If the file cannot be written
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
    except OSError as e:
        logger.error(f"Failed to save transcript: {str(e)}")
        raise FileWriteError(f"cannot write {path}: {e.strerror or e}", path=str(path)) from e
    return path


class TranscriptDownloader:
    """
    Downloads a video's captions into a timestamped text file.
    
    The locator can be swapped for any object with a
    ``locate_caption_track(video_id)`` method, e.g. YtDlpTrackLocator.
    """
    
    def __init__(
        self,
        client: Optional[YouTubeClient] = None,
        locator=None,
        output_dir: Union[str, Path] = ".",
        interval: Optional[int] = None,
    ):
        """
        Initialize transcript downloader.
        
        Args:
            client: YouTube client used for HTTP (default: new YouTubeClient)
            locator: Caption track locator (default: the client itself)
            output_dir: Directory for transcript files (default: current directory)
            interval: If set, merge captions into windows of this many seconds
        """
        self.client = client if client is not None else YouTubeClient()
        self.locator = locator if locator is not None else self.client
        self.output_dir = Path(output_dir)
        self.interval = interval

    def build_document(self, config: TranscriptConfig) -> TranscriptDocument:
        """
        Resolve, locate, download and parse, without writing anything.
        
        Raises:
            CaptionKitError: From whichever stage failed
        """
        video_id = resolve_video_id(config)
        logger.info(f"Starting transcript download for video ID: {video_id}")

        track = self.locator.locate_caption_track(video_id)
        items = self.client.fetch_transcript(track.base_url)

        if self.interval:
            items = group_into_intervals(items, self.interval)

        return TranscriptDocument(video_id=video_id, items=items)

    def run(self, config: TranscriptConfig) -> Path:
        """
        Download captions for the configured video and save the transcript.
        
        Args:
            config: Run configuration naming the video
            
        Returns:
            Path of the written transcript file
            
        Raises:
            InvalidConfigError: If the config names no video (before any request)
            InvalidIdentifierError: If the video URL or ID is malformed
            NetworkError: If a request fails
            NoCaptionsAvailableError: If the video has no caption tracks
            ParsingError: If the page or caption document is malformed
            FileWriteError: If the transcript cannot be saved
        """
        document = self.build_document(config)
        content = format_transcript(document.items)

        path = write_transcript(content, self.output_dir / document.output_filename)
        logger.info(f"Transcript saved to {path} ({len(document.items)} lines)")
        return path


def download_transcript(
    config: TranscriptConfig,
    output_dir: Union[str, Path] = ".",
    interval: Optional[int] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Path:
    """Download one transcript. Convenience function wrapping TranscriptDownloader."""
    with YouTubeClient(timeout=timeout) as client:
        return TranscriptDownloader(client=client, output_dir=output_dir, interval=interval).run(config)
