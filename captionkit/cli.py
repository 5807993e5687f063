"""
Command-line entry point for CaptionKit.

Thin adapter: parse options, load the config, run the downloader and report
the outcome. Exits with status 1 on any CaptionKitError.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import typer

from .config import DEFAULT_CONFIG_PATH, load_config
from .downloader import TranscriptDownloader
from .exceptions import CaptionKitError
from .youtube import YouTubeClient, YtDlpTrackLocator
from .youtube.client import DEFAULT_TIMEOUT

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Locator(str, Enum):
    watch_page = "watch-page"
    yt_dlp = "yt-dlp"


app = typer.Typer(
    name="captionkit",
    help="Save a YouTube video's captions as a [MM:SS] timestamped transcript.",
    add_completion=False,
)


@app.command()
def download(
    config_path: Path = typer.Option(
        DEFAULT_CONFIG_PATH, "--config", "-c", help="JSON config with video_url and/or video_id"
    ),
    output_dir: Path = typer.Option(Path("."), "--output-dir", "-o", help="Directory for the transcript file"),
    interval: Optional[int] = typer.Option(
        None, "--interval", min=1, help="Group captions into windows of this many seconds"
    ),
    locator: Locator = typer.Option(Locator.watch_page, "--locator", help="How to find the caption track"),
    timeout: float = typer.Option(DEFAULT_TIMEOUT, "--timeout", min=1, help="HTTP timeout in seconds"),
    echo: bool = typer.Option(False, "--echo/--no-echo", help="Print the transcript after saving it"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """
    Download captions for the video named in the config file.
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format=LOG_FORMAT)

    try:
        config = load_config(config_path)
        with YouTubeClient(timeout=timeout) as client:
            track_locator = YtDlpTrackLocator() if locator is Locator.yt_dlp else client
            downloader = TranscriptDownloader(
                client=client,
                locator=track_locator,
                output_dir=output_dir,
                interval=interval,
            )
            path = downloader.run(config)
    except CaptionKitError as e:
        typer.echo(f"Error ({e.stage}): {e.message}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Transcript saved to {path}")
    if echo:
        typer.echo("")
        typer.echo(path.read_text(encoding='utf-8'))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
