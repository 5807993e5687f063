"""
Exceptions raised by CaptionKit.

Every error carries the pipeline stage it came from so callers can print a
one-line diagnostic such as ``Error (fetch caption document): ...``.
"""

from typing import Optional


class CaptionKitError(Exception):
    """Base class for all CaptionKit errors."""

    default_stage: Optional[str] = None

    def __init__(self, message: str, stage: Optional[str] = None):
        self.message = message
        self.stage = stage or self.default_stage
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class InvalidConfigError(CaptionKitError):
    """Config file is missing, malformed, or names no video."""

    default_stage = "load config"


class InvalidIdentifierError(CaptionKitError):
    """Input is neither a bare video ID nor a recognised YouTube URL."""

    default_stage = "resolve video id"

    def __init__(self, message: str, value: Optional[str] = None, stage: Optional[str] = None):
        self.value = value
        super().__init__(message, stage=stage)


class NetworkError(CaptionKitError):
    """HTTP transport failure or non-success status."""

    def __init__(
        self,
        message: str,
        stage: Optional[str] = None,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        self.url = url
        self.status_code = status_code
        super().__init__(message, stage=stage)


class NoCaptionsAvailableError(CaptionKitError):
    """The video exposes no caption tracks."""

    default_stage = "locate caption track"


class ParsingError(CaptionKitError):
    """Player payload or timed-text document has an unexpected shape."""


class FileWriteError(CaptionKitError):
    """Transcript could not be written to disk."""

    default_stage = "write transcript"

    def __init__(self, message: str, path: Optional[str] = None, stage: Optional[str] = None):
        self.path = path
        super().__init__(message, stage=stage)
