"""
Data models for CaptionKit.

Defines the core data structures used throughout the package.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional

from .exceptions import InvalidConfigError


OUTPUT_FILENAME_PATTERN = "transcript_{video_id}.txt"


@dataclass(frozen=True)
class TranscriptItem:
    """A single timed caption entry parsed from a timed-text document."""
    start: float  # seconds since video start
    text: str     # markup stripped, entities still encoded
    duration: Optional[float] = None


@dataclass(frozen=True)
class CaptionTrack:
    """A caption track advertised by the video's player metadata."""
    base_url: str
    language_code: Optional[str] = None
    name: Optional[str] = None
    kind: Optional[str] = None  # "asr" for auto-generated captions

    @property
    def is_generated(self) -> bool:
        return self.kind == "asr"


@dataclass
class TranscriptDocument:
    """Parsed transcript for one video."""
    video_id: str
    items: List[TranscriptItem] = field(default_factory=list)

    @property
    def output_filename(self) -> str:
        return OUTPUT_FILENAME_PATTERN.format(video_id=self.video_id)


@dataclass(frozen=True)
class TranscriptConfig:
    """Run configuration: which video to fetch captions for."""
    video_url: Optional[str] = None
    video_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TranscriptConfig":
        """
        Build a config from a decoded JSON object.

        Args:
            data: Mapping with optional 'video_url' and 'video_id' keys

        Returns:
            TranscriptConfig instance (not yet validated)

        Raises:
            InvalidConfigError: If a field is present but not a string
        """
        values = {}
        for key in ("video_url", "video_id"):
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise InvalidConfigError(
                    f"'{key}' must be a string, got {type(value).__name__}"
                )
            values[key] = value.strip() if value else None
        return cls(**values)

    def validate(self) -> None:
        """Ensure at least one of video_url / video_id is non-empty."""
        if not (self.video_url or "").strip() and not (self.video_id or "").strip():
            raise InvalidConfigError(
                "config must provide a non-empty 'video_url' or 'video_id'"
            )
