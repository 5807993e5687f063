"""Loading of the JSON run configuration."""

import json
import logging
from pathlib import Path
from typing import Union

from .exceptions import InvalidConfigError
from .models import TranscriptConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.json"
KNOWN_KEYS = {"video_url", "video_id"}


def load_config(path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> TranscriptConfig:
    """
    Read and validate a config file.
    
    Args:
        path: Path to a JSON object with 'video_url' and/or 'video_id'
        
    Returns:
        Validated TranscriptConfig
        
    Raises:
        InvalidConfigError: If the file cannot be read, is not a JSON object,
            or names no video
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise InvalidConfigError(f"cannot read {path}: {e.strerror or e}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidConfigError(f"{path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise InvalidConfigError(f"{path} must contain a JSON object")

    unknown = set(data) - KNOWN_KEYS
    if unknown:
        logger.debug(f"Ignoring unknown config keys: {', '.join(sorted(unknown))}")

    config = TranscriptConfig.from_dict(data)
    config.validate()
    logger.debug(f"Loaded config from {path}")
    return config
