import json

import pytest

from captionkit.config import load_config
from captionkit.exceptions import InvalidConfigError
from captionkit.models import TranscriptConfig


def write_config(tmp_path, data):
    path = tmp_path / "config.json"
    path.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")
    return path


def test_load_config_with_url(tmp_path):
    path = write_config(tmp_path, {"video_url": "https://www.youtube.com/watch?v=abc123XYZ9"})
    assert load_config(path) == TranscriptConfig(video_url="https://www.youtube.com/watch?v=abc123XYZ9")


def test_load_config_with_id_and_extra_keys(tmp_path):
    path = write_config(tmp_path, {"video_id": " dQw4w9WgXcQ ", "language": "en"})
    assert load_config(path) == TranscriptConfig(video_id="dQw4w9WgXcQ")


@pytest.mark.parametrize("data", [
    {},
    {"video_url": "", "video_id": ""},
    {"video_url": "   "},
    {"video_url": None, "video_id": None},
])
def test_load_config_requires_a_video(tmp_path, data):
    with pytest.raises(InvalidConfigError) as excinfo:
        load_config(write_config(tmp_path, data))
    assert excinfo.value.stage == "load config"


def test_load_config_rejects_non_string_fields(tmp_path):
    with pytest.raises(InvalidConfigError):
        load_config(write_config(tmp_path, {"video_id": 12345}))


def test_load_config_rejects_non_object(tmp_path):
    with pytest.raises(InvalidConfigError):
        load_config(write_config(tmp_path, '["abc123XYZ9"]'))


def test_load_config_rejects_invalid_json(tmp_path):
    with pytest.raises(InvalidConfigError):
        load_config(write_config(tmp_path, "{video_id: abc123XYZ9"))


def test_load_config_missing_file(tmp_path):
    with pytest.raises(InvalidConfigError) as excinfo:
        load_config(tmp_path / "missing.json")
    assert "cannot read" in str(excinfo.value)
