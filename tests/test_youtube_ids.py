import pytest

from captionkit.exceptions import InvalidIdentifierError
from captionkit.youtube import build_watch_url, extract_youtube_id, is_video_id, is_youtube_url


@pytest.mark.parametrize("url, expected", [
    ("https://www.youtube.com/watch?v=abc123XYZ9", "abc123XYZ9"),
    ("https://www.youtube.com/watch?v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
    ("https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=42s", "dQw4w9WgXcQ"),
    ("https://www.youtube.com/watch?feature=share&v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
    ("http://youtube.com/watch?v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
    ("www.youtube.com/watch?v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
    ("https://m.youtube.com/watch?v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
    ("https://music.youtube.com/watch?v=dQw4w9WgXcQ&list=RD", "dQw4w9WgXcQ"),
    ("https://youtu.be/dQw4w9WgXcQ", "dQw4w9WgXcQ"),
    ("https://youtu.be/dQw4w9WgXcQ?si=abcdef", "dQw4w9WgXcQ"),
    ("https://www.youtube.com/embed/dQw4w9WgXcQ", "dQw4w9WgXcQ"),
    ("https://www.youtube-nocookie.com/embed/dQw4w9WgXcQ", "dQw4w9WgXcQ"),
    ("https://www.youtube.com/shorts/dQw4w9WgXcQ", "dQw4w9WgXcQ"),
    ("https://www.youtube.com/live/dQw4w9WgXcQ?feature=share", "dQw4w9WgXcQ"),
])
def test_extract_youtube_id_from_urls(url, expected):
    assert extract_youtube_id(url) == expected


@pytest.mark.parametrize("video_id", ["dQw4w9WgXcQ", "abc123XYZ9", "a-b_c-d_e-f", "___________"])
def test_extract_youtube_id_is_identity_for_bare_ids(video_id):
    assert extract_youtube_id(video_id) == video_id


def test_extract_youtube_id_strips_whitespace():
    assert extract_youtube_id("  dQw4w9WgXcQ\n") == "dQw4w9WgXcQ"


@pytest.mark.parametrize("value", [
    "",
    "abc",
    "dQw4w9WgXcQ!",
    "dQw4w9WgXcQxyz",
    "not a video id",
    "https://example.com/watch?v=dQw4w9WgXcQ",
    "https://www.youtube.com/watch?v=short",
    "https://www.youtube.com/watch?v=dQw4w9WgX$Q",
    "https://www.youtube.com/watch",
    "https://www.youtube.com/channel/UCuAXFkgsw1L7xaCfnd5JJOw",
    "https://youtu.be/",
    "https://www.youtube.com/watch?v=abc123XYZ9%0A",
    "https://youtu.be/abc123XYZ9%0A",
])
def test_extract_youtube_id_rejects_malformed_input(value):
    with pytest.raises(InvalidIdentifierError) as excinfo:
        extract_youtube_id(value)
    assert excinfo.value.stage == "resolve video id"
    assert excinfo.value.value == value.strip()


def test_is_video_id():
    assert is_video_id("dQw4w9WgXcQ")
    assert not is_video_id("dQw4w9WgXc Q")
    assert not is_video_id("abc123XYZ9\n")
    assert not is_video_id("https://youtu.be/dQw4w9WgXcQ")


def test_is_youtube_url():
    assert is_youtube_url("https://www.youtube.com/watch?v=dQw4w9WgXcQ")
    assert is_youtube_url("https://youtu.be/dQw4w9WgXcQ")
    assert not is_youtube_url("https://example.com/video")
    assert not is_youtube_url("https://www.youtube.com/feed/trending")


def test_build_watch_url():
    assert build_watch_url("dQw4w9WgXcQ") == "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
