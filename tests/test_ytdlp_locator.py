import pytest
from yt_dlp.utils import DownloadError

from captionkit.exceptions import NetworkError, NoCaptionsAvailableError
from captionkit.youtube import ytdlp_locator
from captionkit.youtube.ytdlp_locator import YtDlpTrackLocator, tracks_from_info


INFO = {
    "id": "abc123XYZ9",
    "subtitles": {
        "en": [
            {"ext": "json3", "url": "https://example.com/en.json3"},
            {"ext": "srv3", "url": "https://example.com/en.srv3"},
            {"ext": "srv1", "url": "https://example.com/en.srv1", "name": "English"},
        ],
        "live_chat": [{"ext": "json", "url": "https://example.com/chat"}],
    },
    "automatic_captions": {
        "de": [
            {"ext": "vtt", "url": "https://example.com/de.vtt"},
            {"ext": "srv3", "url": "https://example.com/de.srv3"},
        ],
    },
}


class FakeYoutubeDL:
    """Stands in for yt_dlp.YoutubeDL; records options and returns canned info."""

    info = INFO
    error = None
    last_opts = None

    def __init__(self, opts):
        FakeYoutubeDL.last_opts = opts

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False

    def extract_info(self, url, download=True):
        assert download is False
        if self.error is not None:
            raise self.error
        return self.info


@pytest.fixture
def fake_ydl(monkeypatch):
    monkeypatch.setattr(FakeYoutubeDL, "info", INFO)
    monkeypatch.setattr(FakeYoutubeDL, "error", None)
    monkeypatch.setattr(ytdlp_locator.yt_dlp, "YoutubeDL", FakeYoutubeDL)
    return FakeYoutubeDL


def test_tracks_from_info_order_and_format_preference():
    tracks = tracks_from_info(INFO)
    assert [(t.language_code, t.base_url, t.kind) for t in tracks] == [
        ("en", "https://example.com/en.srv1", None),
        ("de", "https://example.com/de.srv3", "asr"),
    ]
    assert tracks[0].name == "English"


def test_locate_caption_track_picks_first(fake_ydl):
    track = YtDlpTrackLocator(cookies_path="cookies.txt").locate_caption_track("abc123XYZ9")

    assert track.base_url == "https://example.com/en.srv1"
    assert fake_ydl.last_opts["cookiefile"] == "cookies.txt"
    assert fake_ydl.last_opts["skip_download"] is True


def test_locate_caption_track_without_tracks(fake_ydl, monkeypatch):
    monkeypatch.setattr(fake_ydl, "info", {"id": "abc123XYZ9", "subtitles": {}, "automatic_captions": {}})

    with pytest.raises(NoCaptionsAvailableError):
        YtDlpTrackLocator().locate_caption_track("abc123XYZ9")


def test_locate_caption_track_extraction_failure(fake_ydl, monkeypatch):
    monkeypatch.setattr(fake_ydl, "error", DownloadError("ERROR: Video unavailable"))

    with pytest.raises(NetworkError) as excinfo:
        YtDlpTrackLocator().locate_caption_track("abc123XYZ9")

    assert excinfo.value.stage == "locate caption track"
    assert "Video unavailable" in str(excinfo.value)
