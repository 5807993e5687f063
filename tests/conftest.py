"""Shared fixtures: canned YouTube responses and a fake HTTP session."""

import json
from unittest.mock import Mock

import pytest
import requests

from captionkit.youtube import YouTubeClient


TRACK_URL = "https://www.youtube.com/api/timedtext?v=abc123XYZ9&lang=en"

SRV1_DOCUMENT = (
    '<?xml version="1.0" encoding="utf-8" ?><transcript>'
    '<text start="0" dur="2.5">Hello <i>world</i></text>'
    '<text start="2.9" dur="3">A &amp; B &lt;tag&gt;</text>'
    '<text start="65.2" dur="1.8">it&#39;s a\nnew line</text>'
    '</transcript>'
)


def build_player_response(tracks=None, playability=None):
    data = {"videoDetails": {"videoId": "abc123XYZ9", "title": "Test video"}}
    if playability is not None:
        data["playabilityStatus"] = playability
    if tracks is not None:
        data["captions"] = {"playerCaptionsTracklistRenderer": {"captionTracks": tracks}}
    return data


def build_watch_page(player_response):
    return (
        '<!DOCTYPE html><html><head><title>Test video - YouTube</title></head><body>'
        '<script nonce="x">var ytInitialPlayerResponse = '
        + json.dumps(player_response)
        + ';var meta = document.createElement(\'meta\');</script>'
        '</body></html>'
    )


def make_response(text="", status_code=200):
    response = Mock()
    response.text = text
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Client Error", response=response
        )
    return response


@pytest.fixture
def english_track():
    return {
        "baseUrl": TRACK_URL,
        "name": {"simpleText": "English"},
        "languageCode": "en",
    }


@pytest.fixture
def watch_page(english_track):
    return build_watch_page(build_player_response(tracks=[english_track]))


@pytest.fixture
def make_session():
    """Build a fake session whose get() returns the given bodies/responses in order."""
    def _make(*bodies):
        session = Mock()
        session.get.side_effect = [
            body if not isinstance(body, str) else make_response(body)
            for body in bodies
        ]
        return session
    return _make


@pytest.fixture
def make_client(make_session):
    def _make(*bodies):
        return YouTubeClient(session=make_session(*bodies), timeout=5)
    return _make
