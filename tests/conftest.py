from datetime import datetime, timezone
from itertools import count
from pathlib import Path
import sys

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from selection.models import RawTrack

NOW = datetime(2025, 6, 1, tzinfo=timezone.utc)

_ids = count(1000)


def _make_track(title="Song", artist="Artist", **fields):
    values = {
        "track_id": next(_ids),
        "title": title,
        "artist": artist,
        "preview_url": "https://audio.example/preview.m4a",
    }
    values.update(fields)
    return RawTrack(**values)


def _full_track(title="Song", artist="Artist", **fields):
    # Earns every quality bonus when scored at NOW
    values = {
        "album": f"{title} LP",
        "genre": "Pop",
        "duration_ms": 210000,
        "artwork_url_100": "https://art.example/100x100.jpg",
        "track_number": 1,
        "release_date": "2010-03-01T08:00:00Z",
    }
    values.update(fields)
    return _make_track(title, artist, **values)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def make_track():
    return _make_track


@pytest.fixture
def full_track():
    return _full_track
