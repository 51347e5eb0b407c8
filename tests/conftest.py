"""Shared test fixtures and configuration."""

import json
from pathlib import Path

import pytest

from moodtunes.data.schemas import Track
from moodtunes.persistence.catalog import Catalog


PROJECT_ROOT = Path(__file__).parent.parent
SHIPPED_CATALOG = PROJECT_ROOT / "data" / "tracks.json"


def make_track(track_id: str, mood: str, genre: str = "Ambient", energy: str = "medium",
               title: str = None) -> Track:
    return Track(
        id=track_id,
        title=title or f"Track {track_id}",
        mood=mood,
        genre=genre,
        energy=energy,
        duration="3:00",
        description=f"A {mood} track.",
        audio_url=f"/tracks/{track_id}.mp3"
    )


class FixedRng:
    """Stand-in for numpy.random.Generator that always picks the same index.

    Records the bound of every draw so tests can check the sampled range.
    """

    def __init__(self, index: int = 0):
        self.index = index
        self.bounds = []

    def integers(self, high):
        self.bounds.append(high)
        assert 0 <= self.index < high, f"index {self.index} out of range for {high} candidates"
        return self.index


@pytest.fixture
def tracks():
    return [
        make_track("calm-1", "calm", genre="Ambient", energy="low"),
        make_track("happy-1", "happy", genre="Pop", energy="high"),
        make_track("sad-1", "sad", genre="Acoustic", energy="low"),
        make_track("energetic-1", "energetic", genre="Rock", energy="very high"),
        make_track("peaceful-1", "peaceful", genre="Ambient", energy="very low"),
        make_track("romantic-1", "romantic", genre="Smooth Jazz", energy="low"),
        make_track("focused-1", "focused", genre="Lo-Fi", energy="medium"),
    ]


@pytest.fixture
def catalog(tracks):
    return Catalog(tracks)


@pytest.fixture
def write_catalog(tmp_path):
    """Write a list of records to a catalog file and return its path."""
    def _write(records, name="tracks.json"):
        path = tmp_path / name
        path.write_text(json.dumps(records), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def catalog_records():
    return [
        {"id": "calm-1", "title": "Still Waters", "mood": "calm", "genre": "Meditation",
         "energy": "very low", "duration": "5:03", "description": "Deep relaxation.",
         "audioUrl": "/tracks/calm-1.mp3"},
        {"id": "happy-1", "title": "Sunshine Vibes", "mood": "happy", "genre": "Folk",
         "energy": "medium", "duration": "3:24", "description": "Instant joy.",
         "audioUrl": "/tracks/happy-1.mp3"},
    ]
