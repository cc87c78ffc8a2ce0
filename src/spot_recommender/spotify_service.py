from __future__ import annotations

import os
from typing import Iterator, Mapping, Sequence

import spotipy
from requests.exceptions import RequestException
from spotipy.exceptions import SpotifyBaseException
from spotipy.oauth2 import SpotifyOAuth

from spot_recommender.models import AttributeTarget

# Errors the spotipy client raises for a failed request, token refresh included.
CLIENT_ERRORS = (SpotifyBaseException, RequestException)

TOP_READ_SCOPE = "user-top-read"

# spotipy's SpotifyOAuth reads these when no arguments are given.
REQUIRED_CREDENTIALS = ("SPOTIPY_CLIENT_ID", "SPOTIPY_CLIENT_SECRET", "SPOTIPY_REDIRECT_URI")


def missing_credentials(environ: Mapping[str, str] | None = None) -> list[str]:
    environ = os.environ if environ is None else environ
    return [name for name in REQUIRED_CREDENTIALS if not environ.get(name)]


def _chunks(items: Sequence[str], size: int) -> Iterator[list[str]]:
    for start in range(0, len(items), size):
        yield list(items[start:start + size])


class SpotifyService:
    # Per-request id limits of the Spotify Web API.
    AUDIO_FEATURES_BATCH = 100
    TRACKS_BATCH = 50

    def __init__(self, client: spotipy.Spotify | None = None) -> None:
        if client is None:
            missing = missing_credentials()
            if missing:
                raise ValueError(
                    f"Missing Spotify credentials: {', '.join(missing)}. "
                    "Set them in environment variables or local .env file."
                )
            client = spotipy.Spotify(auth_manager=SpotifyOAuth(scope=TOP_READ_SCOPE))
        self.client = client

    def get_top_artists(self, limit: int = 5) -> list[dict]:
        page = self.client.current_user_top_artists(limit=limit)
        return page.get("items", [])

    def get_top_tracks(self) -> list[dict]:
        page = self.client.current_user_top_tracks()
        return page.get("items", [])

    def get_audio_features(self, track_ids: Sequence[str]) -> list[dict | None]:
        features: list[dict | None] = []
        for batch in _chunks(track_ids, self.AUDIO_FEATURES_BATCH):
            features.extend(self.client.audio_features(batch) or [])
        return features

    def get_recommendations(
        self,
        seed_artists: Sequence[str],
        attributes: AttributeTarget,
        limit: int = 100,
        market: str | None = None,
    ) -> list[dict]:
        page = self.client.recommendations(
            seed_artists=list(seed_artists),
            limit=limit,
            country=market,
            **attributes.as_query_params(),
        )
        return page.get("tracks", [])

    def get_full_tracks(self, track_ids: Sequence[str]) -> list[dict]:
        tracks: list[dict] = []
        for batch in _chunks(track_ids, self.TRACKS_BATCH):
            page = self.client.tracks(batch)
            tracks.extend(t for t in page.get("tracks", []) if t)
        return tracks

    def get_full_album(self, album_id: str) -> dict:
        return self.client.album(album_id)
