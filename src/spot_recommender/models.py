from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

AUDIO_FEATURES = ("acousticness", "instrumentalness", "liveness", "energy", "valence")


class Bound(str, Enum):
    MAX = "max"
    MIN = "min"


@dataclass(frozen=True, slots=True)
class AudioFeatureSample:
    acousticness: float
    instrumentalness: float
    liveness: float
    energy: float
    valence: float

    @classmethod
    def from_payload(cls, payload: dict) -> AudioFeatureSample:
        return cls(**{name: float(payload.get(name) or 0.0) for name in AUDIO_FEATURES})


@dataclass(frozen=True, slots=True)
class AttributeTarget:
    min_acousticness: float
    max_acousticness: float
    min_instrumentalness: float
    max_instrumentalness: float
    min_liveness: float
    max_liveness: float
    min_energy: float
    max_energy: float
    min_valence: float
    max_valence: float

    def as_query_params(self) -> dict[str, float]:
        """Keyword arguments accepted by ``spotipy.Spotify.recommendations``."""
        params: dict[str, float] = {}
        for name in AUDIO_FEATURES:
            params[f"min_{name}"] = getattr(self, f"min_{name}")
            params[f"max_{name}"] = getattr(self, f"max_{name}")
        return params


@dataclass(frozen=True, slots=True)
class RecommendationParameters:
    seed_artists: tuple[str, ...]
    attributes: AttributeTarget
    from_year: int
    min_track_count: int


@dataclass(slots=True)
class CandidateTrack:
    track: dict
    release_year: int
