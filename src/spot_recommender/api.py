"""FastAPI web server exposing top-artist recommendations."""
import dataclasses

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

from spot_recommender.config import load_config
from spot_recommender.errors import RecommendationError
from spot_recommender.recommender import recommend, release_year
from spot_recommender.spotify_service import SpotifyService

app = FastAPI(title="Spot Recommender")


class TrackInfo(BaseModel):
    """Track information response."""
    id: str
    name: str
    artist: str
    year: int | None = None
    popularity: int = 0
    duration_ms: int = 0
    preview_url: str | None = None


class RecommendationsResponse(BaseModel):
    market: str
    from_year: int
    tracks: list[TrackInfo]


def get_service() -> SpotifyService:
    """Initialize the Spotify service."""
    return SpotifyService()


def _track_info(track: dict) -> TrackInfo:
    return TrackInfo(
        id=track["id"],
        name=track["name"],
        artist=track["artists"][0]["name"] if track.get("artists") else "Unknown",
        year=release_year(track["album"]),
        popularity=track.get("popularity", 0),
        duration_ms=track.get("duration_ms", 0),
        preview_url=track.get("preview_url"),
    )


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


@app.get("/api/recommendations", response_model=RecommendationsResponse)
def get_recommendations(
    market: str | None = Query(default=None, min_length=2, max_length=2),
    from_year: int | None = Query(default=None, ge=1900, le=2100),
):
    """Recommend tracks seeded by each of the user's top artists."""
    config = load_config()
    overrides = {}
    if market:
        overrides["market"] = market.upper()
    if from_year is not None:
        overrides["from_year"] = from_year
    config = dataclasses.replace(config, **overrides)

    try:
        service = get_service()
        tracks = recommend(service, config)
        return RecommendationsResponse(
            market=config.market,
            from_year=config.from_year,
            tracks=[_track_info(t) for t in tracks],
        )
    except ValueError as e:
        raise HTTPException(status_code=500, detail=str(e))
    except RecommendationError as e:
        raise HTTPException(status_code=502, detail=str(e))
