"""Seed-artist recommendations filtered by album release year."""
from __future__ import annotations

import logging

from spot_recommender.attributes import summarize_profile
from spot_recommender.config import RecommenderConfig
from spot_recommender.errors import (
    AlbumResolutionError,
    RecommendationRequestError,
    TopArtistsFetchError,
    TopTracksFetchError,
    TrackResolutionError,
)
from spot_recommender.models import CandidateTrack, RecommendationParameters
from spot_recommender.spotify_service import CLIENT_ERRORS

logger = logging.getLogger(__name__)

DEFAULT_PAGE_LIMIT = 100


def release_year(album: dict) -> int | None:
    """Year of an album's release date at year, month or day precision.

    Returns None when the date is missing or unparsable.
    """
    release_date = album.get("release_date") or ""
    try:
        return int(release_date[:4])
    except ValueError:
        return None


def _resolve_album(service: object, album_id: str) -> dict:
    try:
        return service.get_full_album(album_id)
    except CLIENT_ERRORS as exc:
        raise AlbumResolutionError(album_id, exc) from exc


def fetch_recommendations(
    service: object,
    params: RecommendationParameters,
    market: str | None,
    page_limit: int = DEFAULT_PAGE_LIMIT,
) -> list[CandidateTrack]:
    try:
        page = service.get_recommendations(
            params.seed_artists,
            params.attributes,
            limit=page_limit,
            market=market,
        )
    except CLIENT_ERRORS as exc:
        raise RecommendationRequestError(params.seed_artists, exc) from exc

    track_ids = [t["id"] for t in page if t.get("id")]
    try:
        full_tracks = service.get_full_tracks(track_ids)
    except CLIENT_ERRORS as exc:
        raise TrackResolutionError(len(track_ids), exc) from exc

    candidates: list[CandidateTrack] = []
    for track in full_tracks:
        album_id = track["album"]["id"]
        album = _resolve_album(service, album_id)
        year = release_year(album)
        if year is None:
            logger.debug("Dropping track %s: album %s has no usable release date", track.get("id"), album_id)
            continue
        if year >= params.from_year:
            candidates.append(CandidateTrack(track=track, release_year=year))

    # Only one page is requested; min_track_count is reported, not enforced.
    logger.debug(
        "Kept %d of %d track(s) released in or after %d (wanted %d)",
        len(candidates),
        len(full_tracks),
        params.from_year,
        params.min_track_count,
    )
    return candidates


def recommend(service: object, config: RecommenderConfig | None = None) -> list[dict]:
    config = config or RecommenderConfig()

    try:
        top_artists = service.get_top_artists(limit=config.top_artist_limit)
    except CLIENT_ERRORS as exc:
        raise TopArtistsFetchError(f"Failed to get user's top artists: {exc}") from exc

    try:
        top_tracks = service.get_top_tracks()
    except CLIENT_ERRORS as exc:
        raise TopTracksFetchError(f"Failed to get user's top tracks: {exc}") from exc

    attributes = summarize_profile(service, top_tracks)

    tracks: list[dict] = []
    for artist in top_artists:
        name = artist.get("name", artist["id"])
        logger.info("Fetching recommendations seeded by artist %s", name)

        params = RecommendationParameters(
            seed_artists=(artist["id"],),
            attributes=attributes,
            from_year=config.from_year,
            min_track_count=config.min_track_count,
        )
        candidates = fetch_recommendations(service, params, config.market, page_limit=config.page_limit)

        logger.info("Fetched %d recommendations seeded by artist %s", len(candidates), name)
        tracks.extend(c.track for c in candidates)
    return tracks
