from __future__ import annotations


class RecommendationError(Exception):
    """Base class for failures while building recommendations."""


class TopArtistsFetchError(RecommendationError):
    pass


class TopTracksFetchError(RecommendationError):
    pass


class FeatureFetchError(RecommendationError):
    def __init__(self, track_count: int, cause: Exception) -> None:
        super().__init__(f"Failed to get audio features of {track_count} track(s): {cause}")
        self.track_count = track_count


class RecommendationRequestError(RecommendationError):
    def __init__(self, seeds: tuple[str, ...], cause: Exception) -> None:
        super().__init__(f"Failed to get recommendations for seed(s) {', '.join(seeds)}: {cause}")
        self.seeds = seeds


class TrackResolutionError(RecommendationError):
    def __init__(self, track_count: int, cause: Exception) -> None:
        super().__init__(f"Failed to resolve {track_count} recommended track(s): {cause}")
        self.track_count = track_count


class AlbumResolutionError(RecommendationError):
    def __init__(self, album_id: str, cause: Exception) -> None:
        super().__init__(f"Failed to resolve album {album_id}: {cause}")
        self.album_id = album_id
