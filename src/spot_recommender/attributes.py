from __future__ import annotations

import logging
import warnings
from typing import Iterable, Sequence

from spot_recommender.errors import FeatureFetchError
from spot_recommender.models import AUDIO_FEATURES, AttributeTarget, AudioFeatureSample, Bound
from spot_recommender.spotify_service import CLIENT_ERRORS

logger = logging.getLogger(__name__)

_MODIFIER = 0.3
_MAX_FLOOR = 0.3
_MIN_CEILING = 0.8


def average(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


def as_attribute(bound: Bound | str, value: float) -> float:
    """Bias an averaged feature value into an upper or lower target.

    Max bounds are pushed up and min bounds pushed down, so the target window
    is wider than the profile's current average.
    """
    floor = 0.0
    ceiling = 1.0
    modifier = _MODIFIER

    kind = bound.value if isinstance(bound, Bound) else str(bound).lower()
    if kind == Bound.MAX.value:
        floor = _MAX_FLOOR
    elif kind == Bound.MIN.value:
        ceiling = _MIN_CEILING
        modifier = -modifier
    else:
        warnings.warn(
            f"Received an invalid recommendation bound kind: {bound!r}. "
            "Falling back to default bounds.",
            RuntimeWarning,
            stacklevel=2,
        )

    if value < 0.5:
        return max(value + modifier, floor)
    return min(value + modifier, ceiling)


def _collect_samples(payloads: Iterable[dict | None]) -> list[AudioFeatureSample]:
    # The service returns None for tracks it has no analysis for.
    return [AudioFeatureSample.from_payload(p) for p in payloads if p]


def summarize_profile(service: object, tracks: Sequence[dict]) -> AttributeTarget:
    track_ids = [t["id"] for t in tracks if t.get("id")]
    try:
        payloads = service.get_audio_features(track_ids)
    except CLIENT_ERRORS as exc:
        raise FeatureFetchError(len(tracks), exc) from exc

    samples = _collect_samples(payloads)
    logger.debug("Summarizing %d audio feature sample(s) from %d track(s)", len(samples), len(tracks))

    bounds: dict[str, float] = {}
    for name in AUDIO_FEATURES:
        mean = average([getattr(s, name) for s in samples])
        bounds[f"max_{name}"] = as_attribute(Bound.MAX, mean)
        bounds[f"min_{name}"] = as_attribute(Bound.MIN, mean)
    return AttributeTarget(**bounds)
