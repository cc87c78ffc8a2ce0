from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

# The recommendations endpoint returns at most 100 tracks per request.
MAX_PAGE_LIMIT = 100


def parse_env_lines(text: str) -> dict[str, str]:
    """Parse ``NAME=value`` lines, allowing ``export`` prefixes, comments and quoted values."""
    values: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip().removeprefix("export ").strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        name, value = (part.strip() for part in line.split("=", 1))
        if name:
            values[name] = value.strip('"').strip("'")
    return values


def load_local_env_file(env_path: str | Path = ".env") -> list[str]:
    """Fill in Spotify credentials and SPOT_* settings from a .env file.

    Variables already set in the environment win. Returns the names that were loaded.
    """
    path = Path(env_path)
    if not path.is_file():
        return []

    loaded = []
    for name, value in parse_env_lines(path.read_text(encoding="utf-8")).items():
        if name not in os.environ:
            os.environ[name] = value
            loaded.append(name)
    return loaded


def env_int(name: str, fallback: int, *, minimum: int | None = None, maximum: int | None = None) -> int:
    """Integer setting from the environment, clamped to ``[minimum, maximum]``."""
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return fallback
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer, using %d", name, raw, fallback)
        return fallback

    clamped = value
    if minimum is not None:
        clamped = max(clamped, minimum)
    if maximum is not None:
        clamped = min(clamped, maximum)
    if clamped != value:
        logger.warning("%s=%d is out of range, using %d", name, value, clamped)
    return clamped


@dataclass(frozen=True, slots=True)
class RecommenderConfig:
    market: str = "US"
    from_year: int = 2016
    min_track_count: int = 100
    top_artist_limit: int = 5
    page_limit: int = MAX_PAGE_LIMIT

    def __post_init__(self) -> None:
        if not 1 <= self.page_limit <= MAX_PAGE_LIMIT:
            raise ValueError(f"page_limit must be between 1 and {MAX_PAGE_LIMIT}, got {self.page_limit}")


def load_config() -> RecommenderConfig:
    """Build a RecommenderConfig from SPOT_* environment variables."""
    defaults = RecommenderConfig()
    market = (os.getenv("SPOT_MARKET") or "").strip().upper() or defaults.market
    return RecommenderConfig(
        market=market,
        from_year=env_int("SPOT_FROM_YEAR", defaults.from_year),
        min_track_count=env_int("SPOT_MIN_TRACK_COUNT", defaults.min_track_count, minimum=0),
        top_artist_limit=env_int("SPOT_TOP_ARTIST_LIMIT", defaults.top_artist_limit, minimum=1, maximum=50),
        page_limit=env_int("SPOT_PAGE_LIMIT", defaults.page_limit, minimum=1, maximum=MAX_PAGE_LIMIT),
    )
