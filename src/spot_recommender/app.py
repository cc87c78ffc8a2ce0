from __future__ import annotations

import argparse
import dataclasses
import logging
import sys

from spot_recommender.config import RecommenderConfig, load_config, load_local_env_file
from spot_recommender.errors import RecommendationError
from spot_recommender.recommender import recommend, release_year


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Recommendations seeded by your top artists")
    parser.add_argument(
        "--market",
        help="Market (country code) for recommendations (defaults to SPOT_MARKET env or US)",
    )
    parser.add_argument(
        "--from-year",
        type=int,
        help="Keep tracks whose album was released in or after this year "
        "(defaults to SPOT_FROM_YEAR env or 2016)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def resolve_config(args: argparse.Namespace, base: RecommenderConfig) -> RecommenderConfig:
    overrides = {}
    if args.market:
        overrides["market"] = args.market.upper()
    if args.from_year is not None:
        overrides["from_year"] = args.from_year
    return dataclasses.replace(base, **overrides)


def format_track(track: dict) -> str:
    artist_names = ", ".join(a.get("name", "") for a in track.get("artists", []))
    year = release_year(track.get("album", {}))
    if year is None:
        year = "?"
    return f"{track.get('name')} - {artist_names} ({year}) [{track.get('id')}]"


def main(argv: list[str] | None = None) -> int:
    load_local_env_file()
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.captureWarnings(True)
    config = resolve_config(args, load_config())

    from spot_recommender.spotify_service import SpotifyService

    try:
        service = SpotifyService()
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 2

    try:
        tracks = recommend(service, config)
    except RecommendationError as exc:
        print(f"Unable to build recommendations: {exc}", file=sys.stderr)
        return 1

    if not tracks:
        print("No recommendations matched your profile.")
        return 0

    for track in tracks:
        print(format_track(track))
    return 0


if __name__ == "__main__":
    sys.exit(main())
