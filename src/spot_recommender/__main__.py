"""Serve the recommendations API with uvicorn."""
import logging
import os

import uvicorn

from spot_recommender.api import app
from spot_recommender.config import env_int, load_local_env_file


def main() -> None:
    load_local_env_file()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.captureWarnings(True)
    uvicorn.run(app, host=os.getenv("HOST", "127.0.0.1"), port=env_int("PORT", 8000))


if __name__ == "__main__":
    main()
