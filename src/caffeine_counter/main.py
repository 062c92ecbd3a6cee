"""Command-line entrypoint that serves the API with uvicorn."""

import logging
import sys

import uvicorn
from pydantic import ValidationError

from caffeine_counter.api.app import create_app
from caffeine_counter.app_logging import configure_logging
from caffeine_counter.config import Settings
from caffeine_counter.containers import build_container

logger = logging.getLogger(__name__)


def main() -> None:
    """Load settings, refusing to start when required ones are missing."""
    configure_logging()
    try:
        settings = Settings()
    except ValidationError as exc:
        missing = ", ".join(
            str(error["loc"][0]).upper() for error in exc.errors() if error["loc"]
        )
        logger.error("Missing or invalid configuration: %s", missing)
        sys.exit(1)
    app = create_app(build_container(settings))
    logger.info("Caffeine Counter listening on port %s", settings.port)
    uvicorn.run(app, host="0.0.0.0", port=settings.port)  # noqa: S104


if __name__ == "__main__":
    main()
