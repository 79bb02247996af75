"""Settings read from the environment, plus the logging setup for applications embedding the engine."""

import logging
import os

LOG_LEVEL = os.getenv("CHESS_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = os.getenv(
    "CHESS_LOG_FORMAT", "%(asctime)s %(levelname)s %(name)s: %(message)s"
)


def configure_logging(level: str | int | None = None) -> None:
    """Call once from the application entrypoint. Library modules only create loggers, they never configure them."""
    logging.basicConfig(level=level or LOG_LEVEL, format=LOG_FORMAT)
