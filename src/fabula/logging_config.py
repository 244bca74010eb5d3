import logging
import os
import sys

LOG_LEVEL_ENV = "FABULA_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    """Route log records to stderr, replacing any handlers already installed.

    The FABULA_LOG_LEVEL env var (e.g. ``debug``) takes precedence over ``level``.
    """
    level_name = os.getenv(LOG_LEVEL_ENV)
    if level_name:
        level = getattr(logging, level_name.upper(), level)
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S", stream=sys.stderr, force=True)
