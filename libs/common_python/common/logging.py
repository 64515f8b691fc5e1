"""Shared logging setup.

Each entrypoint (API service, seed job) calls `configure_logging` once; modules
then log through `logging.getLogger(__name__)`.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


class ServiceHandler(logging.StreamHandler):
    """Stream handler installed by `configure_logging`."""

    def __init__(self):
        super().__init__()
        self.setFormatter(logging.Formatter(LOG_FORMAT))


def configure_logging(level: str = "INFO") -> None:
    """Install a single `ServiceHandler` on the root logger.

    Calling it again only updates the level, so repeated calls (tests, reloads)
    do not stack handlers.

    Args:
        level: Level name, e.g. "INFO" or "DEBUG".
    """
    root = logging.getLogger()
    if not any(isinstance(h, ServiceHandler) for h in root.handlers):
        root.addHandler(ServiceHandler())
    root.setLevel(level.upper())
