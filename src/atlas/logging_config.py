"""
Atlas Gateway - Logging setup.

Modules log through logging.getLogger(__name__); this installs the
root handler once per process.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the gateway process."""
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level)

    # httpx logs every PostgREST call at INFO
    logging.getLogger("httpx").setLevel(max(logging.WARNING, root.level))
