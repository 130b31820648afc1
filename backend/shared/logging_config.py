"""
Logging setup for the StyleStash backend.

Modules log through ``logging.getLogger(__name__)``; this only installs
the root handler once at application startup.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_HANDLER_NAME = "stylestash"


def configure_logging(level: int | str = "INFO") -> None:
    """Install a stream handler on the root logger (idempotent)."""
    root = logging.getLogger()
    if isinstance(level, str):
        level = level.upper()
    root.setLevel(level)

    if any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        return

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
