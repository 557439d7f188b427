"""Logging setup for the API process."""
import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure the root logger once with a stdout handler.

    Unknown level names fall back to INFO.
    """
    root = logging.getLogger()
    if getattr(root, "_people_catalog_configured", False):
        return

    lvl = getattr(logging, (level or "INFO").upper(), logging.INFO)
    if not isinstance(lvl, int):
        lvl = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root.addHandler(handler)
    root.setLevel(lvl)
    root._people_catalog_configured = True
