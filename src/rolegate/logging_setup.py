"""Logging configuration."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def configure_logging(level: str = "INFO", debug: bool = False) -> None:
    """Configure the root logger once; later calls only adjust the level."""
    global _configured
    resolved = logging.DEBUG if debug else getattr(logging, level.upper(), logging.INFO)
    if not _configured:
        logging.basicConfig(level=resolved, format=LOG_FORMAT)
        _configured = True
    logging.getLogger().setLevel(resolved)
