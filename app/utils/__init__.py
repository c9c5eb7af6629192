"""
Shared helpers.
"""
import logging
import os


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_configured = False


def _configure_root() -> None:
    global _configured
    if _configured:
        return
    level = logging.getLevelName(os.environ.get("LOG_LEVEL", "INFO").upper())
    if not isinstance(level, int):
        level = logging.INFO
    if not logging.getLogger().handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    else:
        logging.getLogger().setLevel(level)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Return a module logger, configuring the root logger on first use.

    Usage:
        log = get_logger(__name__)
        log.info("Something happened")
    """
    _configure_root()
    return logging.getLogger(name)
