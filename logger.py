"""Logging setup shared by the signer and the initiator."""

import logging
import sys

APP_LOGGER = "external_signing"


def setup_logger(name: str = APP_LOGGER, level: int = logging.INFO) -> logging.Logger:
    """
    Configure and return the application logger. Safe to call more than once;
    handlers are only attached the first time.
    """
    log = logging.getLogger(name)
    if log.handlers:
        return log

    log.setLevel(level)
    fmt = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    h = logging.StreamHandler(sys.stderr)
    h.setFormatter(fmt)
    log.addHandler(h)
    return log


def get_logger(name: str) -> logging.Logger:
    """Child of the application logger, e.g. ``external_signing.app``."""
    return logging.getLogger(f"{APP_LOGGER}.{name}")
