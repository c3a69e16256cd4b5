"""
Logging setup for applications that embed the analyzer.

The analytics modules only log through `logging.getLogger(__name__)`, so
they stay silent until the host application calls `setup_logging()` once
at startup (a script, a notebook, a Streamlit page). Progress lines from
TikTokAnalyzer.analyze_video_batch show at INFO, group counts at DEBUG.
"""

import logging

DEFAULT_LOGGER_NAME = "analytics"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Attach one stream handler to the analytics logger; repeat calls only change the level."""
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logger = logging.getLogger(DEFAULT_LOGGER_NAME)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setLevel(level)
    return logger
