"""
Centralized logging configuration for the bridge and the libraries it loads.
"""

import logging

PACKAGE_LOGGER = "allfiles_bridge"

NOISY_LIBRARIES = [
    "jnius",
    "jnius.reflect",
    "kivy",
]


class NullHandler(logging.Handler):
    """Handler that discards all log records."""

    def emit(self, record):
        pass


def setup_logging(verbose: bool = False) -> None:
    """
    Configure log levels for the bridge.

    Args:
        verbose: If True, show the bridge's DEBUG logs. If False, only
            warnings and errors (including swallowed settings launch failures).
    """
    for logger_name in NOISY_LIBRARIES:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.CRITICAL)
        logger.propagate = False
        logger.handlers = [NullHandler()]

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    root_logger.setLevel(logging.WARNING)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
