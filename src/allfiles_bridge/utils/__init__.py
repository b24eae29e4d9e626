"""
Utility modules for platform detection, logging and terminal output.
"""

from .logging_config import setup_logging
from .platform_detector import (
    PlatformCapabilities,
    build_backends,
    detect_platform,
    is_android,
)

__all__ = [
    "PlatformCapabilities",
    "build_backends",
    "detect_platform",
    "is_android",
    "setup_logging",
]
