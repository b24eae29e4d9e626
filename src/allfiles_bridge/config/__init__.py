"""
Configuration for the all-files-access bridge.
"""

from .bridge_config import SCOPED_STORAGE_MIN_SDK, BridgeConfig, get_bridge_config

__all__ = ["SCOPED_STORAGE_MIN_SDK", "BridgeConfig", "get_bridge_config"]
