"""
Android all-files storage access bridge.
"""

from .gateway import PermissionGateway, ensure_all_files_access
from .plugin import (
    PLUGIN_NAME,
    AllFilesPermissionPlugin,
    PluginRegistry,
    create_default_registry,
)
from .schemas import PermissionStatus, RequestAck

__version__ = "0.1.0"

__all__ = [
    "PermissionGateway",
    "ensure_all_files_access",
    "PLUGIN_NAME",
    "AllFilesPermissionPlugin",
    "PluginRegistry",
    "create_default_registry",
    "PermissionStatus",
    "RequestAck",
]
