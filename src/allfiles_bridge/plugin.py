"""
Front-end bridge: named plugins with named methods returning JSON-ready dicts.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from .config import BridgeConfig
from .exceptions import MethodNotFoundError, PluginNotFoundError
from .gateway import PermissionGateway
from .utils.platform_detector import build_backends

logger = logging.getLogger(__name__)

PLUGIN_NAME = "AllFilesPermission"


class AllFilesPermissionPlugin:
    """
    Exposes the permission gateway to the front-end as `AllFilesPermission`.
    """

    name = PLUGIN_NAME
    methods: Tuple[str, ...] = ("check", "request")

    def __init__(self, gateway: PermissionGateway):
        self.gateway = gateway

    def invoke(self, method: str) -> Dict[str, Any]:
        """
        Run a plugin method.

        Args:
            method: "check" or "request"

        Returns:
            Response dict, {"granted": bool} or {"requested": bool}

        Raises:
            MethodNotFoundError: If the method is not exposed
        """
        if method not in self.methods:
            raise MethodNotFoundError(self.name, method)
        result = getattr(self.gateway, method)()
        return result.model_dump()


class PluginRegistry:
    """Routes (plugin, method) calls from the front-end."""

    def __init__(self):
        self._plugins: Dict[str, AllFilesPermissionPlugin] = {}

    def register(self, plugin: AllFilesPermissionPlugin) -> None:
        if plugin.name in self._plugins:
            logger.debug("Replacing registered plugin %s", plugin.name)
        self._plugins[plugin.name] = plugin

    def get(self, name: str) -> AllFilesPermissionPlugin:
        try:
            return self._plugins[name]
        except KeyError:
            raise PluginNotFoundError(name) from None

    def call(self, plugin: str, method: str) -> Dict[str, Any]:
        logger.debug("%s.%s()", plugin, method)
        return self.get(plugin).invoke(method)

    def plugin_names(self) -> List[str]:
        return sorted(self._plugins)


def create_default_registry(config: Optional[BridgeConfig] = None) -> PluginRegistry:
    """
    Build a registry with the all-files permission plugin for this platform.
    """
    provider, backend = build_backends(config)
    registry = PluginRegistry()
    registry.register(AllFilesPermissionPlugin(PermissionGateway(provider, backend)))
    return registry
