"""
Exception types raised by the bridge.

`check` and `request` never raise; these cover routing, configuration and
the simulated settings launcher.
"""


class BridgeError(Exception):
    """Base class for all bridge errors."""


class PluginNotFoundError(BridgeError):
    """No plugin is registered under the requested name."""

    def __init__(self, plugin: str):
        self.plugin = plugin
        super().__init__(f"Plugin '{plugin}' is not registered")


class MethodNotFoundError(BridgeError):
    """The plugin exists but does not expose the requested method."""

    def __init__(self, plugin: str, method: str):
        self.plugin = plugin
        self.method = method
        super().__init__(f"Plugin '{plugin}' has no method '{method}'")


class SettingsLaunchError(BridgeError):
    """The OS refused to open a settings screen."""

    def __init__(self, action: str, reason: str = "activity not found"):
        self.action = action
        self.reason = reason
        super().__init__(f"Cannot launch {action}: {reason}")


class ConfigurationError(BridgeError):
    """An environment value could not be parsed."""
