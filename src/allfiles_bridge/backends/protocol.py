"""
Platform-agnostic contracts for the OS collaborators of the permission gateway.

Implementations live in `android.py` (pyjnius, on device) and `simulated.py`
(off device and in tests). Nothing in this file touches Android classes.
"""

from abc import ABC, abstractmethod

from ..schemas import SettingsIntent


class CapabilityProvider(ABC):
    """
    Reports what the host platform supports.

    The gateway branches on `supports_scoped_storage()` instead of comparing
    version numbers itself.
    """

    threshold: int

    @abstractmethod
    def sdk_int(self) -> int:
        """OS API level, or 0 when it cannot be determined."""
        ...

    @abstractmethod
    def package_name(self) -> str:
        """Package name of the host application."""
        ...

    def supports_scoped_storage(self) -> bool:
        """Whether the scoped all-files permission model exists on this OS."""
        return self.sdk_int() >= self.threshold


class StorageAccessBackend(ABC):
    """
    OS permission subsystem and settings launcher.
    """

    @abstractmethod
    def is_external_storage_manager(self) -> bool:
        """Live grant state of the all-files permission."""
        ...

    @abstractmethod
    def start_settings(self, intent: SettingsIntent) -> None:
        """
        Open a settings screen.

        Args:
            intent: Settings screen to launch

        Raises:
            Exception: Whatever the OS raises when it rejects the launch
        """
        ...
