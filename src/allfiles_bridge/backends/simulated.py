"""
In-process platform used off device and in tests.
"""

import logging
from typing import Iterable, List

from ..config import SCOPED_STORAGE_MIN_SDK
from ..exceptions import SettingsLaunchError
from ..schemas import SettingsIntent
from .protocol import CapabilityProvider, StorageAccessBackend

logger = logging.getLogger(__name__)

DEFAULT_PACKAGE_NAME = "org.example.allfiles"


class SimulatedCapabilityProvider(CapabilityProvider):
    """Reports a fixed API level and package name."""

    def __init__(
        self,
        sdk_int: int = SCOPED_STORAGE_MIN_SDK,
        package_name: str = DEFAULT_PACKAGE_NAME,
        threshold: int = SCOPED_STORAGE_MIN_SDK,
    ):
        self._sdk_int = sdk_int
        self._package_name = package_name
        self.threshold = threshold

    def sdk_int(self) -> int:
        return self._sdk_int

    def package_name(self) -> str:
        return self._package_name


class SimulatedStorageAccess(StorageAccessBackend):
    """
    Fixed grant state and a launcher that records what it was asked to open.

    Actions listed in `rejected_actions` raise `SettingsLaunchError`, which is
    how a vendor build without the per-app settings screen behaves.
    """

    def __init__(self, granted: bool = False, rejected_actions: Iterable[str] = ()):
        self.granted = granted
        self.rejected_actions = frozenset(rejected_actions)
        self.launched: List[SettingsIntent] = []

    def is_external_storage_manager(self) -> bool:
        return self.granted

    def start_settings(self, intent: SettingsIntent) -> None:
        if intent.action in self.rejected_actions:
            raise SettingsLaunchError(intent.action)
        logger.info("Simulated settings screen: %s", intent.action)
        self.launched.append(intent)
