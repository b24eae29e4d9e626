"""
Android backends built on pyjnius.

Classes are resolved through `jnius.autoclass` at call time, so this module
imports cleanly on machines without pyjnius or a JVM.
"""

import logging
from typing import Any, Callable, Optional

from ..config import SCOPED_STORAGE_MIN_SDK
from ..schemas import SettingsIntent
from .protocol import CapabilityProvider, StorageAccessBackend

logger = logging.getLogger(__name__)

ACTIVITY_CLASS = "org.kivy.android.PythonActivity"
BUILD_VERSION_CLASS = "android.os.Build$VERSION"
ENVIRONMENT_CLASS = "android.os.Environment"
INTENT_CLASS = "android.content.Intent"
URI_CLASS = "android.net.Uri"

AutoClass = Callable[[str], Any]


def _load_autoclass() -> AutoClass:
    from jnius import autoclass

    return autoclass


class _JavaAccess:
    """Shared lazy `autoclass` handling for the Android backends."""

    def __init__(self, autoclass: Optional[AutoClass] = None):
        self._autoclass = autoclass

    def _jclass(self, name: str) -> Any:
        if self._autoclass is None:
            self._autoclass = _load_autoclass()
        return self._autoclass(name)

    def _activity(self) -> Any:
        return self._jclass(ACTIVITY_CLASS).mActivity


class AndroidCapabilityProvider(_JavaAccess, CapabilityProvider):
    """Capability detection from `Build.VERSION.SDK_INT`."""

    def __init__(
        self,
        threshold: int = SCOPED_STORAGE_MIN_SDK,
        package_name: Optional[str] = None,
        autoclass: Optional[AutoClass] = None,
    ):
        super().__init__(autoclass)
        self.threshold = threshold
        self._package_name = package_name

    def _read_sdk_int(self) -> int:
        return int(self._jclass(BUILD_VERSION_CLASS).SDK_INT)

    def sdk_int(self) -> int:
        try:
            return self._read_sdk_int()
        except Exception as e:
            logger.warning("Cannot read Build.VERSION.SDK_INT: %s", e)
            return 0

    def supports_scoped_storage(self) -> bool:
        # An unknown API level is treated as scoped so check() queries the OS
        try:
            return self._read_sdk_int() >= self.threshold
        except Exception as e:
            logger.warning(
                "Cannot read Build.VERSION.SDK_INT, assuming scoped storage: %s", e
            )
            return True

    def package_name(self) -> str:
        if self._package_name:
            return self._package_name
        return str(self._activity().getPackageName())


class AndroidStorageAccess(_JavaAccess, StorageAccessBackend):
    """
    Grant state from `Environment` and settings launches through the app's
    activity.
    """

    def is_external_storage_manager(self) -> bool:
        return bool(self._jclass(ENVIRONMENT_CLASS).isExternalStorageManager())

    def start_settings(self, intent: SettingsIntent) -> None:
        Intent = self._jclass(INTENT_CLASS)

        android_intent = Intent(intent.action)
        if intent.data_uri:
            Uri = self._jclass(URI_CLASS)
            android_intent.setData(Uri.parse(intent.data_uri))
        if intent.flags:
            android_intent.addFlags(intent.flags)

        logger.debug("startActivity(%s)", intent.action)
        self._activity().startActivity(android_intent)
