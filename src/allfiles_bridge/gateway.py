"""
Permission gateway for Android all-files storage access.

`check()` reports whether the app may manage external storage and
`request()` sends the user to the settings screen where it can be granted.
Both always resolve; permission state itself is owned by the OS.
"""

import logging
from typing import Callable

from .backends import CapabilityProvider, StorageAccessBackend
from .schemas import (
    LaunchAttempt,
    LaunchOutcome,
    PermissionStatus,
    RequestAck,
    SettingsIntent,
)

logger = logging.getLogger(__name__)

MANAGE_APP_ALL_FILES_ACCESS_PERMISSION = (
    "android.settings.MANAGE_APP_ALL_FILES_ACCESS_PERMISSION"
)
MANAGE_ALL_FILES_ACCESS_PERMISSION = "android.settings.MANAGE_ALL_FILES_ACCESS_PERMISSION"
FLAG_ACTIVITY_NEW_TASK = 0x10000000


class PermissionGateway:
    """
    Check and request the all-files access permission.

    Args:
        provider: Platform capability detection
        backend: OS permission query and settings launcher
    """

    def __init__(self, provider: CapabilityProvider, backend: StorageAccessBackend):
        self.provider = provider
        self.backend = backend

    def check(self) -> PermissionStatus:
        """
        Report the current grant state.

        Before the scoped permission model the legacy storage permissions
        cover broad access, so older platforms always report granted.
        """
        if not self.provider.supports_scoped_storage():
            return PermissionStatus(granted=True)

        try:
            granted = bool(self.backend.is_external_storage_manager())
        except Exception as e:
            logger.warning("All-files permission query failed: %s", e)
            granted = False
        return PermissionStatus(granted=granted)

    def request(self) -> RequestAck:
        """
        Open the settings screen for granting all-files access.

        Resolves with requested=True whether or not a screen was shown.
        """
        outcome = self.launch_settings()
        if not outcome.skipped and not outcome.launched:
            logger.error(
                "No all-files settings screen could be opened: %s",
                "; ".join(outcome.errors),
            )
        return RequestAck(requested=True)

    def launch_settings(self) -> LaunchOutcome:
        """
        Try the app-scoped settings screen, then the global one.

        Returns:
            LaunchOutcome listing every attempt made. No attempt is made on
            platforms without the scoped permission.
        """
        if not self.provider.supports_scoped_storage():
            return LaunchOutcome(skipped=True)

        outcome = LaunchOutcome()

        attempt = self._attempt(
            MANAGE_APP_ALL_FILES_ACCESS_PERMISSION, self.primary_intent
        )
        outcome.attempts.append(attempt)
        if attempt.launched:
            return outcome

        logger.warning(
            "%s rejected (%s), falling back to %s",
            attempt.action,
            attempt.error,
            MANAGE_ALL_FILES_ACCESS_PERMISSION,
        )
        outcome.attempts.append(
            self._attempt(MANAGE_ALL_FILES_ACCESS_PERMISSION, self.fallback_intent)
        )
        return outcome

    def primary_intent(self) -> SettingsIntent:
        return SettingsIntent(
            action=MANAGE_APP_ALL_FILES_ACCESS_PERMISSION,
            data_uri=f"package:{self.provider.package_name()}",
            flags=FLAG_ACTIVITY_NEW_TASK,
        )

    def fallback_intent(self) -> SettingsIntent:
        return SettingsIntent(
            action=MANAGE_ALL_FILES_ACCESS_PERMISSION,
            flags=FLAG_ACTIVITY_NEW_TASK,
        )

    def _attempt(
        self, action: str, build_intent: Callable[[], SettingsIntent]
    ) -> LaunchAttempt:
        intent = None
        try:
            intent = build_intent()
            self.backend.start_settings(intent)
        except Exception as e:
            return LaunchAttempt(
                action=action,
                intent=intent,
                launched=False,
                error=str(e) or type(e).__name__,
            )
        return LaunchAttempt(action=action, intent=intent, launched=True)


def ensure_all_files_access(gateway: PermissionGateway) -> bool:
    """
    Check the permission and ask for it when missing.

    Returns:
        The grant state observed by the check. A request only opens the
        settings screen, so it never turns a False into a True.
    """
    status = gateway.check()
    if not status.granted:
        gateway.request()
    return status.granted
