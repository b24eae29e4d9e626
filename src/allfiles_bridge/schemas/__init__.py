"""
Pydantic schemas for bridge responses.
"""

from .permission import (
    LaunchAttempt,
    LaunchOutcome,
    PermissionStatus,
    RequestAck,
    SettingsIntent,
)

__all__ = [
    "PermissionStatus",
    "RequestAck",
    "SettingsIntent",
    "LaunchAttempt",
    "LaunchOutcome",
]
