"""
Response and launch schemas for the all-files-access bridge.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class PermissionStatus(BaseModel):
    """
    Result of a permission check.
    """

    granted: bool = Field(
        description="Whether the app currently holds all-files access"
    )


class RequestAck(BaseModel):
    """
    Result of a permission request.

    Only signals that a settings screen launch was attempted. The user's
    eventual decision is never reported back.
    """

    requested: bool = Field(
        default=True, description="Whether the request was attempted"
    )


class SettingsIntent(BaseModel):
    """
    Description of an OS settings screen launch.
    """

    action: str = Field(description="Settings intent action")
    data_uri: Optional[str] = Field(
        default=None, description="Intent data, e.g. package:<name>"
    )
    flags: int = Field(default=0, description="Intent launch flags")


class LaunchAttempt(BaseModel):
    """One attempt to open a settings screen."""

    action: str
    intent: Optional[SettingsIntent] = Field(
        default=None, description="Launched intent, None if it could not be built"
    )
    launched: bool
    error: Optional[str] = None


class LaunchOutcome(BaseModel):
    """
    Result of the two-stage settings launch.
    """

    attempts: List[LaunchAttempt] = Field(default_factory=list)
    skipped: bool = Field(
        default=False,
        description="True when the platform has no scoped permission to request",
    )

    @property
    def launched(self) -> bool:
        return any(attempt.launched for attempt in self.attempts)

    @property
    def used_fallback(self) -> bool:
        return len(self.attempts) > 1

    @property
    def errors(self) -> List[str]:
        return [attempt.error for attempt in self.attempts if attempt.error]
