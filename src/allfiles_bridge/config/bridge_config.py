"""
Bridge configuration loaded from environment variables.

Values can also come from a `.env` file in the working directory.
"""

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

from dotenv import load_dotenv

from ..exceptions import ConfigurationError

load_dotenv()

# Android 11 (Build.VERSION_CODES.R) introduced MANAGE_EXTERNAL_STORAGE
SCOPED_STORAGE_MIN_SDK = 30

_TRUTHY = ("1", "true", "yes", "on")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in _TRUTHY


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}")


def _env_list(name: str) -> Tuple[str, ...]:
    raw = os.getenv(name, "")
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@dataclass
class BridgeConfig:
    """
    Runtime configuration for the all-files-access bridge.

    Environment Variables:
    - ALLFILES_SCOPED_STORAGE_MIN_SDK: API level where the scoped permission exists
    - ALLFILES_PACKAGE_NAME: Override for the host application's package
    - ALLFILES_FORCE_SIMULATED: Use simulated backends even on Android
    - ALLFILES_SIMULATED_SDK / ALLFILES_SIMULATED_GRANTED: Simulated device state
    - ALLFILES_SIMULATED_REJECTED_ACTIONS: Comma-separated intent actions to reject
    """

    scoped_storage_min_sdk: int = SCOPED_STORAGE_MIN_SDK
    """First API level with the scoped all-files permission"""

    package_name: Optional[str] = None
    """Package name used for the scoped settings screen"""

    force_simulated: bool = False
    """Skip Android detection and use the simulated platform"""

    simulated_sdk: int = SCOPED_STORAGE_MIN_SDK
    """API level reported by the simulated platform"""

    simulated_granted: bool = False
    """Grant flag reported by the simulated platform"""

    simulated_rejected_actions: Tuple[str, ...] = field(default_factory=tuple)
    """Intent actions the simulated launcher refuses"""

    @classmethod
    def from_env(cls) -> "BridgeConfig":
        """
        Build a configuration from the current environment.

        Raises:
            ConfigurationError: If an integer variable cannot be parsed
        """
        return cls(
            scoped_storage_min_sdk=_env_int(
                "ALLFILES_SCOPED_STORAGE_MIN_SDK", SCOPED_STORAGE_MIN_SDK
            ),
            package_name=os.getenv("ALLFILES_PACKAGE_NAME") or None,
            force_simulated=_env_bool("ALLFILES_FORCE_SIMULATED", False),
            simulated_sdk=_env_int("ALLFILES_SIMULATED_SDK", SCOPED_STORAGE_MIN_SDK),
            simulated_granted=_env_bool("ALLFILES_SIMULATED_GRANTED", False),
            simulated_rejected_actions=_env_list(
                "ALLFILES_SIMULATED_REJECTED_ACTIONS"
            ),
        )


def get_bridge_config() -> BridgeConfig:
    """
    Get the bridge configuration from the environment.
    """
    return BridgeConfig.from_env()
