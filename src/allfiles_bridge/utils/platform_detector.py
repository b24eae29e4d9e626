"""
Platform detection and backend selection.
"""

import logging
import os
import platform
import sys
from typing import Literal, Optional, Tuple

from pydantic import BaseModel, Field

from ..backends import (
    AndroidCapabilityProvider,
    AndroidStorageAccess,
    CapabilityProvider,
    SimulatedCapabilityProvider,
    SimulatedStorageAccess,
    StorageAccessBackend,
)
from ..config import BridgeConfig, get_bridge_config

logger = logging.getLogger(__name__)

# Set by python-for-android before the interpreter starts
ANDROID_ENV_MARKERS = ("ANDROID_ARGUMENT", "ANDROID_PRIVATE")

UNKNOWN_PACKAGE = "unknown"


class PlatformCapabilities(BaseModel):
    """
    Detected platform capabilities relevant to storage access.
    """

    os_type: Literal["android", "macos", "windows", "linux"] = Field(
        description="Detected operating system type"
    )
    os_version: str = Field(description="Operating system version string")
    sdk_int: int = Field(description="Android API level, 0 off device")
    scoped_storage_supported: bool = Field(
        description="Whether the all-files permission model applies"
    )
    package_name: str = Field(description="Host application package")
    backend: Literal["android", "simulated"] = Field(
        description="Backend answering permission queries"
    )


def is_android() -> bool:
    """
    Whether the interpreter is running inside an Android app.
    """
    if sys.platform == "android":
        return True
    return any(marker in os.environ for marker in ANDROID_ENV_MARKERS)


def build_backends(
    config: Optional[BridgeConfig] = None,
) -> Tuple[CapabilityProvider, StorageAccessBackend]:
    """
    Create the capability provider and storage backend for this process.

    Args:
        config: Bridge configuration, read from the environment if omitted

    Returns:
        (provider, backend) pair
    """
    config = config or get_bridge_config()

    if is_android() and not config.force_simulated:
        logger.debug("Using Android backends")
        provider = AndroidCapabilityProvider(
            threshold=config.scoped_storage_min_sdk,
            package_name=config.package_name,
        )
        return provider, AndroidStorageAccess()

    logger.debug(
        "Using simulated backends (sdk=%d, granted=%s)",
        config.simulated_sdk,
        config.simulated_granted,
    )
    provider_kwargs = {}
    if config.package_name:
        provider_kwargs["package_name"] = config.package_name
    provider = SimulatedCapabilityProvider(
        sdk_int=config.simulated_sdk,
        threshold=config.scoped_storage_min_sdk,
        **provider_kwargs,
    )
    backend = SimulatedStorageAccess(
        granted=config.simulated_granted,
        rejected_actions=config.simulated_rejected_actions,
    )
    return provider, backend


def detect_platform(provider: CapabilityProvider) -> PlatformCapabilities:
    """
    Snapshot the platform as seen through a capability provider.

    Args:
        provider: Provider the gateway is using

    Returns:
        PlatformCapabilities with detected system information
    """
    if isinstance(provider, AndroidCapabilityProvider):
        os_type = "android"
        backend = "android"
    else:
        system = platform.system().lower()
        if system == "darwin":
            os_type = "macos"
        elif system == "windows":
            os_type = "windows"
        else:
            os_type = "linux"
        backend = "simulated"

    try:
        package_name = provider.package_name()
    except Exception as e:
        logger.warning("Cannot read package name: %s", e)
        package_name = UNKNOWN_PACKAGE

    return PlatformCapabilities(
        os_type=os_type,
        os_version=platform.release(),
        sdk_int=provider.sdk_int(),
        scoped_storage_supported=provider.supports_scoped_storage(),
        package_name=package_name,
        backend=backend,
    )
