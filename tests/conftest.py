"""
Pytest configuration and fixtures.
"""

import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

CONFIG_ENV_VARS = [
    "ALLFILES_SCOPED_STORAGE_MIN_SDK",
    "ALLFILES_PACKAGE_NAME",
    "ALLFILES_FORCE_SIMULATED",
    "ALLFILES_SIMULATED_SDK",
    "ALLFILES_SIMULATED_GRANTED",
    "ALLFILES_SIMULATED_REJECTED_ACTIONS",
    "ANDROID_ARGUMENT",
    "ANDROID_PRIVATE",
]


def pytest_configure(config):
    """Configure pytest."""
    # Add src to path
    src_path = Path(__file__).parent.parent / "src"
    sys.path.insert(0, str(src_path))

    for marker in ("android", "cli", "integration"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """
    Modify test items to add helpful markers.
    """
    for item in items:
        if "android" in item.nodeid.lower():
            item.add_marker("android")
        if "cli" in item.nodeid.lower():
            item.add_marker("cli")
        if "integration" in item.nodeid.lower():
            item.add_marker("integration")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's environment out of configuration and detection."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_gateway():
    """
    Build a gateway over a simulated API level and a mocked OS backend.

    Returns a factory taking (sdk_int, granted, launch_side_effect).
    """
    from allfiles_bridge.backends import (
        SimulatedCapabilityProvider,
        StorageAccessBackend,
    )
    from allfiles_bridge.gateway import PermissionGateway

    def _make(sdk_int=30, granted=False, launch_side_effect=None):
        provider = SimulatedCapabilityProvider(
            sdk_int=sdk_int, package_name="cc.sirrus.anhl"
        )
        backend = Mock(spec=StorageAccessBackend)
        backend.is_external_storage_manager.return_value = granted
        backend.start_settings.side_effect = launch_side_effect
        return PermissionGateway(provider, backend)

    return _make


@pytest.fixture
def java_classes():
    """
    Fake pyjnius classes keyed by their Java names.
    """
    activity = Mock()
    activity.getPackageName.return_value = "cc.sirrus.anhl"

    python_activity = Mock()
    python_activity.mActivity = activity

    build_version = Mock()
    build_version.SDK_INT = 33

    environment = Mock()
    environment.isExternalStorageManager.return_value = False

    return {
        "org.kivy.android.PythonActivity": python_activity,
        "android.os.Build$VERSION": build_version,
        "android.os.Environment": environment,
        "android.content.Intent": Mock(),
        "android.net.Uri": Mock(),
    }
