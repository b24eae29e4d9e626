"""
Tests for platform detection and backend selection.
"""

import sys

from allfiles_bridge.backends import (
    AndroidCapabilityProvider,
    AndroidStorageAccess,
    SimulatedCapabilityProvider,
    SimulatedStorageAccess,
)
from allfiles_bridge.config import BridgeConfig
from allfiles_bridge.utils.platform_detector import (
    build_backends,
    detect_platform,
    is_android,
)


class TestIsAndroid:
    """Android runtime detection."""

    def test_desktop(self, monkeypatch):
        monkeypatch.setattr(sys, "platform", "linux")

        assert is_android() is False

    def test_sys_platform(self, monkeypatch):
        monkeypatch.setattr(sys, "platform", "android")

        assert is_android() is True

    def test_python_for_android_marker(self, monkeypatch):
        monkeypatch.setattr(sys, "platform", "linux")
        monkeypatch.setenv("ANDROID_ARGUMENT", "/data/user/0/cc.sirrus.anhl/files")

        assert is_android() is True


class TestBuildBackends:
    """Backend selection from configuration."""

    def test_simulated_off_device(self, monkeypatch):
        monkeypatch.setattr(sys, "platform", "linux")
        config = BridgeConfig(
            simulated_sdk=29,
            simulated_granted=True,
            simulated_rejected_actions=("x",),
            package_name="cc.sirrus.anhl",
        )

        provider, backend = build_backends(config)

        assert isinstance(provider, SimulatedCapabilityProvider)
        assert isinstance(backend, SimulatedStorageAccess)
        assert provider.sdk_int() == 29
        assert provider.package_name() == "cc.sirrus.anhl"
        assert backend.granted is True
        assert backend.rejected_actions == frozenset({"x"})

    def test_android_on_device(self, monkeypatch):
        monkeypatch.setenv("ANDROID_PRIVATE", "/data/user/0/cc.sirrus.anhl/files")

        provider, backend = build_backends(
            BridgeConfig(scoped_storage_min_sdk=31, package_name="cc.sirrus.anhl")
        )

        assert isinstance(provider, AndroidCapabilityProvider)
        assert isinstance(backend, AndroidStorageAccess)
        assert provider.threshold == 31
        assert provider.package_name() == "cc.sirrus.anhl"

    def test_force_simulated_on_device(self, monkeypatch):
        monkeypatch.setenv("ANDROID_PRIVATE", "/data/user/0/cc.sirrus.anhl/files")

        provider, _ = build_backends(BridgeConfig(force_simulated=True))

        assert isinstance(provider, SimulatedCapabilityProvider)

    def test_reads_environment_when_no_config(self, monkeypatch):
        monkeypatch.setattr(sys, "platform", "linux")
        monkeypatch.setenv("ALLFILES_SIMULATED_SDK", "26")

        provider, _ = build_backends()

        assert provider.sdk_int() == 26


class TestDetectPlatform:
    """Capability snapshots."""

    def test_simulated_snapshot(self):
        provider = SimulatedCapabilityProvider(sdk_int=33, package_name="a.b")

        capabilities = detect_platform(provider)

        assert capabilities.backend == "simulated"
        assert capabilities.os_type in ("macos", "windows", "linux")
        assert capabilities.sdk_int == 33
        assert capabilities.scoped_storage_supported is True
        assert capabilities.package_name == "a.b"

    def test_android_snapshot(self, java_classes):
        java_classes["android.os.Build$VERSION"].SDK_INT = 29
        provider = AndroidCapabilityProvider(autoclass=java_classes.__getitem__)

        capabilities = detect_platform(provider)

        assert capabilities.os_type == "android"
        assert capabilities.backend == "android"
        assert capabilities.scoped_storage_supported is False
        assert capabilities.package_name == "cc.sirrus.anhl"

    def test_android_without_activity(self, java_classes, caplog):
        java_classes["org.kivy.android.PythonActivity"].mActivity = None
        provider = AndroidCapabilityProvider(autoclass=java_classes.__getitem__)

        capabilities = detect_platform(provider)

        assert capabilities.package_name == "unknown"
        assert capabilities.sdk_int == 33
        assert "Cannot read package name" in caplog.text

    def test_unreadable_sdk_is_reported_as_scoped(self):
        def autoclass(name):
            raise RuntimeError(f"Class not found {name}")

        capabilities = detect_platform(AndroidCapabilityProvider(autoclass=autoclass))

        assert capabilities.sdk_int == 0
        assert capabilities.scoped_storage_supported is True
        assert capabilities.package_name == "unknown"
