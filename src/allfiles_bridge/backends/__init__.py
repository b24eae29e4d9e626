"""
OS collaborators of the permission gateway.
"""

from .android import AndroidCapabilityProvider, AndroidStorageAccess
from .protocol import CapabilityProvider, StorageAccessBackend
from .simulated import SimulatedCapabilityProvider, SimulatedStorageAccess

__all__ = [
    "CapabilityProvider",
    "StorageAccessBackend",
    "AndroidCapabilityProvider",
    "AndroidStorageAccess",
    "SimulatedCapabilityProvider",
    "SimulatedStorageAccess",
]
