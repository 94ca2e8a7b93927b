"""Radiant: Messana radiant cooling zones as HomeKit-style thermostats."""

# Define public API
__all__ = [
    "MessanaClient",
    "PlatformSettings",
    "SystemMode",
    "ZoneSettings",
    "ZoneStateAdapter",
    "ZoneStatus",
]

# Import settings
from .settings import PlatformSettings, ZoneSettings

# Import models
from .models import ZoneStatus

# Import API client and accessories
from .messana_client import MessanaClient
from .system import SystemMode
from .zone_accessory import ZoneStateAdapter
