"""
Radiant Data Models

HomeKit-side state types for a Messana zone.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum


class HeatingCoolingState(IntEnum):
    """HomeKit heating/cooling state; 0 is reserved for off."""

    OFF = 0
    HEAT = 1
    COOL = 2
    AUTO = 3


@dataclass(frozen=True)
class AccessoryInformation:
    """Accessory information registered with the host for a zone."""

    name: str
    serial_number: str
    manufacturer: str = "Messana"
    model: str = "Zone"


@dataclass
class ZoneStatus:
    """Snapshot of a zone's four thermostat characteristics."""

    zone_index: int
    timestamp: datetime
    current_heating_cooling_state: int
    target_heating_cooling_state: int
    current_temperature: float
    target_temperature: float
