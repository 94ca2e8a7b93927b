"""
Messana Zone Accessory

Translates HomeKit thermostat characteristics for one zone into Messana API
calls. HomeKit works in Celsius with 0=off as its own state; Messana zones
only know on/off, keep heat/cool on the shared system mode and store
temperatures in Fahrenheit.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Optional

from .conversions import to_celsius, to_fahrenheit
from .exceptions import PartialWriteError
from .messana_client import json_field
from .models import AccessoryInformation, HeatingCoolingState, ZoneStatus
from .system import SystemMode

logger = logging.getLogger(__name__)

ZONE_STATUS = "zone/status"
ZONE_SETPOINT = "zone/setpoint"


class ZoneStateAdapter:
    """HomeKit thermostat characteristics for a single Messana zone."""

    to_celsius = staticmethod(to_celsius)
    to_fahrenheit = staticmethod(to_fahrenheit)

    def __init__(
        self,
        zone_index: int,
        api,
        system: Optional[SystemMode] = None,
        name: Optional[str] = None,
    ):
        """Initialize zone accessory.

        Args:
            zone_index: Messana zone id
            api: Collaborator exposing async fetch_json(path) and put_json(path, body)
            system: Shared system entity; pass the platform's instance so all
                zones read the same mode
            name: Display name for the accessory
        """
        self._zone_index = zone_index
        self.api = api
        self.system = system if system is not None else SystemMode(api)
        self.name = name or f"Zone {zone_index}"

    @property
    def zone_index(self) -> int:
        return self._zone_index

    def accessory_information(self) -> AccessoryInformation:
        return AccessoryInformation(
            name=self.name,
            serial_number=f"radiant-{self._zone_index}",
        )

    async def _fetch_field(self, endpoint: str, field: str):
        path = f"{endpoint}/{self._zone_index}"
        data = await self.api.fetch_json(path)
        return json_field(data, path, field)

    async def _write(self, endpoint: str, value) -> None:
        await self.api.put_json(endpoint, {"id": self._zone_index, "value": value})

    async def get_current_heating_cooling_state(self) -> int:
        """What the zone is actually doing right now (off/heating/cooling)."""
        return await self._fetch_field("zone/thermalStatus", "status")

    async def get_target_heating_cooling_state(self) -> int:
        zone_status = await self._fetch_field(ZONE_STATUS, "status")
        # Off zones report off without consulting the system mode
        if zone_status == 0:
            return HeatingCoolingState.OFF

        mode = await self.system.get_mode()
        return mode + 1

    async def set_target_heating_cooling_state(self, value) -> None:
        """Switch the zone on or off.

        Messana zones only support 0 or 1, heat/cool is a system setting, so
        any HomeKit mode above off means "on". Values below 0 are passed
        through unchanged.
        """
        clamped = min(1, value)
        if clamped < 0 or clamped != int(clamped):
            logger.warning(
                f"Zone {self._zone_index}: forwarding out-of-range status {clamped}"
            )
        logger.info(f"Zone {self._zone_index}: set status {clamped} (requested {value})")
        await self._write(ZONE_STATUS, clamped)

    async def get_current_temperature(self) -> float:
        return to_celsius(await self._fetch_field("zone/temperature", "value"))

    async def get_target_temperature(self) -> float:
        return to_celsius(await self._fetch_field(ZONE_SETPOINT, "value"))

    async def set_target_temperature(self, celsius: float) -> None:
        """Set the zone setpoint, switching the zone on first.

        The two writes are independent. Both are always attempted; if exactly
        one fails a PartialWriteError reports which one. If both fail the
        zone-on error is raised.

        Raises:
            PartialWriteError: If only one of the two writes succeeded
        """
        fahrenheit = to_fahrenheit(celsius)
        logger.info(
            f"Zone {self._zone_index}: set target {celsius:.1f}°C ({fahrenheit:.1f}°F)"
        )

        completed: list[str] = []
        failed: dict[str, Exception] = {}
        # switch the zone on in case it was off before
        for endpoint, value in ((ZONE_STATUS, 1), (ZONE_SETPOINT, fahrenheit)):
            try:
                await self._write(endpoint, value)
            except Exception as e:
                logger.error(f"Zone {self._zone_index}: write to {endpoint} failed: {e}")
                failed[endpoint] = e
            else:
                completed.append(endpoint)

        if not failed:
            return
        if not completed:
            raise failed[ZONE_STATUS]
        raise PartialWriteError(completed, failed)

    async def get_status(self) -> ZoneStatus:
        """Read all four characteristics concurrently."""
        current_state, target_state, current_temp, target_temp = await asyncio.gather(
            self.get_current_heating_cooling_state(),
            self.get_target_heating_cooling_state(),
            self.get_current_temperature(),
            self.get_target_temperature(),
        )
        return ZoneStatus(
            zone_index=self._zone_index,
            timestamp=datetime.now(timezone.utc),
            current_heating_cooling_state=current_state,
            target_heating_cooling_state=int(target_state),
            current_temperature=current_temp,
            target_temperature=target_temp,
        )
