"""
Radiant API Endpoints

Exposes each configured zone's thermostat characteristics over HTTP.
"""

import json
import os
import sys

import yaml
from dotenv import load_dotenv
from fastapi import APIRouter, HTTPException
from loguru import logger
from pydantic import BaseModel

# Add core to Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from core.radiant.exceptions import (
    ConfigurationError,
    EndpointNotFoundError,
    PartialWriteError,
    RadiantError,
)
from core.radiant.messana_client import MessanaClient
from core.radiant.settings import PlatformSettings
from core.radiant.system import SystemMode
from core.radiant.zone_accessory import ZoneStateAdapter

router = APIRouter()

OPTIONS_PATH = "/data/options.json"
CONFIG_PATH = os.path.join(os.path.dirname(__file__), "..", "config.yaml")

messana_client: MessanaClient | None = None
ZONES: dict[int, ZoneStateAdapter] = {}


def load_settings() -> PlatformSettings | None:
    """Load platform settings from add-on options, config.yaml or the environment."""
    # Try to load from options.json (production)
    if os.path.exists(OPTIONS_PATH):
        with open(OPTIONS_PATH) as f:
            options = json.load(f)
        logger.info(f"Loading settings from {OPTIONS_PATH}")
        return PlatformSettings.from_dict(options)

    # Development: load from config.yaml if available
    if os.path.exists(CONFIG_PATH):
        with open(CONFIG_PATH) as f:
            config = yaml.safe_load(f) or {}
        options = config.get("options", {})
        if options:
            logger.info("Loading settings from config.yaml")
            return PlatformSettings.from_dict(options)

    # Fallback: environment (and .env)
    load_dotenv()
    host = os.environ.get("MESSANA_HOST", "")
    api_key = os.environ.get("MESSANA_API_KEY", "")
    if not host or not api_key:
        logger.warning("Messana host or API key not configured")
        return None

    zones = [
        int(z) for z in os.environ.get("MESSANA_ZONES", "0").split(",") if z.strip()
    ]
    return PlatformSettings.from_dict({
        "host": host,
        "apiKey": api_key,
        "zones": zones,
        "timeout": float(os.environ.get("MESSANA_TIMEOUT", "5")),
    })


def init_platform(settings: PlatformSettings) -> None:
    """Create the client and one accessory per enabled zone."""
    global messana_client

    messana_client = MessanaClient(settings.base_url, settings.api_key, settings.timeout)
    # One system entity shared by every zone
    system = SystemMode(messana_client)

    ZONES.clear()
    for zone in settings.zones:
        if not zone.enabled:
            logger.info(f"Skipping disabled zone {zone.index} ({zone.name})")
            continue
        ZONES[zone.index] = ZoneStateAdapter(
            zone.index, messana_client, system=system, name=zone.name
        )
    logger.info(f"Configured {len(ZONES)} zone(s) on {settings.base_url}")


# Load platform on module import
try:
    _settings = load_settings()
    if _settings:
        init_platform(_settings)
except ConfigurationError as e:
    logger.error(f"Invalid configuration: {e}")


class SetValueRequest(BaseModel):
    """Request body for writing a characteristic."""
    value: float


def _get_zone(zone_index: int) -> ZoneStateAdapter:
    if messana_client is None:
        raise HTTPException(status_code=503, detail="Messana client not initialized")

    zone = ZONES.get(zone_index)
    if zone is None:
        raise HTTPException(status_code=404, detail=f"Zone not found: {zone_index}")
    return zone


def _vendor_error(zone_index: int, e: RadiantError) -> HTTPException:
    logger.error(f"Zone {zone_index}: {e}")
    if isinstance(e, PartialWriteError):
        return HTTPException(
            status_code=502,
            detail={
                "message": str(e),
                "completed": e.completed,
                "failed": {path: str(err) for path, err in e.failed.items()},
            },
        )
    if isinstance(e, EndpointNotFoundError):
        return HTTPException(status_code=502, detail=f"Messana endpoint missing: {e}")
    return HTTPException(status_code=502, detail=str(e))


@router.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app": "Radiant",
        "version": "0.1.0",
        "messana_configured": messana_client is not None,
        "zones": len(ZONES),
    }


@router.get("/api/zones")
async def get_zones():
    """Get all configured zones."""
    zones = []
    for index, zone in ZONES.items():
        info = zone.accessory_information()
        zones.append({
            "index": index,
            "name": info.name,
            "manufacturer": info.manufacturer,
            "model": info.model,
            "serial_number": info.serial_number,
        })
    return {"zones": zones}


@router.get("/api/zones/{zone_index}/status")
async def get_zone_status(zone_index: int):
    """Get all four thermostat characteristics of a zone."""
    zone = _get_zone(zone_index)
    try:
        status = await zone.get_status()
    except RadiantError as e:
        raise _vendor_error(zone_index, e) from e

    return {
        "zone_index": status.zone_index,
        "name": zone.name,
        "timestamp": status.timestamp.isoformat(),
        "current_heating_cooling_state": status.current_heating_cooling_state,
        "target_heating_cooling_state": status.target_heating_cooling_state,
        "current_temperature": round(status.current_temperature, 2),
        "target_temperature": round(status.target_temperature, 2),
    }


@router.get("/api/zones/{zone_index}/current_heating_cooling_state")
async def get_current_heating_cooling_state(zone_index: int):
    zone = _get_zone(zone_index)
    try:
        return {"value": await zone.get_current_heating_cooling_state()}
    except RadiantError as e:
        raise _vendor_error(zone_index, e) from e


@router.get("/api/zones/{zone_index}/target_heating_cooling_state")
async def get_target_heating_cooling_state(zone_index: int):
    zone = _get_zone(zone_index)
    try:
        return {"value": int(await zone.get_target_heating_cooling_state())}
    except RadiantError as e:
        raise _vendor_error(zone_index, e) from e


@router.put("/api/zones/{zone_index}/target_heating_cooling_state")
async def set_target_heating_cooling_state(zone_index: int, request: SetValueRequest):
    """Switch a zone on (any mode above 0) or off (0)."""
    zone = _get_zone(zone_index)
    value = int(request.value) if request.value.is_integer() else request.value
    try:
        await zone.set_target_heating_cooling_state(value)
    except RadiantError as e:
        raise _vendor_error(zone_index, e) from e
    return {"success": True, "zone_index": zone_index}


@router.get("/api/zones/{zone_index}/current_temperature")
async def get_current_temperature(zone_index: int):
    zone = _get_zone(zone_index)
    try:
        return {"value": await zone.get_current_temperature()}
    except RadiantError as e:
        raise _vendor_error(zone_index, e) from e


@router.get("/api/zones/{zone_index}/target_temperature")
async def get_target_temperature(zone_index: int):
    zone = _get_zone(zone_index)
    try:
        return {"value": await zone.get_target_temperature()}
    except RadiantError as e:
        raise _vendor_error(zone_index, e) from e


@router.put("/api/zones/{zone_index}/target_temperature")
async def set_target_temperature(zone_index: int, request: SetValueRequest):
    """Set a zone's target temperature in °C. Also switches the zone on."""
    zone = _get_zone(zone_index)
    try:
        await zone.set_target_temperature(request.value)
    except RadiantError as e:
        raise _vendor_error(zone_index, e) from e
    return {"success": True, "zone_index": zone_index, "temperature": request.value}
