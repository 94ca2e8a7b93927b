"""
Messana System Entity

The heat/cool mode lives on the overall system, not on any zone. One
SystemMode is shared by every zone accessory of a platform.
"""

import logging

from .messana_client import json_field

logger = logging.getLogger(__name__)

MODE_PATH = "hc/mode/0"


class SystemMode:
    """Read access to the shared system heat/cool mode."""

    def __init__(self, api):
        """
        Args:
            api: Collaborator exposing async fetch_json(path)
        """
        self.api = api

    async def get_mode(self) -> int:
        """Fetch the current system mode (vendor mode space, not HomeKit's)."""
        data = await self.api.fetch_json(MODE_PATH)
        mode = json_field(data, MODE_PATH, "value")
        logger.debug(f"System mode: {mode}")
        return mode
