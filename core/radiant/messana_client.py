"""
Messana API Client for Radiant

Minimal client for reading and writing zone and system endpoints.
"""

import asyncio
import logging
from typing import Any

import requests

from .exceptions import EndpointNotFoundError, MessanaConnectionError, ResponseFormatError

logger = logging.getLogger(__name__)


class MessanaClient:
    """Simple Messana building-control REST API client."""

    def __init__(self, base_url: str, api_key: str, timeout: float = 5):
        """Initialize Messana client.

        Args:
            base_url: Messana controller URL (e.g., "http://192.168.1.50")
            api_key: API key from the controller's user settings
            timeout: Per-request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        # Create a session for connection pooling
        self.session = requests.Session()
        self.session.headers.update({
            "Accept": "application/json",
            "Content-Type": "application/json",
        })
        self.timeout = timeout

    def _url(self, path: str) -> str:
        return f"{self.base_url}/api/{path.lstrip('/')}"

    def get(self, path: str) -> dict[str, Any]:
        """Read an endpoint.

        Args:
            path: Endpoint path relative to /api (e.g., "zone/status/0")

        Returns:
            Parsed JSON object

        Raises:
            EndpointNotFoundError: If the endpoint does not exist
            MessanaConnectionError: If the API request fails
            ResponseFormatError: If the body is not a JSON object
        """
        url = self._url(path)
        logger.debug(f"GET {url}")
        try:
            response = self.session.get(
                url, params={"apikey": self.api_key}, timeout=self.timeout
            )
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            if e.response is not None and e.response.status_code == 404:
                raise EndpointNotFoundError(f"Endpoint not found: {path}") from e
            raise MessanaConnectionError(f"Failed to read {path}: {e}") from e
        except requests.exceptions.RequestException as e:
            raise MessanaConnectionError(f"Messana API request failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise ResponseFormatError(path, f"invalid JSON: {e}") from e
        if not isinstance(data, dict):
            raise ResponseFormatError(path, f"expected JSON object, got {type(data).__name__}")
        return data

    def put(self, path: str, body: dict[str, Any]) -> None:
        """Write an endpoint.

        Args:
            path: Endpoint path relative to /api (e.g., "zone/setpoint")
            body: JSON body, typically {"id": zone_index, "value": value}

        Raises:
            EndpointNotFoundError: If the endpoint does not exist
            MessanaConnectionError: If the API request fails
        """
        url = self._url(path)
        data = {**body, "apikey": self.api_key}

        try:
            logger.debug(f"PUT {url} with data: {body}")
            response = self.session.put(url, json=data, timeout=self.timeout)
            response.raise_for_status()
            logger.info(f"Wrote {path} {body} - Response: {response.status_code}")
        except requests.exceptions.HTTPError as e:
            if e.response is not None and e.response.status_code == 404:
                raise EndpointNotFoundError(f"Endpoint not found: {path}") from e
            raise MessanaConnectionError(f"Failed to write {path}: {e}") from e
        except requests.exceptions.RequestException as e:
            raise MessanaConnectionError(f"Messana API request failed: {e}") from e

    async def fetch_json(self, path: str) -> dict[str, Any]:
        """Read an endpoint without blocking the event loop."""
        return await asyncio.to_thread(self.get, path)

    async def put_json(self, path: str, body: dict[str, Any]) -> None:
        """Write an endpoint without blocking the event loop."""
        await asyncio.to_thread(self.put, path, body)

    def close(self) -> None:
        self.session.close()


def json_field(data: dict[str, Any], path: str, field: str) -> Any:
    """Return data[field], raising ResponseFormatError if it is absent or null."""
    value = data.get(field)
    if value is None:
        raise ResponseFormatError(path, f"missing field '{field}'")
    return value
