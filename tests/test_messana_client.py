from unittest.mock import MagicMock

import pytest
import requests

from core.radiant.exceptions import (
    EndpointNotFoundError,
    MessanaConnectionError,
    ResponseFormatError,
)
from core.radiant.messana_client import MessanaClient, json_field


def _response(status_code=200, body=None, json_error=None):
    response = MagicMock()
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Error", response=response
        )
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = body
    return response


@pytest.fixture
def client():
    client = MessanaClient("http://messana.local/", "secret", timeout=3)
    client.session = MagicMock()
    return client


def test_get_builds_url_with_api_key(client):
    client.session.get.return_value = _response(body={"status": 1})

    assert client.get("zone/status/2") == {"status": 1}
    client.session.get.assert_called_once_with(
        "http://messana.local/api/zone/status/2",
        params={"apikey": "secret"},
        timeout=3,
    )


def test_put_sends_body_with_api_key(client):
    client.session.put.return_value = _response()

    client.put("zone/setpoint", {"id": 2, "value": 70.0})
    client.session.put.assert_called_once_with(
        "http://messana.local/api/zone/setpoint",
        json={"id": 2, "value": 70.0, "apikey": "secret"},
        timeout=3,
    )


def test_get_404_raises_endpoint_not_found(client):
    client.session.get.return_value = _response(status_code=404)

    with pytest.raises(EndpointNotFoundError):
        client.get("zone/status/99")


def test_put_500_raises_connection_error(client):
    client.session.put.return_value = _response(status_code=500)

    with pytest.raises(MessanaConnectionError):
        client.put("zone/status", {"id": 1, "value": 1})


def test_transport_failure_raises_connection_error(client):
    client.session.get.side_effect = requests.exceptions.ConnectionError("refused")

    with pytest.raises(MessanaConnectionError, match="refused"):
        client.get("hc/mode/0")


def test_invalid_json_raises_response_format_error(client):
    client.session.get.return_value = _response(json_error=ValueError("Expecting value"))

    with pytest.raises(ResponseFormatError, match="hc/mode/0"):
        client.get("hc/mode/0")


def test_non_object_json_raises_response_format_error(client):
    client.session.get.return_value = _response(body=[1, 2])

    with pytest.raises(ResponseFormatError):
        client.get("hc/mode/0")


@pytest.mark.asyncio
async def test_async_wrappers_use_blocking_calls(client):
    client.session.get.return_value = _response(body={"value": 72})
    client.session.put.return_value = _response()

    assert await client.fetch_json("zone/setpoint/1") == {"value": 72}
    await client.put_json("zone/status", {"id": 1, "value": 0})
    client.session.put.assert_called_once()


def test_json_field():
    assert json_field({"value": 0}, "hc/mode/0", "value") == 0

    with pytest.raises(ResponseFormatError, match="missing field 'status'"):
        json_field({"value": 0}, "zone/status/1", "status")
