from __future__ import annotations

import logging

import httpx
import pytest

from nok_exr_client.core.errors import (
    NokExrNoDataError,
    NokExrServerError,
    NokExrTransportError,
)
from nok_exr_client.core.transport import SyncTransport
from tests.shared.transport import Response, SyncSequencedClient, build_config


def test_transport_returns_payload_and_normalizes_endpoint():
    client = SyncSequencedClient([Response(200, {"data": {}})])
    transport = SyncTransport(build_config(), client=client)

    payload = transport.request("/data/EXR/A.USD.NOK.SP", params={"format": "sdmx-json"})

    assert payload == {"data": {}}
    assert client.calls == [("data/EXR/A.USD.NOK.SP", {"format": "sdmx-json"})]


@pytest.mark.parametrize(
    ("step", "expected_exception"),
    [
        (Response(503, {"errors": [{"title": "busy"}]}), NokExrServerError),
        (Response(404, ValueError("no body")), NokExrNoDataError),
        (httpx.ConnectError("network down"), NokExrTransportError),
    ],
    ids=["server-error", "no-data", "network"],
)
def test_transport_makes_single_attempt(step, expected_exception):
    client = SyncSequencedClient([step, Response(200, {"data": {}})])
    transport = SyncTransport(build_config(), client=client)

    with pytest.raises(expected_exception):
        transport.request("data/EXR/A.USD.NOK.SP", params={})

    assert len(client.calls) == 1


def test_transport_logs_failures(caplog):
    client = SyncSequencedClient([Response(500, {})])
    transport = SyncTransport(build_config(), client=client)

    with caplog.at_level(logging.ERROR, logger="nok_exr_client"):
        with pytest.raises(NokExrServerError):
            transport.request("data/EXR/A.USD.NOK.SP", params={})

    assert "http_status=500" in caplog.text


def test_transport_raises_after_close():
    client = SyncSequencedClient([])
    transport = SyncTransport(build_config(), client=client)
    transport.close()

    with pytest.raises(NokExrTransportError, match="closed"):
        transport.request("data/EXR/A.USD.NOK.SP", params={})
    assert client.closed is False


def test_transport_can_initialize_and_close_with_real_httpx_client():
    transport = SyncTransport(build_config())
    transport.close()
    transport.close()
