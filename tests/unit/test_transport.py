#
# tests/unit/test_transport.py
#
"""
Tests for HttpTransport error-status handling.
"""

import attrs
import httpx
import pytest

from rpbasic.config import ReportPortalConfig
from rpbasic.exceptions import ReportPortalHTTPError, TransportError
from rpbasic.transport import HttpTransport


def make_transport(config: ReportPortalConfig, handler) -> HttpTransport:
    http_client = httpx.Client(base_url=config.base_uri, transport=httpx.MockTransport(handler))
    return HttpTransport(config, client=http_client)


def test_error_status_returned_when_allowed(rp_config: ReportPortalConfig) -> None:
    transport = make_transport(rp_config, lambda r: httpx.Response(406, json={"message": "nope"}))

    response = transport.put_json("v1/demo/launch/l/finish", {"status": "PASSED"})

    assert response.status_code == 406
    assert response.json() == {"message": "nope"}


def test_error_status_raises_when_not_allowed(rp_config: ReportPortalConfig) -> None:
    strict = attrs.evolve(rp_config, allow_http_errors=False)
    transport = make_transport(strict, lambda r: httpx.Response(404, text="missing"))

    with pytest.raises(ReportPortalHTTPError) as excinfo:
        transport.post_json("v1/demo/item", {})

    assert excinfo.value.status_code == 404
    assert excinfo.value.response_text == "missing"
    assert isinstance(excinfo.value.details, httpx.HTTPStatusError)


def test_success_passes_when_not_allowed(rp_config: ReportPortalConfig) -> None:
    strict = attrs.evolve(rp_config, allow_http_errors=False)
    transport = make_transport(strict, lambda r: httpx.Response(201, json={"id": "x"}))

    assert transport.post_json("v1/demo/launch", {}).status_code == 201


def test_connection_failure_raises_transport_error(rp_config: ReportPortalConfig) -> None:
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    transport = make_transport(rp_config, refuse)

    with pytest.raises(TransportError, match="connection refused"):
        transport.post_json("v1/demo/log", {})


def test_paths_resolve_under_api_root(rp_config: ReportPortalConfig) -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200)

    make_transport(rp_config, handler).put_json("v1/demo/item/abc", {})

    assert seen == ["http://rp.example.com/api/v1/demo/item/abc"]


def test_default_client_sends_bearer_token(rp_config: ReportPortalConfig) -> None:
    transport = HttpTransport(rp_config)
    try:
        assert transport._client.headers["Authorization"] == "bearer secret-token"
        assert str(transport._client.base_url) == "http://rp.example.com/api/"
    finally:
        transport.close()
