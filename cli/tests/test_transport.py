from __future__ import annotations

import ssl

import httpx
import pytest

from syncano_client.config_types import DEFAULT_SERVER
from syncano_client.errors import NetworkError
from syncano_client.transport import provision


def test_provision_skip_verification_sets_tls_config() -> None:
    transport = provision(DEFAULT_SERVER, True)
    try:
        assert transport.server_name == "api.syncano.rocks"
        assert transport.skip_tls_verification is True
        assert transport.ssl_context.verify_mode == ssl.CERT_NONE
        assert transport.ssl_context.check_hostname is False
        assert transport.timeout == httpx.Timeout(30.0)
        assert transport._client.timeout == httpx.Timeout(30.0)
    finally:
        transport.close()


def test_provision_verifies_certificates_by_default() -> None:
    transport = provision(DEFAULT_SERVER, False)
    try:
        assert transport.skip_tls_verification is False
        assert transport.ssl_context.verify_mode == ssl.CERT_REQUIRED
        assert transport.ssl_context.check_hostname is True
    finally:
        transport.close()


def test_provision_returns_independent_transports() -> None:
    first = provision(DEFAULT_SERVER, True)
    second = provision(DEFAULT_SERVER, True)
    try:
        assert first is not second
        assert first._client is not second._client
    finally:
        first.close()
        second.close()


def test_requests_carry_server_name_and_json_content_type() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={})

    transport = provision("tls.example.test", False, http_transport=httpx.MockTransport(handler))
    with transport:
        transport.post_json(transport.url("v1/account/auth/"), {"email": "a"}).close()
        transport.get(transport.url("v1/account/"), params={"api_key": "k"}).close()

    post, get = seen
    assert post.extensions["sni_hostname"] == "tls.example.test"
    assert post.headers["Content-Type"] == "application/json"
    assert str(post.url) == "https://api.syncano.rocks/v1/account/auth/"
    assert get.url.params["api_key"] == "k"
    assert get.headers["User-Agent"].startswith("syncano-client/")


def test_transport_failure_raises_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    transport = provision(DEFAULT_SERVER, False, http_transport=httpx.MockTransport(handler))
    with transport:
        with pytest.raises(NetworkError) as excinfo:
            transport.get(transport.url("v1/account/"))
    assert "connection refused" in str(excinfo.value)


def test_redirects_are_not_followed() -> None:
    calls: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request.url.path)
        return httpx.Response(302, headers={"Location": "https://elsewhere.test/"})

    transport = provision(DEFAULT_SERVER, False, http_transport=httpx.MockTransport(handler))
    with transport:
        response = transport.get(transport.url("v1/account/"))
        response.close()
    assert response.status_code == 302
    assert calls == ["/v1/account/"]
