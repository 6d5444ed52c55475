from __future__ import annotations

import json
import logging

import httpx
import pytest

from syncano_client.account import fetch_account_details, login
from syncano_client.auth import authenticate
from syncano_client.errors import ClientError, InfrastructureError, ServerError
from syncano_client.session import AuthenticatedSession, Session
from syncano_client.transport import provision

ACCOUNT = {"id": 1, "email": "a@b.com", "first_name": "A", "last_name": "B"}


def _session(handler, **fields) -> Session:
    transport = provision("api.syncano.rocks", False, http_transport=httpx.MockTransport(handler))
    return Session(transport=transport, **fields)


def _unreachable(request: httpx.Request) -> httpx.Response:
    raise AssertionError(f"unexpected request to {request.url}")


def test_already_authenticated_is_noop() -> None:
    with _session(_unreachable, api_key="existing", authenticated=True) as session:
        authenticate(session)
        assert session.api_key == "existing"
        assert session.is_authenticated()


def test_api_key_is_validated_remotely() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=ACCOUNT)

    with _session(handler, api_key="validkey") as session:
        authenticate(session)
        assert session.authenticated is True
        assert session.api_key == "validkey"

    assert len(seen) == 1
    assert seen[0].method == "GET"
    assert seen[0].url.path == "/v1/account/"
    assert seen[0].url.params["api_key"] == "validkey"


def test_api_key_wins_over_email_and_password(caplog) -> None:
    paths: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        paths.append(request.url.path)
        if request.url.path == "/v1/account/auth/":
            return httpx.Response(200, json={"account_key": "newkey"})
        return httpx.Response(401, json={"detail": "Invalid API key."})

    caplog.set_level(logging.WARNING, logger="syncano_client")
    with _session(handler, api_key="badkey00", email="x@y.z", password="pw") as session:
        with pytest.raises(ClientError) as excinfo:
            authenticate(session)
        assert session.authenticated is False
        assert session.api_key == "badkey00"

    assert excinfo.value.status_code == 401
    assert paths == ["/v1/account/"]
    assert "****ey00" in caplog.text
    assert "badkey00" not in caplog.text


def test_email_and_password_login_adopts_key() -> None:
    bodies: list[bytes] = []

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "POST"
        assert request.url.path == "/v1/account/auth/"
        bodies.append(request.content)
        return httpx.Response(200, json={"account_key": "newkey"})

    with _session(handler, email="x", password="y") as session:
        authenticate(session)
        assert session.api_key == "newkey"
        assert session.authenticated is True

    assert [json.loads(body) for body in bodies] == [{"email": "x", "password": "y"}]


def test_login_failure_propagates_unchanged() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503)

    with _session(handler, email="x", password="y") as session:
        with pytest.raises(ServerError) as excinfo:
            authenticate(session)
        assert session.authenticated is False
        assert session.api_key == ""
    assert excinfo.value.status_code == 503


@pytest.mark.parametrize(
    "fields",
    [
        {},
        {"email": "x"},
        {"password": "y"},
        {"instance_name": "inst", "instance_key": "ik"},
    ],
)
def test_missing_credentials(fields) -> None:
    with _session(_unreachable, **fields) as session:
        with pytest.raises(InfrastructureError) as excinfo:
            authenticate(session)
        assert session.authenticated is False
    assert "missing login credentials" in str(excinfo.value)


def test_remote_operations_direct() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/v1/account/auth/":
            return httpx.Response(200, json={"account_key": "k1"})
        return httpx.Response(200, json=ACCOUNT)

    transport = provision("api.syncano.rocks", False, http_transport=httpx.MockTransport(handler))
    with transport:
        assert login("a@b.com", "pw", transport) == "k1"
        account = fetch_account_details("k1", transport)
    assert account.full_name == "A B"


def test_session_details_are_never_cached() -> None:
    calls: list[int] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(1)
        return httpx.Response(200, json={**ACCOUNT, "first_name": f"A{len(calls)}"})

    with _session(handler, api_key="k", authenticated=True) as session:
        assert isinstance(session, AuthenticatedSession)
        assert session.get_account_details().first_name == "A1"
        assert session.get_account_details().first_name == "A2"
    assert len(calls) == 2
