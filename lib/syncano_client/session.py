from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from .account import fetch_account_details
from .credentials import ConnectionCredentials
from .models import AccountDetails
from .transport import Transport


@runtime_checkable
class AuthenticatedSession(Protocol):
    def is_authenticated(self) -> bool: ...

    def get_account_details(self) -> AccountDetails: ...


@dataclass(eq=False)
class Session:
    """Connection state for one Syncano account.

    ``api_key`` and ``authenticated`` are only written by
    :func:`syncano_client.auth.authenticate`. A session is not safe for
    concurrent use while it is being authenticated.
    """

    transport: Transport = field(repr=False)
    api_key: str = field(default="", repr=False)
    instance_name: str = ""
    instance_key: str = field(default="", repr=False)
    email: str = ""
    password: str = field(default="", repr=False)
    authenticated: bool = False

    @classmethod
    def from_credentials(cls, credentials: ConnectionCredentials, transport: Transport) -> "Session":
        return cls(
            transport=transport,
            api_key=credentials.api_key,
            instance_name=credentials.instance_name,
            instance_key=credentials.instance_key,
            email=credentials.email,
            password=credentials.password,
        )

    def is_authenticated(self) -> bool:
        return self.authenticated

    def get_account_details(self) -> AccountDetails:
        # always a live call, never cached
        return fetch_account_details(self.api_key, self.transport)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
