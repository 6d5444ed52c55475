from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping

ENV_EMAIL = "SYNCANO_EMAIL"
ENV_PASSWORD = "SYNCANO_PASSWORD"
ENV_API_KEY = "SYNCANO_API_KEY"
ENV_SSL_ENABLED = "SYNCANO_SSL_ENABLED"


@dataclass(frozen=True)
class ConnectionCredentials:
    api_key: str = field(default="", repr=False)
    instance_name: str = ""
    instance_key: str = field(default="", repr=False)
    email: str = ""
    password: str = field(default="", repr=False)
    skip_tls_verification: bool = False

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    @property
    def has_login(self) -> bool:
        return bool(self.email) and bool(self.password)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ConnectionCredentials":
        env = os.environ if environ is None else environ
        return cls(
            api_key=env.get(ENV_API_KEY, ""),
            email=env.get(ENV_EMAIL, ""),
            password=env.get(ENV_PASSWORD, ""),
            # only the literal "1" turns verification off
            skip_tls_verification=env.get(ENV_SSL_ENABLED) == "1",
        )


def resolve_credentials_from_env(environ: Mapping[str, str] | None = None) -> ConnectionCredentials:
    return ConnectionCredentials.from_env(environ)


def mask_secret(value: str, *, visible: int = 4) -> str:
    if not value:
        return ""
    if len(value) <= visible:
        return "*" * len(value)
    return "*" * (len(value) - visible) + value[-visible:]
