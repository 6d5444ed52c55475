from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping

from .version import __version__

API_VERSION = "v1"
AUTH_PATH = "account/auth/"
ACCOUNT_PATH = "account/"
CONTENT_TYPE = "application/json"
DEFAULT_TIMEOUT_S = 30.0
DEFAULT_API_ROOT = "https://api.syncano.rocks"
DEFAULT_SERVER = "api.syncano.rocks"

ENV_API_ROOT = "SYNCANO_API_ROOT"
ENV_SERVER_NAME = "SYNCANO_SERVER_NAME"


@dataclass(frozen=True)
class ClientConfig:
    api_root: str = DEFAULT_API_ROOT
    server_name: str = DEFAULT_SERVER
    timeout_s: float = DEFAULT_TIMEOUT_S
    user_agent: str = f"syncano-client/{__version__}"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ClientConfig":
        env = os.environ if environ is None else environ
        cfg = cls()
        api_root = (env.get(ENV_API_ROOT) or "").strip().rstrip("/")
        if api_root:
            cfg = replace(cfg, api_root=api_root)
        server_name = (env.get(ENV_SERVER_NAME) or "").strip()
        if server_name:
            cfg = replace(cfg, server_name=server_name)
        return cfg
