from __future__ import annotations

import logging

import httpx

from syncano_client import ConnectionCredentials, Session, connect

from .config import AppConfig, client_config, resolve_credentials

logger = logging.getLogger("syncano_cli")


def make_session(
    cfg: AppConfig,
    *,
    credentials: ConnectionCredentials | None = None,
    http_transport: httpx.BaseTransport | None = None,
) -> Session:
    creds = credentials if credentials is not None else resolve_credentials(cfg)
    return connect(
        creds,
        logger,
        config=client_config(cfg),
        http_transport=http_transport,
    )
