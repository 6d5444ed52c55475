from __future__ import annotations

import logging

import httpx

from .auth import authenticate
from .config_types import ClientConfig
from .credentials import ConnectionCredentials
from .session import Session
from .transport import provision

_logger = logging.getLogger(__name__)


def connect(
        credentials: ConnectionCredentials | None = None,
        logger: logging.Logger | None = None,
        *,
        config: ClientConfig | None = None,
        http_transport: httpx.BaseTransport | None = None,
) -> Session:
    """Open an authenticated session, or raise.

    Credentials and configuration default to the ``SYNCANO_*`` environment
    variables. The returned session owns its HTTP client; close it when done.
    """
    creds = credentials if credentials is not None else ConnectionCredentials.from_env()
    cfg = config if config is not None else ClientConfig.from_env()
    log = logger or _logger

    transport = provision(
        cfg.server_name,
        creds.skip_tls_verification,
        api_root=cfg.api_root,
        timeout_s=cfg.timeout_s,
        user_agent=cfg.user_agent,
        http_transport=http_transport,
    )
    session = Session.from_credentials(creds, transport)
    try:
        authenticate(session, logger=log)
    except BaseException:
        transport.close()
        raise
    return session
