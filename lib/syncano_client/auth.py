from __future__ import annotations

import logging

from .account import fetch_account_details, login
from .credentials import mask_secret
from .errors import InfrastructureError, SyncanoClientError
from .session import Session

_logger = logging.getLogger(__name__)


def authenticate(session: Session, *, logger: logging.Logger | None = None) -> None:
    """Authenticate ``session`` in place.

    An API key always wins over email/password, and a rejected key does not
    fall back to the login exchange. Errors are raised unchanged.
    """
    log = logger or _logger

    if session.authenticated:
        return

    if session.api_key:
        try:
            fetch_account_details(session.api_key, session.transport)
        except SyncanoClientError as e:
            log.warning(
                "syncano: authentication failed for the API key %s - %s",
                mask_secret(session.api_key),
                e,
            )
            raise
        session.authenticated = True
        return

    if session.email and session.password:
        session.api_key = login(session.email, session.password, session.transport)
        session.authenticated = True
        log.debug("syncano: logged in as %s", session.email)
        return

    raise InfrastructureError("syncano: missing login credentials")
