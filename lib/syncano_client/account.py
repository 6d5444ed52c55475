from __future__ import annotations

import logging

from .config_types import ACCOUNT_PATH, API_VERSION, AUTH_PATH
from .models import AccountDetails, AuthResponse
from .response import parse_response
from .transport import Transport

logger = logging.getLogger(__name__)


def endpoint_url(transport: Transport, path: str) -> str:
    return transport.url(f"{API_VERSION}/{path}")


def login(email: str, password: str, transport: Transport) -> str:
    """Exchange an email/password pair for an account API key."""
    url = endpoint_url(transport, AUTH_PATH)
    logger.debug("POST %s", url)
    response = transport.post_json(url, {"email": email, "password": password})
    return parse_response(response, AuthResponse).account_key


def fetch_account_details(api_key: str, transport: Transport) -> AccountDetails:
    url = endpoint_url(transport, ACCOUNT_PATH)
    logger.debug("GET %s", url)
    response = transport.get(url, params={"api_key": api_key})
    return parse_response(response, AccountDetails)
