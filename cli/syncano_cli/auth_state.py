from __future__ import annotations

from dataclasses import dataclass

from syncano_client import AuthError, SyncanoClientError

from .config import load_config, resolve_credentials
from .http import make_session


@dataclass
class AuthContext:
    state: str
    email: str | None = None


def resolve_auth_context() -> AuthContext:
    cfg = load_config()
    creds = resolve_credentials(cfg)
    if not creds.has_api_key and not creds.has_login:
        return AuthContext(state="no_credentials")

    try:
        session = make_session(cfg, credentials=creds)
    except AuthError:
        return AuthContext(state="invalid_credentials")
    except SyncanoClientError:
        return AuthContext(state="unreachable")

    with session:
        try:
            account = session.get_account_details()
        except SyncanoClientError:
            return AuthContext(state="unreachable")
    return AuthContext(state="authenticated", email=account.email or None)
