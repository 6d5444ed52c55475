import logging

from .client import connect
from .config_types import ClientConfig
from .credentials import ConnectionCredentials, resolve_credentials_from_env
from .errors import (
    ApiError,
    AuthError,
    ClientError,
    ErrorKind,
    InformationalError,
    InfrastructureError,
    NetworkError,
    RedirectionError,
    ServerError,
    SyncanoClientError,
)
from .models import AccountDetails
from .session import AuthenticatedSession, Session
from .version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "connect",
    "ClientConfig",
    "ConnectionCredentials",
    "resolve_credentials_from_env",
    "AccountDetails",
    "AuthenticatedSession",
    "Session",
    "ErrorKind",
    "SyncanoClientError",
    "ApiError",
    "AuthError",
    "ClientError",
    "ServerError",
    "RedirectionError",
    "InformationalError",
    "InfrastructureError",
    "NetworkError",
    "__version__",
]
