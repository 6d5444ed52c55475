from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INFORMATIONAL = "informational"
    REDIRECTION = "redirection"
    CLIENT = "client"
    SERVER = "server"
    INFRASTRUCTURE = "infrastructure"


class SyncanoClientError(Exception):
    """Base client error."""

    kind: ErrorKind


class InfrastructureError(SyncanoClientError):
    """Transport, body read, decode or missing-credentials failure."""

    kind = ErrorKind.INFRASTRUCTURE

    def __init__(self, message: str, *, body: str | None = None, target: str | None = None):
        super().__init__(message)
        self.message = message
        self.body = body
        self.target = target


class NetworkError(InfrastructureError):
    """Transport/network layer error."""


class ApiError(SyncanoClientError):
    def __init__(self, status_code: int, message: str | None = None, details: str | None = None):
        super().__init__(message or f"syncano: HTTP error with status code of {status_code}")
        self.status_code = status_code
        self.details = details


class InformationalError(ApiError):
    kind = ErrorKind.INFORMATIONAL


class RedirectionError(ApiError):
    kind = ErrorKind.REDIRECTION


class ClientError(ApiError):
    kind = ErrorKind.CLIENT


class AuthError(ClientError):
    """Auth-related API error."""


class ServerError(ApiError):
    kind = ErrorKind.SERVER


def error_for_status(status_code: int, details: str | None = None) -> ApiError | None:
    # band order matters: client errors are checked first
    if 400 <= status_code <= 499:
        if status_code in (401, 403):
            return AuthError(status_code, details=details)
        return ClientError(status_code, details=details)
    if 500 <= status_code <= 599:
        return ServerError(status_code, details=details)
    if 300 <= status_code <= 399:
        return RedirectionError(status_code, details=details)
    if 100 <= status_code <= 199:
        return InformationalError(status_code, details=details)
    return None
