from __future__ import annotations

from .errors import ApiError, ErrorKind, SyncanoClientError

_KIND_LABELS = {
    ErrorKind.INFORMATIONAL: "unexpected informational response",
    ErrorKind.REDIRECTION: "unexpected redirect",
    ErrorKind.CLIENT: "request rejected",
    ErrorKind.SERVER: "server error",
    ErrorKind.INFRASTRUCTURE: "request failed",
}


def describe_error(exc: SyncanoClientError) -> str:
    label = _KIND_LABELS[exc.kind]
    if isinstance(exc, ApiError):
        return f"{label} (HTTP {exc.status_code})"
    return f"{label}: {exc}"
