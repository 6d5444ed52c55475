from __future__ import annotations

import json
from typing import Any, Protocol, TypeVar

import httpx

from .errors import InfrastructureError, error_for_status

T = TypeVar("T", covariant=True)


class PayloadModel(Protocol[T]):
    __name__: str

    def from_payload(self, data: Any) -> T: ...


def parse_response(response: httpx.Response, model: PayloadModel[T]) -> T:
    """Classify ``response`` by status band, or decode its body into ``model``.

    Error bands are checked before anything is read from the body. The
    response is closed on every path.
    """
    try:
        error = error_for_status(response.status_code)
        if error is not None:
            raise error

        try:
            raw = response.read()
        except (httpx.HTTPError, httpx.StreamError) as e:
            raise InfrastructureError(f"syncano: error reading the response body - {e}") from e

        text = raw.decode("utf-8", errors="replace")
        try:
            return model.from_payload(json.loads(text))
        except (ValueError, TypeError, KeyError, RecursionError) as e:
            raise InfrastructureError(
                f"syncano: error parsing response body to type {model.__name__} - {e}",
                body=text,
                target=model.__name__,
            ) from e
    finally:
        response.close()
