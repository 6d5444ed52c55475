from __future__ import annotations

import logging
import ssl
from typing import Any

import httpx

from .config_types import CONTENT_TYPE, DEFAULT_API_ROOT, DEFAULT_TIMEOUT_S, ClientConfig
from .errors import NetworkError

logger = logging.getLogger(__name__)


class Transport:
    """Configured HTTP client bound to one API root and TLS peer name.

    Requests are sent streamed, so the caller owns the returned response and
    must close it (see :func:`syncano_client.response.parse_response`).
    """

    def __init__(
            self,
            *,
            server_name: str,
            ssl_context: ssl.SSLContext,
            api_root: str = DEFAULT_API_ROOT,
            timeout_s: float = DEFAULT_TIMEOUT_S,
            user_agent: str = ClientConfig.user_agent,
            http_transport: httpx.BaseTransport | None = None,
    ):
        self.server_name = server_name
        self.ssl_context = ssl_context
        self.api_root = api_root.rstrip("/")
        self.timeout = httpx.Timeout(timeout_s)
        self._client = httpx.Client(
            verify=ssl_context,
            timeout=self.timeout,
            headers={"User-Agent": user_agent},
            follow_redirects=False,
            transport=http_transport,
        )

    @property
    def skip_tls_verification(self) -> bool:
        return self.ssl_context.verify_mode == ssl.CERT_NONE

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "Transport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def url(self, path: str) -> str:
        return f"{self.api_root}/{path.lstrip('/')}"

    def get(self, url: str, *, params: dict[str, Any] | None = None) -> httpx.Response:
        return self._send("GET", url, params=params)

    def post_json(self, url: str, body: dict[str, Any]) -> httpx.Response:
        return self._send("POST", url, json=body, headers={"Content-Type": CONTENT_TYPE})

    def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        request = self._client.build_request(
            method,
            url,
            extensions={"sni_hostname": self.server_name},
            **kwargs,
        )
        try:
            return self._client.send(request, stream=True)
        except httpx.RequestError as e:
            raise NetworkError(f"syncano: request failed - {e}") from e


def provision(
        server_name: str,
        skip_tls_verification: bool,
        *,
        api_root: str = DEFAULT_API_ROOT,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        user_agent: str = ClientConfig.user_agent,
        http_transport: httpx.BaseTransport | None = None,
) -> Transport:
    ssl_context = ssl.create_default_context()
    if skip_tls_verification:
        # check_hostname has to be switched off before CERT_NONE is accepted
        ssl_context.check_hostname = False
        ssl_context.verify_mode = ssl.CERT_NONE
        logger.debug("TLS verification disabled for %s", server_name)
    return Transport(
        server_name=server_name,
        ssl_context=ssl_context,
        api_root=api_root,
        timeout_s=timeout_s,
        user_agent=user_agent,
        http_transport=http_transport,
    )
