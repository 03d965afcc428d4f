from __future__ import annotations

import logging
from typing import Protocol

import httpx

from .config_types import ClientConfig
from .errors import ApiError, AuthError, NetworkError
from .signing import V4Signer

logger = logging.getLogger(__name__)

CLIENT_USER_AGENT = "mgs-client/0.1.0"
_OK_STATUSES = (200, 201)


class SendFunc(Protocol):
    def __call__(self, payload: bytes, method: str, url: str, region: str, signer: V4Signer) -> bytes: ...


class Transport:
    def __init__(self, cfg: ClientConfig, *, http_transport: httpx.BaseTransport | None = None):
        self._cfg = cfg
        headers = {"User-Agent": cfg.user_agent or CLIENT_USER_AGENT}
        self._client = httpx.Client(
            timeout=cfg.timeout_s,
            headers=headers,
            transport=http_transport,
        )

    def close(self) -> None:
        self._client.close()

    def send(self, payload: bytes, method: str, url: str, region: str, signer: V4Signer) -> bytes:
        headers = signer.sign(method, url, payload, region, headers={"Content-Type": "application/xml"})
        try:
            r = self._client.request(method, url, content=payload, headers=headers)
        except httpx.RequestError as e:
            raise NetworkError(str(e)) from e

        logger.debug("%s %s -> %s", method, url, r.status_code)
        if r.status_code not in _OK_STATUSES:
            msg = f"unexpected response from the service: {method} {url} failed with {r.status_code}"
            details = r.text[:1000] if r.text else None
            if r.status_code in (401, 403):
                raise AuthError(r.status_code, msg, details)
            raise ApiError(r.status_code, msg, details)

        return r.content
