from __future__ import annotations

from botocore.auth import SigV4Auth
from botocore.awsrequest import AWSRequest
from botocore.credentials import Credentials
from botocore.exceptions import BotoCoreError

from .errors import TransportError

SIGNING_SERVICE = "ssmmessages"


class V4Signer:
    """Credential-bound SigV4 signer for message gateway calls."""

    def __init__(self, credentials: Credentials, *, service_name: str = SIGNING_SERVICE):
        self._credentials = credentials
        self.service_name = service_name

    @classmethod
    def from_static(cls, access_key: str, secret_key: str, token: str | None = None) -> V4Signer:
        return cls(Credentials(access_key, secret_key, token or None))

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    def sign(
            self,
            method: str,
            url: str,
            payload: bytes,
            region: str,
            *,
            headers: dict[str, str] | None = None,
    ) -> dict[str, str]:
        """Return ``headers`` plus the SigV4 headers for this exact request."""
        req = AWSRequest(method=method, url=url, data=payload, headers=dict(headers or {}))
        try:
            SigV4Auth(self._credentials, self.service_name, region).add_auth(req)
        except BotoCoreError as e:
            raise TransportError(f"failed to sign {method} {url}: {e}") from e
        return dict(req.headers.items())
