from __future__ import annotations


class MgsClientError(Exception):
    """Base client error."""


class ResolutionError(MgsClientError):
    """Region or identifier could not be turned into a gateway URL."""


class EncodingError(MgsClientError):
    """Outgoing request is malformed."""


class TransportError(MgsClientError):
    """Signing or network exchange failed."""


class NetworkError(TransportError):
    """Transport/network layer error."""


class ApiError(TransportError):
    def __init__(self, status_code: int, message: str, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class AuthError(ApiError):
    """Auth-related API error."""


class DecodingError(MgsClientError):
    """Response body is not a well-formed gateway message."""


class SchemaMismatchError(DecodingError):
    def __init__(self, expected: str, received: str):
        super().__init__(f"unsupported message schema version {received!r} (client speaks {expected!r})")
        self.expected = expected
        self.received = received
