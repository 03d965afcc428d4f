from .client import MessageGatewayClient
from .config_types import ClientConfig
from .errors import (
    ApiError,
    AuthError,
    DecodingError,
    EncodingError,
    MgsClientError,
    NetworkError,
    ResolutionError,
    SchemaMismatchError,
    TransportError,
)
from .schema import MESSAGE_SCHEMA_VERSION, ChannelKind
from .signing import V4Signer

__all__ = [
    "MessageGatewayClient",
    "ClientConfig",
    "V4Signer",
    "ChannelKind",
    "MESSAGE_SCHEMA_VERSION",
    "MgsClientError",
    "ResolutionError",
    "EncodingError",
    "TransportError",
    "NetworkError",
    "ApiError",
    "AuthError",
    "DecodingError",
    "SchemaMismatchError",
]
