from __future__ import annotations
from dataclasses import dataclass

from .schema import MESSAGE_SCHEMA_VERSION
from .signing import V4Signer


@dataclass(frozen=True)
class ClientConfig:
    region: str
    signer: V4Signer
    schema_version: str = MESSAGE_SCHEMA_VERSION
    timeout_s: float = 15.0
    endpoint_override: str | None = None
    user_agent: str | None = None
