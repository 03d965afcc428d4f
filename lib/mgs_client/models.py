from __future__ import annotations

from dataclasses import dataclass, field


def _wire(name: str, *, required: bool = True, **kwargs):
    return field(metadata={"wire": name, "required": required}, **kwargs)


# --- requests ---

@dataclass
class CreateControlChannelInput:
    message_schema_version: str = _wire("MessageSchemaVersion")
    request_id: str = _wire("RequestId")


@dataclass
class CreateDataChannelInput:
    message_schema_version: str = _wire("MessageSchemaVersion")
    request_id: str = _wire("RequestId")
    client_id: str = _wire("ClientId")


@dataclass
class DeleteChannelInput:
    message_schema_version: str = _wire("MessageSchemaVersion")
    request_id: str = _wire("RequestId")


# --- responses ---

@dataclass(frozen=True)
class CreateControlChannelOutput:
    message_schema_version: str | None = _wire("MessageSchemaVersion", required=False, default=None)
    token_value: str | None = _wire("TokenValue", default=None)


@dataclass(frozen=True)
class CreateDataChannelOutput:
    message_schema_version: str | None = _wire("MessageSchemaVersion", required=False, default=None)
    token_value: str | None = _wire("TokenValue", default=None)


@dataclass(frozen=True)
class DeleteChannelOutput:
    message_schema_version: str | None = _wire("MessageSchemaVersion", required=False, default=None)
    channel_id: str | None = _wire("ChannelId", default=None)


REQUEST_TYPES = (CreateControlChannelInput, CreateDataChannelInput, DeleteChannelInput)
RESPONSE_TYPES = (CreateControlChannelOutput, CreateDataChannelOutput, DeleteChannelOutput)
