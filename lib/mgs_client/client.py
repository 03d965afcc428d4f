from __future__ import annotations

import logging
import uuid
from typing import Callable, TypeVar

from . import codec
from .config_types import ClientConfig
from .endpoint import HostResolver, fixed_host, resolve_host, resolve_url
from .errors import EncodingError
from .models import (
    CreateControlChannelInput,
    CreateControlChannelOutput,
    CreateDataChannelInput,
    CreateDataChannelOutput,
    DeleteChannelInput,
    DeleteChannelOutput,
)
from .schema import ChannelKind
from .signing import V4Signer
from .transport import SendFunc, Transport

logger = logging.getLogger(__name__)

T = TypeVar("T")


def new_request_id() -> str:
    return str(uuid.uuid4())


class MessageGatewayClient:
    """Creates and deletes control/data channels on the regional message gateway.

    Every call is a single signed request/response exchange; the client keeps
    no state besides its frozen config and injected collaborators, so one
    instance can be shared between threads.
    """

    def __init__(
            self,
            cfg: ClientConfig,
            *,
            send: SendFunc | None = None,
            id_factory: Callable[[], str] | None = None,
            host_resolver: HostResolver | None = None,
    ):
        self._cfg = cfg
        if host_resolver is None:
            host_resolver = fixed_host(cfg.endpoint_override) if cfg.endpoint_override else resolve_host
        self._resolve_host = host_resolver
        self._new_id = id_factory or new_request_id
        self._t: Transport | None = None
        if send is None:
            self._t = Transport(cfg)
            send = self._t.send
        self._send = send

    def close(self) -> None:
        if self._t is not None:
            self._t.close()

    def __enter__(self) -> MessageGatewayClient:
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # --- configuration ---
    def get_region(self) -> str:
        return self._cfg.region

    def get_v4_signer(self) -> V4Signer:
        return self._cfg.signer

    @property
    def schema_version(self) -> str:
        return self._cfg.schema_version

    # --- request factories ---
    def new_create_control_channel_input(self) -> CreateControlChannelInput:
        return CreateControlChannelInput(message_schema_version=self.schema_version, request_id=self._new_id())

    def new_create_data_channel_input(self, client_id: str | None = None) -> CreateDataChannelInput:
        return CreateDataChannelInput(
            message_schema_version=self.schema_version,
            request_id=self._new_id(),
            client_id=client_id or self._new_id(),
        )

    def new_delete_channel_input(self) -> DeleteChannelInput:
        return DeleteChannelInput(message_schema_version=self.schema_version, request_id=self._new_id())

    # --- API methods ---
    def create_control_channel(
            self,
            instance_id: str,
            request: CreateControlChannelInput | None = None,
    ) -> CreateControlChannelOutput:
        request = request or self.new_create_control_channel_input()
        return self._call(
            "POST", ChannelKind.CONTROL, instance_id, request, CreateControlChannelInput, CreateControlChannelOutput
        )

    def create_data_channel(
            self,
            session_id: str,
            request: CreateDataChannelInput | None = None,
            *,
            client_id: str | None = None,
    ) -> CreateDataChannelOutput:
        request = request or self.new_create_data_channel_input(client_id)
        return self._call(
            "POST", ChannelKind.DATA, session_id, request, CreateDataChannelInput, CreateDataChannelOutput
        )

    def delete_control_channel(
            self,
            instance_id: str,
            request: DeleteChannelInput | None = None,
    ) -> DeleteChannelOutput:
        request = request or self.new_delete_channel_input()
        return self._call(
            "DELETE", ChannelKind.CONTROL, instance_id, request, DeleteChannelInput, DeleteChannelOutput
        )

    def delete_data_channel(
            self,
            session_id: str,
            request: DeleteChannelInput | None = None,
    ) -> DeleteChannelOutput:
        request = request or self.new_delete_channel_input()
        return self._call(
            "DELETE", ChannelKind.DATA, session_id, request, DeleteChannelInput, DeleteChannelOutput
        )

    def _call(
            self,
            method: str,
            kind: ChannelKind,
            identifier: str,
            request,
            input_type: type,
            output_type: type[T],
    ) -> T:
        if not isinstance(request, input_type):
            raise EncodingError(f"expected {input_type.__name__}, got {type(request).__name__}")
        self._validate(request)
        url = resolve_url(kind, identifier, self._cfg.region, host_resolver=self._resolve_host)
        payload = codec.encode(request)
        logger.debug("%s %s request_id=%s", method, url, request.request_id)
        raw = self._send(payload, method, url, self._cfg.region, self._cfg.signer)
        return codec.decode(raw, output_type, supported_version=self.schema_version)

    def _validate(self, request) -> None:
        version = request.message_schema_version
        if version != self.schema_version:
            raise EncodingError(
                f"request schema version {version!r} "
                f"does not match client schema version {self.schema_version!r}"
            )
        if not str(request.request_id or "").strip():
            raise EncodingError("request id is required")
