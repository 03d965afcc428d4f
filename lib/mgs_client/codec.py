from __future__ import annotations

import dataclasses
import logging
import xml.etree.ElementTree as ET
from typing import Any, TypeVar

from .errors import DecodingError, EncodingError
from .models import REQUEST_TYPES, RESPONSE_TYPES
from .schema import MESSAGE_SCHEMA_VERSION, check_compatible

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _wire_fields(cls) -> list[dataclasses.Field]:
    return [f for f in dataclasses.fields(cls) if "wire" in f.metadata]


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def encode(message: Any) -> bytes:
    """Serialize a request (or response, for stubbing the gateway) to XML bytes.

    The root element is the model's type name and each field becomes a child
    element named after its wire name. ``None`` fields of a response are
    omitted; every field of a request is required and must be a non-empty
    string.
    """
    cls = type(message)
    if cls not in REQUEST_TYPES and cls not in RESPONSE_TYPES:
        raise EncodingError(f"cannot encode {cls.__name__}: not a gateway message")
    is_request = cls in REQUEST_TYPES

    root = ET.Element(cls.__name__)
    for f in _wire_fields(cls):
        value = getattr(message, f.name)
        if value is None and not is_request:
            continue
        if not isinstance(value, str):
            raise EncodingError(f"{cls.__name__}.{f.metadata['wire']} must be a string, got {type(value).__name__}")
        if is_request and f.metadata["required"] and not value.strip():
            raise EncodingError(f"{cls.__name__}.{f.metadata['wire']} is required")
        ET.SubElement(root, f.metadata["wire"]).text = value
    return ET.tostring(root, encoding="utf-8")


def decode(payload: bytes, output_type: type[T], *, supported_version: str = MESSAGE_SCHEMA_VERSION) -> T:
    if output_type not in RESPONSE_TYPES:
        raise DecodingError(f"cannot decode into {output_type.__name__}: not a gateway response")
    if not payload or not payload.strip():
        raise DecodingError(f"empty {output_type.__name__} response")
    try:
        root = ET.fromstring(payload)
    except ET.ParseError as e:
        raise DecodingError(f"malformed {output_type.__name__} response: {e}") from e

    if _local_name(root.tag) != output_type.__name__:
        logger.debug("decoding <%s> as %s", root.tag, output_type.__name__)

    # first occurrence wins; namespaces are ignored on both root and children
    children: dict[str, str] = {}
    for child in root:
        children.setdefault(_local_name(child.tag), child.text or "")

    values: dict[str, str | None] = {}
    for f in _wire_fields(output_type):
        wire = f.metadata["wire"]
        if f.metadata["required"] and wire not in children:
            raise DecodingError(f"{output_type.__name__} response is missing {wire}")
        values[f.name] = children.get(wire)

    check_compatible(values.get("message_schema_version"), supported_version)
    return output_type(**values)
