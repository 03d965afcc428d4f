from __future__ import annotations

import enum
import logging
import re

from .errors import SchemaMismatchError

logger = logging.getLogger(__name__)

MESSAGE_SCHEMA_VERSION = "1.0"

_VERSION_RE = re.compile(r"^(\d+)\.(\d+)(?:\.(\d+))?$")


class ChannelKind(enum.Enum):
    CONTROL = "control-channel"
    DATA = "data-channel"

    @classmethod
    def parse(cls, value: str) -> ChannelKind:
        text = (value or "").strip().lower().replace("_", "-")
        for kind in cls:
            if text in (kind.value, kind.name.lower()):
                return kind
        raise ValueError(f"unknown channel kind: {value!r}")


def parse_schema_version(text: str | None) -> tuple[int, int, int] | None:
    m = _VERSION_RE.match((text or "").strip())
    if not m:
        return None
    return int(m.group(1)), int(m.group(2)), int(m.group(3) or 0)


def check_compatible(received: str | None, supported: str) -> None:
    """Raise SchemaMismatchError when ``received`` has a different major version.

    Minor/patch drift and versions that cannot be parsed are logged and let
    through; the gateway echoes the version but older agents never enforced it.
    """
    want = parse_schema_version(supported)
    got = parse_schema_version(received)
    if want is None or got is None:
        logger.warning("cannot compare message schema versions: received=%r supported=%r", received, supported)
        return
    if got[0] != want[0]:
        raise SchemaMismatchError(supported, str(received))
    if got != want:
        logger.warning("message schema version %s differs from supported %s", received, supported)
