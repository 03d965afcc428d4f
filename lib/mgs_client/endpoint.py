from __future__ import annotations

import re
import urllib.parse
from typing import Callable

from .errors import ResolutionError
from .schema import ChannelKind

SERVICE_NAME = "ssmmessages"
API_VERSION = "v1"

_REGION_RE = re.compile(r"^[a-z]{2}(-[a-z]+)+-\d+$")

HostResolver = Callable[[str], str]


_PARTITION_SUFFIXES = (
    ("cn-", "amazonaws.com.cn"),
    ("us-isob-", "sc2s.sgov.gov"),
    ("us-iso-", "c2s.ic.gov"),
)


def domain_suffix(region: str) -> str:
    """DNS suffix of the partition ``region`` belongs to.

    Covers the commercial, GovCloud, China and US ISO/ISOB partitions; anything
    else is assumed to be commercial. Use an endpoint override for the rest.
    """
    for prefix, suffix in _PARTITION_SUFFIXES:
        if region.startswith(prefix):
            return suffix
    return "amazonaws.com"


def resolve_host(region: str) -> str:
    value = (region or "").strip()
    if not value:
        raise ResolutionError("region is required to resolve the message gateway host")
    if not _REGION_RE.match(value):
        raise ResolutionError(f"unknown region {value!r}")
    return f"{SERVICE_NAME}.{value}.{domain_suffix(value)}"


def normalize_host(value: str | None) -> str:
    """Reduce an endpoint override to ``host[:port]``.

    Accepts a bare host, ``host:port``, or a URL; scheme, path and surrounding
    whitespace are dropped. Returns ``""`` when nothing usable is left, e.g. for
    ``"/"`` or a host containing whitespace.
    """
    text = str(value or "").strip()
    if "://" not in text:
        text = f"//{text}"
    try:
        parsed = urllib.parse.urlsplit(text)
    except ValueError:
        return ""
    host = parsed.netloc.rsplit("@", 1)[-1]
    if not host or any(ch.isspace() for ch in host):
        return ""
    return host.lower()


def fixed_host(value: str) -> HostResolver:
    host = normalize_host(value)
    if not host:
        raise ResolutionError(f"invalid endpoint override {value!r}")
    return lambda _region: host


def resolve_url(
        kind: ChannelKind,
        identifier: str,
        region: str,
        *,
        host_resolver: HostResolver = resolve_host,
) -> str:
    if not (identifier or "").strip():
        raise ResolutionError(f"{kind.value} identifier is required")
    host = host_resolver(region)
    if not host:
        raise ResolutionError(f"failed to get host address for region {region!r}")
    return f"https://{host}/{API_VERSION}/{kind.value}/{identifier}"
