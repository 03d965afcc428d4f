from __future__ import annotations

from importlib import metadata

from mgs_client import MessageGatewayClient, V4Signer
from mgs_client.config_types import ClientConfig
from mgs_client.endpoint import normalize_host

from .config import AppConfig, apply_profile, load_credentials, resolve_region


class ClientSetupError(Exception):
    """Local configuration is not enough to build a client."""


def cli_version() -> str:
    try:
        return metadata.version("mgs-client")
    except metadata.PackageNotFoundError:
        return "0.0.0"


def make_client(
    cfg: AppConfig,
    *,
    profile: str | None,
    region_override: str | None,
) -> MessageGatewayClient:
    effective_cfg = apply_profile(cfg, profile)
    region = resolve_region(effective_cfg, region_override)
    if not region:
        raise ClientSetupError("Region is not set. Use --region, MGS_REGION or `mgs config set --region`.")
    creds = load_credentials()
    if creds is None:
        raise ClientSetupError("AWS credentials not found. Set AWS_ACCESS_KEY_ID and AWS_SECRET_ACCESS_KEY.")
    if effective_cfg.endpoint and not normalize_host(effective_cfg.endpoint):
        raise ClientSetupError(
            f"Invalid endpoint override {effective_cfg.endpoint!r}. Fix it with `mgs config set --endpoint`."
        )

    return MessageGatewayClient(
        ClientConfig(
            region=region,
            signer=V4Signer.from_static(creds.access_key, creds.secret_key, creds.token),
            timeout_s=effective_cfg.timeout_s,
            endpoint_override=effective_cfg.endpoint,
            user_agent=f"mgs-cli/{cli_version()}",
        )
    )
