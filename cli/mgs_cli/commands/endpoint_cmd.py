from __future__ import annotations

import typer
from mgs_client import ChannelKind, ResolutionError
from mgs_client.endpoint import fixed_host, resolve_host, resolve_url

from .. import console
from ..config import apply_profile, load_config, resolve_region


def endpoint(
        kind: str = typer.Argument(..., help="Channel kind: control or data."),
        identifier: str = typer.Argument(..., help="Instance id (control) or session id (data)."),
        region: str | None = typer.Option(None, "--region", help="Override region."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
):
    """Print the gateway URL a channel call would use."""
    try:
        channel_kind = ChannelKind.parse(kind)
    except ValueError as exc:
        console.err(str(exc))
        raise typer.Exit(code=2)

    cfg = apply_profile(load_config(), profile)
    try:
        resolver = fixed_host(cfg.endpoint) if cfg.endpoint else resolve_host
        url = resolve_url(channel_kind, identifier, resolve_region(cfg, region), host_resolver=resolver)
    except ResolutionError as exc:
        console.err(str(exc))
        raise typer.Exit(code=2)
    console.print(url, markup=False, soft_wrap=True)
