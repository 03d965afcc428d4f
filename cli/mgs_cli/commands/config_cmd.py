from __future__ import annotations

import typer

from .. import console
from ..config import ProfileConfig, config_path, load_config, save_config

app = typer.Typer(help="Manage local CLI settings (~/.config/mgs/config.toml).")


@app.command("show")
def show_config():
    cfg = load_config()
    console.print(f"region={cfg.region or '(empty)'} endpoint={cfg.endpoint or '(default)'} timeout_s={cfg.timeout_s}")
    for name, prof in sorted(cfg.profiles.items()):
        console.print(
            f"[{name}] region={prof.region or '-'} endpoint={prof.endpoint or '-'} timeout_s={prof.timeout_s or '-'}",
            markup=False,
        )
    console.info(f"Config file: {config_path()}")


@app.command("set")
def set_config(
        region: str | None = typer.Option(None, "--region", help="Default region, e.g. us-east-1."),
        endpoint: str | None = typer.Option(None, "--endpoint", help="Gateway host override. Empty string clears it."),
        timeout_s: float | None = typer.Option(None, "--timeout", min=0.1, help="Request timeout in seconds."),
        profile: str | None = typer.Option(None, "--profile", help="Write to this profile instead of the defaults."),
):
    cfg = load_config()
    target = cfg
    if profile:
        target = cfg.profiles.setdefault(profile, ProfileConfig())

    if region is not None:
        target.region = region.strip() or (None if profile else "")
    if endpoint is not None:
        target.endpoint = endpoint.strip() or None
    if timeout_s is not None:
        target.timeout_s = timeout_s

    saved = save_config(cfg)
    console.ok(f"Config updated: {saved}")
