from __future__ import annotations

import dataclasses
from typing import Any, Callable

import typer
from mgs_client import ApiError, EncodingError, MgsClientError, MessageGatewayClient, ResolutionError

from .. import console
from ..config import load_config
from ..http import ClientSetupError, make_client

app = typer.Typer(help="Create and delete message gateway channels.")

REGION_HELP = "Override region (else MGS_REGION/AWS_REGION, then config)."
PROFILE_HELP = "Config profile to use."


def _open_client(region: str | None, profile: str | None) -> MessageGatewayClient:
    cfg = load_config()
    try:
        return make_client(cfg, profile=profile, region_override=region)
    except (ClientSetupError, MgsClientError) as exc:
        console.err(str(exc))
        raise typer.Exit(code=2)


def _run(
        region: str | None,
        profile: str | None,
        call: Callable[[MessageGatewayClient], Any],
) -> dict[str, Any]:
    client = _open_client(region, profile)
    try:
        out = call(client)
    except (ResolutionError, EncodingError) as exc:
        console.err(str(exc))
        raise typer.Exit(code=2)
    except ApiError as exc:
        console.err(f"{exc} ({exc.status_code})")
        if exc.details:
            console.info(exc.details)
        raise typer.Exit(code=1)
    except MgsClientError as exc:
        console.err(str(exc))
        raise typer.Exit(code=1)
    finally:
        client.close()
    return dataclasses.asdict(out)


@app.command("create-control")
def create_control(
        instance_id: str = typer.Argument(..., help="Managed instance id, e.g. i-0123456789abcdef0."),
        region: str | None = typer.Option(None, "--region", help=REGION_HELP),
        profile: str | None = typer.Option(None, "--profile", help=PROFILE_HELP),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    data = _run(region, profile, lambda c: c.create_control_channel(instance_id))
    if json_out:
        console.print_json(data)
        return
    console.ok(f"Control channel token issued for {instance_id}")
    console.print(data["token_value"], markup=False, soft_wrap=True)


@app.command("create-data")
def create_data(
        session_id: str = typer.Argument(..., help="Session id."),
        client_id: str | None = typer.Option(None, "--client-id", help="Client id (UUID). Generated when omitted."),
        region: str | None = typer.Option(None, "--region", help=REGION_HELP),
        profile: str | None = typer.Option(None, "--profile", help=PROFILE_HELP),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    data = _run(region, profile, lambda c: c.create_data_channel(session_id, client_id=client_id))
    if json_out:
        console.print_json(data)
        return
    console.ok(f"Data channel token issued for {session_id}")
    console.print(data["token_value"], markup=False, soft_wrap=True)


@app.command("delete-control")
def delete_control(
        instance_id: str = typer.Argument(..., help="Managed instance id."),
        region: str | None = typer.Option(None, "--region", help=REGION_HELP),
        profile: str | None = typer.Option(None, "--profile", help=PROFILE_HELP),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    data = _run(region, profile, lambda c: c.delete_control_channel(instance_id))
    if json_out:
        console.print_json(data)
        return
    console.ok(f"Control channel deleted: {data['channel_id']}")


@app.command("delete-data")
def delete_data(
        session_id: str = typer.Argument(..., help="Session id."),
        region: str | None = typer.Option(None, "--region", help=REGION_HELP),
        profile: str | None = typer.Option(None, "--profile", help=PROFILE_HELP),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    data = _run(region, profile, lambda c: c.delete_data_channel(session_id))
    if json_out:
        console.print_json(data)
        return
    console.ok(f"Data channel deleted: {data['channel_id']}")
