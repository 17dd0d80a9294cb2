"""Typer CLI for inspecting and producing astarte service info payloads."""

from __future__ import annotations

from pathlib import Path

import typer

from astarte_srvinfo.domain import AstarteMod
from astarte_srvinfo.serviceinfo import (
    ServiceInfo,
    ServiceInfoError,
    ServiceInfoKv,
    parse_astarte_mod,
    to_service_info,
)

from .deps import get_settings

app = typer.Typer(help="Astarte FDO service info command-line interface")


def _parse_extra(value: str) -> ServiceInfoKv:
    key, sep, text = value.partition("=")
    if not sep or ":" not in key:
        raise typer.BadParameter("extra entries must look like module:field=value")
    return ServiceInfoKv.encode(key, text)


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved application settings."""

    settings = get_settings()
    typer.echo("Environment:\t" + settings.environment)
    typer.echo("Log level:\t" + settings.log_level)
    typer.echo(f"Strict base URL:\t{settings.strict_base_url}")


@app.command("inspect")
def inspect_file(
    path: Path,
    show_secret: bool = typer.Option(False, help="Print the credential secret in clear"),
) -> None:
    """Parse the astarte module out of a CBOR service info file."""

    settings = get_settings()
    try:
        data = path.read_bytes()
    except OSError as exc:
        typer.echo(f"Unable to read {path}: {exc.strerror}")
        raise typer.Exit(code=1) from exc

    try:
        service_info = ServiceInfo.from_cbor(data)
        record = parse_astarte_mod(service_info, settings=settings)
    except ServiceInfoError as exc:
        typer.echo(f"Invalid service info ({exc.kind}): {exc}")
        raise typer.Exit(code=1) from exc

    secret = record.secret.get_secret_value() if show_secret else str(record.secret)
    typer.echo(f"Entries:\t{len(service_info)}")
    typer.echo("Realm:\t" + record.realm)
    typer.echo("Secret:\t" + secret)
    typer.echo("Base URL:\t" + record.base_url)
    typer.echo("Device ID:\t" + record.device_id)


@app.command("encode")
def encode(
    path: Path,
    realm: str = typer.Option(...),
    secret: str = typer.Option(...),
    base_url: str = typer.Option(...),
    device_id: str = typer.Option(...),
    active: bool = typer.Option(True, "--active/--inactive"),
    extra: list[str] | None = typer.Option(
        None, help="Additional module:field=value text entries, may be repeated"
    ),
) -> None:
    """Write a CBOR service info file carrying the astarte module."""

    record = AstarteMod(realm=realm, secret=secret, base_url=base_url, device_id=device_id)
    extra_entries = tuple(_parse_extra(item) for item in extra or ())

    module_entries = to_service_info(record, active=active).entries
    service_info = ServiceInfo(extra_entries + module_entries)
    path.write_bytes(service_info.to_cbor())
    typer.echo(f"Wrote {len(service_info)} entries to {path}")
