"""Command-line interface for wakelan."""

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Optional

import click

from wakelan import __version__

if TYPE_CHECKING:
    from wakelan.config.loader import Host

DEFAULT_CONFIG = Path.home() / ".config" / "wakelan" / "config.yaml"


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )


def _load_hosts(config: str) -> list["Host"]:
    from wakelan.config.loader import hosts_from_config, load_config, validate_config

    path = Path(config)
    if not path.exists():
        click.echo(f"Config file not found: {path}", err=True)
        sys.exit(1)
    raw = load_config(path)
    if not raw:
        click.echo("Config file is empty.", err=True)
        sys.exit(1)
    errors = validate_config(raw)
    if errors:
        click.echo("Config validation errors:", err=True)
        for e in errors:
            click.echo(f"  • {e}", err=True)
        sys.exit(1)
    return hosts_from_config(raw)


# ── Root group ────────────────────────────────────────────────────────────────


@click.group()
@click.version_option(version=__version__, prog_name="wakelan")
@click.option(
    "--config",
    "-c",
    default=str(DEFAULT_CONFIG),
    envvar="WAKELAN_CONFIG",
    show_default=True,
    help="Path to wakelan config.yaml",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config: str, verbose: bool) -> None:
    """wakelan — send Wake-on-LAN magic packets."""
    _setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["config"] = config


# ── wake command ─────────────────────────────────────────────────────────────


@main.command()
@click.argument("host_name", required=False)
@click.option("--mac", "-m", help="MAC address to wake")
@click.pass_context
def wake(ctx: click.Context, host_name: Optional[str], mac: Optional[str]) -> None:
    """Broadcast a magic packet to a configured host or a raw --mac address."""
    if (host_name is None) == (mac is None):
        raise click.UsageError("Give either a HOST_NAME or --mac, not both.")

    if mac is None:
        hosts = _load_hosts(ctx.obj["config"])
        match = next((h for h in hosts if h.name == host_name), None)
        if match is None:
            click.echo(f"Host '{host_name}' not found in config.", err=True)
            sys.exit(1)
        mac = match.mac_address

    from wakelan.core.address import ParseError
    from wakelan.core.sender import BROADCAST_ADDRESS
    from wakelan.core.wol import wake as do_wake

    try:
        do_wake(mac)
    except ParseError as exc:
        click.echo(f"unable to create magic packet: {exc}", err=True)
        sys.exit(1)
    except OSError as exc:
        click.echo(f"unable to send packet: {exc}", err=True)
        sys.exit(2)
    click.echo(f"packet sent to {BROADCAST_ADDRESS} with MAC {mac}")


# ── check command ─────────────────────────────────────────────────────────────


@main.command()
@click.argument("mac")
def check(mac: str) -> None:
    """Validate a MAC address and print its canonical form."""
    from wakelan.core.address import ParseError, format_eui48, parse_eui48

    try:
        value = parse_eui48(mac)
    except ParseError as exc:
        click.echo(f"invalid MAC address '{mac}': {exc}", err=True)
        sys.exit(1)
    click.echo(format_eui48(value))


# ── hosts group ───────────────────────────────────────────────────────────────


@main.group()
def hosts() -> None:
    """Inspect configured hosts."""


@hosts.command("list")
@click.pass_context
def hosts_list(ctx: click.Context) -> None:
    """List all configured hosts."""
    host_objs = _load_hosts(ctx.obj["config"])
    click.echo(f"{'NAME':<24} {'MAC ADDRESS':<20} {'DESCRIPTION'}")
    click.echo("─" * 70)
    for h in host_objs:
        click.echo(f"{h.name:<24} {h.mac_address:<20} {h.description}")


if __name__ == "__main__":
    main()
