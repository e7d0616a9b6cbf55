"""powerha-facts CLI — command-line interface for the PowerHA collector.

Commands:
    collect     Print a snapshot of the local cluster node
    commands    Show the command lines the collector would run
"""

from __future__ import annotations

import dataclasses
import json
import logging
import sys
from typing import Any

import click
import yaml

from powerha_facts import __version__
from powerha_facts.collector import collect as collect_facts
from powerha_facts.commands import COMMANDS, RG_ATTRIBUTES, build_command_args
from powerha_facts.config import CollectorConfig, load_config
from powerha_facts.identity import HostIdentity
from powerha_facts.runner.recorded import RecordingError

DEFAULT_FACT_NAME = "aix_powerha"


def _load_cfg(config_path: str | None) -> CollectorConfig:
    """Load an explicit config, or auto-discover one (never error)."""
    if config_path is not None:
        try:
            return load_config(config_path)
        except (FileNotFoundError, ValueError) as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)
    try:
        return load_config()
    except Exception:
        return CollectorConfig()


def _render(data: dict[str, Any], output_format: str) -> str:
    if output_format == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False).rstrip()
    return json.dumps(data, indent=2)


# --- Root group ---


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", count=True, help="Log to stderr (-vv for debug)")
def cli(verbose: int) -> None:
    """powerha-facts: structured facts about a PowerHA cluster."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG if verbose > 1 else logging.INFO,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )


# --- collect command ---


@cli.command()
@click.option("--config", "config_path", default=None, help="Path to powerha-facts.yaml")
@click.option("--recording", default=None, help="Replay command output from a YAML recording")
@click.option("--hostname", default=None, help="Short host name of this node")
@click.option("--fqdn", default=None, help="Fully qualified name of this node")
@click.option("--timeout", type=float, default=None, help="Per-command timeout in seconds")
@click.option(
    "--format", "output_format",
    type=click.Choice(["json", "yaml"]), default="json",
    help="Output format",
)
@click.option(
    "--fact-name", default=DEFAULT_FACT_NAME,
    help="Key the snapshot is published under",
)
@click.option("--no-wrap", is_flag=True, help="Print the bare snapshot without the fact key")
def collect(
    config_path: str | None,
    recording: str | None,
    hostname: str | None,
    fqdn: str | None,
    timeout: float | None,
    output_format: str,
    fact_name: str,
    no_wrap: bool,
) -> None:
    """Collect and print a snapshot of the local cluster node."""
    cfg = _load_cfg(config_path)
    overrides = {
        "recording": recording,
        "hostname": hostname,
        "fqdn": fqdn,
        "timeout": timeout,
    }
    cfg = dataclasses.replace(cfg, **{k: v for k, v in overrides.items() if v is not None})

    try:
        facts = collect_facts(
            config=cfg,
            identity=HostIdentity.local(cfg.hostname, cfg.fqdn),
        )
    except RecordingError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    data = facts.to_facts()
    if not no_wrap:
        data = {fact_name: data}
    click.echo(_render(data, output_format))


# --- commands command ---


@cli.command("commands")
@click.option("--config", "config_path", default=None, help="Path to powerha-facts.yaml")
@click.option(
    "--group", default="<group>",
    help="Resource group name substituted into the attribute listing",
)
def list_commands(config_path: str | None, group: str) -> None:
    """Show the command lines the collector would run."""
    cfg = _load_cfg(config_path)
    for section, template in COMMANDS.items():
        params = {"group": group} if section == RG_ATTRIBUTES else None
        args = build_command_args(section, cfg, params)
        click.echo(f"  {section:<16} {' '.join(args)}")
        if template.description:
            click.echo(click.style(f"  {'':<16} {template.description}", dim=True))
