"""Command catalogue for the PowerHA and AIX utilities the collector reads.

Maps a section name to an argv template. Templates are expanded against
a ``CollectorConfig`` and optional per-call params (the resource-group
name for ``rg-attributes``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from powerha_facts.config import CollectorConfig


@dataclass
class CommandTemplate:
    """Maps a section to a command line."""

    program: str
    args: list[str] = field(default_factory=list)
    description: str = ""


PACKAGE_VERSION = "package-version"
CLUSTER = "cluster"
SNMP_COMMUNITY = "snmp-community"
DAEMONS = "daemons"
SITES = "sites"
NETWORKS = "networks"
NODES = "nodes"
RG_STATUS = "rg-status"
RG_ATTRIBUTES = "rg-attributes"
APPLICATIONS = "applications"


COMMANDS: dict[str, CommandTemplate] = {
    PACKAGE_VERSION: CommandTemplate(
        program="{lslpp_path}",
        args=["-lc", "{package}"],
        description="Installed fileset level",
    ),
    CLUSTER: CommandTemplate(
        program="{utilities_dir}/cllsclstr",
        args=["-c"],
        description="Cluster id, name and repository disk",
    ),
    SNMP_COMMUNITY: CommandTemplate(
        program="{utilities_dir}/cl_community_name",
        description="SNMP community used for status queries",
    ),
    DAEMONS: CommandTemplate(
        program="{lssrc_path}",
        args=["-g", "cluster"],
        description="Cluster subsystems known to the SRC",
    ),
    SITES: CommandTemplate(
        program="{utilities_dir}/cllssite",
        args=["-c"],
        description="Site definitions",
    ),
    NETWORKS: CommandTemplate(
        program="{utilities_dir}/cllsnw",
        args=["-c"],
        description="Network definitions",
    ),
    NODES: CommandTemplate(
        program="{utilities_dir}/cllsnode",
        args=["-c"],
        description="Node and interface definitions",
    ),
    RG_STATUS: CommandTemplate(
        program="{utilities_dir}/clRGinfo",
        args=["-c"],
        description="Resource group status per node",
    ),
    RG_ATTRIBUTES: CommandTemplate(
        program="{utilities_dir}/cllsres",
        args=["-c", "-g", "{group}"],
        description="Resources configured in one resource group",
    ),
    APPLICATIONS: CommandTemplate(
        program="{utilities_dir}/cllsserv",
        args=["-c"],
        description="Application controllers",
    ),
}


def build_command_args(
    section: str,
    config: CollectorConfig,
    params: dict[str, Any] | None = None,
) -> list[str]:
    """Build the argv for *section* from its template and the config."""
    template = COMMANDS[section]
    values: dict[str, Any] = {
        "utilities_dir": config.utilities_dir.rstrip("/"),
        "lslpp_path": config.lslpp_path,
        "lssrc_path": config.lssrc_path,
        "package": config.package,
    }
    values.update(params or {})

    args = [template.program.format(**values)]
    for arg in template.args:
        args.append(arg.format(**values))
    return args
