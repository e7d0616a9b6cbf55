"""Section builders: one PowerHA listing in, one part of the snapshot out.

The builders are independent of each other. Where a listing holds more
than one line for a singleton value (cluster identity, SNMP community,
package level) the last line wins.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from powerha_facts.identity import HostIdentity
from powerha_facts.models import Application, Architecture, Interface, Network, Site
from powerha_facts.parsing import field_at, split_records, starts_with

logger = logging.getLogger(__name__)

SERVICE_ROLE = "service"
# participant, role, interface, type, visibility, value
NODE_GROUP_WIDTH = 6
# service groups carry one extra trailing field
SERVICE_GROUP_WIDTH = 7

DAEMON_HEADER = "Subsystem"


class ClusterIdentity(NamedTuple):
    cluster_id: str | None = None
    cluster_name: str | None = None
    repo_disk: str | None = None


def parse_package_version(text: str | None) -> str | None:
    """Return the fileset level from ``lslpp -lc`` output, if any."""
    version = None
    for fields in split_records(text):
        version = field_at(fields, 2)
    return version or None


def build_cluster_identity(text: str | None, architecture: Architecture) -> ClusterIdentity:
    identity = ClusterIdentity()
    for fields in split_records(text):
        identity = ClusterIdentity(
            cluster_id=field_at(fields, 0),
            cluster_name=field_at(fields, 1),
            repo_disk=field_at(fields, 4) if architecture == Architecture.CAA else None,
        )
    return identity


def build_snmp_community(text: str | None) -> str | None:
    community = None
    for fields in split_records(text, delimiter=None):
        community = field_at(fields, 1)
    return community


def build_daemons(text: str | None) -> dict[str, str | None]:
    """Map each cluster subsystem to its PID.

    ``lssrc`` leaves the PID column empty for an inoperative subsystem,
    so such lines only have three fields.
    """
    daemons: dict[str, str | None] = {}
    for fields in split_records(text, delimiter=None, skip=starts_with(DAEMON_HEADER)):
        pid = fields[2] if len(fields) >= 4 else None
        daemons[fields[0]] = pid
    return daemons


def build_sites(text: str | None) -> dict[str, Site]:
    sites: dict[str, Site] = {}
    for fields in split_records(text):
        sites[fields[0]] = Site(
            nodes=(field_at(fields, 1) or "").split(),
            dominance=field_at(fields, 2),
            protection=field_at(fields, 3),
            priority=field_at(fields, 4),
            hmcs=(field_at(fields, 5) or "").split(),
        )
    return sites


def build_networks(text: str | None) -> dict[str, Network]:
    networks: dict[str, Network] = {}
    for fields in split_records(text):
        # The remaining columns don't line up with cllsnw's own header;
        # the same data is available from cllsnode.
        networks[fields[0]] = Network(
            attributes=field_at(fields, 1),
            alias=field_at(fields, 2),
            monitor_method=field_at(fields, 3),
        )
    return networks


def build_nodes(text: str | None, identity: HostIdentity) -> dict[str, dict[str, Interface]]:
    """Build node -> interface -> role -> participant -> value.

    After the node name, each ``cllsnode -c`` line packs interface groups
    of six fields, or seven when the role is ``service``. A participant
    naming this host resolves ``identity.node_name``.
    """
    nodes: dict[str, dict[str, Interface]] = {}
    for fields in split_records(text):
        node = fields[0]
        interfaces = nodes.setdefault(node, {})
        pos = 1
        while pos < len(fields):
            participant = fields[pos]
            role = field_at(fields, pos + 1)
            if_name = field_at(fields, pos + 2)
            if role is None or if_name is None:
                logger.debug("Truncated interface group on node %s", node)
                break

            interface = interfaces.get(if_name)
            if interface is None:
                interface = Interface(
                    if_type=field_at(fields, pos + 3),
                    visibility=field_at(fields, pos + 4),
                )
                interfaces[if_name] = interface
            interface.roles.setdefault(role, {})[participant] = field_at(fields, pos + 5)

            if identity.is_host(participant):
                identity.node_name = node

            pos += SERVICE_GROUP_WIDTH if role == SERVICE_ROLE else NODE_GROUP_WIDTH
    return nodes


def build_applications(text: str | None, architecture: Architecture) -> dict[str, Application]:
    applications: dict[str, Application] = {}
    caa = architecture == Architecture.CAA
    for fields in split_records(text):
        applications[fields[0]] = Application(
            start_script=field_at(fields, 1),
            stop_script=field_at(fields, 2),
            fore_back=field_at(fields, 3) if caa else None,
            monitor=field_at(fields, 4) if caa else None,
        )
    return applications
