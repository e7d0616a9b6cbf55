"""Resource-group correlator.

Merges two listings into one record per resource group:

- ``clRGinfo -c`` gives one line per (group, node) pair: group, state,
  node, startup/fallover/fallback policies.
- ``cllsres -c -g <group>`` gives the resources configured in the group,
  under a ``#`` header that names its columns.

The attribute listing is fetched once per group, the first time the
group appears in the status listing. Later lines for the same group only
add to its per-node status map.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from powerha_facts.identity import HostIdentity
from powerha_facts.models import ResourceGroup
from powerha_facts.parsing import COLON, field_at, iter_header_records, split_records, starts_with

logger = logging.getLogger(__name__)

ONLINE = "ONLINE"
RG_STATUS_FIELDS = 7
RG_STATUS_ERROR = starts_with("clRGinfo:")

# cllsres columns holding blank-separated lists
SPLIT_FIELDS: frozenset[str] = frozenset({
    "disk",
    "volume_group",
    "concurrent_volume_group",
    "filesystem",
    "export_filesystem",
    "shared_tape_resources",
    "aix_connections_services",
    "aix_fast_connect_services",
    "communication_links",
    "applications",
    "mount_filesystem",
    "service_label",
    "nfs_network",
    "node_priority_policy",
    "nodes",
    "gmd_rep_resource",
    "pprc_rep_resource",
    "ercmf_rep_resource",
    "sr_rep_resource",
    "tc_rep_resource",
    "genxd_rep_resource",
    "svcpprc_rep_resource",
    "gmvg_rep_resource",
    "primarynodes",
    "secondarynodes",
    "export_filesystem_v4",
    "stable_storage_path",
    "userdefined_resources",
    "raw_disk",
})

AttributeFetcher = Callable[[str], str | None]


def parse_attributes(text: str | None) -> dict[str, str | list[str]]:
    """Turn ``cllsres`` output into attribute name -> value.

    Names from :data:`SPLIT_FIELDS` become token lists; everything else
    stays a string. Later data lines overwrite earlier ones.
    """
    attributes: dict[str, str | list[str]] = {}
    for record in iter_header_records(text):
        for name, value in record.items():
            attributes[name] = value.split() if name in SPLIT_FIELDS else value
    return attributes


@dataclass
class ResourceGroupCorrelator:
    """Builds resource-group records and the local active-group list.

    *fetch_attributes* is called with a group name and returns the raw
    ``cllsres`` output for it, or None.
    """

    fetch_attributes: AttributeFetcher
    identity: HostIdentity
    groups: dict[str, ResourceGroup] = field(default_factory=dict)
    active_rgs: list[str] = field(default_factory=list)

    @property
    def any_rg_active(self) -> bool:
        return bool(self.active_rgs)

    def feed(self, fields: list[str]) -> None:
        """Process one status line."""
        fields = fields[:RG_STATUS_FIELDS]
        name = fields[0]
        state = field_at(fields, 1)
        node = field_at(fields, 2)

        group = self.groups.get(name)
        if group is None:
            group = ResourceGroup(
                type=field_at(fields, 3),
                online_where=field_at(fields, 4),
                failover_to=field_at(fields, 5),
                fallback_when=field_at(fields, 6),
            )
            group.attributes = parse_attributes(self.fetch_attributes(name))
            self.groups[name] = group
            logger.debug("Resource group %s: %d attributes", name, len(group.attributes))

        if node is not None:
            group.node_hash[node] = state

        if state == ONLINE and self.identity.matches(node):
            self.active_rgs.append(name)

    def correlate(self, text: str | None) -> dict[str, ResourceGroup]:
        """Process a full ``clRGinfo -c`` listing."""
        for fields in split_records(text, delimiter=COLON, skip=RG_STATUS_ERROR):
            self.feed(fields)
        return self.groups
