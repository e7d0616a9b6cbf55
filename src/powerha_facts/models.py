"""Data models for a PowerHA cluster snapshot.

Defines the schemas for:
- Cluster identity and architecture
- Sites, networks and nodes (static topology)
- Resource groups and their per-node status (runtime state)
- Application controllers
"""

from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, Field

# --- Enums ---


class Architecture(enum.StrEnum):
    RSCT = "RSCT"
    CAA = "CAA"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def from_version(cls, version: str) -> Architecture:
        """Derive the membership layer from the PowerHA major version."""
        if version.startswith("6"):
            return cls.RSCT
        if version.startswith("7"):
            return cls.CAA
        return cls.UNKNOWN


# --- Topology ---


class Site(BaseModel):
    """A named group of nodes used for site-aware placement."""

    nodes: list[str] = Field(default_factory=list)
    dominance: str | None = None
    protection: str | None = None
    priority: str | None = None
    hmcs: list[str] = Field(default_factory=list)


class Network(BaseModel):
    attributes: str | None = None
    alias: str | None = None
    monitor_method: str | None = None


class Interface(BaseModel):
    """One interface on a node.

    ``roles`` maps role (``boot``, ``service``, ...) to participant
    identity to value (usually an IP label or address).
    """

    if_type: str | None = None
    visibility: str | None = None
    roles: dict[str, dict[str, str | None]] = Field(default_factory=dict)


# --- Runtime state ---


class ResourceGroup(BaseModel):
    """A resource group merged from the status and attribute listings."""

    type: str | None = None
    online_where: str | None = None
    failover_to: str | None = None
    fallback_when: str | None = None
    node_hash: dict[str, str | None] = Field(default_factory=dict)
    attributes: dict[str, str | list[str]] = Field(default_factory=dict)

    def to_facts(self) -> dict[str, Any]:
        """Flatten attributes into the record.

        A cllsres column sharing a name with a status field replaces it.
        """
        facts: dict[str, Any] = self.model_dump(exclude={"attributes"})
        facts.update(self.attributes)
        return facts


class Application(BaseModel):
    start_script: str | None = None
    stop_script: str | None = None
    # CAA only
    fore_back: str | None = None
    monitor: str | None = None


# --- Snapshot ---


class ClusterFacts(BaseModel):
    """Everything the collector learned about the local cluster.

    When ``installed`` is false no other field carries data.
    """

    installed: bool = False
    version: str | None = None
    architecture: Architecture | None = None
    cluster_id: str | None = None
    cluster_name: str | None = None
    node_name: str | None = None
    repo_disk: str | None = None
    snmp_community: str | None = None
    any_rg_active: bool = False
    active_rgs: list[str] = Field(default_factory=list)
    daemons: dict[str, str | None] = Field(default_factory=dict)
    sites: dict[str, Site] = Field(default_factory=dict)
    networks: dict[str, Network] = Field(default_factory=dict)
    nodes: dict[str, dict[str, Interface]] = Field(default_factory=dict)
    resource_groups: dict[str, ResourceGroup] = Field(default_factory=dict)
    applications: dict[str, Application] = Field(default_factory=dict)

    @classmethod
    def not_installed(cls) -> ClusterFacts:
        return cls(installed=False)

    def to_facts(self) -> dict[str, Any]:
        """Return the plain-dict view handed to inventory consumers."""
        if not self.installed:
            return {"installed": False}
        facts = self.model_dump(mode="json", exclude={"resource_groups"})
        facts["resource_groups"] = {
            name: rg.to_facts() for name, rg in self.resource_groups.items()
        }
        return facts
