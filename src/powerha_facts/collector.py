"""Top-level collector: runs the PowerHA utilities and builds ClusterFacts.

Usage::

    from powerha_facts.collector import collect

    facts = collect()
    if facts.installed:
        print(facts.cluster_name, facts.active_rgs)

Every call runs the commands afresh; nothing is cached between calls.
"""

from __future__ import annotations

import logging
from typing import Any

from powerha_facts import commands
from powerha_facts.commands import build_command_args
from powerha_facts.config import CollectorConfig
from powerha_facts.identity import HostIdentity
from powerha_facts.models import Architecture, ClusterFacts
from powerha_facts.resource_groups import ResourceGroupCorrelator
from powerha_facts.runner.command import CommandRunner, SubprocessRunner
from powerha_facts.runner.recorded import load_recording
from powerha_facts.sections import (
    build_applications,
    build_cluster_identity,
    build_daemons,
    build_networks,
    build_nodes,
    build_sites,
    build_snmp_community,
    parse_package_version,
)

logger = logging.getLogger(__name__)


class Collector:
    """Runs each PowerHA listing through its section builder.

    Commands are issued one at a time, in a fixed order. A listing that
    comes back empty leaves its section at the default value.
    """

    def __init__(
        self,
        runner: CommandRunner,
        config: CollectorConfig | None = None,
        identity: HostIdentity | None = None,
    ) -> None:
        self._runner = runner
        self._config = config or CollectorConfig()
        self._identity = identity

    def _run(self, section: str, params: dict[str, Any] | None = None) -> str | None:
        args = build_command_args(section, self._config, params)
        output = self._runner.run(args)
        if output is None:
            logger.debug("No output for %s", section)
        return output

    def collect(self) -> ClusterFacts:
        version = parse_package_version(self._run(commands.PACKAGE_VERSION))
        if version is None:
            logger.info("PowerHA fileset %s is not installed", self._config.package)
            return ClusterFacts.not_installed()

        identity = self._identity or HostIdentity.local(self._config.hostname, self._config.fqdn)
        # never leak a node name resolved by an earlier collection
        identity = HostIdentity(hostname=identity.hostname, fqdn=identity.fqdn)

        architecture = Architecture.from_version(version)
        facts = ClusterFacts(installed=True, version=version, architecture=architecture)

        cluster = build_cluster_identity(self._run(commands.CLUSTER), architecture)
        facts.cluster_id = cluster.cluster_id
        facts.cluster_name = cluster.cluster_name
        facts.repo_disk = cluster.repo_disk

        facts.snmp_community = build_snmp_community(self._run(commands.SNMP_COMMUNITY))
        facts.daemons = build_daemons(self._run(commands.DAEMONS))
        facts.sites = build_sites(self._run(commands.SITES))
        facts.networks = build_networks(self._run(commands.NETWORKS))

        facts.nodes = build_nodes(self._run(commands.NODES), identity)
        facts.node_name = identity.node_name

        correlator = ResourceGroupCorrelator(
            fetch_attributes=lambda group: self._run(commands.RG_ATTRIBUTES, {"group": group}),
            identity=identity,
        )
        facts.resource_groups = correlator.correlate(self._run(commands.RG_STATUS))
        facts.active_rgs = correlator.active_rgs
        facts.any_rg_active = correlator.any_rg_active

        facts.applications = build_applications(self._run(commands.APPLICATIONS), architecture)

        logger.info(
            "Collected PowerHA %s (%s): cluster=%s node=%s active_rgs=%s",
            version, architecture, facts.cluster_name, facts.node_name, facts.active_rgs,
        )
        return facts


def build_runner(config: CollectorConfig) -> CommandRunner:
    """Pick the runner a config asks for: a recording or the live host."""
    if config.recording is not None:
        return load_recording(config.recording)
    return SubprocessRunner(timeout=config.timeout)


def collect(
    runner: CommandRunner | None = None,
    config: CollectorConfig | None = None,
    identity: HostIdentity | None = None,
) -> ClusterFacts:
    """Collect a fresh PowerHA snapshot of the local node."""
    config = config or CollectorConfig()
    if runner is None:
        runner = build_runner(config)
    return Collector(runner, config, identity).collect()
