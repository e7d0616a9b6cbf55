"""Tests for the top-level collector, driven by recorded command output."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from powerha_facts.collector import Collector, build_runner, collect
from powerha_facts.commands import (
    APPLICATIONS,
    CLUSTER,
    NODES,
    PACKAGE_VERSION,
    RG_ATTRIBUTES,
    RG_STATUS,
)
from powerha_facts.config import CollectorConfig
from powerha_facts.identity import HostIdentity
from powerha_facts.models import Architecture
from powerha_facts.runner.command import SubprocessRunner
from powerha_facts.runner.recorded import RecordedRunner, RecordingError, load_recording
from tests.conftest import cluster_outputs, command_line

# --- Not installed ---


class TestNotInstalled:
    def test_absent_version_short_circuits(self, identity: HostIdentity):
        runner = RecordedRunner({})
        facts = collect(runner=runner, identity=identity)
        assert facts.installed is False
        assert facts.to_facts() == {"installed": False}
        assert runner.calls == [command_line(PACKAGE_VERSION)]

    def test_header_only_version_short_circuits(self, identity: HostIdentity):
        runner = RecordedRunner({command_line(PACKAGE_VERSION): "#Path:Fileset:Level\n"})
        facts = collect(runner=runner, identity=identity)
        assert facts.to_facts() == {"installed": False}
        assert len(runner.calls) == 1

    def test_no_partial_data(self, identity: HostIdentity):
        outputs = cluster_outputs()
        outputs[command_line(PACKAGE_VERSION)] = None
        facts = collect(runner=RecordedRunner(outputs), identity=identity)
        assert facts.cluster_name is None
        assert facts.nodes == {}
        assert facts.resource_groups == {}


# --- Full snapshot ---


class TestCollect:
    def test_scalars(self, runner: RecordedRunner, identity: HostIdentity):
        facts = collect(runner=runner, identity=identity)
        assert facts.installed is True
        assert facts.version == "7.2.5.0"
        assert facts.architecture == Architecture.CAA
        assert facts.cluster_id == "1573491845"
        assert facts.cluster_name == "prodclu"
        assert facts.repo_disk == "hdisk2"
        assert facts.snmp_community == "public"

    def test_node_name_resolved(self, runner: RecordedRunner, identity: HostIdentity):
        facts = collect(runner=runner, identity=identity)
        assert facts.node_name == "nodeA"

    def test_active_groups_follow_resolved_node(
        self, runner: RecordedRunner, identity: HostIdentity,
    ):
        facts = collect(runner=runner, identity=identity)
        assert facts.active_rgs == ["RG_APP"]
        assert facts.any_rg_active is True

    def test_sections_populated(self, runner: RecordedRunner, identity: HostIdentity):
        facts = collect(runner=runner, identity=identity)
        assert set(facts.daemons) == {"clstrmgrES", "clevmgrdES", "clinfoES"}
        assert set(facts.sites) == {"dc1"}
        assert set(facts.networks) == {"net_ether_01"}
        assert set(facts.nodes) == {"nodeA", "nodeB"}
        assert set(facts.resource_groups) == {"RG_APP", "RG_DB"}
        assert facts.applications["app_ctl"].monitor == "app_mon"

    def test_attribute_listing_fetched_once_per_group(
        self, runner: RecordedRunner, identity: HostIdentity,
    ):
        collect(runner=runner, identity=identity)
        assert runner.calls.count(command_line(RG_ATTRIBUTES, "RG_APP")) == 1
        assert runner.calls.count(command_line(RG_ATTRIBUTES, "RG_DB")) == 1

    def test_commands_issued_in_order(self, runner: RecordedRunner, identity: HostIdentity):
        collect(runner=runner, identity=identity)
        assert runner.calls[0] == command_line(PACKAGE_VERSION)
        assert runner.calls[1] == command_line(CLUSTER)
        assert runner.calls.index(command_line(NODES)) < runner.calls.index(
            command_line(RG_STATUS),
        )
        assert runner.calls[-1] == command_line(APPLICATIONS)

    def test_unknown_host_has_no_local_state(self, runner: RecordedRunner):
        identity = HostIdentity(hostname="standby", fqdn="standby.example.com")
        facts = collect(runner=runner, identity=identity)
        assert facts.node_name is None
        assert facts.active_rgs == []
        assert facts.any_rg_active is False

    def test_missing_sections_degrade_to_empty(self, identity: HostIdentity):
        runner = RecordedRunner({command_line(PACKAGE_VERSION): "/usr:pkg:7.1.0.0\n"})
        facts = collect(runner=runner, identity=identity)
        assert facts.installed is True
        assert facts.architecture == Architecture.CAA
        assert facts.cluster_name is None
        assert facts.daemons == {}
        assert facts.sites == {}
        assert facts.networks == {}
        assert facts.nodes == {}
        assert facts.resource_groups == {}
        assert facts.applications == {}
        assert facts.active_rgs == []


class TestArchitecture:
    @pytest.mark.parametrize(
        ("version", "expected"),
        [
            ("6.1.0.10", Architecture.RSCT),
            ("7.2.5.0", Architecture.CAA),
            ("5.5.0.0", Architecture.UNKNOWN),
        ],
    )
    def test_from_version(self, version: str, expected: Architecture, identity: HostIdentity):
        outputs = cluster_outputs()
        outputs[command_line(PACKAGE_VERSION)] = f"/usr/lib/objrepos:pkg:{version}\n"
        facts = collect(runner=RecordedRunner(outputs), identity=identity)
        assert facts.architecture == expected
        assert (facts.repo_disk is not None) == (expected == Architecture.CAA)

    def test_rsct_applications_skip_caa_fields(self, identity: HostIdentity):
        outputs = cluster_outputs()
        outputs[command_line(PACKAGE_VERSION)] = "/usr/lib/objrepos:pkg:6.1.0.10\n"
        facts = collect(runner=RecordedRunner(outputs), identity=identity)
        assert facts.applications["app_ctl"].fore_back is None


# --- Repeatability ---


class TestIdempotence:
    def test_identical_output_gives_identical_facts(self, outputs, identity: HostIdentity):
        first = collect(runner=RecordedRunner(outputs), identity=identity)
        second = collect(runner=RecordedRunner(outputs), identity=identity)
        assert first.to_facts() == second.to_facts()

    def test_collector_reusable(self, runner: RecordedRunner, identity: HostIdentity):
        collector = Collector(runner, CollectorConfig(), identity)
        assert collector.collect() == collector.collect()

    def test_caller_identity_not_mutated(self, runner: RecordedRunner, identity: HostIdentity):
        collect(runner=runner, identity=identity)
        assert identity.node_name is None


# --- Runner selection ---


class TestBuildRunner:
    def test_subprocess_by_default(self):
        assert isinstance(build_runner(CollectorConfig()), SubprocessRunner)

    def test_recording_when_configured(self, tmp_path: Path):
        path = tmp_path / "rec.yaml"
        path.write_text(yaml.safe_dump({"commands": cluster_outputs()}), encoding="utf-8")
        runner = build_runner(CollectorConfig(recording=str(path)))
        assert isinstance(runner, RecordedRunner)

    def test_missing_recording_raises(self, tmp_path: Path):
        with pytest.raises(RecordingError):
            build_runner(CollectorConfig(recording=str(tmp_path / "nope.yaml")))

    def test_collect_from_recording(self, tmp_path: Path, identity: HostIdentity):
        path = tmp_path / "rec.yaml"
        path.write_text(yaml.safe_dump({"commands": cluster_outputs()}), encoding="utf-8")
        facts = collect(config=CollectorConfig(recording=str(path)), identity=identity)
        assert facts.cluster_name == "prodclu"

    def test_identity_from_config(self, runner: RecordedRunner):
        config = CollectorConfig(hostname="aixprd02", fqdn="aixprd02.example.com")
        with patch("powerha_facts.identity.socket.gethostname") as gethostname:
            facts = collect(runner=runner, config=config)
        gethostname.assert_not_called()
        assert facts.node_name == "nodeB"
        assert facts.active_rgs == ["RG_DB"]


class TestExampleRecording:
    def test_example_recording_matches_fixture(self):
        path = Path(__file__).resolve().parent.parent / "examples" / "recordings" / "two_node_caa.yaml"
        runner = load_recording(path)
        identity = HostIdentity(hostname="aixprd01", fqdn="aixprd01.example.com")
        expected = collect(runner=RecordedRunner(cluster_outputs()), identity=identity)
        assert collect(runner=runner, identity=identity).to_facts() == expected.to_facts()
