"""Shared fixtures: captured PowerHA 7 output for a two-node cluster."""

from __future__ import annotations

import pytest

from powerha_facts.commands import (
    APPLICATIONS,
    CLUSTER,
    DAEMONS,
    NETWORKS,
    NODES,
    PACKAGE_VERSION,
    RG_ATTRIBUTES,
    RG_STATUS,
    SITES,
    SNMP_COMMUNITY,
    build_command_args,
)
from powerha_facts.config import CollectorConfig
from powerha_facts.identity import HostIdentity
from powerha_facts.runner.recorded import RecordedRunner

LSLPP_OUTPUT = """\
#Path:Fileset:Level:PTF Id:State:Type:Description:EFIX Locked
/usr/lib/objrepos:cluster.es.server.rte:7.2.5.0::COMMITTED:I:Base Server Runtime:
/etc/objrepos:cluster.es.server.rte:7.2.5.0::COMMITTED:I:Base Server Runtime:
"""

CLLSCLSTR_OUTPUT = """\
#Cluster ID:Name:Security:Persistent IP label:Repository Disk:Cluster IP Address
1573491845:prodclu:Standard::hdisk2:228.10.0.1
"""

COMMUNITY_OUTPUT = "community public\n"

LSSRC_OUTPUT = """\
Subsystem         Group            PID          Status
 clstrmgrES       cluster          6422618      active
 clevmgrdES       cluster          8781946      active
 clinfoES         cluster                       inoperative
"""

CLLSSITE_OUTPUT = """\
#Site:Nodes:Dominance:Protection:Priority:HMCs
dc1:nodeA nodeB:yes:NONE:1:hmc01 hmc02
"""

CLLSNW_OUTPUT = """\
#Network:Attribute:Alias:Monitor method:Node:IP Address:Interface Name
net_ether_01:public:true:default:nodeA:10.0.0.1:en0
"""

CLLSNODE_OUTPUT = (
    "#Node:Interface:Role:Name:Type:Visibility:Address\n"
    "nodeA:aixprd01:boot:en0:ether:public:10.0.0.1"
    ":appsvc:service:en0:ether:public:10.0.0.100:ipv4"
    ":aixprd01b:boot:en1:ether:private:10.0.1.1\n"
    "nodeB:aixprd02:boot:en0:ether:public:10.0.0.2\n"
)

CLRGINFO_OUTPUT = """\
RG_APP:ONLINE:nodeA:non-concurrent:OHN:FNPN:NFB:ignore::::
RG_APP:OFFLINE:nodeB:non-concurrent:OHN:FNPN:NFB:ignore::::
RG_DB:OFFLINE:nodeA:non-concurrent:OHN:FNPN:FBHPN:ignore::::
RG_DB:ONLINE:nodeB:non-concurrent:OHN:FNPN:FBHPN:ignore::::
"""

CLLSRES_APP_OUTPUT = """\
#SERVICE_LABEL:APPLICATIONS:VOLUME_GROUP:FILESYSTEM:FORCED_VARYON:FSCHECK_TOOL
appsvc:app_ctl:appvg:/app /app/log:false:fsck
"""

CLLSRES_DB_OUTPUT = """\
#SERVICE_LABEL:APPLICATIONS:VOLUME_GROUP:DISK
dbsvc:db_ctl:datavg:hdisk4 hdisk5
"""

CLLSSERV_OUTPUT = """\
app_ctl:/opt/app/bin/start.sh:/opt/app/bin/stop.sh:background:app_mon
db_ctl:/opt/db/bin/start.sh:/opt/db/bin/stop.sh:foreground:
"""


def command_line(section: str, group: str | None = None) -> str:
    """The recording key the collector uses for *section* with defaults."""
    params = {"group": group} if group is not None else None
    return " ".join(build_command_args(section, CollectorConfig(), params))


def cluster_outputs() -> dict[str, str | None]:
    return {
        command_line(PACKAGE_VERSION): LSLPP_OUTPUT,
        command_line(CLUSTER): CLLSCLSTR_OUTPUT,
        command_line(SNMP_COMMUNITY): COMMUNITY_OUTPUT,
        command_line(DAEMONS): LSSRC_OUTPUT,
        command_line(SITES): CLLSSITE_OUTPUT,
        command_line(NETWORKS): CLLSNW_OUTPUT,
        command_line(NODES): CLLSNODE_OUTPUT,
        command_line(RG_STATUS): CLRGINFO_OUTPUT,
        command_line(RG_ATTRIBUTES, "RG_APP"): CLLSRES_APP_OUTPUT,
        command_line(RG_ATTRIBUTES, "RG_DB"): CLLSRES_DB_OUTPUT,
        command_line(APPLICATIONS): CLLSSERV_OUTPUT,
    }


@pytest.fixture()
def outputs() -> dict[str, str | None]:
    return cluster_outputs()


@pytest.fixture()
def runner(outputs: dict[str, str | None]) -> RecordedRunner:
    return RecordedRunner(outputs)


@pytest.fixture()
def identity() -> HostIdentity:
    return HostIdentity(hostname="aixprd01", fqdn="aixprd01.example.com")
