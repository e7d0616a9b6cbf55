"""powerha-facts: structured facts about a PowerHA SystemMirror cluster."""

__version__ = "0.3.0"

from powerha_facts.collector import Collector, collect
from powerha_facts.config import CollectorConfig, find_config, load_config
from powerha_facts.identity import HostIdentity
from powerha_facts.models import (
    Application,
    Architecture,
    ClusterFacts,
    Interface,
    Network,
    ResourceGroup,
    Site,
)
from powerha_facts.runner.command import CommandRunner, SubprocessRunner
from powerha_facts.runner.recorded import RecordedRunner, RecordingError, load_recording

__all__ = [
    "Application",
    "Architecture",
    "ClusterFacts",
    "Collector",
    "CollectorConfig",
    "CommandRunner",
    "find_config",
    "HostIdentity",
    "Interface",
    "load_config",
    "load_recording",
    "Network",
    "RecordedRunner",
    "RecordingError",
    "ResourceGroup",
    "Site",
    "SubprocessRunner",
    "collect",
    "__version__",
]
