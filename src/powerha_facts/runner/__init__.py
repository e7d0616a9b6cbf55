"""Command runners: the collector's only window onto the host.

Runners: SubprocessRunner, RecordedRunner.
"""

from powerha_facts.runner.command import CommandRunner, SubprocessRunner
from powerha_facts.runner.recorded import RecordedRunner, RecordingError, load_recording

__all__ = [
    "CommandRunner",
    "RecordedRunner",
    "RecordingError",
    "SubprocessRunner",
    "load_recording",
]
