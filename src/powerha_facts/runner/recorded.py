"""Replay captured command output from a YAML recording.

A recording maps a command line (argv joined by single spaces) to the
text that command printed::

    commands:
      "/bin/lslpp -lc cluster.es.server.rte": |
        #Path:Fileset:Level:...
        /usr/lib/objrepos:cluster.es.server.rte:7.2.5.0::COMMITTED:...

Commands missing from the recording behave like a missing binary.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

import yaml


class RecordingError(Exception):
    """Raised when a recording file is invalid or cannot be loaded."""


class RecordedRunner:
    """In-memory runner answering from captured output."""

    def __init__(self, outputs: dict[str, str | None]) -> None:
        self._outputs = dict(outputs)
        self.calls: list[str] = []

    def __len__(self) -> int:
        return len(self._outputs)

    def run(self, args: Sequence[str]) -> str | None:
        key = " ".join(args)
        self.calls.append(key)
        output = self._outputs.get(key)
        if not output:
            return None
        return output


def load_recording(path: str | Path) -> RecordedRunner:
    """Load a recording from a YAML file.

    The YAML file must have a top-level 'commands' key mapping command
    lines to their output.

    Raises:
        RecordingError: If the file cannot be read, parsed, or validated.
    """
    path = Path(path)
    if not path.exists():
        raise RecordingError(f"Recording file not found: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise RecordingError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(raw, dict) or "commands" not in raw:
        raise RecordingError(f"Recording file must have a top-level 'commands' key: {path}")

    raw_commands: Any = raw["commands"]
    if not isinstance(raw_commands, dict):
        raise RecordingError(f"'commands' must be a mapping: {path}")

    outputs: dict[str, str | None] = {}
    for cmd, output in raw_commands.items():
        if output is not None and not isinstance(output, str):
            raise RecordingError(f"Output for {cmd!r} must be a string in {path}")
        outputs[str(cmd)] = output

    return RecordedRunner(outputs)
