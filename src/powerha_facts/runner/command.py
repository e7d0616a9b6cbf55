"""CommandRunner protocol and the subprocess-backed runner.

A runner turns an argv list into captured stdout, or ``None`` when the
command could not produce any. Runners never raise: a missing binary, a
non-zero exit, a timeout and empty output all look the same to callers.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class CommandRunner(Protocol):
    """Protocol for command runners.

    Any object with a ``run()`` method satisfies this protocol.
    """

    def run(self, args: Sequence[str]) -> str | None:
        """Run a command and return its stdout, or None on any failure."""
        ...


class SubprocessRunner:
    """Runner that executes commands via ``subprocess.run``.

    Output is decoded with replacement so stray non-ASCII bytes from the
    PowerHA utilities never abort a collection.
    """

    def __init__(self, timeout: float | None = 30.0) -> None:
        self._timeout = timeout

    def run(self, args: Sequence[str]) -> str | None:
        cmd = list(args)
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                errors="replace",
                timeout=self._timeout,
            )
        except subprocess.TimeoutExpired:
            logger.debug("%s timed out after %ss", cmd[0], self._timeout)
            return None
        except OSError as e:
            logger.debug("%s could not be started: %s", cmd[0], e)
            return None

        if result.returncode != 0:
            logger.debug("%s exited with status %d", cmd[0], result.returncode)
            return None
        if not result.stdout:
            return None
        return result.stdout
