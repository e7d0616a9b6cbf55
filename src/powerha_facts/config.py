"""Config file loading and auto-discovery for powerha-facts.

Searches for ``powerha-facts.yaml`` in the current directory and parent
directories, parses it, and resolves a relative ``recording`` path
against the config file's location.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

CONFIG_FILENAME = "powerha-facts.yaml"

DEFAULT_UTILITIES_DIR = "/usr/es/sbin/cluster/utilities"
DEFAULT_LSLPP = "/bin/lslpp"
DEFAULT_LSSRC = "/bin/lssrc"
DEFAULT_PACKAGE = "cluster.es.server.rte"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class CollectorConfig:
    """Where the PowerHA utilities live and how to run them."""

    config_path: Path | None = None
    utilities_dir: str = DEFAULT_UTILITIES_DIR
    lslpp_path: str = DEFAULT_LSLPP
    lssrc_path: str = DEFAULT_LSSRC
    package: str = DEFAULT_PACKAGE
    timeout: float = DEFAULT_TIMEOUT
    hostname: str | None = None
    fqdn: str | None = None
    recording: str | None = None


def find_config(start: Path | None = None) -> Path | None:
    """Walk from *start* (default ``cwd()``) up to the filesystem root.

    Returns the first ``powerha-facts.yaml`` found, or ``None``.
    """
    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def load_config(
    path: str | Path | None = None,
    *,
    auto_discover: bool = True,
) -> CollectorConfig:
    """Load collector settings.

    An explicit *path* must exist. Without one, the nearest
    ``powerha-facts.yaml`` above the working directory is used unless
    *auto_discover* is off. Keys the file leaves out keep their defaults:
    the stock AIX utility paths, a 30 second timeout and no recording,
    so commands run live.

    Raises:
        FileNotFoundError: *path* was given but is not a file.
        ValueError: The file is not valid YAML, not a mapping, or has a
            non-numeric timeout.
    """
    config_path: Path | None = None

    if path is not None:
        config_path = Path(path).resolve()
        if not config_path.is_file():
            msg = f"Config file not found: {config_path}"
            raise FileNotFoundError(msg)
    elif auto_discover:
        config_path = find_config()

    if config_path is None:
        return CollectorConfig()

    return _parse_config(config_path)


def _parse_config(config_path: Path) -> CollectorConfig:
    """Read and parse a YAML config file."""
    text = config_path.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        msg = f"Invalid YAML in {config_path}: {e}"
        raise ValueError(msg) from e

    if not isinstance(data, dict):
        msg = f"Expected a YAML mapping in {config_path}, got {type(data).__name__}"
        raise ValueError(msg)

    recording = data.get("recording")
    if recording is not None:
        recording = str((config_path.parent / recording).resolve())

    try:
        timeout = float(data.get("timeout", DEFAULT_TIMEOUT))
    except (TypeError, ValueError) as e:
        msg = f"Invalid timeout in {config_path}: {data.get('timeout')!r}"
        raise ValueError(msg) from e

    return CollectorConfig(
        config_path=config_path,
        utilities_dir=data.get("utilities_dir", DEFAULT_UTILITIES_DIR),
        lslpp_path=data.get("lslpp_path", DEFAULT_LSLPP),
        lssrc_path=data.get("lssrc_path", DEFAULT_LSSRC),
        package=data.get("package", DEFAULT_PACKAGE),
        timeout=timeout,
        hostname=data.get("hostname"),
        fqdn=data.get("fqdn"),
        recording=recording,
    )
