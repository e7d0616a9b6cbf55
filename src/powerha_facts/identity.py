"""Local host identity used to find "this node" in the cluster listings."""

from __future__ import annotations

import socket
from dataclasses import dataclass


@dataclass
class HostIdentity:
    """Names the local host may appear under in PowerHA output.

    ``node_name`` starts unset and is filled in once the node listing
    shows which cluster node this host is.
    """

    hostname: str
    fqdn: str
    node_name: str | None = None

    @classmethod
    def local(cls, hostname: str | None = None, fqdn: str | None = None) -> HostIdentity:
        """Build the identity from the running host, honouring overrides."""
        if hostname is None:
            hostname = socket.gethostname().split(".")[0]
        if fqdn is None:
            fqdn = socket.getfqdn()
        return cls(hostname=hostname, fqdn=fqdn)

    def is_host(self, name: str | None) -> bool:
        """True if *name* is this host's short name or FQDN."""
        return name is not None and name in (self.hostname, self.fqdn)

    def matches(self, name: str | None) -> bool:
        """True if *name* is this host or its resolved cluster node."""
        if self.is_host(name):
            return True
        return self.node_name is not None and name == self.node_name
