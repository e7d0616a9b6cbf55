#!/usr/bin/env python3
"""Demo: collect PowerHA facts offline from a captured recording.

Replays ``examples/recordings/two_node_caa.yaml`` as if it were the live
PowerHA utilities on nodeA, then prints what the collector found.

Run from the project root after ``pip install -e .``:
    python examples/demo_recording.py
"""

from __future__ import annotations

from pathlib import Path

from powerha_facts import HostIdentity, collect, load_recording


def main() -> None:
    recording = Path(__file__).resolve().parent / "recordings" / "two_node_caa.yaml"
    runner = load_recording(recording)

    for host in ("aixprd01", "aixprd02"):
        identity = HostIdentity(hostname=host, fqdn=f"{host}.example.com")
        facts = collect(runner=runner, identity=identity)

        print(f"--- {host} ---")
        print(f"  PowerHA {facts.version} ({facts.architecture})")
        print(f"  cluster:   {facts.cluster_name} [{facts.cluster_id}]")
        print(f"  node:      {facts.node_name}")
        print(f"  active:    {', '.join(facts.active_rgs) or '-'}")
        for name, rg in facts.resource_groups.items():
            states = ", ".join(f"{node}={state}" for node, state in rg.node_hash.items())
            print(f"  {name:<10} {states}")
        print(f"  {len(runner.calls)} command(s) replayed so far")


if __name__ == "__main__":
    main()
