#!/usr/bin/env python3
"""
Demo: Run all three container demos and export a YAML snapshot.

Shows the console output of each demo followed by the containers
each one built.
"""

from seqmap.demos import DEMOS
from seqmap.serialization import snapshot_to_yaml


def main():
    built = {}
    for name, demo in DEMOS.items():
        print("=" * 80)
        print(f"{name.upper()} DEMO")
        print("=" * 80)
        built.update({f"{name}.{key}": value for key, value in demo().items()})
        print()

    print("=" * 80)
    print("SNAPSHOT (YAML)")
    print("=" * 80)
    print(snapshot_to_yaml(built))


if __name__ == "__main__":
    main()
