"""
Run configuration for the demo CLI.

A DemoConfig can be built directly, loaded from YAML, and then
overridden by command-line flags:

    demos: [maps, slices]
    output_format: yaml
    verbosity: 1
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, List

import yaml

from seqmap.demos import DEMOS
from seqmap.errors import InvalidArgumentError


OUTPUT_FORMATS = ("text", "yaml", "json")


@dataclass
class DemoConfig:
    """
    Properties:
        demos: Demo names to run, in order
        output_format: "text" prints demo lines only; "yaml"/"json" add a snapshot
        verbosity: 0 errors only, 1 info, 2 debug
    """

    demos: List[str] = field(default_factory=lambda: list(DEMOS))
    output_format: str = "text"
    verbosity: int = 0

    def __post_init__(self):
        unknown = [name for name in self.demos if name not in DEMOS]
        if unknown:
            raise InvalidArgumentError(f"Unknown demos: {unknown} (choose from {sorted(DEMOS)})")
        if self.output_format not in OUTPUT_FORMATS:
            raise InvalidArgumentError(f"Unknown output format: {self.output_format!r}")
        if self.verbosity < 0:
            raise InvalidArgumentError("verbosity must be >= 0")

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "DemoConfig":
        known = {f.name for f in fields(cls)}
        extra = set(d) - known
        if extra:
            raise InvalidArgumentError(f"Unknown config keys: {sorted(extra)}")
        return cls(**d)

    @classmethod
    def from_yaml(cls, text: str) -> "DemoConfig":
        d = yaml.safe_load(text) or {}
        if not isinstance(d, dict):
            raise InvalidArgumentError("Config must be a YAML mapping")
        return cls.from_dict(d)

    def merged(self, **overrides: Any) -> "DemoConfig":
        """Return a copy with every override that is not None applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def load_config(path: str) -> DemoConfig:
    with open(path) as f:
        return DemoConfig.from_yaml(f.read())
