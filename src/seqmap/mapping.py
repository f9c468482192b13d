"""
Associative Containers (maps)

A Map stores unique keys with values of one declared value kind.

Lookups never fail:
    - m.get(key) returns Lookup(value, present)
    - m[key] returns just the value

For a missing key both return the zero value of the value kind, and
get() reports present=False. The presence flag is the only way to tell a
stored zero (0, "", False) apart from a missing key.

The nil map (Map.nil) is an uninitialized map. Reading it behaves like an
empty map; writing to it raises InvalidArgumentError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, NamedTuple, Optional, Tuple

from seqmap.errors import InvalidArgumentError
from seqmap.zero import register_zero, zero_value


logger = logging.getLogger(__name__)


class Lookup(NamedTuple):
    """Result of Map.get(): the value and whether the key was present."""

    value: Any
    present: bool


def _ordered(keys: List[Any]) -> List[Any]:
    try:
        return sorted(keys)
    except TypeError:
        return keys


@dataclass(eq=False)
class Map:
    """
    Key/value container with presence-tested lookup.

    Properties:
        value_kind: Kind of the stored values; its zero value is returned on a miss
        entries: Key -> value storage (None for the nil map)

    Iteration and keys()/items() are sorted by key when the keys are
    orderable, which keeps printed output stable.
    """

    value_kind: type = int
    entries: Optional[Dict[Any, Any]] = field(default_factory=dict)

    @classmethod
    def of(cls, value_kind: type, pairs: Dict[Any, Any]) -> "Map":
        """Build a map literal from `pairs`."""
        return cls(value_kind=value_kind, entries=dict(pairs))

    @classmethod
    def nil(cls, value_kind: type = object) -> "Map":
        return cls(value_kind=value_kind, entries=None)

    @property
    def is_nil(self) -> bool:
        return self.entries is None

    def set(self, key: Any, value: Any) -> None:
        """Insert or overwrite the value stored under `key`."""
        if self.entries is None:
            raise InvalidArgumentError("assignment to entry in nil map")
        self.entries[key] = value

    def get(self, key: Any) -> Lookup:
        if self.entries is not None and key in self.entries:
            return Lookup(self.entries[key], True)
        return Lookup(zero_value(self.value_kind), False)

    def delete(self, key: Any) -> None:
        """Remove `key` if present; a missing key is a no-op."""
        if self.entries is not None:
            self.entries.pop(key, None)

    def clear(self) -> None:
        if self.entries is None:
            return
        logger.debug("clear: dropping %d entries", len(self.entries))
        self.entries.clear()

    def size(self) -> int:
        return 0 if self.entries is None else len(self.entries)

    def keys(self) -> List[Any]:
        if self.entries is None:
            return []
        return _ordered(list(self.entries))

    def items(self) -> List[Tuple[Any, Any]]:
        return [(k, self.entries[k]) for k in self.keys()]

    def __getitem__(self, key: Any) -> Any:
        return self.get(key).value

    def __setitem__(self, key: Any, value: Any) -> None:
        self.set(key, value)

    def __contains__(self, key: Any) -> bool:
        return self.get(key).present

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Any]:
        return iter(self.keys())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Map):
            return NotImplemented
        return maps_equal(self, other)

    __hash__ = None


register_zero(Map, Map.nil)


def maps_equal(a: Map, b: Map) -> bool:
    """
    True if both maps hold the same keys with equal values.

    Insertion order is irrelevant. A nil map equals an empty map.
    """
    if a.size() != b.size():
        return False
    for key, value in a.items():
        found = b.get(key)
        if not found.present or found.value != value:
            return False
    return True
