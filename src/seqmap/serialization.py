"""
Serialization helpers for seqmap containers (Slice, Map, scalars).

Snapshots go through an explicit intermediate dict representation and can
be written as JSON or YAML. A snapshot records the container as its owner
sees it: kind, nil-ness, length/capacity and elements. Aliasing between
slices is not recorded; every restored slice owns a fresh buffer.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from seqmap.errors import InvalidArgumentError
from seqmap.mapping import Map
from seqmap.sequence import Slice, make


_KINDS_BY_NAME: Dict[str, type] = {
    "bool": bool,
    "int": int,
    "float": float,
    "str": str,
    "object": object,
    "slice": Slice,
    "map": Map,
}
_NAMES_BY_KIND: Dict[type, str] = {kind: name for name, kind in _KINDS_BY_NAME.items()}


def kind_to_name(kind: type) -> str:
    try:
        return _NAMES_BY_KIND[kind]
    except KeyError:
        raise TypeError(f"Unsupported element kind: {kind!r}") from None


def kind_from_name(name: str) -> type:
    try:
        return _KINDS_BY_NAME[name]
    except KeyError:
        raise TypeError(f"Unsupported element kind name: {name!r}") from None


def value_to_dict(value: Any) -> Any:
    if isinstance(value, Slice):
        return slice_to_dict(value)
    if isinstance(value, Map):
        return map_to_dict(value)
    return value


def value_from_dict(d: Any) -> Any:
    if isinstance(d, dict):
        t = d.get("type")
        if t == "slice":
            return slice_from_dict(d)
        if t == "map":
            return map_from_dict(d)
        raise TypeError(f"Unsupported container dict type: {t}")
    return d


def slice_to_dict(s: Slice) -> Dict[str, Any]:
    return {
        "type": "slice",
        "kind": kind_to_name(s.kind),
        "nil": s.is_nil,
        "length": len(s),
        "capacity": s.capacity,
        "items": [value_to_dict(v) for v in s],
    }


def slice_from_dict(d: Dict[str, Any]) -> Slice:
    kind = kind_from_name(d.get("kind", "object"))
    if d.get("nil"):
        return Slice.nil(kind)
    items = [value_from_dict(v) for v in d.get("items", [])]
    length = d.get("length", len(items))
    if length != len(items):
        raise InvalidArgumentError(f"slice length {length} does not match {len(items)} items")
    s = make(length, d.get("capacity", length), kind)
    for i, item in enumerate(items):
        s[i] = item
    return s


def map_to_dict(m: Map) -> Dict[str, Any]:
    return {
        "type": "map",
        "kind": kind_to_name(m.value_kind),
        "nil": m.is_nil,
        "entries": [{"key": k, "value": value_to_dict(v)} for k, v in m.items()],
    }


def map_from_dict(d: Dict[str, Any]) -> Map:
    kind = kind_from_name(d.get("kind", "object"))
    if d.get("nil"):
        return Map.nil(kind)
    return Map.of(kind, {e["key"]: value_from_dict(e["value"]) for e in d.get("entries", [])})


def slice_to_json(s: Slice) -> str:
    return json.dumps(slice_to_dict(s), sort_keys=True)


def slice_from_json(s: str) -> Slice:
    return slice_from_dict(json.loads(s))


def slice_to_yaml(s: Slice) -> str:
    return yaml.safe_dump(slice_to_dict(s))


def slice_from_yaml(s: str) -> Slice:
    return slice_from_dict(yaml.safe_load(s))


def map_to_json(m: Map) -> str:
    return json.dumps(map_to_dict(m), sort_keys=True)


def map_from_json(s: str) -> Map:
    return map_from_dict(json.loads(s))


def map_to_yaml(m: Map) -> str:
    return yaml.safe_dump(map_to_dict(m))


def map_from_yaml(s: str) -> Map:
    return map_from_dict(yaml.safe_load(s))


def snapshot_to_dict(values: Dict[str, Any]) -> Dict[str, Any]:
    """Snapshot a name -> value mapping, e.g. the containers a demo built."""
    return {name: value_to_dict(v) for name, v in values.items()}


def snapshot_to_json(values: Dict[str, Any]) -> str:
    return json.dumps(snapshot_to_dict(values), sort_keys=True, indent=2)


def snapshot_to_yaml(values: Dict[str, Any]) -> str:
    return yaml.safe_dump(snapshot_to_dict(values))
