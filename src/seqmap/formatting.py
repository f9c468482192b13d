"""
Console rendering of values.

Output follows the default print format the demos are checked against:

    True / False        ->  true / false
    Slice ["a","b"]     ->  [a b]
    Slice ["","",""]    ->  [  ]
    Map {k1: 7, k2: 13} ->  map[k1:7 k2:13]
    nil slice / nil map ->  []  /  map[]
    None                ->  <nil>
"""

from typing import Any, Iterable

from seqmap.mapping import Map
from seqmap.sequence import Slice


def _join(values: Iterable[Any]) -> str:
    return " ".join(format_value(v) for v in values)


def _format_float(value: float) -> str:
    text = repr(value)
    if text.endswith(".0"):
        return text[:-2]
    return text


def format_value(value: Any) -> str:
    """Render a single value."""
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, (Slice, list, tuple)):
        return f"[{_join(value)}]"
    if isinstance(value, Map):
        pairs = value.items()
    elif isinstance(value, dict):
        pairs = Map.of(object, value).items()
    else:
        return str(value)
    return "map[" + " ".join(f"{format_value(k)}:{format_value(v)}" for k, v in pairs) + "]"


def sprintln(*args: Any) -> str:
    """Render operands separated by single spaces, as one output line."""
    return _join(args)
