"""
Variable declarations.

A Scope holds typed variables and supports the usual declaration forms:

    declare("a", values=["initial"])             # kind inferred: str
    declare("b", "c", kind=int, values=(1, 2))   # several at once, explicit kind
    declare("e", kind=int)                       # no initializer: zero value
    short_declare(f="apple")                     # declare-and-initialize

Every variable keeps the kind it was declared with; later assignments
must match it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from seqmap.errors import InvalidArgumentError, UndeclaredNameError
from seqmap.zero import infer_kind, kind_matches, zero_value


@dataclass
class Binding:
    """A declared variable: its name, fixed kind and current value."""

    name: str
    kind: type
    value: Any


def _coerce(name: str, kind: type, value: Any) -> Any:
    if not kind_matches(kind, value):
        raise InvalidArgumentError(
            f"cannot use {value!r} (kind {type(value).__name__}) as {kind.__name__} value for {name}"
        )
    if kind is float and not isinstance(value, float):
        return float(value)
    return value


class Scope:
    """A flat set of variable bindings."""

    def __init__(self):
        self._bindings: Dict[str, Binding] = {}

    def declare(self, *names: str, kind: Optional[type] = None, values: Sequence[Any] = ()) -> Tuple[Any, ...]:
        """
        Declare one or more new variables.

        Args:
            names: Variable names, all new to this scope
            kind: Explicit kind; inferred per value when omitted
            values: Initial values, one per name, or empty for zero values

        Returns:
            The declared values, in name order

        Raises:
            InvalidArgumentError: On redeclaration, a names/values count
                mismatch, a missing kind without values, or a kind mismatch
        """
        if not names:
            raise InvalidArgumentError("declaration needs at least one name")
        values = tuple(values)
        if values and len(values) != len(names):
            raise InvalidArgumentError(
                f"assignment mismatch: {len(names)} variables but {len(values)} values"
            )
        if not values and kind is None:
            raise InvalidArgumentError(f"missing kind or initializer for {', '.join(names)}")
        seen = set()
        for name in names:
            if name in self._bindings or name in seen:
                raise InvalidArgumentError(f"{name} redeclared in this scope")
            seen.add(name)

        declared: List[Binding] = []
        for i, name in enumerate(names):
            if values:
                value_kind = kind or infer_kind(values[i])
                declared.append(Binding(name, value_kind, _coerce(name, value_kind, values[i])))
            else:
                declared.append(Binding(name, kind, zero_value(kind)))
        for binding in declared:
            self._bindings[binding.name] = binding
        return tuple(b.value for b in declared)

    def short_declare(self, **pairs: Any) -> Tuple[Any, ...]:
        """
        Declare-and-initialize with inferred kinds.

        At least one name must be new. Names already in scope are assigned,
        keeping their declared kind.
        """
        if not pairs:
            raise InvalidArgumentError("short declaration needs at least one name")
        if all(name in self._bindings for name in pairs):
            raise InvalidArgumentError("no new variables on left side of short declaration")

        staged: List[Binding] = []
        for name, value in pairs.items():
            existing = self._bindings.get(name)
            if existing is not None:
                staged.append(Binding(name, existing.kind, _coerce(name, existing.kind, value)))
            else:
                staged.append(Binding(name, infer_kind(value), value))
        for binding in staged:
            self._bindings[binding.name] = binding
        return tuple(b.value for b in staged)

    def assign(self, name: str, value: Any) -> None:
        binding = self._binding(name)
        binding.value = _coerce(name, binding.kind, value)

    def lookup(self, name: str) -> Any:
        return self._binding(name).value

    def kind_of(self, name: str) -> type:
        return self._binding(name).kind

    def names(self) -> List[str]:
        """Declared names in declaration order."""
        return list(self._bindings)

    def _binding(self, name: str) -> Binding:
        try:
            return self._bindings[name]
        except KeyError:
            raise UndeclaredNameError(name) from None

    def __contains__(self, name: str) -> bool:
        return name in self._bindings
