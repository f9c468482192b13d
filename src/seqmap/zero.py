"""
Zero-value defaulting.

Every value kind has a zero value: the value a variable holds when it is
declared without an initializer, the value a map lookup returns for a
missing key, and the value each element of a freshly made slice starts as.

Container kinds (Slice, Map) register their own factories when their
modules are imported, so their zero value is the nil container.
"""

from __future__ import annotations

from typing import Any, Callable, Dict

from seqmap.errors import InvalidArgumentError


_ZERO_FACTORIES: Dict[type, Callable[[], Any]] = {
    bool: lambda: False,
    int: lambda: 0,
    float: lambda: 0.0,
    complex: lambda: 0j,
    str: lambda: "",
    object: lambda: None,
}


def register_zero(kind: type, factory: Callable[[], Any]) -> None:
    """
    Register the zero value factory for a kind.

    The factory is called on every request, so mutable zero values
    are never shared between variables or slice elements.
    """
    _ZERO_FACTORIES[kind] = factory


def zero_value(kind: type) -> Any:
    """
    Return the zero value of `kind`.

    Args:
        kind: A Python type (int, str, Slice, ...)

    Returns:
        The registered zero value, or kind() for other default-constructible types

    Raises:
        InvalidArgumentError: If kind has no zero value
    """
    factory = _ZERO_FACTORIES.get(kind)
    if factory is not None:
        return factory()
    if not isinstance(kind, type):
        raise InvalidArgumentError(f"not a type: {kind!r}")
    try:
        return kind()
    except TypeError as e:
        raise InvalidArgumentError(f"type {kind.__name__} has no zero value: {e}") from e


def infer_kind(value: Any) -> type:
    """Return the kind a declaration without explicit type gives to `value`."""
    if value is None:
        raise InvalidArgumentError("cannot infer a kind from None")
    return type(value)


def kind_matches(kind: type, value: Any) -> bool:
    """Check that `value` may be stored in a variable or element of `kind`."""
    # bool is an int subclass in Python; keep the two kinds apart
    if kind is int and isinstance(value, bool):
        return False
    if kind is float and isinstance(value, int) and not isinstance(value, bool):
        return True
    return isinstance(value, kind)
