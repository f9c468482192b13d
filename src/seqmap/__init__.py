"""
seqmap: growable sequences, associative containers and declarations.

This package models three pieces of value semantics precisely:

    - Slice: growable sequence with length/capacity decoupling and
      non-copying sub-range views that alias one backing buffer
    - Map: key/value container with presence-tested lookup
    - Scope: typed variable declarations with zero-value defaulting

Console rendering, snapshots and the demo routines live in
separate modules and consume these types unchanged.
"""

from seqmap.errors import ContainerError, InvalidArgumentError, OutOfRangeError, UndeclaredNameError
from seqmap.zero import zero_value
from seqmap.sequence import Slice, append, cap, copy, make, slices_equal, subrange
from seqmap.mapping import Lookup, Map, maps_equal
from seqmap.declarations import Scope

__version__ = "0.1.0"

__all__ = [
    "ContainerError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "UndeclaredNameError",
    "zero_value",
    "Slice",
    "append",
    "cap",
    "copy",
    "make",
    "slices_equal",
    "subrange",
    "Lookup",
    "Map",
    "maps_equal",
    "Scope",
]
