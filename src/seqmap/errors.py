"""
Error classes for seqmap containers.

Only two failure classes exist:
    - InvalidArgumentError: malformed construction or declaration requests
    - OutOfRangeError: indexing or sub-ranging outside valid bounds

Absent-key lookups, deleting a missing key and clearing an empty map
are NOT errors. They are defined zero-value returns or no-ops.
"""


class ContainerError(Exception):
    """Base class for every error raised by seqmap."""
    pass


class InvalidArgumentError(ContainerError, ValueError):
    """Raised when an allocation or declaration request is malformed."""
    pass


class OutOfRangeError(ContainerError, IndexError):
    """Raised when an index or sub-range falls outside a sequence's bounds."""
    pass


class UndeclaredNameError(ContainerError, KeyError):
    """Raised when a scope is asked about a variable it never declared."""
    pass
