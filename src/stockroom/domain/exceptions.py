"""Domain-level exceptions.

Every rejected stock operation is expressed as a subclass of
DomainException so the CLI layer can catch them uniformly and display
user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class InvalidArgumentError(DomainException):
    """A caller-supplied quantity or parameter violates a precondition."""


class InvalidStateError(DomainException):
    """The operation is well-formed but the record cannot honour it."""
