"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the outer layers can catch them uniformly and report them to the caller.
Each subclass names its error kind and the HTTP-style status hint the
transport layer should map it to.
"""


class DomainException(Exception):
    """Base class for all domain errors."""

    kind = "DomainError"
    status_hint = 400


class ValidationError(DomainException):
    """Caller data is malformed or out of range."""

    kind = "InvalidInput"
    status_hint = 400


class EntityNotFoundError(DomainException):
    """A requested entity does not exist (or is not owned by the caller)."""

    kind = "NotFound"
    status_hint = 404


class InvalidStateError(DomainException):
    """The operation is not permitted in the entity's current state."""

    kind = "InvalidState"
    status_hint = 400


class StoreFailure(DomainException):
    """The persistence layer raised an unexpected fault.

    The original exception is kept as ``__cause__``.
    """

    kind = "StoreFailure"
    status_hint = 500
