"""Domain-level exceptions.

All catalog rule violations are expressed as subclasses of DomainException
so the HTTP and CLI layers can catch them uniformly and turn them into
distinct responses.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input is missing, malformed, or violates a catalog invariant."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class StorageError(DomainException):
    """The catalog store could not be read or written."""
