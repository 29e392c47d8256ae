"""Domain-level exceptions.

Every failure the ledger can report is a subclass of DomainException so
the CLI layer can catch them uniformly and display a readable message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Malformed input or a business rule violation."""


class NotFoundError(DomainException):
    """A requested entity does not exist."""


class PermissionDeniedError(DomainException):
    """The caller context does not grant the requested capability."""


class PersistenceError(DomainException):
    """The record store is unavailable or rejected a read/write."""
