"""Domain-level exceptions.

Every failure the upsert workflow can meet is a subclass of DomainException,
so adapters can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class StorageError(DomainException):
    """A repository could not persist a product."""


class NotificationError(DomainException):
    """A product change could not be delivered to downstream consumers."""
