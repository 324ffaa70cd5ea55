"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Failures raised by collaborators (file I/O, storage) are not part of this
hierarchy and propagate untouched.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input has the wrong shape or a business rule was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
