"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

An empty box selection is NOT an error; callers treat it as
"custom shipping required".
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidDimensionsError(ValidationError):
    """Product dimensions or weight are missing, non-numeric or not positive."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class CatalogError(DomainException):
    """The box catalog could not be loaded."""
