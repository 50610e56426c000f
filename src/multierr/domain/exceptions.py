"""Domain-level exceptions.

Contract violations detected by this package are expressed as subclasses of
DomainException so the CLI layer can catch them uniformly and display
user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input to an aggregate or an error spec was invalid."""
