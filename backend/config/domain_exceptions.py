from __future__ import annotations


class DomainError(Exception):
    """
    Base class for predictable domain/use-case errors surfaced to event sources.
    """


class ValidationError(DomainError):
    pass


class ServiceUnavailableError(DomainError):
    pass
