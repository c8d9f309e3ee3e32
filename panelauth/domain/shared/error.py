"""Errors raised around the authorization core.

The predicates themselves never raise. Services, handler gates and adapters
raise these, and ``application.api.v1.errors.map_error`` turns them into
HTTP responses: domain errors become 4xx, infrastructure errors 503.
"""


class PanelAuthError(Exception):
    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


class DomainError(PanelAuthError):
    """A request the hierarchy does not allow, or that names something missing."""


class NotFoundError(DomainError):
    pass


class ValidationError(DomainError):
    """Bad input; ``field`` names the offending request field when known."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


class AuthenticationError(DomainError):
    """Session missing, expired or unreadable."""


class AuthorizationError(DomainError):
    """Valid session, but its role may not do this."""


class InfrastructureError(PanelAuthError):
    pass


class ConfigurationError(InfrastructureError):
    """Handler wiring or settings are inconsistent."""
