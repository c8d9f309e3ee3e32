"""Centralized error transformation for API routes.

Maps panelauth errors (domain and infrastructure) to HTTPException responses.
Response bodies follow the panels' ``{"success": false, "message": ...}`` shape.
"""

from typing import Any

from fastapi import HTTPException

from panelauth.domain.shared.error import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    InfrastructureError,
    NotFoundError,
    PanelAuthError,
    ValidationError,
)

DOMAIN_ERROR_STATUS_MAP: dict[type[DomainError], int] = {
    NotFoundError: 404,
    ValidationError: 422,
    AuthenticationError: 401,
    AuthorizationError: 403,
}

_UNAUTHENTICATED_HEADERS = {"WWW-Authenticate": "Bearer"}


def map_error(error: PanelAuthError) -> HTTPException:
    """Map a panelauth error to an HTTPException.

    Args:
        error: The panelauth error to map.

    Returns:
        HTTPException with appropriate status code and detail.
    """
    detail: dict[str, Any] = {
        "success": False,
        "code": error.code,
        "message": error.message,
    }

    if isinstance(error, InfrastructureError):
        return HTTPException(status_code=503, detail=detail)

    if isinstance(error, DomainError):
        status_code = DOMAIN_ERROR_STATUS_MAP.get(type(error), 400)
        if isinstance(error, ValidationError) and error.field is not None:
            detail["field"] = error.field
        # Distinguish 401 (no session) from 403 (session lacks access)
        if status_code == 401 or (
            isinstance(error, AuthorizationError) and error.code == "missing_token"
        ):
            return HTTPException(status_code=401, detail=detail, headers=_UNAUTHENTICATED_HEADERS)
        return HTTPException(status_code=status_code, detail=detail)

    # Fallback for unknown PanelAuthError subclasses
    return HTTPException(status_code=500, detail=detail)
