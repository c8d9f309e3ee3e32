"""Handler-level authorization gate shared by command and query handlers."""

from __future__ import annotations

import logging
from collections.abc import Callable, Coroutine
from functools import wraps
from typing import Any

_auth_logger = logging.getLogger("panelauth.authz")

# Unbound async handler method: (self, dto) -> Coroutine -> Result
HandlerMethod = Callable[..., Coroutine[Any, Any, Any]]


def check_handler_access(handler: Any, dto: Any) -> None:
    """Evaluate the handler's ``__auth__`` policy for its current principal.

    Raises:
        ConfigurationError: handler declares no policy and its DTO is not public.
        AuthorizationError: principal missing (``missing_token``) or policy
            failed (``access_denied``).
    """
    from panelauth.domain.auth.model.principal import Principal
    from panelauth.domain.shared.authorization.policy import Policy
    from panelauth.domain.shared.error import AuthorizationError, ConfigurationError

    if getattr(type(dto), "__public__", False):
        return

    policy = getattr(type(handler), "__auth__", None)
    if not isinstance(policy, Policy):
        raise ConfigurationError(
            f"Handler {type(handler).__name__} has no __auth__ declaration "
            f"and its command/query is not __public__"
        )

    principal = getattr(handler, "principal", None)
    if not isinstance(principal, Principal):
        raise AuthorizationError("Authentication required", code="missing_token")

    allowed = policy.evaluate(principal)
    _auth_logger.debug(
        "Auth check: handler=%s, policy=%s, role=%s, user_id=%s, allowed=%s",
        type(handler).__name__,
        policy.describe(),
        principal.role,
        principal.user_id,
        allowed,
    )
    if not allowed:
        raise AuthorizationError(
            f"Access denied: {policy.describe()} not available for role '{principal.role}'",
            code="access_denied",
        )


def wrap_run_with_auth(original_run: HandlerMethod) -> HandlerMethod:
    """Wrap a handler's run() so the gate is checked before it executes."""

    @wraps(original_run)
    async def auth_wrapped_run(self: Any, dto: Any) -> Any:
        check_handler_access(self, dto)
        return await original_run(self, dto)

    return auth_wrapped_run
