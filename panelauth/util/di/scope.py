"""Dishka scopes for panelauth."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """Dependency injection scopes.

    Hierarchy: APP -> UOW

    - APP: Application lifetime (config, account store, session verifier)
    - UOW: One HTTP request (session principal, services, handlers)
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")
