"""Startup validation for handler authorization declarations."""

import logging
from collections.abc import Iterable
from typing import get_args, get_origin

from panelauth.domain.shared.authorization.policy import Policy
from panelauth.domain.shared.command import CommandHandler
from panelauth.domain.shared.error import ConfigurationError
from panelauth.domain.shared.query import QueryHandler

logger = logging.getLogger(__name__)


def _get_dto_type(handler_cls: type) -> type | None:
    """Extract the Command/Query type from a handler's generic bases."""
    for base in getattr(handler_cls, "__orig_bases__", []):
        origin = get_origin(base)
        if origin in (CommandHandler, QueryHandler):
            args = get_args(base)
            if args and isinstance(args[0], type):
                return args[0]
    return None


def check_handler_class(handler_cls: type) -> None:
    """Raise ConfigurationError if the handler lacks a policy and its DTO is not public."""
    dto_cls = _get_dto_type(handler_cls)
    if dto_cls is not None and getattr(dto_cls, "__public__", False):
        return

    if not isinstance(getattr(handler_cls, "__auth__", None), Policy):
        raise ConfigurationError(
            f"Handler {handler_cls.__name__} has no __auth__ declaration "
            f"and its command/query is not __public__"
        )


def validate_all_handlers(handlers: Iterable[type] | None = None) -> None:
    """Check handler classes for authorization declarations.

    Scans every registered CommandHandler and QueryHandler subclass unless an
    explicit list is given. Raises ConfigurationError listing all handlers
    missing __auth__ declarations.
    """
    if handlers is None:
        handlers = [*CommandHandler.__subclasses__(), *QueryHandler.__subclasses__()]

    violations: list[str] = []

    for handler_cls in handlers:
        try:
            check_handler_class(handler_cls)
        except ConfigurationError as e:
            violations.append(str(e))

    if violations:
        raise ConfigurationError(
            f"Authorization validation failed for {len(violations)} handler(s):\n"
            + "\n".join(f"  - {v}" for v in violations)
        )

    logger.info("Authorization startup validation passed for all handlers")
